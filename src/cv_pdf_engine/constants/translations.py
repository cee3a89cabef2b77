"""Localized labels used by the CV document.

Only Spanish (``es``) and English (``en``) variants are rendered.
"""

from __future__ import annotations

from enum import StrEnum


class Language(StrEnum):
    """Output languages of the CV document."""

    ES = "es"
    EN = "en"


SECTION_TITLES: dict[str, dict[str, str]] = {
    "es": {
        "about": "Sobre mí",
        "roles": "Roles",
        "portfolio": "Portafolio",
        "contact": "Contacto",
        "experience": "Experiencia Laboral",
        "education": "Formación Académica",
        "training": "Capacitaciones",
        "hard_skills": "Hard Skills",
        "soft_skills": "Soft Skills",
        "languages": "Idiomas",
        "publications": "Publicaciones",
        "in_progress": "En proceso",
    },
    "en": {
        "about": "About",
        "roles": "Roles",
        "portfolio": "Portfolio",
        "contact": "Contact",
        "experience": "Work Experience",
        "education": "Education",
        "training": "Training & Courses",
        "hard_skills": "Hard Skills",
        "soft_skills": "Soft Skills",
        "languages": "Languages",
        "publications": "Publications",
        "in_progress": "In progress",
    },
}

DEPLOY_LABEL = "Deploy"
SOURCE_LABEL = "Codigo"

# Keyed by the output language: terms written in the other language are
# mapped into the active one.
LANGUAGE_TERMS: dict[str, dict[str, str]] = {
    "es": {
        "Spanish": "Español",
        "English": "Inglés",
        "Native speaker": "Nativo",
        "Native": "Nativo",
        "Advanced": "Avanzado",
    },
    "en": {
        "Español": "Spanish",
        "Inglés": "English",
        "Nativo": "Native speaker",
        "Avanzado": "Advanced",
    },
}


def section_title(key: str, lang: str) -> str:
    """Return the localized heading for *key*, defaulting to Spanish."""
    titles = SECTION_TITLES.get(lang, SECTION_TITLES["es"])
    return titles[key]


def translate_language_term(value: str | None, lang: str) -> str:
    """Translate a language name or fluency label into *lang*.

    Unmapped values are returned stripped but otherwise unchanged.
    """
    term = (value or "").strip()
    if not term:
        return ""
    return LANGUAGE_TERMS.get(lang, {}).get(term, term)
