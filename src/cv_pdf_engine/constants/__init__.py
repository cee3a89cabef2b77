from __future__ import annotations

from cv_pdf_engine.constants.translations import (
    LANGUAGE_TERMS,
    SECTION_TITLES,
    Language,
    section_title,
    translate_language_term,
)

__all__ = [
    "LANGUAGE_TERMS",
    "Language",
    "SECTION_TITLES",
    "section_title",
    "translate_language_term",
]
