from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from cv_pdf_engine.models.cv import CvRecord


class FixedWidthFont:
    """Measures every character as half the font size wide."""

    def measure(self, text: str | None, size: float) -> float:
        return len(text or "") * size * 0.5


@pytest.fixture
def fixed_font() -> FixedWidthFont:
    return FixedWidthFont()


@pytest.fixture(autouse=True)
def core_fonts_only(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep renders independent of the fonts installed on the machine."""
    monkeypatch.setenv("CV_PDF_FONTS", str(tmp_path / "missing-font.ttf"))


def cv_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "basics": {
            "name": "Diego Saavedra",
            "label": {"es": "Desarrollador de software", "en": "Software developer"},
            "summary": {
                "es": "Docente e ingeniero de software con experiencia en desarrollo web.",
                "en": "Lecturer and software engineer experienced in web development.",
            },
            "email": "diego@example.com",
            "phone": "+593 999 999 999",
            "url": "https://statick88.github.io",
            "profiles": [
                {"network": "GitHub", "url": "https://github.com/statick88"},
                {"network": "LinkedIn", "url": "https://www.linkedin.com/in/statick/"},
            ],
        },
        "work": [
            {
                "name": "Acme",
                "position": {"es": "Ingeniero", "en": "Engineer"},
                "startDate": "2023-01-01",
                "summary": {"es": "Construccion de servicios web.", "en": "Building web services."},
            },
            {
                "name": "Globex",
                "position": "Analyst",
                "startDate": "2019-03-01",
                "endDate": "2022-12-31",
                "summary": "Data pipelines and reporting.",
            },
        ],
        "education": [
            {
                "institution": "Universidad Central",
                "area": {"es": "Ingenieria en Sistemas", "en": "Systems Engineering"},
                "startDate": "2012",
                "endDate": "2017",
            }
        ],
        "projects": [
            {
                "name": "Portfolio",
                "description": {"es": "Sitio personal.", "en": "Personal site."},
                "url": "https://statick88.github.io/",
                "github": "https://github.com/statick88/statick88.github.io",
            }
        ],
        "skills": [{"name": "Python"}, {"name": "Docker"}, {"name": None}],
        "softSkills": ["Teamwork", "Communication"],
        "languages": [
            {"language": "Spanish", "fluency": "Native speaker"},
            {"language": "English", "fluency": "Advanced"},
        ],
        "publications": [
            {
                "name": {"es": "Articulo", "en": "Article"},
                "publisher": "Revista Tecnica",
                "releaseDate": "2023-05-10",
                "url": "https://example.com/article",
            }
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def sample_cv() -> CvRecord:
    return CvRecord.model_validate(cv_payload())


@pytest.fixture
def cv_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A project root holding cv.json, cv-en.json and a public directory."""
    root = tmp_path / "site"
    (root / "public").mkdir(parents=True)
    (root / "cv.json").write_text(json.dumps(cv_payload()), encoding="utf-8")
    (root / "cv-en.json").write_text(json.dumps(cv_payload()), encoding="utf-8")
    monkeypatch.setenv("CV_PDF_ROOT", str(root))
    return root


@pytest.fixture
def make_payload():
    """Factory for CV payload dicts with top-level overrides."""
    return cv_payload
