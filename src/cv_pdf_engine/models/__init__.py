"""Data models and type definitions"""

from cv_pdf_engine.models.cv import (
    Basics,
    CvRecord,
    Education,
    LanguageSkill,
    Profile,
    Project,
    Publication,
    Skill,
    Work,
)
from cv_pdf_engine.models.errors import CvDataError, CvPdfError, OutputWriteError
from cv_pdf_engine.models.layout import LayoutState, LinkAnnotation, LinkRect

__all__ = [
    "Basics",
    "CvDataError",
    "CvPdfError",
    "CvRecord",
    "Education",
    "LanguageSkill",
    "LayoutState",
    "LinkAnnotation",
    "LinkRect",
    "OutputWriteError",
    "Profile",
    "Project",
    "Publication",
    "Skill",
    "Work",
]
