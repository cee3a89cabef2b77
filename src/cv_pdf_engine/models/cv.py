"""Pydantic models for the bilingual CV record.

The documents follow the JSON Resume layout (``basics``, ``work``,
``education`` ...) with a few extensions (``softSkills``, bilingual
``{es, en}`` text fields). Every field is optional: the renderer omits
whatever is missing instead of failing.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "Basics",
    "CvRecord",
    "Education",
    "LanguageSkill",
    "LocalizedText",
    "Profile",
    "Project",
    "Publication",
    "Skill",
    "Work",
]

# Either a plain string or a ``{"es": ..., "en": ...}`` mapping.
LocalizedText = str | dict[str, str | None] | None


def _clean_list(value: Any) -> Any:
    """Treat ``null`` lists as empty and drop ``null`` items."""
    if value is None:
        return []
    if isinstance(value, list):
        return [item for item in value if item is not None]
    return value


class _CvModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Profile(_CvModel):
    """A social/professional profile link."""

    network: str | None = None
    url: str | None = None


class Basics(_CvModel):
    """Identity and contact block."""

    name: str | None = None
    label: LocalizedText = None
    summary: LocalizedText = None
    email: str | None = None
    phone: str | None = None
    url: str | None = None
    image: str | None = Field(None, description="Avatar path relative to the public directory")
    profiles: list[Profile] = Field(default_factory=list)

    @field_validator("profiles", mode="before")
    @classmethod
    def clean_profiles(cls, value: Any) -> Any:
        return _clean_list(value)


class Work(_CvModel):
    """A single work-experience entry."""

    name: str | None = Field(None, description="Company name")
    position: LocalizedText = None
    start_date: str | None = Field(None, alias="startDate")
    end_date: str | None = Field(None, alias="endDate", description="None while ongoing")
    summary: LocalizedText = None


class Education(_CvModel):
    """A single education entry."""

    institution: str | None = None
    area: LocalizedText = None
    start_date: str | None = Field(None, alias="startDate")
    end_date: str | None = Field(None, alias="endDate")


class Project(_CvModel):
    """A training course or project."""

    name: str | None = None
    description: LocalizedText = None
    url: str | None = Field(None, description="Deploy URL")
    github: str | None = Field(None, description="Source-code URL")


class Skill(_CvModel):
    name: str | None = None


class LanguageSkill(_CvModel):
    language: str | None = None
    fluency: str | None = None


class Publication(_CvModel):
    name: LocalizedText = None
    publisher: str | None = None
    release_date: str | None = Field(None, alias="releaseDate")
    url: str | None = None


class CvRecord(_CvModel):
    """Top-level CV document, read-only for the duration of a render."""

    basics: Basics = Field(default_factory=Basics)
    work: list[Work] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    soft_skills: list[str] = Field(default_factory=list, alias="softSkills")
    languages: list[LanguageSkill] = Field(default_factory=list)
    publications: list[Publication] = Field(default_factory=list)

    @field_validator(
        "work",
        "education",
        "projects",
        "skills",
        "soft_skills",
        "languages",
        "publications",
        mode="before",
    )
    @classmethod
    def clean_lists(cls, value: Any) -> Any:
        return _clean_list(value)

    @field_validator("basics", mode="before")
    @classmethod
    def default_basics(cls, value: Any) -> Any:
        return {} if value is None else value
