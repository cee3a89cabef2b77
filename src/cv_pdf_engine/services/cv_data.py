"""Loading CV documents and resolving bilingual fields."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from cv_pdf_engine.models.cv import CvRecord, LocalizedText
from cv_pdf_engine.models.errors import CvDataError

logger = logging.getLogger(__name__)

__all__ = ["load_cv", "localized", "parse_cv"]


def localized(value: LocalizedText, lang: str) -> str:
    """Pick the *lang* variant of a bilingual field.

    Falls back to ``es`` then ``en`` when the active key is missing; plain
    strings are returned as-is and ``None`` becomes ``""``.
    """
    if value is None:
        return ""
    if isinstance(value, dict):
        for key in (lang, "es", "en"):
            text = value.get(key)
            if text is not None:
                return str(text)
        return ""
    return str(value)


def parse_cv(raw: str, source: str = "<string>") -> CvRecord:
    """Parse a CV JSON document.

    Raises:
        CvDataError: If the document is not valid JSON or not CV-shaped.
    """
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {source}: {exc}"
        raise CvDataError(msg) from exc
    if not isinstance(payload, dict):
        msg = f"CV document {source} must be a JSON object"
        raise CvDataError(msg)
    try:
        return CvRecord.model_validate(payload)
    except ValidationError as exc:
        msg = f"CV document {source} has an unexpected shape: {exc}"
        raise CvDataError(msg) from exc


def load_cv(path: Path) -> CvRecord:
    """Read and parse the CV document at *path*.

    Raises:
        CvDataError: If the file cannot be read or parsed.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Could not read CV document {path}: {exc}"
        raise CvDataError(msg) from exc
    cv = parse_cv(raw, source=str(path))
    logger.debug("Loaded %s: %d work, %d education entries", path, len(cv.work), len(cv.education))
    return cv
