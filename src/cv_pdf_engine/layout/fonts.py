"""Font handles bound to an fpdf document.

TrueType faces are resolved once per run (:class:`FontFaces`) and then
registered on every document that is built. When the preferred faces are
missing or unreadable the core Helvetica face is used instead; core faces
only cover Latin-1, so text drawn with them is sanitized first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from fpdf import FPDF

logger = logging.getLogger(__name__)

__all__ = [
    "CORE_FAMILY",
    "EMBEDDED_FAMILY",
    "FontFaces",
    "FontHandle",
    "FontSet",
    "register_fonts",
    "resolve_font_faces",
]

CORE_FAMILY = "helvetica"
EMBEDDED_FAMILY = "CvSans"

_BOLD_SUFFIXES = ("-Bold", "-SemiBold")

_CORE_REPLACEMENTS = {
    "•": "·",  # bullet -> middle dot
    "–": "-",
    "—": "-",
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
    "…": "...",
}


@dataclass(frozen=True, slots=True)
class FontFaces:
    """TrueType files shared, read-only, by every document of a run."""

    regular: Path | None = None
    bold: Path | None = None


@dataclass(frozen=True, slots=True)
class FontHandle:
    """A registered face that can measure and prepare text.

    Attributes:
        pdf: Document the face is registered on.
        family: fpdf font family name.
        style: ``""`` for regular, ``"B"`` for bold.
        unicode: False for core faces limited to Latin-1.
    """

    pdf: FPDF
    family: str
    style: str = ""
    unicode: bool = True

    def prepare(self, text: str | None) -> str:
        """Return *text* in a form the face can encode."""
        if not text:
            return ""
        if self.unicode:
            return text
        for char, replacement in _CORE_REPLACEMENTS.items():
            text = text.replace(char, replacement)
        return text.encode("latin-1", errors="replace").decode("latin-1")

    def use(self, size: float) -> None:
        self.pdf.set_font(self.family, self.style, size)

    def measure(self, text: str | None, size: float) -> float:
        """Width of *text* in points at *size*."""
        prepared = self.prepare(text)
        if not prepared:
            return 0.0
        self.use(size)
        return self.pdf.get_string_width(prepared)


@dataclass(frozen=True, slots=True)
class FontSet:
    regular: FontHandle
    bold: FontHandle

    def pick(self, bold: bool = False) -> FontHandle:
        return self.bold if bold else self.regular


def _bold_candidates(regular: Path) -> list[Path]:
    if "-Regular" in regular.name:
        return [regular.with_name(regular.name.replace("-Regular", s)) for s in _BOLD_SUFFIXES]
    return [regular.with_name(f"{regular.stem}{s}{regular.suffix}") for s in _BOLD_SUFFIXES]


def resolve_font_faces(candidates: Iterable[Path]) -> FontFaces:
    """Pick the first existing regular face and its bold sibling.

    Bold siblings are looked up by swapping ``-Regular`` for ``-Bold`` (then
    ``-SemiBold``) or, for names without a weight, by appending the suffix.
    """
    paths = [Path(c).expanduser() for c in candidates]
    regular = next((p for p in paths if p.is_file()), None)
    if regular is None:
        logger.warning("No TrueType face found among %d candidates; using %s", len(paths), CORE_FAMILY)
        return FontFaces()

    bold = next((p for p in _bold_candidates(regular) if p.is_file()), None)
    if bold is None:
        logger.debug("No bold face next to %s; bold text uses the regular face", regular)
    return FontFaces(regular=regular, bold=bold)


def _register(pdf: FPDF, path: Path | None, style: str) -> FontHandle | None:
    if path is None:
        return None
    try:
        pdf.add_font(EMBEDDED_FAMILY, style, str(path))
    except Exception as exc:
        logger.warning("Could not load font %s: %s", path, exc)
        return None
    return FontHandle(pdf, EMBEDDED_FAMILY, style)


def register_fonts(pdf: FPDF, faces: FontFaces) -> FontSet:
    """Register *faces* on *pdf* and return the regular/bold pair.

    A missing regular face substitutes the core face for both variants; a
    missing bold face reuses the regular one.
    """
    regular = _register(pdf, faces.regular, "")
    if regular is None:
        core = FontHandle(pdf, CORE_FAMILY, "", unicode=False)
        return FontSet(regular=core, bold=core)

    bold = _register(pdf, faces.bold, "B")
    return FontSet(regular=regular, bold=bold or regular)
