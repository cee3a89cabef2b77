"""Path configuration for CV generation.

The project root can be overridden via the CV_PDF_ROOT environment
variable and the preferred TrueType faces via CV_PDF_FONTS (an
``os.pathsep``-separated list of regular-weight font files). Without
overrides the repository root and a list of common font locations are
used.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ROOT_ENV = "CV_PDF_ROOT"
FONTS_ENV = "CV_PDF_FONTS"

DEFAULT_FONT_CANDIDATES = (
    Path("~/Library/Fonts/FiraCodeNerdFont-Regular.ttf"),
    Path("~/Library/Fonts/FiraCodeNerdFontPropo-Regular.ttf"),
    Path("/usr/share/fonts/truetype/firacode/FiraCode-Regular.ttf"),
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
)

# Input document and output file name per language.
CV_FILENAMES = {"es": "cv.json", "en": "cv-en.json"}
PDF_FILENAMES = {"es": "cv-es.pdf", "en": "cv-en.pdf"}


@dataclass(frozen=True)
class CvPdfSettings:
    """Resolved locations for one generation run."""

    root: Path
    public_dir: Path
    cv_paths: dict[str, Path]
    output_paths: dict[str, Path]
    font_candidates: tuple[Path, ...]


def get_project_root() -> Path:
    """Return the project root, allowing overrides via environment variable."""
    env_root = os.getenv(ROOT_ENV)
    if env_root:
        return Path(env_root).expanduser().resolve()
    return Path(__file__).resolve().parents[2]


def get_font_candidates() -> tuple[Path, ...]:
    env_fonts = os.getenv(FONTS_ENV)
    if env_fonts:
        return tuple(Path(p).expanduser() for p in env_fonts.split(os.pathsep) if p.strip())
    return DEFAULT_FONT_CANDIDATES


def get_settings() -> CvPdfSettings:
    root = get_project_root()
    public_dir = root / "public"
    return CvPdfSettings(
        root=root,
        public_dir=public_dir,
        cv_paths={lang: root / name for lang, name in CV_FILENAMES.items()},
        output_paths={lang: public_dir / name for lang, name in PDF_FILENAMES.items()},
        font_candidates=get_font_candidates(),
    )
