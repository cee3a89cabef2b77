"""CV PDF generation service.

Loads the Spanish and English CV documents, renders both variants
concurrently and writes them into the public directory.
"""

from __future__ import annotations

import logging
import os
import tempfile
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from pathlib import Path

from cv_pdf_engine.config import CvPdfSettings, get_settings
from cv_pdf_engine.constants.translations import Language
from cv_pdf_engine.layout.fonts import resolve_font_faces
from cv_pdf_engine.models.errors import OutputWriteError
from cv_pdf_engine.services.cv_data import load_cv
from cv_pdf_engine.services.document_assembler import render_cv_pdf

logger = logging.getLogger(__name__)

__all__ = ["generate_cv_pdfs", "write_pdf"]


def write_pdf(path: Path, data: bytes) -> Path:
    """Atomically replace *path* with *data*.

    The bytes go to a temporary file in the same directory first, so a
    failed write never leaves a truncated PDF behind.

    Raises:
        OutputWriteError: If the directory or file cannot be written.
    """
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "wb", dir=path.parent, prefix=f".{path.stem}-", suffix=".tmp", delete=False
        ) as handle:
            tmp_name = handle.name
            handle.write(data)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        msg = f"Could not write {path}: {exc}"
        raise OutputWriteError(msg) from exc
    return path


def generate_cv_pdfs(
    settings: CvPdfSettings | None = None,
    *,
    today: date | None = None,
) -> dict[str, Path]:
    """Render ``cv-es.pdf`` and ``cv-en.pdf`` from the project's CV documents.

    Both documents are loaded before anything is rendered, and nothing is
    written until both variants rendered successfully.

    Args:
        settings: Resolved paths; defaults to :func:`get_settings`.
        today: Render date for "in progress" labels; defaults to today.

    Returns:
        ``{"es": Path, "en": Path}`` of the written files.

    Raises:
        CvDataError: If either CV document is missing or malformed.
        OutputWriteError: If an output file cannot be written.
    """
    settings = settings or get_settings()
    today = today or date.today()
    languages = [lang.value for lang in Language]

    records = {lang: load_cv(settings.cv_paths[lang]) for lang in languages}
    faces = resolve_font_faces(settings.font_candidates)
    logger.info("Rendering CV PDFs (%s) with font %s", ", ".join(languages), faces.regular or "helvetica")

    with ThreadPoolExecutor(max_workers=len(languages), thread_name_prefix="cv-pdf") as pool:
        futures = {
            lang: pool.submit(
                render_cv_pdf,
                records[lang],
                lang,
                faces=faces,
                public_dir=settings.public_dir,
                today=today,
            )
            for lang in languages
        }
        rendered = {lang: future.result() for lang, future in futures.items()}

    written: dict[str, Path] = {}
    for lang in languages:
        path = write_pdf(settings.output_paths[lang], rendered[lang])
        logger.info("Wrote %s (%d bytes)", path, len(rendered[lang]))
        written[lang] = path
    return written
