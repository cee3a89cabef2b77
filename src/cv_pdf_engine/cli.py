from __future__ import annotations

import logging
import sys

from cv_pdf_engine.config import get_settings
from cv_pdf_engine.models.errors import CvPdfError
from cv_pdf_engine.services.cv_pdf_generator import generate_cv_pdfs


def run_cli() -> int:
    """Generate both CV PDFs and report where they were written.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    print("=" * 60)
    print("CV PDF Engine - two-column CV renderer")
    print("=" * 60)

    settings = get_settings()
    try:
        written = generate_cv_pdfs(settings)
    except CvPdfError as exc:
        print(f"\n❌ {exc}")
        return 1

    print()
    for lang, path in written.items():
        print(f"✅ {lang}: {path}")
    return 0


def main() -> int:
    """Entry point for the CLI application."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        return run_cli()
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
