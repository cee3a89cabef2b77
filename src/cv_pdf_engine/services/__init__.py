"""Services"""

from cv_pdf_engine.services.cv_data import load_cv, localized, parse_cv
from cv_pdf_engine.services.cv_pdf_generator import generate_cv_pdfs, write_pdf
from cv_pdf_engine.services.document_assembler import (
    AssemblerState,
    DocumentAssembler,
    render_cv_pdf,
)

__all__ = [
    "AssemblerState",
    "DocumentAssembler",
    "generate_cv_pdfs",
    "load_cv",
    "localized",
    "parse_cv",
    "render_cv_pdf",
    "write_pdf",
]
