"""Tests for font resolution and registration fallbacks."""

from __future__ import annotations

import io
import logging
from datetime import date
from pathlib import Path

import pytest
from fpdf import FPDF
from pypdf import PdfReader

from cv_pdf_engine.layout.fonts import (
    CORE_FAMILY,
    EMBEDDED_FAMILY,
    FontFaces,
    FontHandle,
    register_fonts,
    resolve_font_faces,
)
from cv_pdf_engine.models.cv import CvRecord
from cv_pdf_engine.services.document_assembler import render_cv_pdf


class TestResolveFontFaces:
    def test_no_candidates_found(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            faces = resolve_font_faces([tmp_path / "Missing-Regular.ttf"])
        assert faces == FontFaces()
        assert "No TrueType face found" in caplog.text

    def test_picks_first_existing_face_and_bold_sibling(self, tmp_path: Path) -> None:
        regular = tmp_path / "Fira-Regular.ttf"
        bold = tmp_path / "Fira-Bold.ttf"
        regular.write_bytes(b"")
        bold.write_bytes(b"")
        faces = resolve_font_faces([tmp_path / "Other-Regular.ttf", regular])
        assert faces.regular == regular
        assert faces.bold == bold

    def test_semibold_sibling(self, tmp_path: Path) -> None:
        regular = tmp_path / "Fira-Regular.ttf"
        semibold = tmp_path / "Fira-SemiBold.ttf"
        regular.write_bytes(b"")
        semibold.write_bytes(b"")
        assert resolve_font_faces([regular]).bold == semibold

    def test_unweighted_name_gets_suffix(self, tmp_path: Path) -> None:
        regular = tmp_path / "DejaVuSans.ttf"
        bold = tmp_path / "DejaVuSans-Bold.ttf"
        regular.write_bytes(b"")
        bold.write_bytes(b"")
        assert resolve_font_faces([regular]).bold == bold

    def test_missing_bold(self, tmp_path: Path) -> None:
        regular = tmp_path / "Fira-Regular.ttf"
        regular.write_bytes(b"")
        faces = resolve_font_faces([regular])
        assert faces.regular == regular
        assert faces.bold is None


class TestRegisterFonts:
    def test_core_fallback_without_faces(self) -> None:
        fonts = register_fonts(FPDF(unit="pt"), FontFaces())
        assert fonts.regular.family == CORE_FAMILY
        assert fonts.pick(bold=True) is fonts.regular

    def test_unreadable_face_falls_back(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        broken = tmp_path / "Broken-Regular.ttf"
        broken.write_bytes(b"definitely not a font")
        with caplog.at_level(logging.WARNING):
            fonts = register_fonts(FPDF(unit="pt"), FontFaces(regular=broken))
        assert fonts.regular.family == CORE_FAMILY
        assert not fonts.regular.unicode
        assert "Could not load font" in caplog.text


class TestFontHandle:
    def test_core_face_sanitizes_text(self) -> None:
        handle = FontHandle(FPDF(unit="pt"), CORE_FAMILY, unicode=False)
        assert handle.prepare("• Español – “ok”") == "· Español - \"ok\""
        assert handle.prepare("日本") == "??"

    def test_measure(self) -> None:
        handle = FontHandle(FPDF(unit="pt"), CORE_FAMILY, unicode=False)
        assert handle.measure("", 10) == 0.0
        assert handle.measure(None, 10) == 0.0
        assert handle.measure("ab", 10) > handle.measure("a", 10) > 0
        assert handle.measure("a", 20) == pytest.approx(2 * handle.measure("a", 10))


def _find_system_ttf() -> Path | None:
    preferred = Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf")
    if preferred.is_file():
        return preferred
    for root in (Path("/usr/share/fonts"), Path("/Library/Fonts"), Path("C:/Windows/Fonts")):
        if root.is_dir():
            found = next(iter(sorted(root.rglob("*.ttf"))), None)
            if found is not None:
                return found
    return None


@pytest.fixture
def truetype_faces(tmp_path: Path) -> FontFaces:
    """A regular/bold pair copied from an installed TrueType font."""
    source = _find_system_ttf()
    if source is None:
        pytest.skip("no TrueType font installed")
    regular = tmp_path / "Face-Regular.ttf"
    bold = tmp_path / "Face-Bold.ttf"
    regular.write_bytes(source.read_bytes())
    bold.write_bytes(source.read_bytes())
    return FontFaces(regular=regular, bold=bold)


class TestTrueTypeRegistration:
    def test_regular_face_is_unicode(self, truetype_faces: FontFaces) -> None:
        fonts = register_fonts(FPDF(unit="pt"), FontFaces(regular=truetype_faces.regular))
        assert fonts.regular.family == EMBEDDED_FAMILY
        assert fonts.regular.unicode
        assert fonts.regular.prepare("• Español") == "• Español"

    def test_missing_bold_reuses_regular(self, truetype_faces: FontFaces) -> None:
        fonts = register_fonts(FPDF(unit="pt"), FontFaces(regular=truetype_faces.regular))
        assert fonts.bold is fonts.regular

    def test_bold_face_is_registered_separately(self, truetype_faces: FontFaces) -> None:
        fonts = register_fonts(FPDF(unit="pt"), truetype_faces)
        assert fonts.bold is not fonts.regular
        assert fonts.regular.style == ""
        assert fonts.bold.style == "B"
        assert fonts.bold.family == EMBEDDED_FAMILY

    def test_resolved_pair_matches_files(self, truetype_faces: FontFaces) -> None:
        assert resolve_font_faces([truetype_faces.regular]) == truetype_faces

    def test_render_with_embedded_faces_is_deterministic(
        self, truetype_faces: FontFaces, sample_cv: CvRecord
    ) -> None:
        first = render_cv_pdf(sample_cv, "es", faces=truetype_faces, today=date(2024, 6, 1))
        second = render_cv_pdf(sample_cv, "es", faces=truetype_faces, today=date(2024, 6, 1))
        assert first == second
        assert "Experiencia Laboral" in PdfReader(io.BytesIO(first)).pages[0].extract_text()
