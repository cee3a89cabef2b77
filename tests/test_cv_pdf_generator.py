"""Tests for the batch generator, its configuration and the CLI."""

from __future__ import annotations

import json
import os
from datetime import date
from pathlib import Path

import pytest
from pypdf import PdfReader

import cv_pdf_engine.services.cv_pdf_generator as generator_module
from cv_pdf_engine import main
from cv_pdf_engine.cli import run_cli
from cv_pdf_engine.config import (
    DEFAULT_FONT_CANDIDATES,
    get_font_candidates,
    get_project_root,
    get_settings,
)
from cv_pdf_engine.models.errors import CvDataError, OutputWriteError
from cv_pdf_engine.services.cv_pdf_generator import generate_cv_pdfs, write_pdf

TODAY = date(2024, 6, 1)


class TestConfig:
    def test_root_override(self, cv_project: Path) -> None:
        assert get_project_root() == cv_project.resolve()

    def test_default_root_is_repository(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CV_PDF_ROOT", raising=False)
        assert (get_project_root() / "src" / "cv_pdf_engine").is_dir()

    def test_settings_paths(self, cv_project: Path) -> None:
        settings = get_settings()
        root = cv_project.resolve()
        assert settings.cv_paths == {"es": root / "cv.json", "en": root / "cv-en.json"}
        assert settings.output_paths == {
            "es": root / "public" / "cv-es.pdf",
            "en": root / "public" / "cv-en.pdf",
        }

    def test_font_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        first, second = tmp_path / "A-Regular.ttf", tmp_path / "B-Regular.ttf"
        monkeypatch.setenv("CV_PDF_FONTS", os.pathsep.join([str(first), str(second)]))
        assert get_font_candidates() == (first, second)

    def test_default_fonts(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CV_PDF_FONTS", raising=False)
        assert get_font_candidates() == DEFAULT_FONT_CANDIDATES


class TestWritePdf:
    def test_creates_directory_and_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out" / "cv-es.pdf"
        assert write_pdf(target, b"%PDF-data") == target
        assert target.read_bytes() == b"%PDF-data"
        assert list(target.parent.iterdir()) == [target]

    def test_replaces_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "cv-es.pdf"
        target.write_bytes(b"old")
        write_pdf(target, b"new")
        assert target.read_bytes() == b"new"

    def test_unwritable_target(self, tmp_path: Path) -> None:
        blocker = tmp_path / "public"
        blocker.write_text("a file, not a directory")
        with pytest.raises(OutputWriteError):
            write_pdf(blocker / "cv-es.pdf", b"%PDF")


class TestGenerateCvPdfs:
    def test_writes_both_variants(self, cv_project: Path) -> None:
        written = generate_cv_pdfs(today=TODAY)
        public = cv_project.resolve() / "public"
        assert written == {"es": public / "cv-es.pdf", "en": public / "cv-en.pdf"}
        es_text = PdfReader(written["es"]).pages[0].extract_text()
        en_text = PdfReader(written["en"]).pages[0].extract_text()
        assert "Experiencia Laboral" in es_text
        assert "Work Experience" in en_text

    def test_output_is_reproducible(self, cv_project: Path) -> None:
        first = {lang: path.read_bytes() for lang, path in generate_cv_pdfs(today=TODAY).items()}
        second = {lang: path.read_bytes() for lang, path in generate_cv_pdfs(today=TODAY).items()}
        assert first == second

    def test_missing_document_writes_nothing(self, cv_project: Path) -> None:
        (cv_project / "cv-en.json").unlink()
        with pytest.raises(CvDataError):
            generate_cv_pdfs(today=TODAY)
        assert list((cv_project / "public").iterdir()) == []

    def test_malformed_document_writes_nothing(self, cv_project: Path) -> None:
        (cv_project / "cv.json").write_text("{broken", encoding="utf-8")
        with pytest.raises(CvDataError):
            generate_cv_pdfs(today=TODAY)
        assert list((cv_project / "public").iterdir()) == []

    def test_render_failure_writes_nothing(
        self, cv_project: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail(cv, lang, **kwargs):
            if lang == "en":
                raise RuntimeError("boom")
            return b"%PDF"

        monkeypatch.setattr(generator_module, "render_cv_pdf", fail)
        with pytest.raises(RuntimeError, match="boom"):
            generate_cv_pdfs(today=TODAY)
        assert list((cv_project / "public").iterdir()) == []

    def test_uses_avatar_from_public_dir(self, cv_project: Path, make_payload) -> None:
        payload = make_payload()
        payload["basics"]["image"] = "/missing-avatar.png"
        (cv_project / "cv.json").write_text(json.dumps(payload), encoding="utf-8")
        written = generate_cv_pdfs(today=TODAY)
        assert written["es"].is_file()


class TestCli:
    def test_success(self, cv_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli() == 0
        out = capsys.readouterr().out
        assert "cv-es.pdf" in out
        assert "cv-en.pdf" in out

    def test_failure_exit_code(self, cv_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (cv_project / "cv.json").unlink()
        assert run_cli() == 1
        assert "Could not read" in capsys.readouterr().out

    def test_main_returns_exit_code(self, cv_project: Path) -> None:
        assert main() == 0
        assert main.__annotations__.get("return") in (int, "int")
