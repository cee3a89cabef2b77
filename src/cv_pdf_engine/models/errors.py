"""Exceptions that abort a CV generation run."""

from __future__ import annotations


class CvPdfError(Exception):
    """Base class for fatal CV generation failures."""


class CvDataError(CvPdfError):
    """Raised when a CV data document cannot be read or parsed."""


class OutputWriteError(CvPdfError):
    """Raised when a generated PDF cannot be written to its output path."""
