"""Utility functions and helpers"""

from cv_pdf_engine.utils.dates import date_label, is_in_progress, parse_iso_date, year_range
from cv_pdf_engine.utils.urls import display_url, profile_username

__all__ = [
    "date_label",
    "display_url",
    "is_in_progress",
    "parse_iso_date",
    "profile_username",
    "year_range",
]
