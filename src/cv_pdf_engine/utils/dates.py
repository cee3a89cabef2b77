"""Date helpers for CV entry headers.

CV dates are ISO strings (``YYYY-MM-DD``; ``YYYY-MM`` and ``YYYY`` are
accepted too) or absent. Malformed values never raise: they behave like
missing dates.
"""

from __future__ import annotations

from datetime import date

from cv_pdf_engine.constants.translations import section_title

__all__ = ["date_label", "is_in_progress", "parse_iso_date", "year_range"]


def parse_iso_date(value: str | None) -> date | None:
    """Parse a full or partial ISO date, returning None when malformed."""
    text = (value or "").strip()[:10]
    if len(text) == 4:
        text = f"{text}-01-01"
    elif len(text) == 7:
        text = f"{text}-01"
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def _year(value: str | None) -> str:
    text = (value or "").strip()[:4]
    return text if len(text) == 4 and text.isdigit() else ""


def year_range(start: str | None, end: str | None) -> str:
    """Return ``"2020 - 2022"``, a single year, or ``""`` without dates."""
    start_year = _year(start)
    end_year = _year(end)
    if start_year and end_year:
        return f"{start_year} - {end_year}"
    return start_year or end_year


def is_in_progress(start: str | None, end: str | None, today: date) -> bool:
    """True when *start* has passed and *end* is absent or not yet reached."""
    start_date = parse_iso_date(start)
    if start_date is None or start_date > today:
        return False
    if not (end or "").strip():
        return True
    end_date = parse_iso_date(end)
    return end_date is not None and today <= end_date


def date_label(start: str | None, end: str | None, today: date, lang: str) -> str:
    """Localized "in progress" label for active entries, else the year range."""
    if is_in_progress(start, end, today):
        return section_title("in_progress", lang)
    return year_range(start, end)
