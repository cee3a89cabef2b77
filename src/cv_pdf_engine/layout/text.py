"""Glyph-width-aware wrapping, justification and truncation.

Every function takes a *font* exposing ``measure(text, size) -> float``
(a :class:`~cv_pdf_engine.layout.fonts.FontHandle` in production). None of
them raise on odd input: absent or blank text simply produces no lines.
"""

from __future__ import annotations

from typing import Protocol

from cv_pdf_engine.constants.layout_constants import ELLIPSIS

__all__ = [
    "TextMeasurer",
    "hanging_indent_lines",
    "justify_line",
    "truncate_with_ellipsis",
    "wrap_text",
]


class TextMeasurer(Protocol):
    def measure(self, text: str | None, size: float) -> float: ...


def wrap_text(text: str | None, max_width: float, size: float, font: TextMeasurer) -> list[str]:
    """Greedily break *text* into lines no wider than *max_width*.

    Words are never split: a single word wider than the column is placed on
    a line of its own and allowed to overflow.
    """
    tokens = (text or "").split()
    lines: list[str] = []
    line = ""
    for token in tokens:
        candidate = f"{line} {token}" if line else token
        if line and font.measure(candidate, size) > max_width:
            lines.append(line)
            line = token
        else:
            line = candidate
    if line:
        lines.append(line)
    return lines


def justify_line(line: str, max_width: float, size: float, font: TextMeasurer) -> str:
    """Pad the gaps of *line* with spaces so it spans *max_width*.

    Each gap gets ``round(gap / space_width)`` spaces (at least one). The
    total is rounded once and spread over the gaps, so the padded line is
    within one space width of *max_width*.
    """
    words = line.split()
    if len(words) < 2:
        return line

    space_width = font.measure(" ", size)
    if space_width <= 0:
        return line

    word_width = sum(font.measure(word, size) for word in words)
    gaps = len(words) - 1
    total_spaces = max(gaps, round((max_width - word_width) / space_width))
    base, extra = divmod(total_spaces, gaps)

    parts = [words[0]]
    for index, word in enumerate(words[1:]):
        parts.append(" " * (base + (1 if index < extra else 0)))
        parts.append(word)
    return "".join(parts)


def truncate_with_ellipsis(
    lines: list[str],
    max_lines: int,
    max_width: float,
    size: float,
    font: TextMeasurer,
) -> list[str]:
    """Cap *lines* at *max_lines*, ending the last kept line with ``...``."""
    if len(lines) <= max_lines:
        return list(lines)
    if max_lines <= 0:
        return []

    shown = lines[:max_lines]
    last = shown[-1]
    while last and font.measure(last + ELLIPSIS, size) > max_width:
        last = last[:-1].rstrip()
    shown[-1] = last.rstrip() + ELLIPSIS
    return shown


def hanging_indent_lines(
    text: str | None,
    bullet: str,
    max_width: float,
    size: float,
    font: TextMeasurer,
    min_body_width: float = 0.0,
) -> tuple[list[str], float]:
    """Wrap a bullet body so continuation lines align under its first word.

    Returns:
        The wrapped body lines and the x offset of the continuation lines.
    """
    indent = font.measure(bullet, size)
    body_width = max(min_body_width, max_width - indent)
    return wrap_text(text, body_width, size, font), indent
