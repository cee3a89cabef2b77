"""Clickable URI regions for drawn text.

Text drawing only paints glyphs; a link is a separate annotation object on
the page, addressed by a rectangle in page space.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cv_pdf_engine.constants.layout_constants import PAGE_HEIGHT, PAGE_WIDTH
from cv_pdf_engine.models.layout import LinkAnnotation, LinkRect

if TYPE_CHECKING:
    from cv_pdf_engine.models.layout import LayoutState

__all__ = ["ASCENDER_PADDING", "DESCENDER_ALLOWANCE", "attach_link", "link_rect_for_text"]

DESCENDER_ALLOWANCE = 2.0
ASCENDER_PADDING = 2.0


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def link_rect_for_text(x: float, baseline: float, width: float, size: float) -> LinkRect:
    """Hit box for text drawn at *baseline*, clamped to the page."""
    x0 = _clamp(x, 0.0, PAGE_WIDTH)
    x1 = _clamp(x + max(0.0, width), x0, PAGE_WIDTH)
    y0 = _clamp(baseline - DESCENDER_ALLOWANCE, 0.0, PAGE_HEIGHT)
    y1 = _clamp(baseline + size + ASCENDER_PADDING, y0, PAGE_HEIGHT)
    return LinkRect(x0, y0, x1, y1)


def attach_link(state: LayoutState, rect: LinkRect, url: str | None) -> LinkAnnotation | None:
    """Attach a URI annotation for *rect* to the current page.

    Returns:
        The recorded annotation, or None when *url* is blank.
    """
    target = (url or "").strip()
    if not target:
        return None
    annotation = LinkAnnotation(page=state.flow.current_page(), rect=rect, url=target)
    state.flow.add_link(rect, target)
    state.links.append(annotation)
    return annotation
