"""Engine-internal layout state for a single CV document."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cv_pdf_engine.layout.cursor import LayoutCursor
    from cv_pdf_engine.layout.fonts import FontSet
    from cv_pdf_engine.layout.page_flow import PageFlowManager

__all__ = ["LayoutState", "LinkAnnotation", "LinkRect"]


@dataclass(frozen=True, slots=True)
class LinkRect:
    """Rectangle in page space, origin bottom-left, ``y0 <= y1``."""

    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0


@dataclass(frozen=True, slots=True)
class LinkAnnotation:
    """A clickable URI region attached to one page."""

    page: int
    rect: LinkRect
    url: str


@dataclass(slots=True)
class LayoutState:
    """Mutable state threaded through every drawing routine.

    One instance exists per generated document and is discarded once the
    document bytes have been produced.

    Attributes:
        lang: Output language (``"es"`` or ``"en"``).
        today: Render date used for "in progress" detection.
        flow: Owner of the current page and both column cursors.
        fonts: Regular/bold faces registered on the document.
        links: Every hyperlink annotation attached so far.
    """

    lang: str
    today: date
    flow: PageFlowManager
    fonts: FontSet
    links: list[LinkAnnotation] = field(default_factory=list)

    @property
    def cursor(self) -> LayoutCursor:
        return self.flow.cursor
