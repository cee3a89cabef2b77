"""Page ownership and drawing primitives for the CV document.

The layout engine positions everything in PDF page space (origin at the
bottom-left, ``y`` growing upwards). fpdf2 works top-down, so every
primitive here converts coordinates before delegating to :class:`FPDF`.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from fpdf import FPDF

from cv_pdf_engine.constants.layout_constants import (
    PAGE_HEIGHT,
    PAGE_WIDTH,
    SIDEBAR_COLOR,
    SIDEBAR_WIDTH,
    TOP_Y,
)
from cv_pdf_engine.layout.cursor import LayoutCursor

if TYPE_CHECKING:
    from cv_pdf_engine.layout.assets import EmbeddedImage
    from cv_pdf_engine.layout.fonts import FontHandle
    from cv_pdf_engine.models.layout import LinkRect

__all__ = ["Color", "PageFlowManager"]

Color = tuple[int, int, int]


class PageFlowManager:
    """Single source of truth for the page being written to.

    Every new page gets the sidebar background painted before anything
    else, so sidebar content that overflows keeps its framing. Callers must
    go through :meth:`current_page` instead of holding on to a page across
    a possible break.
    """

    def __init__(self, pdf: FPDF) -> None:
        self.pdf = pdf
        self.cursor = LayoutCursor(self.new_page)
        self.background_pages: list[int] = []

    @property
    def page_count(self) -> int:
        return len(self.pdf.pages)

    def current_page(self) -> int:
        """1-based number of the active page (0 before the first page)."""
        return self.pdf.page_no()

    def new_page(self) -> int:
        self.pdf.add_page()
        self.cursor.reset(TOP_Y)
        self._draw_sidebar_background()
        return self.current_page()

    def _draw_sidebar_background(self) -> None:
        self.draw_rect(0, 0, SIDEBAR_WIDTH, PAGE_HEIGHT, SIDEBAR_COLOR)
        self.background_pages.append(self.current_page())

    @staticmethod
    def _top(y: float) -> float:
        return PAGE_HEIGHT - y

    def draw_text(
        self,
        x: float,
        baseline: float,
        text: str | None,
        font: FontHandle,
        size: float,
        color: Color,
    ) -> None:
        prepared = font.prepare(text)
        if not prepared:
            return
        font.use(size)
        self.pdf.set_text_color(*color)
        self.pdf.text(x, self._top(baseline), prepared)

    def draw_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        self.pdf.set_fill_color(*color)
        self.pdf.rect(x, self._top(y + height), width, height, style="F")

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        thickness: float,
        color: Color,
    ) -> None:
        self.pdf.set_draw_color(*color)
        self.pdf.set_line_width(thickness)
        self.pdf.line(x1, self._top(y1), x2, self._top(y2))

    def draw_image(self, image: EmbeddedImage, x: float, y: float, width: float, height: float) -> None:
        """Draw *image* with its bottom-left corner at ``(x, y)``."""
        self.pdf.image(io.BytesIO(image.data), x=x, y=self._top(y + height), w=width, h=height)

    def add_link(self, rect: LinkRect, url: str) -> None:
        """Append a URI link annotation covering *rect* to the current page."""
        self.pdf.link(rect.x0, self._top(rect.y1), rect.width, rect.height, url)

    @staticmethod
    def page_bounds() -> tuple[float, float]:
        return PAGE_WIDTH, PAGE_HEIGHT
