"""Vertical position tracking for the sidebar and main column."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from cv_pdf_engine.constants.layout_constants import MAIN_FLOOR, SIDEBAR_FLOOR, TOP_Y

__all__ = ["LayoutCursor", "Region"]


class Region(StrEnum):
    SIDEBAR = "sidebar"
    MAIN = "main"


_FLOORS = {
    Region.SIDEBAR: SIDEBAR_FLOOR,
    Region.MAIN: MAIN_FLOOR,
}


class LayoutCursor:
    """Per-region baseline tracker with overflow detection.

    ``y`` is the distance from the page bottom to the next baseline of a
    region. The cursor never draws; it gates drawing through
    :meth:`ensure_space` and records consumed height through
    :meth:`advance`.
    """

    def __init__(self, on_page_break: Callable[[], None], top: float = TOP_Y) -> None:
        self._on_page_break = on_page_break
        self._y = {Region.SIDEBAR: top, Region.MAIN: top}

    @staticmethod
    def region_floor(region: Region) -> float:
        return _FLOORS[region]

    def y(self, region: Region) -> float:
        return self._y[region]

    @property
    def sidebar_y(self) -> float:
        return self._y[Region.SIDEBAR]

    @property
    def main_y(self) -> float:
        return self._y[Region.MAIN]

    def fits(self, required: float, region: Region) -> bool:
        return self._y[region] - required >= self.region_floor(region)

    def ensure_space(self, required: float, region: Region) -> bool:
        """Break the page if *required* points do not fit above the floor.

        Returns:
            True when a page break was triggered.
        """
        if self.fits(required, region):
            return False
        self._on_page_break()
        return True

    def advance(self, height: float, region: Region) -> float:
        """Move *region* down by *height* and return its new ``y``."""
        self._y[region] -= max(0.0, height)
        return self._y[region]

    def reset(self, top: float = TOP_Y) -> None:
        for region in self._y:
            self._y[region] = top
