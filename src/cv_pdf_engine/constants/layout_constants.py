"""Geometry, palette and type sizes for the two-column CV layout.

All distances are PDF points with the origin at the bottom-left corner of
the page, the way the layout engine reasons about vertical position.
"""

from __future__ import annotations

from datetime import UTC, datetime

# A4 portrait
PAGE_WIDTH = 595.28
PAGE_HEIGHT = 841.89

MARGIN = 48.0
SIDEBAR_MARGIN = 24.0
SIDEBAR_WIDTH = 175.0
COLUMN_GAP = 16.0

CONTENT_WIDTH = PAGE_WIDTH - MARGIN * 2
MAIN_X = MARGIN + SIDEBAR_WIDTH + COLUMN_GAP
MAIN_WIDTH = CONTENT_WIDTH - SIDEBAR_WIDTH - COLUMN_GAP

# The sidebar may run closer to the bottom edge than the main column.
SIDEBAR_FLOOR = 20.0
MAIN_FLOOR = MARGIN
TOP_Y = PAGE_HEIGHT - MARGIN

# Colours as 0-255 RGB triples.
SIDEBAR_COLOR = (31, 31, 46)
WHITE_COLOR = (255, 255, 255)
TEXT_LIGHT_COLOR = (209, 209, 209)
TEXT_DARK_COLOR = (26, 26, 26)
MUTED_COLOR = (107, 107, 107)
ACCENT_COLOR = (77, 128, 204)

# Sidebar
AVATAR_SIZE = 85.0
QR_SIZE = 80.0
QR_PIXEL_WIDTH = 130
SIDEBAR_HEADING_SIZE = 12.0
SIDEBAR_BODY_SIZE = 9.0
SIDEBAR_LINE_HEIGHT = 13.0
SIDEBAR_TEXT_WIDTH = SIDEBAR_WIDTH - SIDEBAR_MARGIN - 8
SIDEBAR_BULLET_WIDTH = SIDEBAR_WIDTH - SIDEBAR_MARGIN - 20
SIDEBAR_MIN_BULLET_BODY = 30.0
MAX_SIDEBAR_ROLES = 3

BIO_SIZE = 8.5
BIO_LINE_HEIGHT = 12.0
BIO_MAX_LINES = 12

# Main column
NAME_SIZE = 22.0
LABEL_SIZE = 11.0
SECTION_TITLE_SIZE = 14.0
DIVIDER_THICKNESS = 2.0
TITLE_TO_DIVIDER = 1.0
DIVIDER_TO_CONTENT = 14.0
ENTRY_TITLE_SIZE = 11.0
ENTRY_TITLE_LINE_HEIGHT = 14.0
ENTRY_META_SIZE = 9.0
PARAGRAPH_SIZE = 8.6
PARAGRAPH_LINE_HEIGHT = 12.0
BODY_SIZE = 10.0
BODY_LINE_HEIGHT = 13.0
LINK_SIZE = 9.0
LINK_LINE_HEIGHT = 12.0
MAIN_MIN_BULLET_BODY = 40.0
MAX_PROJECTS = 4
PUBLICATIONS_MIN_SPACE = 80.0

BULLET = "• "
ELLIPSIS = "..."

DEFAULT_SITE_URL = "https://statick88.github.io"

# Fixed document timestamp so identical inputs produce identical bytes.
DOCUMENT_CREATION_DATE = datetime(2000, 1, 1, tzinfo=UTC)
