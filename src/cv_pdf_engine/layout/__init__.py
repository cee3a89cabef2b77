"""Manual page layout: text metrics, cursors, pagination, links and assets."""

from cv_pdf_engine.layout.assets import EmbeddedImage, embed_image, load_image, make_qr_png
from cv_pdf_engine.layout.cursor import LayoutCursor, Region
from cv_pdf_engine.layout.fonts import FontFaces, FontHandle, FontSet, register_fonts, resolve_font_faces
from cv_pdf_engine.layout.links import attach_link, link_rect_for_text
from cv_pdf_engine.layout.page_flow import PageFlowManager
from cv_pdf_engine.layout.text import (
    hanging_indent_lines,
    justify_line,
    truncate_with_ellipsis,
    wrap_text,
)

__all__ = [
    "EmbeddedImage",
    "FontFaces",
    "FontHandle",
    "FontSet",
    "LayoutCursor",
    "PageFlowManager",
    "Region",
    "attach_link",
    "embed_image",
    "hanging_indent_lines",
    "justify_line",
    "link_rect_for_text",
    "load_image",
    "make_qr_png",
    "register_fonts",
    "resolve_font_faces",
    "truncate_with_ellipsis",
    "wrap_text",
]
