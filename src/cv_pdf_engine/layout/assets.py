"""Raster assets for the CV: the avatar and the portfolio QR code.

Image problems are never fatal. Every entry point returns ``None`` when an
image cannot be used and the caller simply skips that visual element.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_M
from qrcode.exceptions import DataOverflowError

from cv_pdf_engine.constants.layout_constants import QR_PIXEL_WIDTH

logger = logging.getLogger(__name__)

__all__ = [
    "NATIVE_FORMATS",
    "REENCODED_FORMATS",
    "EmbeddedImage",
    "embed_image",
    "load_image",
    "make_qr_png",
]

# Formats fpdf embeds as-is, keyed by hint, valued by Pillow format name.
NATIVE_FORMATS = {
    "png": "PNG",
    "jpg": "JPEG",
    "jpeg": "JPEG",
}
# Formats re-encoded to PNG before embedding.
REENCODED_FORMATS = {
    "webp": "WEBP",
    "gif": "GIF",
    "bmp": "BMP",
}
REENCODE_WIDTH = 256
QR_BORDER = 1

_IMAGE_ERRORS = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)


@dataclass(frozen=True, slots=True)
class EmbeddedImage:
    """Image bytes in a format the document library embeds natively."""

    data: bytes
    width: int
    height: int
    format: str


def _normalize_hint(hint: str | None) -> str:
    """Accept ``".png"``, ``"PNG"`` or ``"image/png"`` style hints."""
    value = (hint or "").strip().lower()
    if "/" in value:
        value = value.rsplit("/", 1)[-1]
    return value.lstrip(".")


def _open_checked(data: bytes, expected: str) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    if image.format != expected:
        image.close()
        msg = f"expected {expected} data, found {image.format}"
        raise ValueError(msg)
    image.load()
    return image


def _native(data: bytes, expected: str) -> EmbeddedImage:
    with _open_checked(data, expected) as image:
        width, height = image.size
    return EmbeddedImage(data=data, width=width, height=height, format=expected)


def _reencode_png(data: bytes, expected: str) -> EmbeddedImage:
    with _open_checked(data, expected) as image:
        frame = image.convert("RGBA")
    if frame.width != REENCODE_WIDTH:
        height = max(1, round(frame.height * REENCODE_WIDTH / frame.width))
        frame = frame.resize((REENCODE_WIDTH, height), Image.Resampling.LANCZOS)
    buffer = io.BytesIO()
    frame.save(buffer, format="PNG")
    return EmbeddedImage(data=buffer.getvalue(), width=frame.width, height=frame.height, format="PNG")


def embed_image(data: bytes | None, hint: str | None) -> EmbeddedImage | None:
    """Prepare *data* for embedding according to its declared format.

    Args:
        data: Raw image bytes.
        hint: Declared format, as a file suffix, format name or MIME type.

    Returns:
        The embeddable image, or None if the bytes cannot be used.
    """
    if not data:
        logger.warning("Skipping image: no data")
        return None

    fmt = _normalize_hint(hint)
    try:
        if fmt in NATIVE_FORMATS:
            return _native(data, NATIVE_FORMATS[fmt])
        if fmt in REENCODED_FORMATS:
            return _reencode_png(data, REENCODED_FORMATS[fmt])
    except _IMAGE_ERRORS as exc:
        logger.warning("Skipping %s image: %s", fmt, exc)
        return None

    logger.warning("Skipping image with unsupported format %r", hint)
    return None


def load_image(path: Path) -> EmbeddedImage | None:
    """Read and prepare the image at *path*; None if it is missing or unusable."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.warning("Skipping image %s: %s", path, exc)
        return None
    return embed_image(data, path.suffix)


def make_qr_png(url: str | None) -> bytes | None:
    """Render a scannable QR code for *url* as PNG bytes."""
    text = (url or "").strip()
    if not text:
        return None

    try:
        qr = qrcode.QRCode(error_correction=ERROR_CORRECT_M, border=QR_BORDER, box_size=1)
        qr.add_data(text)
        qr.make(fit=True)
        qr.box_size = max(1, QR_PIXEL_WIDTH // (qr.modules_count + 2 * QR_BORDER))
        image = qr.make_image(fill_color=(0, 0, 0), back_color=(255, 255, 255))
        buffer = io.BytesIO()
        image.save(buffer)
    except (DataOverflowError, *_IMAGE_ERRORS) as exc:
        logger.warning("Could not render QR code for %s: %s", text, exc)
        return None
    return buffer.getvalue()
