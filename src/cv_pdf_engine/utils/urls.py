"""URL display helpers."""

from __future__ import annotations

import re
from urllib.parse import urlparse

__all__ = ["display_url", "profile_username"]

_PROTOCOL = re.compile(r"^https?://")


def display_url(url: str | None) -> str:
    """Strip the protocol and a trailing slash for display."""
    text = (url or "").strip()
    if not text:
        return ""
    return _PROTOCOL.sub("", text).removesuffix("/")


def profile_username(url: str | None) -> str:
    """Return the last path segment of a profile URL (the handle).

    ``https://github.com/octocat/`` gives ``octocat``; a URL without a path
    gives ``""``.
    """
    text = (url or "").strip()
    if not text:
        return ""
    try:
        parsed = urlparse(text if text.startswith("http") else f"https://{text}")
    except ValueError:
        return display_url(text)
    parts = [part for part in parsed.path.split("/") if part]
    return parts[-1] if parts else ""
