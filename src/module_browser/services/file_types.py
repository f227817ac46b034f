"""File classification helpers used when serving raw files."""

from __future__ import annotations

import re

from module_browser.domain.exceptions import InvalidFileNameError

_EXTENSION_RE = re.compile(r".+\.(.+)$")

CONTENT_TYPES: dict[str, str] = {
    "js": "application/javascript",
    "ts": "application/typescript",
}

DEFAULT_CONTENT_TYPE = "text/plain"

IMAGE_EXTENSIONS: tuple[str, ...] = ("gif", "jpg", "jpeg", "png", "svg")


def get_content_type(name: str) -> str:
    """MIME type for *name* based on its extension.

    Raises :class:`InvalidFileNameError` when *name* has no extension.
    """
    match = _EXTENSION_RE.match(name)
    if not match:
        raise InvalidFileNameError(f"Cannot derive a content type for '{name}'")
    return CONTENT_TYPES.get(match[1], DEFAULT_CONTENT_TYPE)


def is_image_from_name(name: str) -> bool:
    # Case-sensitive: "logo.PNG" is not treated as an image.
    return name.endswith(tuple(f".{ext}" for ext in IMAGE_EXTENSIONS))
