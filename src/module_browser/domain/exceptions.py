"""Domain exception hierarchy.

Inner layers raise these; the interface layer's error handlers translate the
ones that escape a request into HTTP responses.  ``UpstreamRequestError`` is
the exception that never escapes: the metadata use case captures its payload
into the result instead.
"""

from __future__ import annotations

from typing import Any


class ModuleBrowserError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidModulePathError(ModuleBrowserError):
    """The first path segment is not ``name[@branchtag]``."""


class InvalidFileNameError(ModuleBrowserError):
    """A file name has no extension to derive a content type from."""


# ── Provider dispatch ───────────────────────────────────────────────────────


class InvalidProviderError(ModuleBrowserError):
    """A module reference names a provider other than GitHub or GitLab."""


# ── Upstream / content errors ───────────────────────────────────────────────


class UpstreamRequestError(ModuleBrowserError):
    """A provider's contents API answered with a non-success status."""

    def __init__(self, status_code: int, payload: Any) -> None:
        super().__init__(f"Upstream request failed with HTTP {status_code}")
        self.status_code = status_code
        self.payload = payload


class ContentDecodingError(ModuleBrowserError):
    """A file entry declares an encoding that cannot be decoded."""
