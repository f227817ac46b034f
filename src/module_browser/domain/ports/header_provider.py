"""Port: request headers for authenticated provider calls."""

from __future__ import annotations

from typing import Protocol


class HeaderProvider(Protocol):
    def headers_for_github(self) -> dict[str, str]:
        """Headers to attach to every GitHub API request."""
        ...
