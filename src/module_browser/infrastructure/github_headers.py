"""GitHub request headers — implements the HeaderProvider port."""

from __future__ import annotations

USER_AGENT = "module-browser/1.0"


class TokenHeaderProvider:
    """Builds GitHub API headers, authenticated when a token is configured."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def headers_for_github(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": USER_AGENT,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers
