"""GitHub REST API provider — implements the RepoProvider port."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

import httpx

from module_browser.domain.entities import ModuleReference, Tree, TreeFile
from module_browser.domain.exceptions import ContentDecodingError, UpstreamRequestError
from module_browser.domain.ports.header_provider import HeaderProvider
from module_browser.domain.providers import GITHUB_API
from module_browser.infrastructure.branchtag_fetcher import fetch_module_branchtags
from module_browser.infrastructure.github_headers import USER_AGENT

logger = logging.getLogger(__name__)

_README_NAME = "readme.md"


class GitHubProvider:
    """Concrete RepoProvider backed by the GitHub v3 REST API."""

    def __init__(self, client: httpx.AsyncClient, header_provider: HeaderProvider) -> None:
        self._client = client
        self._header_provider = header_provider

    async def fetch_default_branch(self, ref: ModuleReference) -> str | None:
        """GET /repos/{owner}/{repo} → default_branch."""
        resp = await self._client.get(
            f"{GITHUB_API}/repos/{ref.org}/{ref.repo}",
            headers=self._header_provider.headers_for_github(),
        )
        data = resp.json()
        return data.get("default_branch")

    async def fetch_branchtags(self, ref: ModuleReference) -> list[str]:
        """GET /branches then /tags → [name, ...]."""
        return await fetch_module_branchtags(
            self._client, ref, headers=self._header_provider.headers_for_github()
        )

    async def fetch_tree(
        self, ref: ModuleReference, path: str, branchtag: str | None
    ) -> Tree | None:
        """GET /repos/{owner}/{repo}/contents{path}?ref={branchtag}."""
        url = f"{GITHUB_API}/repos/{ref.org}/{ref.repo}/contents{path}"
        params = {"ref": branchtag} if branchtag else None
        resp = await self._client.get(
            url, headers=self._header_provider.headers_for_github(), params=params
        )

        if not resp.is_success:
            raise UpstreamRequestError(resp.status_code, _error_payload(resp))

        data = resp.json()
        if isinstance(data, list):
            return [TreeFile.from_github(item) for item in data]
        return TreeFile.from_github(data)

    async def fetch_readme(self, listing: list[TreeFile]) -> str | None:
        """Download the listing's ``README.md`` (any casing) as text.

        The body is returned whatever the status; only network failures
        propagate.
        """
        readme = next(
            (entry for entry in listing if entry.name.lower() == _README_NAME), None
        )
        if readme is None or not readme.download_url:
            return None

        resp = await self._client.get(
            readme.download_url, headers={"User-Agent": USER_AGENT}
        )
        return resp.text

    def read_file(self, entry: TreeFile) -> tuple[str | None, str | None]:
        """Decode a contents-API file entry → (content, download_url)."""
        return decode_content(entry.content, entry.encoding), entry.download_url


def decode_content(content: str | None, encoding: str | None) -> str | None:
    """Decode a contents-API ``content`` field according to its ``encoding``.

    GitHub uses ``base64`` for regular files and ``none`` (with empty
    content) for files too large to inline.
    """
    if content is None or not encoding or encoding == "none":
        return content
    if encoding != "base64":
        raise ContentDecodingError(f"Unsupported content encoding: '{encoding}'")
    try:
        return base64.b64decode(content).decode("utf-8", errors="replace")
    except binascii.Error as exc:
        raise ContentDecodingError(f"Malformed base64 content: {exc}") from exc


def _error_payload(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        logger.debug("Non-JSON error body from %s", resp.request.url)
        return {"message": resp.text}
