"""Shared test fixtures and fake HTTP plumbing."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from module_browser.infrastructure.json_registry import JsonModuleRegistry

REGISTRY = {
    "std": {
        "type": "GitHub",
        "owner": "denoland",
        "repo": "deno_std",
        "desc": "Deno standard library",
    },
    "oak": {"type": "GitHub", "org": "oakserver", "repo": "oak"},
    "glmod": {"type": "GitLab", "owner": "someone", "repo": "glmod"},
    "weird": {"type": "Bitbucket", "owner": "someone", "repo": "weird"},
}


def json_response(url: str, data: Any, status_code: int = 200) -> httpx.Response:
    """Build a real httpx.Response carrying a JSON body."""
    return httpx.Response(status_code, json=data, request=httpx.Request("GET", url))


def text_response(url: str, text: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, text=text, request=httpx.Request("GET", url))


def full_url(url: str, params: dict[str, str] | None = None) -> str:
    """The URL httpx would request for *url* plus query *params*."""
    if not params:
        return url
    return str(httpx.URL(url, params=params))


def fake_client(routes: dict[str, httpx.Response]) -> AsyncMock:
    """An AsyncClient mock answering GETs from a URL → response table.

    Table keys include the query string, whether the caller passed it
    inline or through ``params=``.
    """
    client = AsyncMock(spec=httpx.AsyncClient)

    def _get(url: str, **kwargs: Any) -> httpx.Response:
        key = full_url(url, kwargs.get("params"))
        try:
            return routes[key]
        except KeyError:
            raise AssertionError(f"unexpected request: {key}") from None

    client.get.side_effect = _get
    return client


def requested_urls(client: AsyncMock) -> list[str]:
    return [
        full_url(call.args[0], call.kwargs.get("params"))
        for call in client.get.call_args_list
    ]


@pytest.fixture
def registry() -> JsonModuleRegistry:
    return JsonModuleRegistry(REGISTRY)
