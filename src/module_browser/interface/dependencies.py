"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from module_browser.domain.providers import ProviderType
from module_browser.infrastructure.config import get_settings
from module_browser.infrastructure.github_headers import TokenHeaderProvider
from module_browser.infrastructure.github_provider import GitHubProvider
from module_browser.infrastructure.gitlab_provider import GitLabProvider
from module_browser.infrastructure.json_registry import JsonModuleRegistry
from module_browser.services.fetch_module_metadata import FetchModuleMetadataUseCase

_http_client: httpx.AsyncClient | None = None
_registry: JsonModuleRegistry | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _registry  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout))
    _registry = JsonModuleRegistry.from_file(settings.registry_path)


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _registry  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _registry = None


def get_use_case() -> FetchModuleMetadataUseCase:
    """Build the use case with injected adapters."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"
    assert _registry is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    return FetchModuleMetadataUseCase(
        registry=_registry,
        providers={
            ProviderType.GITHUB: GitHubProvider(_http_client, TokenHeaderProvider(token)),
            ProviderType.GITLAB: GitLabProvider(_http_client),
        },
    )
