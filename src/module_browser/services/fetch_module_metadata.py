"""Fetch-module-metadata use case — the main orchestration pipeline.

Resolves ``["name@branchtag", *path]`` into a :class:`ResolutionResult`.
The steps run strictly one after another; a step whose input is missing is
skipped and leaves its result fields empty.  Only an upstream failure of the
tree step is captured (into ``errors``); every other failure propagates to
the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from module_browser.domain.entities import (
    ModuleNotFound,
    ModuleReference,
    ResolutionResult,
    ResolvedModule,
    Tree,
    TreeFile,
)
from module_browser.domain.exceptions import InvalidProviderError, UpstreamRequestError
from module_browser.domain.ports.module_registry import ModuleRegistry
from module_browser.domain.ports.repo_provider import RepoProvider
from module_browser.domain.providers import ProviderType, provider_type
from module_browser.domain.value_objects import ModulePath

logger = logging.getLogger(__name__)


def sort_listing(listing: list[TreeFile]) -> list[TreeFile]:
    """Order a directory listing by entry type, keeping ties in place."""
    return sorted(listing, key=lambda entry: entry.type)


class FetchModuleMetadataUseCase:
    """Orchestrates the module path → metadata pipeline.

    Parameters
    ----------
    registry:
        Looks up which repository a module name points at.
    providers:
        One :class:`RepoProvider` per supported hosting service.
    """

    def __init__(
        self,
        registry: ModuleRegistry,
        providers: Mapping[ProviderType, RepoProvider],
    ) -> None:
        self._registry = registry
        self._providers = providers

    # ── Public entry point ──────────────────────────────────────────────

    async def execute(
        self, segments: Sequence[str], is_api: bool = False
    ) -> ResolutionResult | ModuleNotFound:
        """Run the pipeline for one module path."""
        module_path = ModulePath.from_segments(segments)

        reference = await self._registry.lookup(module_path.module_name)
        if reference is None:
            logger.info("Module '%s' not found", module_path.module_name)
            return ModuleNotFound(segments=list(segments))

        module = ResolvedModule.from_reference(module_path.module_name, reference)
        logger.info("Resolving %s%s", module.repo_url, module_path.path)
        provider = self._provider_for(module.reference)

        branchtag = module_path.branchtag
        if not branchtag:
            branchtag = await provider.fetch_default_branch(module.reference)

        branchtags = None
        breadcrumbs = None
        if not is_api:
            branchtags = await provider.fetch_branchtags(module.reference)
            breadcrumbs = module_path.breadcrumbs()

        tree, errors = await self._fetch_tree(
            provider, module.reference, module_path.path, branchtag
        )

        readme = None
        content = None
        source_url = None
        if isinstance(tree, list):
            tree = sort_listing(tree)
            readme = await provider.fetch_readme(tree)
        elif tree is not None:
            file_data = provider.read_file(tree)
            if file_data is not None:
                content, source_url = file_data

        return ResolutionResult(
            module=module,
            segments=list(segments),
            path=module_path.path,
            branchtag=branchtag,
            branchtags=branchtags,
            breadcrumbs=breadcrumbs,
            tree=tree,
            readme=readme,
            content=content,
            source_url=source_url,
            errors=errors,
        )

    # ── Pipeline steps ──────────────────────────────────────────────────

    def _provider_for(self, ref: ModuleReference) -> RepoProvider:
        type_ = provider_type(ref.type)
        provider = self._providers.get(type_)
        if provider is None:
            raise InvalidProviderError(f"No provider configured for {type_.value}")
        return provider

    @staticmethod
    async def _fetch_tree(
        provider: RepoProvider,
        ref: ModuleReference,
        path: str,
        branchtag: str | None,
    ) -> tuple[Tree | None, Any]:
        """Return ``(tree, None)`` on success or ``(None, payload)`` on rejection."""
        try:
            return await provider.fetch_tree(ref, path, branchtag), None
        except UpstreamRequestError as exc:
            logger.warning(
                "Contents request for %s/%s%s failed with HTTP %d",
                ref.org,
                ref.repo,
                path,
                exc.status_code,
            )
            return None, exc.payload
