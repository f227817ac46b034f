"""GitLab provider — implements the RepoProvider port.

Only branch/tag listing is wired up.  Default-branch lookup and the
tree/README/file steps are not implemented for GitLab yet; they return
``None`` so the matching result fields stay empty.
"""

from __future__ import annotations

import logging

import httpx

from module_browser.domain.entities import ModuleReference, Tree, TreeFile
from module_browser.infrastructure.branchtag_fetcher import fetch_module_branchtags

logger = logging.getLogger(__name__)

_GITLAB_BASE = "https://gitlab.com"


def logs_tree_url(ref: ModuleReference, branchtag: str | None) -> str:
    return f"{_GITLAB_BASE}/{ref.org}/{ref.repo}/-/refs/{branchtag}/logs_tree/?format=json"


class GitLabProvider:
    """RepoProvider for gitlab.com."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_default_branch(self, ref: ModuleReference) -> str | None:
        logger.debug("Default branch lookup not supported for GitLab (%s/%s)", ref.org, ref.repo)
        return None

    async def fetch_branchtags(self, ref: ModuleReference) -> list[str]:
        # TODO: send a PRIVATE-TOKEN header once GitLab credentials are configurable.
        return await fetch_module_branchtags(self._client, ref)

    async def fetch_tree(
        self, ref: ModuleReference, path: str, branchtag: str | None
    ) -> Tree | None:
        logger.debug(
            "Tree listing not supported for GitLab (%s, path %s)",
            logs_tree_url(ref, branchtag),
            path,
        )
        return None

    async def fetch_readme(self, listing: list[TreeFile]) -> str | None:
        return None

    def read_file(self, entry: TreeFile) -> tuple[str | None, str | None] | None:
        return None
