"""Port: repository provider — one implementation per hosting service."""

from __future__ import annotations

from typing import Protocol

from module_browser.domain.entities import ModuleReference, Tree, TreeFile


class RepoProvider(Protocol):
    """Capabilities the metadata use case needs from a hosting service.

    Operations a provider does not support return ``None`` rather than
    raising, so the use case simply leaves the matching result field empty.
    """

    async def fetch_default_branch(self, ref: ModuleReference) -> str | None:
        """Return the repository's default branch."""
        ...

    async def fetch_branchtags(self, ref: ModuleReference) -> list[str]:
        """Return every branch name followed by every tag name."""
        ...

    async def fetch_tree(
        self, ref: ModuleReference, path: str, branchtag: str | None
    ) -> Tree | None:
        """Return the directory listing or file entry at *path*.

        Raises :class:`UpstreamRequestError` when the provider rejects the
        request.
        """
        ...

    async def fetch_readme(self, listing: list[TreeFile]) -> str | None:
        """Return the text of the README found in a directory listing."""
        ...

    def read_file(self, entry: TreeFile) -> tuple[str | None, str | None] | None:
        """Return ``(content, source_url)`` for a single file entry."""
        ...
