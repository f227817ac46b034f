"""Port: module registry — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from module_browser.domain.entities import ModuleReference


class ModuleRegistry(Protocol):
    """Maps a module alias to the repository it is published from."""

    async def lookup(self, name: str) -> ModuleReference | None:
        """Return the module's repository reference, or ``None`` if unknown."""
        ...
