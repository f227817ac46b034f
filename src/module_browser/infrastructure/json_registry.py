"""JSON-file module registry — implements the ModuleRegistry port.

The registry file maps module names to their source repository::

    {
      "std": {"type": "GitHub", "owner": "denoland", "repo": "deno_std",
              "desc": "Deno standard library"}
    }

``org`` is accepted as an alias of ``owner``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from module_browser.domain.entities import ModuleReference

logger = logging.getLogger(__name__)


class JsonModuleRegistry:
    """Module lookup backed by an in-memory copy of a registry document."""

    def __init__(self, entries: Mapping[str, Mapping[str, Any]]) -> None:
        self._entries = dict(entries)

    @classmethod
    def from_file(cls, path: str | Path) -> JsonModuleRegistry:
        """Load the registry document at *path*."""
        path = Path(path)
        entries = json.loads(path.read_text(encoding="utf-8"))
        logger.info("Loaded %d modules from %s", len(entries), path)
        return cls(entries)

    async def lookup(self, name: str) -> ModuleReference | None:
        entry = self._entries.get(name)
        if entry is None:
            return None
        return ModuleReference(
            type=entry["type"],
            org=entry.get("owner") or entry["org"],
            repo=entry["repo"],
            description=entry.get("desc"),
        )
