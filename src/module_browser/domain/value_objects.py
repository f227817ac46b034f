"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from module_browser.domain.entities import Breadcrumb
from module_browser.domain.exceptions import InvalidModulePathError

_MODULE_SEGMENT_RE = re.compile(r"(?P<name>[0-9a-z\-_]+)(?:@(?P<branchtag>.*))?")

# Label of the breadcrumb pointing at the module index page.
_ROOT_CRUMB = "x"


@dataclass(frozen=True, slots=True)
class ModulePath:
    """Parsed module path such as ``["std@0.50.0", "fs", "mod.ts"]``.

    The first segment names the module and optionally pins a branch or tag;
    the remaining segments are a path inside the repository.
    """

    segments: tuple[str, ...]
    module_name: str
    branchtag: str | None = None

    @classmethod
    def from_segments(cls, segments: Sequence[str]) -> ModulePath:
        """Parse and validate raw path segments."""
        if not segments:
            raise InvalidModulePathError("Module path must contain a module name.")
        match = _MODULE_SEGMENT_RE.fullmatch(segments[0])
        if not match:
            raise InvalidModulePathError(
                f"Invalid module segment: '{segments[0]}'. "
                "Expected format: <name>[@<branch-or-tag>]"
            )
        return cls(
            segments=tuple(segments),
            module_name=match["name"],
            branchtag=match["branchtag"] or None,
        )

    @property
    def path(self) -> str:
        """Repository-relative path, always starting with ``/``."""
        return "/" + "/".join(self.segments[1:])

    def breadcrumbs(self) -> list[Breadcrumb]:
        crumbs = [_ROOT_CRUMB, *self.segments]
        return [
            Breadcrumb(label, "/" + "/".join(crumbs[: i + 1]))
            for i, label in enumerate(crumbs)
        ]
