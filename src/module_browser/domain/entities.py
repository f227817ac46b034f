"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, Union

from module_browser.domain.providers import create_repo_url


@dataclass(frozen=True, slots=True)
class ModuleReference:
    """Identifies a hosted repository: provider, organisation and name."""

    type: str  # "GitHub" or "GitLab"
    org: str
    repo: str
    description: str | None = None


@dataclass(frozen=True, slots=True)
class ResolvedModule:
    """A registry alias together with the repository it points at."""

    name: str
    type: str
    org: str
    repo: str
    description: str | None = None

    @classmethod
    def from_reference(cls, name: str, ref: ModuleReference) -> ResolvedModule:
        return cls(
            name=name,
            type=ref.type,
            org=ref.org,
            repo=ref.repo,
            description=ref.description,
        )

    @property
    def reference(self) -> ModuleReference:
        return ModuleReference(
            type=self.type, org=self.org, repo=self.repo, description=self.description
        )

    @property
    def repo_url(self) -> str:
        return create_repo_url(self.reference)


class Breadcrumb(NamedTuple):
    """One navigation link: the segment label and the href up to it."""

    label: str
    href: str


@dataclass(frozen=True, slots=True)
class TreeFile:
    """A single entry returned by a provider's contents API."""

    name: str
    type: str  # "file", "dir", "symlink" or "submodule" on GitHub
    path: str = ""
    size: int = 0
    sha: str | None = None
    download_url: str | None = None
    html_url: str | None = None
    content: str | None = None
    encoding: str | None = None

    @classmethod
    def from_github(cls, data: dict[str, Any]) -> TreeFile:
        return cls(
            name=data["name"],
            type=data.get("type", "file"),
            path=data.get("path", ""),
            size=data.get("size", 0),
            sha=data.get("sha"),
            download_url=data.get("download_url"),
            html_url=data.get("html_url"),
            content=data.get("content"),
            encoding=data.get("encoding"),
        )


Tree = Union[TreeFile, list[TreeFile]]


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Everything the browse page needs for one module path.

    Each optional field is ``None`` when the step producing it was skipped
    or is not supported by the module's provider.
    """

    module: ResolvedModule
    segments: list[str]
    path: str
    branchtag: str | None = None
    branchtags: list[str] | None = None
    breadcrumbs: list[Breadcrumb] | None = None
    tree: Tree | None = None
    readme: str | None = None
    content: str | None = None
    source_url: str | None = None
    errors: Any = None


@dataclass(frozen=True, slots=True)
class ModuleNotFound:
    """Terminal result for a module name the registry does not know."""

    segments: list[str]
