"""Provider tables — pure URL builders and branch/tag reshaping.

Every function here dispatches on the reference's provider type and raises
:class:`InvalidProviderError` for anything other than GitHub or GitLab.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from module_browser.domain.exceptions import InvalidProviderError

if TYPE_CHECKING:
    from module_browser.domain.entities import ModuleReference


class ProviderType(str, Enum):
    """Hosting services a module can live on."""

    GITHUB = "GitHub"
    GITLAB = "GitLab"


GITHUB_API = "https://api.github.com"

_REPO_URL_TEMPLATES: dict[ProviderType, str] = {
    ProviderType.GITHUB: "https://github.com/{org}/{repo}",
    ProviderType.GITLAB: "https://gitlab.com/{org}/{repo}",
}

# Order matters: branches are listed before tags.
_BRANCHTAG_URL_TEMPLATES: dict[ProviderType, tuple[str, ...]] = {
    ProviderType.GITHUB: (
        GITHUB_API + "/repos/{org}/{repo}/branches",
        GITHUB_API + "/repos/{org}/{repo}/tags",
    ),
    ProviderType.GITLAB: ("https://gitlab.com/{org}/{repo}/refs",),
}


def provider_type(value: str) -> ProviderType:
    """Coerce a raw provider name into a :class:`ProviderType`."""
    try:
        return ProviderType(value)
    except ValueError:
        raise InvalidProviderError(f"invalid module type: {value!r}") from None


def create_repo_url(ref: ModuleReference) -> str:
    """Canonical web URL of the repository behind *ref*."""
    template = _REPO_URL_TEMPLATES[provider_type(ref.type)]
    return template.format(org=ref.org, repo=ref.repo)


def create_branchtag_urls(ref: ModuleReference) -> list[str]:
    """API endpoints that together list every branch and tag of *ref*."""
    templates = _BRANCHTAG_URL_TEMPLATES[provider_type(ref.type)]
    return [t.format(org=ref.org, repo=ref.repo) for t in templates]


def _github_ref_names(data: Any) -> list[str]:
    return [item["name"] for item in data]


def _gitlab_ref_names(data: Any) -> list[str]:
    return [*data["Branches"], *data["Tags"]]


_TRANSFORMS: dict[ProviderType, Callable[[Any], list[str]]] = {
    ProviderType.GITHUB: _github_ref_names,
    ProviderType.GITLAB: _gitlab_ref_names,
}


def transform_branchtags(data: Any, type_: str) -> list[str]:
    """Flatten a decoded branch/tag listing into ref names.

    GitHub answers with ``[{"name": ...}, ...]``; GitLab with
    ``{"Branches": [...], "Tags": [...]}`` (branches come first).
    """
    return _TRANSFORMS[provider_type(type_)](data)
