"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel

from module_browser.domain.entities import (
    ModuleNotFound,
    ResolutionResult,
    ResolvedModule,
    TreeFile,
)


class TreeFileSchema(BaseModel):
    """One entry of a directory listing, or a single file."""

    name: str
    type: str
    path: str = ""
    size: int = 0
    sha: str | None = None
    download_url: str | None = None
    html_url: str | None = None
    content: str | None = None
    encoding: str | None = None

    @classmethod
    def from_entry(cls, entry: TreeFile) -> TreeFileSchema:
        return cls(
            name=entry.name,
            type=entry.type,
            path=entry.path,
            size=entry.size,
            sha=entry.sha,
            download_url=entry.download_url,
            html_url=entry.html_url,
            content=entry.content,
            encoding=entry.encoding,
        )


class ModuleSchema(BaseModel):
    name: str
    type: str
    org: str
    repo: str
    repo_url: str
    description: str | None = None

    @classmethod
    def from_module(cls, module: ResolvedModule) -> ModuleSchema:
        return cls(
            name=module.name,
            type=module.type,
            org=module.org,
            repo=module.repo,
            repo_url=module.repo_url,
            description=module.description,
        )


class ModuleMetadataResponse(BaseModel):
    """Response of ``GET /x/...`` and ``GET /api/x/...``.

    For an unknown module only ``segments`` is set; routes serialize with
    ``exclude_unset`` so the body is exactly ``{"segments": [...]}``.
    """

    segments: list[str]
    meta: ModuleSchema | None = None
    branchtag: str | None = None
    branchtags: list[str] | None = None
    breadcrumbs: list[tuple[str, str]] | None = None
    path: str | None = None
    tree: Union[TreeFileSchema, list[TreeFileSchema], None] = None
    readme: str | None = None
    content: str | None = None
    source_url: str | None = None
    errors: Any = None

    @classmethod
    def from_result(
        cls, result: ResolutionResult | ModuleNotFound
    ) -> ModuleMetadataResponse:
        if isinstance(result, ModuleNotFound):
            return cls(segments=result.segments)

        tree: TreeFileSchema | list[TreeFileSchema] | None
        if isinstance(result.tree, list):
            tree = [TreeFileSchema.from_entry(entry) for entry in result.tree]
        elif result.tree is not None:
            tree = TreeFileSchema.from_entry(result.tree)
        else:
            tree = None

        return cls(
            segments=result.segments,
            meta=ModuleSchema.from_module(result.module),
            branchtag=result.branchtag,
            branchtags=result.branchtags,
            breadcrumbs=(
                [tuple(crumb) for crumb in result.breadcrumbs]
                if result.breadcrumbs is not None
                else None
            ),
            path=result.path,
            tree=tree,
            readme=result.readme,
            content=result.content,
            source_url=result.source_url,
            errors=result.errors,
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
