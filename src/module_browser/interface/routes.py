"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse, Response

from module_browser.domain.entities import ModuleNotFound
from module_browser.interface.dependencies import get_use_case
from module_browser.interface.schemas import ErrorResponse, ModuleMetadataResponse
from module_browser.services.fetch_module_metadata import FetchModuleMetadataUseCase
from module_browser.services.file_types import get_content_type, is_image_from_name

router = APIRouter()

_METADATA_RESPONSES = {
    422: {"model": ErrorResponse, "description": "Malformed module path"},
    502: {"model": ErrorResponse, "description": "Upstream provider unreachable"},
}


@router.get("/health", include_in_schema=False)
async def health() -> dict[str, str]:
    """Liveness check; touches no upstream."""
    return {"status": "ok"}


def split_segments(module_path: str) -> list[str]:
    """``"std@0.1/fs/mod.ts"`` → ``["std@0.1", "fs", "mod.ts"]``."""
    return [segment for segment in module_path.split("/") if segment]


@router.get(
    "/x/{module_path:path}",
    response_model=ModuleMetadataResponse,
    response_model_exclude_unset=True,
    responses=_METADATA_RESPONSES,
)
async def browse_module(
    module_path: str,
    use_case: FetchModuleMetadataUseCase = Depends(get_use_case),
) -> ModuleMetadataResponse:
    """Full metadata for the browse page, including branches and breadcrumbs."""
    result = await use_case.execute(split_segments(module_path))
    return ModuleMetadataResponse.from_result(result)


@router.get(
    "/api/x/{module_path:path}",
    response_model=ModuleMetadataResponse,
    response_model_exclude_unset=True,
    responses=_METADATA_RESPONSES,
)
async def module_api(
    module_path: str,
    use_case: FetchModuleMetadataUseCase = Depends(get_use_case),
) -> ModuleMetadataResponse:
    """Lightweight metadata without branch/tag listing or breadcrumbs."""
    result = await use_case.execute(split_segments(module_path), is_api=True)
    return ModuleMetadataResponse.from_result(result)


@router.get(
    "/raw/{module_path:path}",
    responses={
        404: {"model": ErrorResponse, "description": "No such file"},
        422: {"model": ErrorResponse, "description": "File name has no extension"},
    },
)
async def raw_file(
    module_path: str,
    use_case: FetchModuleMetadataUseCase = Depends(get_use_case),
) -> Response:
    """Serve a single file's content with a content type derived from its name."""
    segments = split_segments(module_path)
    result = await use_case.execute(segments, is_api=True)
    if isinstance(result, ModuleNotFound) or len(segments) < 2:
        raise HTTPException(status_code=404, detail="File not found")

    filename = segments[-1]
    if is_image_from_name(filename) and result.source_url:
        return RedirectResponse(result.source_url)
    if result.content is None:
        raise HTTPException(status_code=404, detail="File not found")

    return Response(content=result.content, media_type=get_content_type(filename))
