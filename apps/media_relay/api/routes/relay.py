from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response

from media_relay.api.dependencies import get_relay_service
from media_relay.core.constants import FILE_CACHE_CONTROL
from media_relay.schemas import DeleteResponse, ErrorResponse, UploadResponse
from media_relay.services.relay import RelayService, parse_content_length

router = APIRouter(tags=["relay"])

_ERRORS = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={**_ERRORS, 413: {"model": ErrorResponse}},
    summary="Store the raw request body under `key`",
)
async def upload(
    request: Request,
    key: Optional[str] = Query(default=None),
    service: RelayService = Depends(get_relay_service),
):
    result = await service.upload(
        key,
        request.headers.get("content-type"),
        parse_content_length(request.headers.get("content-length")),
        request.stream(),
    )
    return UploadResponse(key=result.key)


@router.delete(
    "/delete",
    response_model=DeleteResponse,
    responses=_ERRORS,
    summary="Delete the object stored under `key`",
)
async def delete(
    key: Optional[str] = Query(default=None),
    service: RelayService = Depends(get_relay_service),
):
    deleted = await service.delete(key)
    return DeleteResponse(key=deleted)


@router.get(
    "/file",
    responses={**_ERRORS, 404: {"model": ErrorResponse}},
    summary="Serve the object stored under `key`",
)
async def file(
    key: Optional[str] = Query(default=None),
    service: RelayService = Depends(get_relay_service),
):
    stored = await service.fetch(key)
    headers = {"Cache-Control": FILE_CACHE_CONTROL}
    if stored.etag:
        headers["ETag"] = stored.etag
    return Response(content=stored.body, media_type=stored.content_type, headers=headers)
