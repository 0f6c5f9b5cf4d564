from typing import Annotated

from fastapi import APIRouter, Depends, Query

from unfurl_api.api.deps import get_unfurl_service
from unfurl_api.schemas import ErrorResponse, UnfurlResult
from unfurl_api.services.unfurl import UnfurlService

router = APIRouter(prefix="/unfurl", tags=["unfurl"])


@router.get(
    "",
    response_model=UnfurlResult,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def unfurl_link(
    service: Annotated[UnfurlService, Depends(get_unfurl_service)],
    url: Annotated[str | None, Query(description="Absolute URL to preview")] = None,
) -> UnfurlResult:
    """Fetch ``url`` and return its link preview."""
    return await service.unfurl(url)
