import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from unfurl_api.api import api_router
from unfurl_api.config import settings
from unfurl_api.exceptions import RetrievalError, UnfurlError, ValidationError
from unfurl_api.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    configure_logging(settings.log_level)
    logger.info("%s started", settings.app_name)
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.include_router(api_router)


def _error(status_code: int, payload: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(by_alias=True, exclude_none=True),
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, ErrorResponse(error=str(exc)))


@app.exception_handler(RetrievalError)
async def retrieval_error_handler(request: Request, exc: RetrievalError) -> JSONResponse:
    return _error(
        exc.status_code,
        ErrorResponse(error=str(exc), debug_info=exc.debug_info),
    )


@app.exception_handler(UnfurlError)
async def unfurl_error_handler(request: Request, exc: UnfurlError) -> JSONResponse:
    # NetworkError and extraction failures
    logger.error("Error unfurling URL %s: %s", request.query_params.get("url"), exc)
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error=f"Could not unfurl link: {exc}"),
    )


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok", "app": settings.app_name}
