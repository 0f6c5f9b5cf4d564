from fastapi import APIRouter

from unfurl_api.api.v1 import unfurl

api_router = APIRouter()
api_router.include_router(unfurl.router)

__all__ = ["api_router"]
