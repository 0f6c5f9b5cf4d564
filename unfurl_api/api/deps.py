from unfurl_api.config import get_settings
from unfurl_api.services.unfurl import UnfurlService


async def get_unfurl_service() -> UnfurlService:
    """Build a fresh service per request; nothing is shared between calls."""
    return UnfurlService(settings=get_settings())
