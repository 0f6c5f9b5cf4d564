from unfurl_api.schemas.unfurl import ErrorResponse, UnfurlResult

__all__ = [
    "ErrorResponse",
    "UnfurlResult",
]
