from pydantic import BaseModel, ConfigDict, Field


class UnfurlResult(BaseModel):
    """Compact link preview, serialized with the camelCase wire names."""

    title: str
    description: str
    image_url: str | None = Field(default=None, alias="imageUrl")
    url: str
    site_name: str = Field(alias="siteName")
    favicon_url: str | None = Field(default=None, alias="faviconUrl")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ErrorResponse(BaseModel):
    error: str
    debug_info: str | None = Field(default=None, alias="debugInfo")

    model_config = ConfigDict(populate_by_name=True)
