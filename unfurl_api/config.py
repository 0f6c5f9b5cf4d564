from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    app_name: str = Field(default="Unfurl API", description="Application name")
    log_level: str = Field(default="INFO", description="Root logging level")

    fetch_timeout: float | None = Field(
        default=None,
        description="Seconds to wait for the remote page; unset means no limit",
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    accept: str = Field(default=DEFAULT_ACCEPT)
    accept_language: str = Field(default="en-US,en;q=0.5")

    max_title_length: int = Field(default=100, ge=4)
    max_description_length: int = Field(default=200, ge=4)
    min_image_width: int = Field(
        default=100,
        description="Inline images wider than this are always content images",
    )
    icon_marker: str = Field(
        default="icon",
        description="Inline image sources containing this are treated as icons",
    )
    debug_excerpt_length: int = Field(default=200, ge=0)
    log_excerpt_length: int = Field(default=500, ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def request_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
        }


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
