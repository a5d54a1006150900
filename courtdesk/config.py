"""
Application configuration helpers.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ADVOCATES = [
    "NARESH KUMAR JAJULA (NKJ)",
    "N DURGA PRASAD (NDP)",
    "ANKINEEDU PRASAD KOTHAPALLI (KAP)",
    "RAMESH BABU VISHWANATHULA",
]


class Settings(BaseSettings):
    """Configuration loaded from environment variables."""

    gemini_api_key: str | None = Field(None, alias="GEMINI_API_KEY")
    gemini_api_url: str = Field(
        "https://generativelanguage.googleapis.com/v1beta", alias="GEMINI_API_URL"
    )
    fast_model: str = Field("gemini-3-flash-preview", alias="FAST_MODEL")
    deep_model: str = Field("gemini-3-pro-preview", alias="DEEP_MODEL")
    gateway_timeout: float | None = Field(None, alias="GATEWAY_TIMEOUT")
    board_refresh_seconds: float = Field(60.0, alias="BOARD_REFRESH_SECONDS", gt=0)
    firm_name: str = Field("Jajula & Seniors Legal Office", alias="FIRM_NAME")
    firm_advocates: list[str] = Field(default_factory=lambda: list(DEFAULT_ADVOCATES), alias="FIRM_ADVOCATES")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
