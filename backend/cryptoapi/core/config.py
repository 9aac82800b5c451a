"""
Client configuration from environment variables (.env file)

All variables are optional: the defaults point at the public provider APIs
and keep the transport behaviour of a single plain GET per call.
Pydantic validates types when the settings object is created.
"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Providers
    DEXSCREENER_BASE_URL: str = Field(default="https://api.dexscreener.com")
    COINGECKO_BASE_URL: str = Field(default="https://api.coingecko.com/api/v3")

    # HTTP transport
    HTTP_TIMEOUT: Optional[float] = Field(default=30.0)  # None disables the timeout
    HTTP_RETRIES: int = Field(default=0, ge=0)  # connection retries only, 0 = single attempt
    HTTP_FOLLOW_REDIRECTS: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        env_parse_none_str="null",
    )

settings = Settings()
