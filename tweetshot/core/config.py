from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    app_name: str = Field(default="tweetshot", alias="APP_NAME")
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    syndication_base_url: str = Field(default="https://cdn.syndication.twimg.com", alias="SYNDICATION_BASE_URL")
    syndication_lang: str = Field(default="en", alias="SYNDICATION_LANG")
    syndication_timeout_seconds: float = Field(default=10.0, gt=0, alias="SYNDICATION_TIMEOUT_SECONDS")
    enrich_json: bool = Field(default=True, alias="ENRICH_JSON")

    browser_executable_path: str | None = Field(default=None, alias="BROWSER_EXECUTABLE_PATH")
    browser_args: list[str] = Field(
        default_factory=lambda: ["--disable-dev-shm-usage", "--disable-gpu"],
        alias="BROWSER_ARGS",
    )
    viewport_width: int = Field(default=550, ge=1, alias="VIEWPORT_WIDTH")
    viewport_height: int = Field(default=400, ge=1, alias="VIEWPORT_HEIGHT")
    settle_strategy: Literal["delay", "images"] = Field(default="images", alias="SETTLE_STRATEGY")
    settle_delay_ms: int = Field(default=1000, ge=0, alias="SETTLE_DELAY_MS")

    request_timeout_seconds: float = Field(default=15.0, gt=0, alias="REQUEST_TIMEOUT_SECONDS")
    cache_max_age: int = Field(default=3600, ge=0, alias="CACHE_MAX_AGE")

    environment: Literal["dev", "prod", "test"] = Field(default="dev", alias="ENVIRONMENT")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
