from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    # Browser launch
    browser: Literal["chromium", "firefox", "webkit"] = "chromium"
    headless: bool = True
    browser_args: list[str] = Field(default_factory=lambda: ["--disable-gpu"])

    # Page loading, all times in milliseconds
    navigation_timeout: float = Field(30000, gt=0)
    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = (
        "networkidle"
    )
    scroll_distance: int = Field(100, ge=1)
    scroll_interval: int = Field(100, ge=0)
    settle_time: float = Field(1000, ge=0)

    verbose: bool = False

    model_config = SettingsConfigDict(
        env_prefix="BATCH_SHOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_config() -> Config:
    """Get cached config instance."""

    return Config()
