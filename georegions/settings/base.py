"""Base settings for the package."""

from typing import Literal, TypeAlias

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel: TypeAlias = Literal[
    "CRITICAL",
    "ERROR",
    "WARNING",
    "INFO",
    "DEBUG",
]


class FeatureFlags(BaseModel):
    """Feature flags for the package."""

    eager_closure: bool = False
    """Compute the derived sets of a region when it is constructed rather than on first query."""


class SettingsBase(BaseSettings):
    """The package settings."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    feature: FeatureFlags = FeatureFlags()
    """Feature flags for the package"""

    log_level: LogLevel = "INFO"
    dev_mode: bool = False


settings = SettingsBase()
