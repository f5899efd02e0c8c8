# grit/src/grit/core/config.py

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from grit.core.settings import UNLIMITED_SPLIT


class Settings(BaseSettings):
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"] = Field(default="INFO")

    # Defaults applied by CLI commands when options are omitted
    default_delimiter: str = Field(default=" ", min_length=1)
    default_max_split: int = Field(default=UNLIMITED_SPLIT)
    default_mode: Literal["borrow", "dup"] = Field(default="dup")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GRIT_",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


# Instantiate settings
settings = Settings()
