# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EditorConfig(BaseSettings):
    gift_item_max_count: int = Field(10_000, ge=1, alias="GIFT_ITEM_MAX_COUNT")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")


def _editor_config_factory() -> EditorConfig:
    return EditorConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(None, alias="LOG_FILE")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    # env var names must not collide with common shell variables such as EDITOR
    editor: EditorConfig = Field(default_factory=_editor_config_factory, alias="GIFT_EDITOR")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug_logging else self.log_level


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "EditorConfig", "load_config"]
