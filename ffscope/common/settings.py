# ffscope/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False


class FFmpegConfig(BaseModel):
    # bare name -> resolved through PATH by the OS at spawn time
    bin: str = "ffmpeg"
    # None blocks until ffmpeg exits
    timeout_sec: Optional[float] = Field(default=None, gt=0)
    log_output: bool = False

    @field_validator("log_output", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "ffscope"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Paths --------
    # API requests name files relative to this root
    media_root: Path = Path(".")

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    ffmpeg: FFmpegConfig = FFmpegConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from ffscope.common.settings import get_settings
        cfg = get_settings()

    Nested values come from double-underscore env vars, e.g. FFMPEG__BIN.
    """
    return Settings()  # pydantic_settings will read from .env automatically
