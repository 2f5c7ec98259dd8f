"""Pydantic models describing getver configuration."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, Field, field_validator

from .. import __version__

DEFAULT_REGISTRY_URL = "https://crates.io"
DEFAULT_MAX_WORKERS = 8
DEFAULT_TIMEOUT = 15.0


class GlobalConfig(BaseModel):
    """Registry endpoint and lookup concurrency settings."""

    registry_url: str = DEFAULT_REGISTRY_URL
    resource: str = "crates"
    # Key of the nested package object in the registry's JSON body
    response_key: str = "crate"
    max_workers: int = DEFAULT_MAX_WORKERS
    # One worker per name instead of the bounded pool
    unbounded: bool = False
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = Field(default=f"getver/{__version__}")

    @field_validator("registry_url", mode="before")
    @classmethod
    def _strip_slash(cls, value: Any) -> str:
        text = str(value).strip()
        if not text:
            raise ValueError("registry_url cannot be empty")
        return text.rstrip("/")

    @field_validator("resource", "response_key")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value:
            raise ValueError("value cannot be empty")
        return value

    @field_validator("max_workers")
    @classmethod
    def _positive_workers(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_workers must be >= 1")
        return value

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be > 0")
        return value

    def endpoint(self, name: str) -> str:
        return f"{self.registry_url}/api/v1/{self.resource}/{quote(name, safe='')}"


__all__ = ["DEFAULT_MAX_WORKERS", "DEFAULT_REGISTRY_URL", "DEFAULT_TIMEOUT", "GlobalConfig"]
