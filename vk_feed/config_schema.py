from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _validate_pattern(value: str | None) -> str | None:
    if value is None:
        return None
    if not value.strip():
        return None
    try:
        re.compile(value, re.IGNORECASE)
    except re.error as e:
        raise ValueError(f"must be a valid regular expression ({e})") from e
    return value


class FiltersConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    include: str | None = None  # case-insensitive, must match post text
    exclude: str | None = None  # case-insensitive, must not match post text

    @field_validator("include", "exclude")
    @classmethod
    def _patterns_must_compile(cls, v: str | None) -> str | None:
        return _validate_pattern(v)


class FeedConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = "https://vk.com"

    @field_validator("base_url")
    @classmethod
    def _base_url_must_be_http(cls, v: str) -> str:
        url = (v or "").strip().rstrip("/")
        if not url.startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return url


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    filters: FiltersConfig = Field(default_factory=FiltersConfig)
    feed: FeedConfig = Field(default_factory=FeedConfig)
