"""Environment configuration helpers for Lambda functions."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_EXA_API_URL = "https://api.exa.ai/contents"
DEFAULT_LIVECRAWL_TIMEOUT_MS = 10000
DEFAULT_REGION = "ap-northeast-1"


def get_env(key: str, default: str | None = None, *, required: bool = False) -> str | None:
    value = os.getenv(key, default)
    if required and (value is None or value == ""):
        raise ConfigurationError(f"Environment variable {key} must be set")
    return value


def get_int_env(key: str, default: int | None = None, *, required: bool = False) -> int:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        if required and default is None:
            raise ConfigurationError(f"Environment variable {key} must be set")
        if default is None:
            raise ConfigurationError(f"Environment variable {key} is missing and no default provided")
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {key} must be an integer") from exc


@dataclass(frozen=True)
class ExaSettings:
    """Per-invocation settings handed to the summary handlers."""

    api_key: str | None = None
    api_key_secret_name: str | None = None
    api_url: str = DEFAULT_EXA_API_URL
    livecrawl_timeout_ms: int = DEFAULT_LIVECRAWL_TIMEOUT_MS
    region: str = DEFAULT_REGION


def load_settings() -> ExaSettings:
    """Read Exa settings from the process environment."""
    return ExaSettings(
        api_key=(get_env("EXA_API_KEY") or "").strip() or None,
        api_key_secret_name=(get_env("EXA_API_KEY_SECRET_NAME") or "").strip() or None,
        api_url=get_env("EXA_API_URL") or DEFAULT_EXA_API_URL,
        livecrawl_timeout_ms=get_int_env("EXA_LIVECRAWL_TIMEOUT_MS", DEFAULT_LIVECRAWL_TIMEOUT_MS),
        region=get_env("AWS_REGION") or DEFAULT_REGION,
    )
