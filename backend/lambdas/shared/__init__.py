"""Shared helpers reused across Lambda handlers."""

from .config import ExaSettings, get_env, get_int_env, load_settings
from .exceptions import (
    CallableError,
    ConfigurationError,
    ExaApiError,
    ExaDecodeError,
    ExaStatusError,
    ExaTransportError,
    ExternalServiceError,
    MissingApiKeyError,
)
from .logging import get_logger
from .summary import NO_SUMMARY_FALLBACK, extract_summary

__all__ = [
    "get_env",
    "get_int_env",
    "load_settings",
    "ExaSettings",
    "CallableError",
    "ConfigurationError",
    "ExaApiError",
    "ExaDecodeError",
    "ExaStatusError",
    "ExaTransportError",
    "ExternalServiceError",
    "MissingApiKeyError",
    "get_logger",
    "NO_SUMMARY_FALLBACK",
    "extract_summary",
]
