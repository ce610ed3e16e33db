"""Custom exceptions shared across Lambda handlers."""

from __future__ import annotations

from typing import Any


class ConfigurationError(RuntimeError):
    """Raised when required environment settings are missing or invalid."""


class MissingApiKeyError(ConfigurationError):
    """Raised when no Exa API key could be resolved for the invocation."""

    def __init__(self, message: str = "Missing EXA_API_KEY environment variable") -> None:
        super().__init__(message)


class ExternalServiceError(RuntimeError):
    """Raised when downstream services return recoverable errors."""


class ExaApiError(ExternalServiceError):
    """Base class for failures talking to the Exa contents endpoint."""

    def __init__(self, details: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.status_code is None:
            return "Exa API error"
        return f"Exa API error {self.status_code}"


class ExaTransportError(ExaApiError):
    """The request never produced an HTTP response."""


class ExaStatusError(ExaApiError):
    """Exa answered with a non-2xx status code."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(body, status_code)


class ExaDecodeError(ExaApiError):
    """Exa answered 2xx but the body was not valid JSON."""


CALLABLE_ERROR_STATUS: dict[str, int] = {
    "cancelled": 499,
    "unknown": 500,
    "invalid-argument": 400,
    "deadline-exceeded": 504,
    "not-found": 404,
    "already-exists": 409,
    "permission-denied": 403,
    "resource-exhausted": 429,
    "failed-precondition": 400,
    "aborted": 409,
    "out-of-range": 400,
    "unimplemented": 501,
    "internal": 500,
    "unavailable": 503,
    "data-loss": 500,
    "unauthenticated": 401,
}


class CallableError(Exception):
    """
    Structured error returned to callable clients.

    ``kind`` is one of the canonical callable codes (``failed-precondition``,
    ``internal`` ...). ``details`` is an optional JSON-serialisable payload
    sent alongside the message.
    """

    def __init__(self, kind: str, message: str, details: Any = None) -> None:
        if kind not in CALLABLE_ERROR_STATUS:
            raise ValueError(f"Unknown callable error kind: {kind}")
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details

    @property
    def http_status(self) -> int:
        return CALLABLE_ERROR_STATUS[self.kind]

    def to_dict(self) -> dict[str, Any]:
        error: dict[str, Any] = {
            "status": self.kind.upper().replace("-", "_"),
            "message": self.message,
        }
        if self.details is not None:
            error["details"] = self.details
        return error
