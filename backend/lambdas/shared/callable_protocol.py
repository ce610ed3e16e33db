"""
Callable endpoint protocol.

Callable functions receive ``POST`` requests whose JSON body is
``{"data": <value>}`` and answer with ``{"result": <value>}`` on success or
``{"error": {"status", "message", "details"}}`` on failure. The HTTP status of
an error response is derived from the error kind. The same envelope is
accepted when the Lambda is invoked directly instead of through API Gateway.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict

from .exceptions import CallableError
from .http import empty_response, json_response, request_body, request_method


LOGGER = logging.getLogger(__name__)

CallableFunction = Callable[[Any, Any], Any]


def _bad_request() -> CallableError:
    return CallableError("invalid-argument", "Bad Request")


def parse_callable_data(event: Any) -> Any:
    """Return the ``data`` member of a callable request."""
    if isinstance(event, str):
        try:
            event = json.loads(event)
        except json.JSONDecodeError as exc:
            raise _bad_request() from exc
    if not isinstance(event, dict):
        raise _bad_request()

    method = request_method(event)
    if method is None:
        envelope: Any = event
    else:
        if method != "POST":
            raise _bad_request()
        try:
            envelope = json.loads(request_body(event) or "")
        except (ValueError, UnicodeDecodeError) as exc:
            raise _bad_request() from exc

    if not isinstance(envelope, dict) or "data" not in envelope:
        raise _bad_request()
    return envelope["data"]


def error_response(error: CallableError) -> Dict[str, Any]:
    return json_response(error.http_status, {"error": error.to_dict()})


def dispatch(event: Any, context: Any, func: CallableFunction) -> Dict[str, Any]:
    """Run ``func(data, context)`` and marshal its outcome to the callable wire format."""
    if isinstance(event, dict) and request_method(event) == "OPTIONS":
        return empty_response(204)

    try:
        data = parse_callable_data(event)
    except CallableError as exc:
        LOGGER.warning("Rejected callable request: %s", exc.message)
        return error_response(exc)

    try:
        result = func(data, context)
    except CallableError as exc:
        LOGGER.warning("Callable %s failed with %s: %s", getattr(func, "__name__", func), exc.kind, exc.message)
        return error_response(exc)
    except Exception:  # pylint: disable=broad-except
        LOGGER.exception("Unhandled error in callable %s", getattr(func, "__name__", func))
        return error_response(CallableError("internal", "INTERNAL"))

    return json_response(200, {"result": result})
