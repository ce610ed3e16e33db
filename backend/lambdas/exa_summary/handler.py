"""
Exa Summary Lambda (HTTP).

Exposes ``/exaSummary`` behind an API Gateway HTTP API. Every request, whatever
its method or body, asks Exa to summarise a fixed list of URLs for a fixed
query and answers with ``{"summary": "..."}``.

Failures are reported as HTTP 500 with an ``{"error": ..., "details": ...}``
body; nothing is retried.
"""
from __future__ import annotations

import json
from typing import Any, Dict

from shared.config import ExaSettings, load_settings
from shared.exa import summarize
from shared.exceptions import ExaApiError, MissingApiKeyError
from shared.http import json_response, request_method
from shared.logging import get_logger
from shared.secrets import resolve_api_key

LOGGER = get_logger(__name__)


def handle(event: Any, _context: Any, settings: ExaSettings) -> Dict[str, Any]:
    try:
        LOGGER.info("Received exaSummary request method=%s", request_method(event) or "INVOKE")
        api_key = resolve_api_key(settings)
        if not api_key:
            error = MissingApiKeyError()
            LOGGER.error("%s", error)
            return json_response(500, {"error": str(error)})

        try:
            summary = summarize(api_key, settings)
        except ExaApiError as exc:
            LOGGER.warning("%s: %s", exc.message, exc.details[:200])
            return json_response(500, {"error": exc.message, "details": exc.details})

        LOGGER.info("Returning summary (chars=%s)", len(summary))
        return json_response(200, {"summary": summary})
    except Exception as exc:  # pylint: disable=broad-except
        LOGGER.exception("exaSummary failed: %s", exc)
        return json_response(500, {"error": str(exc)})


def lambda_handler(event: Any, context: Any) -> Dict[str, Any]:
    try:
        if isinstance(event, str):
            event = json.loads(event)
        settings = load_settings()
    except Exception as exc:  # pylint: disable=broad-except
        LOGGER.exception("Failed to prepare exaSummary request: %s", exc)
        return json_response(500, {"error": str(exc)})
    return handle(event, context, settings)
