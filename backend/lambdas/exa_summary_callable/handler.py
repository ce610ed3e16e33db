"""
Exa Summary Lambda (callable).

Callable counterpart of ``exa_summary``: returns ``{"summary": "..."}`` as the
callable result and reports failures as structured callable errors instead of
HTTP status codes. The request data is ignored.
"""
from __future__ import annotations

from typing import Any, Dict

from shared import callable_protocol
from shared.config import ExaSettings, load_settings
from shared.exa import summarize
from shared.exceptions import CallableError, ExaApiError, ExaStatusError, MissingApiKeyError
from shared.logging import get_logger
from shared.secrets import resolve_api_key

LOGGER = get_logger(__name__)


def exa_summary_callable(_data: Any, _context: Any, settings: ExaSettings) -> Dict[str, str]:
    try:
        api_key = resolve_api_key(settings)
        if not api_key:
            raise CallableError("failed-precondition", str(MissingApiKeyError()))

        try:
            summary = summarize(api_key, settings)
        except ExaStatusError as exc:
            LOGGER.warning("%s: %s", exc.message, exc.details[:200])
            raise CallableError("internal", exc.message, exc.details) from exc
        except ExaApiError as exc:
            LOGGER.warning("Exa request did not complete: %s", exc.details)
            raise CallableError("internal", exc.details) from exc

        LOGGER.info("Returning summary (chars=%s)", len(summary))
        return {"summary": summary}
    except CallableError:
        raise
    except Exception as exc:  # pylint: disable=broad-except
        LOGGER.exception("exaSummaryCallable failed: %s", exc)
        raise CallableError("internal", str(exc)) from exc


def handle(event: Any, context: Any, settings: ExaSettings) -> Dict[str, Any]:
    return callable_protocol.dispatch(
        event,
        context,
        lambda data, ctx: exa_summary_callable(data, ctx, settings),
    )


def lambda_handler(event: Any, context: Any) -> Dict[str, Any]:
    try:
        settings = load_settings()
    except Exception as exc:  # pylint: disable=broad-except
        LOGGER.exception("Invalid configuration: %s", exc)
        return callable_protocol.error_response(CallableError("internal", str(exc)))
    return handle(event, context, settings)
