"""Hello World Lambda (HTTP): static greeting used to smoke-test the API."""
from __future__ import annotations

import json
from typing import Any, Dict

from shared.http import json_response, request_method
from shared.logging import get_logger

LOGGER = get_logger(__name__)

GREETING = "Hello from Firebase Functions!"


def handle(event: Any, _context: Any) -> Dict[str, Any]:
    LOGGER.info("Received helloWorld request method=%s", request_method(event) or "INVOKE")
    return json_response(200, {"message": GREETING})


def lambda_handler(event: Any, context: Any) -> Dict[str, Any]:
    if isinstance(event, str):
        try:
            event = json.loads(event)
        except json.JSONDecodeError:
            LOGGER.warning("Ignoring non-JSON event payload")
    return handle(event, context)
