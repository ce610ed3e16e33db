"""Hello Lambda (callable): greets ``data.name`` or the world."""
from __future__ import annotations

from typing import Any, Dict

from shared import callable_protocol
from shared.logging import get_logger

LOGGER = get_logger(__name__)


def hello_callable(data: Any, _context: Any) -> Dict[str, str]:
    name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(name, str) or not name:
        name = "World"
    LOGGER.info("Greeting %s", name)
    return {"message": f"Hello, {name}!"}


def lambda_handler(event: Any, context: Any) -> Dict[str, Any]:
    return callable_protocol.dispatch(event, context, hello_callable)
