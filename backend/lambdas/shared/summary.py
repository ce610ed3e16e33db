"""
Summary extraction for Exa contents responses.

The contents endpoint has been observed to return the generated summary in
several places depending on the request and API version:

- ``{"summary": "..."}``
- ``{"results": [{"summary": "..."}]}``
- ``{"results": [{"content": {"summary": "..."}}]}``
- ``{"documents": [{"summary": "..."}]}``

Each shape is tried in that order. A shape that does not match, or that blows
up while being walked, simply yields nothing; ``extract_summary`` never raises.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

LOGGER = logging.getLogger(__name__)

NO_SUMMARY_FALLBACK = "No summary available."


def _as_list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


def _string_field(item: Any, key: str) -> Optional[str]:
    if not isinstance(item, Mapping):
        return None
    value = item.get(key)
    return value if isinstance(value, str) else None


def _decode_flat_summary(value: Mapping) -> Optional[str]:
    return _string_field(value, "summary")


def _decode_results(value: Mapping) -> Optional[str]:
    for item in _as_list(value.get("results")):
        if not isinstance(item, Mapping):
            continue
        summary = _string_field(item, "summary")
        if summary is not None:
            return summary
        summary = _string_field(item.get("content"), "summary")
        if summary is not None:
            return summary
    return None


def _decode_documents(value: Mapping) -> Optional[str]:
    for document in _as_list(value.get("documents")):
        summary = _string_field(document, "summary")
        if summary is not None:
            return summary
    return None


_SHAPES: tuple[Callable[[Mapping], Optional[str]], ...] = (
    _decode_flat_summary,
    _decode_results,
    _decode_documents,
)


def extract_summary(value: Any) -> str:
    """Return the first summary string found in ``value``, or ``""``."""
    if not isinstance(value, Mapping):
        return ""
    for decode in _SHAPES:
        try:
            summary = decode(value)
        except Exception as exc:  # pylint: disable=broad-except
            LOGGER.debug("Summary shape %s failed: %s", decode.__name__, exc)
            continue
        if summary is not None:
            return summary
    return ""
