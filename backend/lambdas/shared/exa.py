"""
Shared helpers for calling the Exa contents API.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
from requests import RequestException

from .config import ExaSettings
from .exceptions import ExaDecodeError, ExaStatusError, ExaTransportError
from .summary import NO_SUMMARY_FALLBACK, extract_summary


LOGGER = logging.getLogger(__name__)

SUMMARY_URLS: tuple[str, ...] = (
    "https://www.google.com/maps/contrib/115444186411517945794/reviews/@41.4688643,-81.1138728,7z/"
    "data=!3m1!4b1!4m3!8m2!3m1!1e1?authuser=4&entry=ttu&g_ep=EgoyMDI1MDkwMy4wIKXMDSoASAFQAw%3D%3D",
)
SUMMARY_QUERY = (
    "what food and places does he like? describe both food preferences and travel/place preferences"
)


@dataclass(frozen=True)
class SummarizationRequest:
    urls: List[str]
    query: str
    livecrawl_timeout_ms: int
    include_text: bool = True

    def __post_init__(self) -> None:
        if not self.urls:
            raise ValueError("SummarizationRequest requires at least one URL")

    def to_payload(self) -> Dict[str, Any]:
        return {
            "urls": list(self.urls),
            "summary": {"query": self.query},
            "livecrawl_timeout": self.livecrawl_timeout_ms,
            "text": self.include_text,
        }


def build_summary_request(settings: ExaSettings) -> SummarizationRequest:
    """The fixed request both summary endpoints send."""
    return SummarizationRequest(
        urls=list(SUMMARY_URLS),
        query=SUMMARY_QUERY,
        livecrawl_timeout_ms=settings.livecrawl_timeout_ms,
        include_text=True,
    )


def fetch_contents(
    api_key: str,
    request: SummarizationRequest,
    *,
    endpoint: str,
    session: Optional[requests.Session] = None,
) -> Any:
    """
    POST ``request`` to the Exa contents endpoint and return the decoded body.

    Raises ``ExaTransportError`` when no response arrives, ``ExaStatusError``
    for non-2xx responses and ``ExaDecodeError`` for a body that is not JSON.
    """
    http = session or requests
    try:
        response = http.post(
            endpoint,
            headers={
                "content-type": "application/json",
                "x-api-key": api_key,
            },
            json=request.to_payload(),
        )
    except RequestException as exc:
        raise ExaTransportError(f"Exa request failed: {exc}") from exc

    if not 200 <= response.status_code < 300:
        raise ExaStatusError(response.status_code, response.text)

    try:
        return response.json()
    except ValueError as exc:
        raise ExaDecodeError(f"Exa returned non-JSON payload: {exc}", response.status_code) from exc


def summarize(api_key: str, settings: ExaSettings, *, session: Optional[requests.Session] = None) -> str:
    """Fetch the fixed summary request and reduce the response to one string."""
    request = build_summary_request(settings)
    result = fetch_contents(api_key, request, endpoint=settings.api_url, session=session)
    summary = extract_summary(result)
    if not summary:
        LOGGER.info(
            "Exa response carried no summary (keys=%s)",
            sorted(result) if isinstance(result, dict) else type(result).__name__,
        )
        return NO_SUMMARY_FALLBACK
    return summary
