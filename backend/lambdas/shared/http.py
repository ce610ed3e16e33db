"""API Gateway proxy helpers shared by the HTTP-facing Lambdas."""

from __future__ import annotations

import base64
import json
from typing import Any, Dict, Optional

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


def json_response(status_code: int, body: Any) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            **CORS_HEADERS,
        },
        "body": json.dumps(body, ensure_ascii=False),
    }


def empty_response(status_code: int) -> Dict[str, Any]:
    return {"statusCode": status_code, "headers": dict(CORS_HEADERS), "body": ""}


def request_method(event: Any) -> Optional[str]:
    """HTTP method for payload v2 or v1 events, ``None`` for direct invocations."""
    if not isinstance(event, dict):
        return None
    method = None
    request_context = event.get("requestContext")
    if isinstance(request_context, dict):
        http = request_context.get("http")
        if isinstance(http, dict):
            method = http.get("method")
    if not method:
        method = event.get("httpMethod")
    return method.upper() if isinstance(method, str) else None


def request_body(event: Dict[str, Any]) -> Optional[str]:
    body = event.get("body")
    if body is None:
        return None
    if event.get("isBase64Encoded"):
        return base64.b64decode(body).decode("utf-8")
    return body
