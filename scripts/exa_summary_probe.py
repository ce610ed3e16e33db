#!/usr/bin/env python3
"""
Exa response probe.

Posts a contents request for the given URLs and query, then reports the
top-level keys of the response and the summary the Lambdas would extract from
it. Useful for spotting schema changes in the Exa API.
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict

LAMBDA_ROOT = Path(__file__).resolve().parents[1] / "backend" / "lambdas"
if str(LAMBDA_ROOT) not in sys.path:
    sys.path.insert(0, str(LAMBDA_ROOT))

from shared.config import DEFAULT_EXA_API_URL, DEFAULT_LIVECRAWL_TIMEOUT_MS  # noqa: E402
from shared.exa import SUMMARY_QUERY, SUMMARY_URLS, SummarizationRequest, fetch_contents  # noqa: E402
from shared.exceptions import ExaApiError  # noqa: E402
from shared.summary import extract_summary  # noqa: E402


def describe_response(result: Any) -> Dict[str, Any]:
    keys = sorted(result) if isinstance(result, dict) else []
    return {
        "type": type(result).__name__,
        "keys": keys,
        "results": len(result.get("results") or []) if isinstance(result, dict) and isinstance(result.get("results"), list) else None,
        "summary": extract_summary(result),
    }


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "urls",
        nargs="*",
        help="URLs to summarise. Defaults to the URL the Lambdas use.",
    )
    parser.add_argument("--query", default=SUMMARY_QUERY, help="Summary query")
    parser.add_argument(
        "--livecrawl-timeout",
        type=int,
        default=DEFAULT_LIVECRAWL_TIMEOUT_MS,
        help=f"livecrawl_timeout in ms (default: {DEFAULT_LIVECRAWL_TIMEOUT_MS})",
    )
    parser.add_argument("--endpoint", default=os.getenv("EXA_API_URL", DEFAULT_EXA_API_URL))
    parser.add_argument("--raw", action="store_true", help="Print the full response body")
    args = parser.parse_args()

    api_key = os.getenv("EXA_API_KEY")
    if not api_key:
        print("EXA_API_KEY must be set.", file=sys.stderr)
        return 1

    request = SummarizationRequest(
        urls=args.urls or list(SUMMARY_URLS),
        query=args.query,
        livecrawl_timeout_ms=args.livecrawl_timeout,
    )
    try:
        result = fetch_contents(api_key, request, endpoint=args.endpoint)
    except ExaApiError as exc:
        print(f"{exc.message}: {exc.details}", file=sys.stderr)
        return 2

    if args.raw:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    print(json.dumps(describe_response(result), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
