"""
Test-wide configuration and shared fixtures.

Ensures the repository root (and Lambda packages) are importable without
duplicated sys.path tweaks inside each test module, and provides a stub for
outbound Exa requests so no test touches the network.
"""
from __future__ import annotations

import json
import pathlib
import sys
from typing import Any, Dict, List

import pytest


REPO_ROOT = pathlib.Path(__file__).resolve().parents[2]
LAMBDA_ROOT = REPO_ROOT / "backend" / "lambdas"

for target in (REPO_ROOT, LAMBDA_ROOT):
    target_str = str(target)
    if target_str not in sys.path:
        sys.path.insert(0, target_str)

import requests  # noqa: E402

from shared.config import ExaSettings  # noqa: E402


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    def json(self) -> Any:
        if self._body is None:
            return json.loads(self.text)
        return self._body


class FakeExa:
    """Records outbound POSTs and replays a canned response or exception."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.response: FakeResponse = FakeResponse(200, {})
        self.error: Exception | None = None

    def reply(self, status_code: int = 200, body: Any = None, text: str | None = None) -> None:
        self.response = FakeResponse(status_code, body, text)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(name="fake_exa")
def fixture_fake_exa(monkeypatch: pytest.MonkeyPatch) -> FakeExa:
    fake = FakeExa()
    monkeypatch.setattr(requests, "post", fake.post)
    return fake


@pytest.fixture(name="settings")
def fixture_settings() -> ExaSettings:
    return ExaSettings(api_key="test-key", api_url="https://exa.test/contents")


@pytest.fixture(name="settings_without_key")
def fixture_settings_without_key() -> ExaSettings:
    return ExaSettings(api_url="https://exa.test/contents")
