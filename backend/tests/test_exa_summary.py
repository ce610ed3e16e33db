import json

import pytest
import requests

from backend.lambdas.exa_summary import handler as exa_summary  # noqa: E402


def _body(response):
    return json.loads(response["body"])


def test_missing_api_key_returns_500_without_upstream_call(fake_exa, settings_without_key):
    response = exa_summary.handle({}, None, settings_without_key)

    assert response["statusCode"] == 500
    assert _body(response) == {"error": "Missing EXA_API_KEY environment variable"}
    assert fake_exa.calls == []


def test_upstream_status_error_is_reported(fake_exa, settings):
    fake_exa.reply(503, text="rate limited")

    response = exa_summary.handle({}, None, settings)

    assert response["statusCode"] == 500
    assert _body(response) == {"error": "Exa API error 503", "details": "rate limited"}


def test_transport_error_uses_error_envelope(fake_exa, settings):
    fake_exa.error = requests.Timeout("read timed out")

    response = exa_summary.handle({}, None, settings)

    body = _body(response)
    assert response["statusCode"] == 500
    assert body["error"] == "Exa API error"
    assert "read timed out" in body["details"]


def test_summary_is_returned(fake_exa, settings):
    fake_exa.reply(200, {"summary": "likes ramen and hiking"})

    response = exa_summary.handle({"requestContext": {"http": {"method": "GET"}}}, None, settings)

    assert response["statusCode"] == 200
    assert response["headers"]["Content-Type"] == "application/json"
    assert _body(response) == {"summary": "likes ramen and hiking"}
    assert fake_exa.calls[0]["headers"]["x-api-key"] == "test-key"


def test_request_body_is_ignored(fake_exa, settings):
    fake_exa.reply(200, {"results": [{"content": {"summary": "nested"}}]})
    event = {
        "requestContext": {"http": {"method": "POST"}},
        "body": json.dumps({"urls": ["https://elsewhere.example"], "query": "other"}),
    }

    response = exa_summary.handle(event, None, settings)

    assert _body(response) == {"summary": "nested"}
    assert fake_exa.calls[0]["json"]["urls"] != ["https://elsewhere.example"]


def test_empty_response_uses_fallback(fake_exa, settings):
    fake_exa.reply(200, {})

    response = exa_summary.handle({}, None, settings)

    assert response["statusCode"] == 200
    assert _body(response) == {"summary": "No summary available."}


def test_unexpected_exception_is_stringified(monkeypatch: pytest.MonkeyPatch, settings):
    def explode(api_key, settings):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(exa_summary, "summarize", explode)

    response = exa_summary.handle({}, None, settings)

    assert response["statusCode"] == 500
    assert _body(response) == {"error": "kaboom"}


def test_lambda_handler_reads_environment(monkeypatch: pytest.MonkeyPatch, fake_exa):
    monkeypatch.setenv("EXA_API_KEY", "env-key")
    monkeypatch.delenv("EXA_API_URL", raising=False)
    fake_exa.reply(200, {"documents": [{"summary": "from env"}]})

    response = exa_summary.lambda_handler(json.dumps({"rawPath": "/exaSummary"}), None)

    assert _body(response) == {"summary": "from env"}
    assert fake_exa.calls[0]["headers"]["x-api-key"] == "env-key"


def test_lambda_handler_without_key(monkeypatch: pytest.MonkeyPatch, fake_exa):
    monkeypatch.delenv("EXA_API_KEY", raising=False)
    monkeypatch.delenv("EXA_API_KEY_SECRET_NAME", raising=False)

    response = exa_summary.lambda_handler({}, None)

    assert response["statusCode"] == 500
    assert "Missing EXA_API_KEY environment variable" in response["body"]


def test_non_json_upstream_body_uses_error_envelope(fake_exa, settings):
    fake_exa.reply(200, text="<html>maintenance</html>")

    response = exa_summary.handle({}, None, settings)

    body = _body(response)
    assert response["statusCode"] == 500
    assert body["error"] == "Exa API error 200"
    assert "non-JSON" in body["details"]


@pytest.mark.parametrize("event", [None, [], {"requestContext": "x"}, {"requestContext": {"http": "x"}}])
def test_unusual_events_still_get_a_response(fake_exa, settings, event):
    fake_exa.reply(200, {"summary": "still works"})

    response = exa_summary.handle(event, None, settings)

    assert response["statusCode"] == 200
    assert _body(response) == {"summary": "still works"}


@pytest.mark.parametrize("event", [None, [], "null"])
def test_lambda_handler_accepts_payloads_without_request_context(monkeypatch: pytest.MonkeyPatch, fake_exa, event):
    monkeypatch.setenv("EXA_API_KEY", "env-key")
    fake_exa.reply(200, {"summary": "ok"})

    response = exa_summary.lambda_handler(event, None)

    assert response["statusCode"] == 200
    assert _body(response) == {"summary": "ok"}


def test_lambda_handler_reports_unparseable_payload(monkeypatch: pytest.MonkeyPatch, fake_exa):
    monkeypatch.setenv("EXA_API_KEY", "env-key")

    response = exa_summary.lambda_handler("not json", None)

    assert response["statusCode"] == 500
    assert "error" in _body(response)
    assert fake_exa.calls == []
