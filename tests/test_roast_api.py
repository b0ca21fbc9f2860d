"""
Endpoint tests for POST /api/roast
"""

import httpx
from fastapi.testclient import TestClient

from main import create_app
from roast_prompt import MOCK_ROAST
from tests.fakes import FakeGateway, SAMPLE_ROAST
from utils.openrouter_client import RoastGateway
from utils.presentation import PRO_ADVICE

LONG_ROAST = (
    "Score: 41/100\n"
    "What's good:\n"
    "- Bold hero image\n"
    "What's confusing:\n"
    "- Two competing CTAs\n"
    "Improvements:\n"
    "- Add testimonials\n"
    "- Clarify pricing earlier\n"
    "- Shorten the signup form\n"
    "- Name the target customer"
)


def test_end_to_end_structured(client, fake_gateway):
    response = client.post("/api/roast", json={"url": "https://example.com"})

    assert response.status_code == 200
    assert response.json() == {
        "score": "7/10",
        "good": ["Clear headline"],
        "confusing": ["CTA placement"],
        "improvements": ["Add testimonials"],
    }
    assert fake_gateway.calls == ["https://example.com"]


def test_malformed_json_is_rejected_without_upstream_call(client, fake_gateway):
    response = client.post(
        "/api/roast",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "invalid request body"}
    assert fake_gateway.calls == []


def test_missing_url_is_rejected(client, fake_gateway):
    response = client.post("/api/roast", json={"link": "https://example.com"})
    assert response.status_code == 400
    assert response.json() == {"error": "invalid request body"}
    assert fake_gateway.calls == []


def test_undecodable_body_is_rejected_without_upstream_call(client, fake_gateway):
    response = client.post(
        "/api/roast",
        content=b'{"url": "\xff\xfe"}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "invalid request body"}
    assert fake_gateway.calls == []


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_blank_url_is_rejected(client, fake_gateway):
    response = client.post("/api/roast", json={"url": "   "})
    assert response.status_code == 400
    assert fake_gateway.calls == []


def test_non_string_url_is_rejected(client, fake_gateway):
    response = client.post("/api/roast", json={"url": 42})
    assert response.status_code == 400
    assert fake_gateway.calls == []


def test_url_is_not_otherwise_validated(client, fake_gateway):
    response = client.post("/api/roast", json={"url": "my-saas dot com"})
    assert response.status_code == 200
    assert fake_gateway.calls == ["my-saas dot com"]


def test_upstream_failure_returns_500(make_client, monkeypatch):
    def fail_parse(text):
        raise AssertionError("parser must not run after an upstream failure")

    monkeypatch.setattr("routes.parse_roast", fail_parse)
    client = make_client(FakeGateway(fail=True))

    response = client.post("/api/roast", json={"url": "https://example.com"})
    assert response.status_code == 500
    assert response.json() == {"error": "AI roast failed"}


def test_upstream_non_2xx_through_real_gateway(make_client, settings):
    transport = httpx.MockTransport(lambda request: httpx.Response(502, text="bad gateway"))
    gateway = RoastGateway(settings, client=httpx.AsyncClient(transport=transport))
    client = make_client(gateway)

    response = client.post("/api/roast", json={"url": "https://example.com"})
    assert response.status_code == 500
    assert response.json() == {"error": "AI roast failed"}


def test_unstructured_reply_includes_raw(make_client):
    reply = "I can't browse the web, sorry."
    client = make_client(FakeGateway(reply=reply))

    body = client.post("/api/roast", json={"url": "https://example.com"}).json()
    assert body == {
        "score": "",
        "good": [],
        "confusing": [],
        "improvements": [],
        "raw": reply,
    }


def test_improvements_truncated_without_pro(make_client):
    client = make_client(FakeGateway(reply=LONG_ROAST))

    body = client.post("/api/roast", json={"url": "https://example.com"}).json()
    assert body["improvements"] == ["Add testimonials", "Clarify pricing earlier"]
    assert "advice" not in body


def test_pro_mode_returns_full_list_and_advice(make_client):
    client = make_client(FakeGateway(reply=LONG_ROAST))

    body = client.post("/api/roast?pro=true", json={"url": "https://example.com"}).json()
    assert len(body["improvements"]) == 4
    assert [section["title"] for section in body["advice"]] == [
        section.title for section in PRO_ADVICE
    ]


def test_pro_flag_must_be_true(make_client):
    client = make_client(FakeGateway(reply=LONG_ROAST))

    for value in ("1", "yes", "false", ""):
        body = client.post(f"/api/roast?pro={value}", json={"url": "https://example.com"}).json()
        assert len(body["improvements"]) == 2
        assert "advice" not in body


def test_preview_limit_is_configurable(make_client):
    client = make_client(FakeGateway(reply=LONG_ROAST), IMPROVEMENTS_PREVIEW_LIMIT=3)

    body = client.post("/api/roast", json={"url": "https://example.com"}).json()
    assert len(body["improvements"]) == 3


def test_raw_mode_returns_completion_text(make_client):
    client = make_client(FakeGateway(), ROAST_RESPONSE_MODE="raw")

    response = client.post("/api/roast?pro=true", json={"url": "https://example.com"})
    assert response.status_code == 200
    assert response.json() == {"result": SAMPLE_ROAST}


def test_mock_mode_end_to_end(settings):
    mock_settings = settings.model_copy(update={"ROAST_MOCK_MODE": True})
    with TestClient(create_app(mock_settings)) as client:
        body = client.post("/api/roast?pro=true", json={"url": "https://example.com"}).json()

    assert body["score"] == "7/10"
    assert body["good"] == ["Clear headline", "Strong value proposition"]
    assert body["confusing"] == ["CTA could be more prominent"]
    assert body["improvements"] == ["Add testimonials", "Clarify pricing earlier"]
    assert MOCK_ROAST.startswith("Score:")


def test_root_and_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["endpoints"]["roast"] == "/api/roast (POST)"
