"""Testes do endpoint de envio de email (handler + mapeamento de erros)."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.requests import Request

from api.connectors.keplars import KeplarsHttpClient
from api.routes import create_api_router
from api.routes.email import router as email_route
from utils.errors import UpstreamParseError, UpstreamReportedError

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "POST, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def _build_request(
    *,
    method: str,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _payload(response: Any) -> Any:
    return json.loads(response.body.decode("utf-8"))


def _assert_cors(response: Any) -> None:
    for name, value in CORS.items():
        assert response.headers[name] == value


@pytest.fixture
def use_case(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    fake = SimpleNamespace(execute=AsyncMock(return_value={"success": True}))
    monkeypatch.setattr(email_route, "get_send_email_use_case", lambda: fake)
    monkeypatch.setattr(
        email_route, "get_keplars_settings", lambda: SimpleNamespace(api_key="secret")
    )
    return fake.execute


@pytest.mark.asyncio
async def test_preflight_returns_204_without_body(use_case: AsyncMock) -> None:
    response = await email_route.send_email(_build_request(method="OPTIONS"))

    assert response.status_code == 204
    assert response.body == b""
    _assert_cors(response)
    use_case.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "HEAD", "PUT", "DELETE", "PATCH", "TRACE"])
async def test_other_methods_are_rejected(use_case: AsyncMock, method: str) -> None:
    response = await email_route.send_email(_build_request(method=method))

    assert response.status_code == 405
    assert _payload(response) == {"success": False, "error": "Method not allowed. Use POST."}
    _assert_cors(response)
    use_case.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_api_key_checked_before_body(monkeypatch: pytest.MonkeyPatch) -> None:
    execute = AsyncMock()
    monkeypatch.setattr(
        email_route, "get_send_email_use_case", lambda: SimpleNamespace(execute=execute)
    )
    monkeypatch.setattr(email_route, "get_keplars_settings", lambda: SimpleNamespace(api_key=None))

    response = await email_route.send_email(_build_request(method="POST", body=b"{not json"))

    assert response.status_code == 500
    assert _payload(response) == {
        "success": False,
        "error": "Server configuration error. API key not configured.",
    }
    _assert_cors(response)
    execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_success_relays_provider_json(use_case: AsyncMock) -> None:
    provider_json = {"success": True, "data": {"id": "m1", "message": "Queued"}}
    use_case.return_value = provider_json
    body = {"to": ["a@b.com"], "subject": "Hi", "body": "Hello"}

    response = await email_route.send_email(
        _build_request(method="POST", body=json.dumps(body).encode())
    )

    assert response.status_code == 200
    assert _payload(response) == provider_json
    _assert_cors(response)
    use_case.assert_awaited_once_with(body, "secret")


@pytest.mark.asyncio
async def test_invalid_json_body_is_caller_error(use_case: AsyncMock) -> None:
    response = await email_route.send_email(_build_request(method="POST", body=b"{oops"))

    assert response.status_code == 400
    assert _payload(response) == {"success": False, "error": "Invalid JSON body."}
    use_case.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw",
    [
        b'{"to": ["a@b.com"], "template_id": "t", "params": {"n": NaN}}',
        b'{"to": ["a@b.com"], "template_id": "t", "params": {"n": 1e999}}',
    ],
)
async def test_non_standard_json_numbers_are_caller_error(use_case: AsyncMock, raw: bytes) -> None:
    response = await email_route.send_email(_build_request(method="POST", body=raw))

    assert response.status_code == 400
    assert _payload(response) == {"success": False, "error": "Invalid JSON body."}
    _assert_cors(response)
    use_case.assert_not_awaited()


@pytest.mark.asyncio
async def test_empty_body_is_treated_as_empty_object(use_case: AsyncMock) -> None:
    await email_route.send_email(_build_request(method="POST"))
    use_case.assert_awaited_once_with({}, "secret")


@pytest.mark.asyncio
async def test_provider_reported_error_passes_status_through(use_case: AsyncMock) -> None:
    use_case.side_effect = UpstreamReportedError("bad template", status_code=422, code="T404")

    response = await email_route.send_email(_build_request(method="POST", body=b"{}"))

    assert response.status_code == 422
    assert _payload(response) == {"success": False, "error": "bad template", "code": "T404"}
    _assert_cors(response)


@pytest.mark.asyncio
async def test_parse_error_includes_details(use_case: AsyncMock) -> None:
    use_case.side_effect = UpstreamParseError(
        "Invalid response from email service", details="Internal Server Error"
    )

    response = await email_route.send_email(_build_request(method="POST", body=b"{}"))

    assert response.status_code == 500
    assert _payload(response) == {
        "success": False,
        "error": "Invalid response from email service",
        "details": "Internal Server Error",
    }


@pytest.mark.asyncio
async def test_unexpected_error_uses_exception_message(use_case: AsyncMock) -> None:
    use_case.side_effect = httpx.ConnectError("connection refused")

    response = await email_route.send_email(_build_request(method="POST", body=b"{}"))

    assert response.status_code == 500
    assert _payload(response) == {"success": False, "error": "connection refused"}
    _assert_cors(response)


@pytest.mark.asyncio
async def test_unexpected_error_without_message_uses_fallback(use_case: AsyncMock) -> None:
    use_case.side_effect = RuntimeError()

    response = await email_route.send_email(_build_request(method="POST", body=b"{}"))

    assert response.status_code == 500
    assert _payload(response) == {"success": False, "error": "Unknown error occurred"}


class TestEndToEnd:
    """App FastAPI real, provedor simulado via httpx.MockTransport."""

    @pytest.fixture
    def provider_calls(self, monkeypatch: pytest.MonkeyPatch) -> list[httpx.Request]:
        calls: list[httpx.Request] = []
        self.provider_response = httpx.Response(
            200, json={"success": True, "data": {"id": "m1", "message": "Queued"}}
        )

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return self.provider_response

        monkeypatch.setenv("KEPLARS_API_KEY", "live-key")
        monkeypatch.delenv("KEPLARS_BASE_URL", raising=False)
        monkeypatch.delenv("KEPLARS_REQUEST_TIMEOUT_SECONDS", raising=False)
        monkeypatch.setattr(
            "app.bootstrap.dependencies.create_keplars_http_client",
            lambda settings: KeplarsHttpClient(transport=httpx.MockTransport(handler)),
        )
        return calls

    @pytest.fixture
    def client(self) -> TestClient:
        app = FastAPI()
        app.include_router(create_api_router())
        return TestClient(app)

    def test_queue_send(self, client: TestClient, provider_calls: list[httpx.Request]) -> None:
        response = client.post(
            "/", json={"to": ["a@b.com"], "subject": "Hi", "body": "Hello"}
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"id": "m1", "message": "Queued"}}
        assert response.headers["access-control-allow-origin"] == "*"
        assert len(provider_calls) == 1
        sent = provider_calls[0]
        assert str(sent.url) == "https://api.keplars.com/api/v1/send-email/queue"
        assert sent.headers["authorization"] == "Bearer live-key"
        assert json.loads(sent.content) == {
            "to": ["a@b.com"],
            "subject": "Hi",
            "body": "Hello",
            "is_html": False,
        }

    def test_scheduled_template_send(
        self, client: TestClient, provider_calls: list[httpx.Request]
    ) -> None:
        response = client.post(
            "/",
            json={
                "to": ["a@b.com"],
                "template_id": "t1",
                "params": {"n": 1},
                "scheduled_at": "2026-01-20T10:00:00",
            },
        )

        assert response.status_code == 200
        assert str(provider_calls[0].url).endswith("/send-email/schedule")

    def test_validation_failure_never_reaches_provider(
        self, client: TestClient, provider_calls: list[httpx.Request]
    ) -> None:
        response = client.post("/", json={"to": ["a@b.com"], "template_id": "t1", "subject": "x"})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "When using template_id, do not include subject, body, or html fields.",
        }
        assert provider_calls == []

    def test_provider_html_error_page(
        self, client: TestClient, provider_calls: list[httpx.Request]
    ) -> None:
        page = "Internal Server Error " + "<div>" * 80
        self.provider_response = httpx.Response(500, text=page)

        response = client.post("/", json={"to": ["a@b.com"], "subject": "Hi", "body": "Hello"})

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Invalid response from email service",
            "details": page[:200],
        }

    def test_provider_reported_error(
        self, client: TestClient, provider_calls: list[httpx.Request]
    ) -> None:
        self.provider_response = httpx.Response(
            422, json={"success": False, "error": "bad template", "code": "T404"}
        )

        response = client.post("/", json={"to": ["a@b.com"], "template_id": "t1"})

        assert response.status_code == 422
        assert response.json() == {"success": False, "error": "bad template", "code": "T404"}

    def test_provider_nan_body_is_parse_error(
        self, client: TestClient, provider_calls: list[httpx.Request]
    ) -> None:
        self.provider_response = httpx.Response(200, text='{"success": true, "v": NaN}')

        response = client.post("/", json={"to": ["a@b.com"], "subject": "Hi", "body": "Hello"})

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Invalid response from email service",
            "details": '{"success": true, "v": NaN}',
        }
        assert response.headers["access-control-allow-origin"] == "*"

    def test_provider_null_code_is_relayed(
        self, client: TestClient, provider_calls: list[httpx.Request]
    ) -> None:
        self.provider_response = httpx.Response(
            429, json={"success": False, "error": "slow down", "code": None}
        )

        response = client.post("/", json={"to": ["a@b.com"], "template_id": "t1"})

        assert response.status_code == 429
        assert response.json() == {"success": False, "error": "slow down", "code": None}

    @pytest.mark.parametrize("method", ["TRACE", "PURGE", "GET"])
    def test_any_other_method_gets_json_405(
        self, client: TestClient, provider_calls: list[httpx.Request], method: str
    ) -> None:
        response = client.request(method, "/")

        assert response.status_code == 405
        assert response.json() == {"success": False, "error": "Method not allowed. Use POST."}
        assert response.headers["access-control-allow-origin"] == "*"
        assert provider_calls == []

    def test_preflight_through_app(
        self, client: TestClient, provider_calls: list[httpx.Request]
    ) -> None:
        response = client.options("/")

        assert response.status_code == 204
        assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
