"""Testes da taxonomia de erros e do corpo JSON de erro."""

from __future__ import annotations

from utils.errors import (
    CallerInputError,
    EmailProxyError,
    ErrorResponse,
    ServerConfigError,
    UpstreamParseError,
    UpstreamReportedError,
)


def test_status_codes() -> None:
    assert CallerInputError("x").status_code == 400
    assert ServerConfigError("x").status_code == 500
    assert UpstreamParseError("x", details="y").status_code == 500
    assert UpstreamReportedError("x", status_code=429).status_code == 429


def test_all_errors_share_base() -> None:
    for exc in (
        CallerInputError("x"),
        ServerConfigError("x"),
        UpstreamParseError("x", details=""),
        UpstreamReportedError("x", status_code=400),
    ):
        assert isinstance(exc, EmailProxyError)
        assert str(exc) == "x"


def test_response_bodies_omit_absent_fields() -> None:
    assert CallerInputError("bad").to_response().to_body() == {
        "success": False,
        "error": "bad",
    }
    assert UpstreamParseError("bad", details="raw").to_response().to_body() == {
        "success": False,
        "error": "bad",
        "details": "raw",
    }


def test_numeric_provider_code_is_preserved() -> None:
    body = ErrorResponse(error="x", code=404).to_body()
    assert body["code"] == 404


def test_reported_error_code_presence() -> None:
    assert UpstreamReportedError("x", status_code=400).to_response().to_body() == {
        "success": False,
        "error": "x",
    }
    assert UpstreamReportedError("x", status_code=400, has_code=True).to_response().to_body() == {
        "success": False,
        "error": "x",
        "code": None,
    }
