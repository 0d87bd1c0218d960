"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CallerInputError,
    EmailProxyError,
    ErrorResponse,
    ServerConfigError,
    UpstreamParseError,
    UpstreamReportedError,
)

__all__ = [
    "CallerInputError",
    "EmailProxyError",
    "ErrorResponse",
    "ServerConfigError",
    "UpstreamParseError",
    "UpstreamReportedError",
]
