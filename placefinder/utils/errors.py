from __future__ import annotations

from typing import Any, Dict


class ProxyError(Exception):
    """Terminal failure for a single proxied request, rendered as a JSON body."""

    status_code = 500

    def __init__(self, message: str, **extra: Any) -> None:
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message, **self.extra}


class MissingParameter(ProxyError):
    status_code = 400


class ServerMisconfiguration(ProxyError):
    status_code = 500


class UpstreamError(ProxyError):
    """Upstream answered, but with a logical status other than OK."""

    status_code = 400


class TransportError(ProxyError):
    """Upstream could not be reached or answered with a non-2xx status."""

    status_code = 500


class UnexpectedError(ProxyError):
    status_code = 500
