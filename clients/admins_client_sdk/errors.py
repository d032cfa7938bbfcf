from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

GENERIC_ERROR_MESSAGE = "Server error"


@dataclass
class RequestError(Exception):
    code: str
    message: str
    details: dict[str, Any] | list[Any] | str | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_http_response(cls, response: httpx.Response) -> "RequestError":
        fallback = f"Request failed with status code {response.status_code}"
        try:
            payload = response.json()
        except ValueError:
            return cls(code="HTTP_ERROR", message=fallback, details=response.text or None, status_code=response.status_code)

        if isinstance(payload, dict):
            server_message = payload.get("message")
            return cls(
                code=str(payload.get("code") or "HTTP_ERROR"),
                message=str(server_message) if server_message else fallback,
                details=payload.get("details"),
                status_code=response.status_code,
            )

        return cls(code="HTTP_ERROR", message=fallback, details=payload, status_code=response.status_code)

    @classmethod
    def from_transport_error(cls, exc: Exception) -> "RequestError":
        return cls(code="NETWORK_ERROR", message=str(exc) or GENERIC_ERROR_MESSAGE, details=type(exc).__name__)
