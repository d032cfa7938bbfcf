from __future__ import annotations

from typing import Any

import httpx

from clients.admins_client_sdk.config import SDKConfig
from clients.admins_client_sdk.errors import RequestError

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class HttpClient:
    def __init__(
        self,
        config: SDKConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._client = client or httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout_seconds,
            verify=self.config.verify_ssl,
            headers=DEFAULT_HEADERS,
        )

    async def request(
        self,
        method: str,
        path: str,
        json_body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        # Relative paths keep the base URL's own path prefix.
        normalized_path = path.lstrip("/")
        try:
            response = await self._client.request(
                method=method,
                url=normalized_path,
                json=json_body,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise RequestError.from_transport_error(exc) from exc

        if response.status_code >= 400:
            raise RequestError.from_http_response(response)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    async def aclose(self) -> None:
        await self._client.aclose()
