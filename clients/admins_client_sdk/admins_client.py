from __future__ import annotations

import logging
from typing import Any

from clients.admins_client_sdk.errors import RequestError
from clients.admins_client_sdk.http_client import HttpClient
from clients.admins_client_sdk.models import AdminRecord
from clients.admins_client_sdk.normalizers import build_partial_payload, normalize_collection, unwrap_record

logger = logging.getLogger(__name__)


class AdminsClient:
    def __init__(self, http_client: HttpClient) -> None:
        self.http_client = http_client

    async def list_all(self) -> list[AdminRecord]:
        """Fetch the full collection; any failure yields an empty list.

        Rows that do not parse as admins are skipped with a warning.
        """
        try:
            payload = await self.http_client.request("GET", "/")
            rows = normalize_collection(payload)
        except RequestError as error:
            logger.warning("admin listing failed: %s", error.message)
            return []
        except ValueError as error:
            logger.warning("admin listing returned a malformed body: %s", error)
            return []

        admins: list[AdminRecord] = []
        for index, row in enumerate(rows):
            try:
                admins.append(AdminRecord.from_payload(row))
            except ValueError as error:
                logger.warning("skipping malformed admin row %s: %s", index, error)
        return admins

    async def create(self, record: AdminRecord) -> AdminRecord | None:
        """Register a new admin.

        Any 2xx reply counts as success; the created record is returned only
        when the body carries one.
        """
        if record.id is not None:
            raise ValueError(f"admin {record.id} is already persisted")
        payload = await self.http_client.request("POST", "/register", json_body=record.to_payload())
        return _parse_record(payload)

    async def update(self, admin_id: int, partial: AdminRecord | dict[str, Any]) -> AdminRecord | None:
        body = _to_partial_body(partial)
        try:
            payload = await self.http_client.request("PATCH", f"/{admin_id}", json_body=body)
        except RequestError as error:
            logger.warning("PATCH /%s failed (%s), falling back to PUT", admin_id, error.message)
            payload = await self.http_client.request("PUT", f"/{admin_id}", json_body=body)
        return _parse_record(payload)

    async def delete(self, admin_id: int) -> None:
        await self.http_client.request("DELETE", f"/{admin_id}")


def _to_partial_body(partial: AdminRecord | dict[str, Any]) -> dict[str, Any]:
    if isinstance(partial, AdminRecord):
        return partial.to_payload()
    return build_partial_payload(partial)


def _parse_record(payload: Any) -> AdminRecord | None:
    candidate = unwrap_record(payload)
    if candidate is None:
        return None
    try:
        return AdminRecord.from_payload(candidate)
    except ValueError as error:
        logger.warning("mutation reply did not carry an admin record: %s", error)
        return None
