from __future__ import annotations

from typing import Any


def normalize_collection(payload: Any) -> list[Any]:
    """Return the row list of a listing body.

    The service answers either with a bare array or with ``{"data": [...]}``;
    anything else is a malformed body.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        return payload["data"]
    raise ValueError(f"unexpected listing body: {type(payload).__name__}")


def build_partial_payload(values: dict[str, Any]) -> dict[str, Any]:
    """Drop unset fields and an empty credential from an update body."""
    return {key: value for key, value in values.items() if value not in (None, "") and key != "id"}


RECORD_ENVELOPE_KEYS = ("data", "admin")


def unwrap_record(payload: Any) -> dict[str, Any] | None:
    """Return the record object of a mutation reply, if it carries one.

    Accepts the record itself or a single-record envelope such as
    ``{"message": ..., "admin": {...}}``.
    """
    if not isinstance(payload, dict):
        return None
    for key in RECORD_ENVELOPE_KEYS:
        if isinstance(payload.get(key), dict):
            return payload[key]
    return payload
