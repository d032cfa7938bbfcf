from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AdminRole(str, Enum):
    ADMIN = "Admin"
    SUPER_ADMIN = "Super Admin"
    MODERATOR = "Moderator"


class AdminRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int | None = None
    name: str
    email: str
    role: str = AdminRole.ADMIN.value
    # Write-only credential: never echoed in repr or listings.
    password: str | None = Field(default=None, repr=False)

    @field_validator("role", mode="before")
    @classmethod
    def _default_role(cls, value: Any) -> Any:
        return AdminRole.ADMIN.value if value in (None, "") else value

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @classmethod
    def from_payload(cls, payload: Any) -> "AdminRecord":
        if not isinstance(payload, dict):
            raise ValueError(f"admin payload must be an object, got {type(payload).__name__}")
        return cls.model_validate(payload)

    def to_payload(self, *, include_id: bool = False) -> dict[str, Any]:
        exclude = set() if include_id else {"id"}
        payload = self.model_dump(mode="json", exclude_none=True, exclude=exclude)
        if not payload.get("password"):
            payload.pop("password", None)
        return payload

    def searchable_fields(self) -> tuple[str, str, str]:
        return (self.name or "", self.email or "", self.role or "")
