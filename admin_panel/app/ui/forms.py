from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from clients.admins_client_sdk.models import AdminRole

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6
ALLOWED_ROLES = {role.value for role in AdminRole}


class ValidationError(Exception):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


@dataclass
class FormResult:
    values: dict[str, Any]
    field_errors: dict[str, str]

    @property
    def first_invalid_field(self) -> str | None:
        return next(iter(self.field_errors), None)

    @property
    def first_error(self) -> str | None:
        field = self.first_invalid_field
        return self.field_errors[field] if field else None

    @property
    def is_valid(self) -> bool:
        return len(self.field_errors) == 0

    def raise_for_errors(self) -> None:
        field = self.first_invalid_field
        if field is not None:
            raise ValidationError(field, self.field_errors[field])


def _normalize_text(value: Any) -> str:
    return str(value or "").strip()


def validate_admin_form(values: dict[str, Any], *, creating: bool) -> FormResult:
    name = _normalize_text(values.get("name"))
    email = _normalize_text(values.get("email"))
    role = _normalize_text(values.get("role")) or AdminRole.ADMIN.value
    password = values.get("password") or ""

    field_errors: dict[str, str] = {}
    if not name:
        field_errors["name"] = "Full name is required"
    if not EMAIL_REGEX.match(email):
        field_errors["email"] = "Invalid email format"
    if creating and len(password) < MIN_PASSWORD_LENGTH:
        field_errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    if role not in ALLOWED_ROLES:
        field_errors["role"] = "Invalid access level"

    cleaned: dict[str, Any] = {"name": name, "email": email, "role": role}
    if password:
        cleaned["password"] = password
    return FormResult(values=cleaned, field_errors=field_errors)
