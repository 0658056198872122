"""User and message records accepted from a persistence collaborator.

Updates:
    v0.1.0 - 2026-10-16 - Added validated User/Message dataclasses.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class UserValidationError(ValueError):
    """Raised when a user payload violates the stored-record contract."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


def _parse_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


@dataclass(slots=True)
class Message:
    content: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Message":
        content = data.get("content")
        if not isinstance(content, str) or not content:
            raise UserValidationError(["message content is required"])
        created_at = data.get("created_at")
        if created_at is None:
            return cls(content=content)
        parsed = _parse_datetime(created_at)
        if parsed is None:
            raise UserValidationError(["message created_at must be a datetime"])
        return cls(content=content, created_at=parsed)


@dataclass(slots=True)
class User:
    username: str
    email: str
    password: str
    verify_code: bool
    verify_code_expiry: datetime
    is_verified: bool = False
    is_accepting_message: bool = True
    messages: list[Message] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        """Build a user from raw fields, collecting every violation.

        Args:
            data (Mapping[str, Any]): Raw user fields.

        Returns:
            User: Validated user record.

        Raises:
            UserValidationError: If a required field is missing or the email
                is not shaped like ``local@domain.tld``.
        """

        errors: list[str] = []
        for key in ("username", "email", "password"):
            value = data.get(key)
            if not isinstance(value, str) or not value:
                errors.append(f"{key} is required")

        email = data.get("email")
        if isinstance(email, str) and email and not EMAIL_PATTERN.match(email):
            errors.append("please use valid email address")

        verify_code = data.get("verify_code")
        if not isinstance(verify_code, bool):
            errors.append("verify code is required")

        expiry = _parse_datetime(data.get("verify_code_expiry"))
        if expiry is None:
            errors.append("verify code expiry is required")

        messages: list[Message] = []
        for raw in data.get("messages") or []:
            try:
                messages.append(raw if isinstance(raw, Message) else Message.from_dict(raw))
            except UserValidationError as exc:
                errors.extend(exc.errors)

        if errors:
            raise UserValidationError(errors)

        return cls(
            username=data["username"],
            email=data["email"],
            password=data["password"],
            verify_code=verify_code,
            verify_code_expiry=expiry,
            is_verified=bool(data.get("is_verified", False)),
            is_accepting_message=bool(data.get("is_accepting_message", True)),
            messages=messages,
        )
