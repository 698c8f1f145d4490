from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any

from campus_events.models.user import User, UserRole


@dataclass(frozen=True)
class Identity:
    """Per-request caller identity, as asserted by a validated access token."""

    id: uuid.UUID
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> Identity:
        return cls(
            id=uuid.UUID(claims["sub"]),
            email=claims["email"],
            role=UserRole(claims["role"]),
        )

    @classmethod
    def from_user(cls, user: User) -> Identity:
        return cls(id=user.id, email=user.email, role=user.role)
