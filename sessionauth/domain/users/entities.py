# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(slots=True, frozen=True)
class User:
    """A registered account. ``password_hash`` never holds plaintext."""

    id: int
    username: str
    password_hash: str = field(repr=False)
    created_at: datetime

    def to_public(self) -> dict[str, int | str]:
        return {"user_id": self.id, "username": self.username}


@dataclass(slots=True, frozen=True)
class Credentials:
    """Request-scoped username/password pair; never persisted."""

    username: str
    password: str = field(repr=False)


@dataclass(slots=True, frozen=True)
class Session:
    """Server-side record binding an opaque token to the user seen at login."""

    token: str = field(repr=False)
    user: User
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) >= self.expires_at
