# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any, Protocol

from .entities import Session, User


class UserStore(Protocol):
    def find_by(self, **criteria: Any) -> Sequence[User]: ...
    def find_by_username(self, username: str) -> User | None: ...
    def add(self, user: User) -> User: ...


class SessionStore(Protocol):
    def issue_token(self) -> str: ...
    def get(self, token: str) -> Session | None: ...
    def set(self, token: str, user: User, expires_at: datetime) -> Session: ...
    def destroy(self, token: str) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
