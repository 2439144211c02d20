from __future__ import annotations

import os
import tempfile
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

_TMP = Path(tempfile.mkdtemp(prefix="sessionauth-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TMP / 'test.db'}")
os.environ.setdefault("LOG_FILE", str(_TMP / "test.log"))
os.environ.setdefault("PASSWORD_HASH_COST", "1000")

import pytest  # noqa: E402

from sessionauth.application.services.credential_validator import CredentialValidator  # noqa: E402
from sessionauth.application.services.session_manager import SessionManager  # noqa: E402
from sessionauth.domain.users.entities import Session, User  # noqa: E402
from sessionauth.domain.users.exceptions import UsernameTakenError  # noqa: E402
from sessionauth.domain.users.repositories import (  # noqa: E402
    PasswordHasher,
    SessionStore,
    UserStore,
)


class InMemoryUserStore(UserStore):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1
        self.lookups = 0

    def find_by(self, **criteria: Any) -> Sequence[User]:
        self.lookups += 1
        return [
            user
            for user in self._users.values()
            if all(getattr(user, key) == value for key, value in criteria.items())
        ]

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def add(self, user: User) -> User:
        if user.username in self._users:
            raise UsernameTakenError()
        new_user = User(
            id=self._seq,
            username=user.username,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._seq += 1
        self._users[new_user.username] = new_user
        return new_user


class InMemorySessionStore(SessionStore):
    def __init__(self) -> None:
        self.records: dict[str, Session] = {}
        self._seq = 0

    def issue_token(self) -> str:
        self._seq += 1
        return f"token-{self._seq}"

    def get(self, token: str) -> Session | None:
        return self.records.get(token)

    def set(self, token: str, user: User, expires_at: datetime) -> Session:
        session = Session(token=token, user=user, created_at=datetime.now(UTC), expires_at=expires_at)
        self.records[token] = session
        return session

    def destroy(self, token: str) -> None:
        self.records.pop(token, None)


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.calls = 0

    def hash(self, password: str) -> str:
        self.calls += 1
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture()
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def validator(users: InMemoryUserStore) -> CredentialValidator:
    return CredentialValidator(users=users)


@pytest.fixture()
def session_manager(session_store: InMemorySessionStore) -> SessionManager:
    return SessionManager(sessions=session_store, lifetime=timedelta(hours=1))
