# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from sessionauth.domain.users.entities import Session as DomainSession
from sessionauth.domain.users.entities import User as DomainUser
from sessionauth.domain.users.exceptions import SessionStoreError, UsernameTakenError
from sessionauth.domain.users.repositories import SessionStore, UserStore
from sessionauth.infrastructure.db.models import SessionRecord, User
from sessionauth.infrastructure.db.session import session_scope

_USER_CRITERIA = frozenset({"id", "username"})


def _aware(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back out.
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def _to_domain_user(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=_aware(row.created_at),
    )


def _to_domain_session(row: SessionRecord) -> DomainSession:
    return DomainSession(
        token=row.token,
        user=DomainUser(
            id=row.user_id,
            username=row.username,
            password_hash=row.password_hash,
            created_at=_aware(row.user_created_at),
        ),
        created_at=_aware(row.created_at),
        expires_at=_aware(row.expires_at),
    )


class SqlAlchemyUserRepository(UserStore):
    def find_by(self, **criteria: Any) -> Sequence[DomainUser]:
        unknown = set(criteria) - _USER_CRITERIA
        if unknown:
            raise ValueError(f"Unsupported user criteria: {sorted(unknown)!r}")
        with session_scope() as session:
            rows = session.query(User).filter_by(**criteria).order_by(User.id.asc()).all()
            return [_to_domain_user(row) for row in rows]

    def find_by_username(self, username: str) -> DomainUser | None:
        matches = self.find_by(username=username)
        return matches[0] if matches else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    username=user.username,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                persisted = _to_domain_user(row)
        except IntegrityError as exc:
            raise UsernameTakenError() from exc
        return persisted


class SqlAlchemySessionStore(SessionStore):
    def issue_token(self) -> str:
        return secrets.token_urlsafe(32)

    def get(self, token: str) -> DomainSession | None:
        try:
            with session_scope() as session:
                row = session.get(SessionRecord, token)
                if row is None:
                    return None
                return _to_domain_session(row)
        except SQLAlchemyError as exc:
            raise SessionStoreError() from exc

    def set(self, token: str, user: DomainUser, expires_at: datetime) -> DomainSession:
        created_at = datetime.now(UTC)
        try:
            with session_scope() as session:
                session.merge(
                    SessionRecord(
                        token=token,
                        user_id=user.id,
                        username=user.username,
                        password_hash=user.password_hash,
                        user_created_at=user.created_at,
                        created_at=created_at,
                        expires_at=expires_at,
                    )
                )
        except SQLAlchemyError as exc:
            raise SessionStoreError() from exc
        return DomainSession(token=token, user=user, created_at=created_at, expires_at=expires_at)

    def destroy(self, token: str) -> None:
        try:
            with session_scope() as session:
                session.query(SessionRecord).filter(SessionRecord.token == token).delete()
        except SQLAlchemyError as exc:
            raise SessionStoreError() from exc
