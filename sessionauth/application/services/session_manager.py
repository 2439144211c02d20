# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session lifecycle: Anonymous -> Authenticated -> Anonymous."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from enum import StrEnum

from sessionauth.domain.users.entities import Session, User
from sessionauth.domain.users.repositories import SessionStore
from sessionauth.shared.errors.base import InfrastructureError
from sessionauth.shared.logging import logger


class LogoutOutcome(StrEnum):
    # Values double as the response message; every outcome is a 200.
    LOGGED_OUT = "logged out"
    NO_SESSION = "no session"
    DESTROY_FAILED = "error"


class SessionManager:
    def __init__(self, *, sessions: SessionStore, lifetime: timedelta) -> None:
        self._sessions = sessions
        self._lifetime = lifetime

    def current_session(self, token: str | None) -> Session | None:
        if not token:
            return None
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.is_expired():
            self._discard_expired(session)
            return None
        return session

    def _discard_expired(self, session: Session) -> None:
        try:
            self._sessions.destroy(session.token)
        except InfrastructureError:
            # Retried on the next read.
            logger.warning(f"session: could not drop expired record user_id={session.user.id}")

    def current_user(self, token: str | None) -> User | None:
        session = self.current_session(token)
        return session.user if session else None

    def login(self, token: str | None, user: User) -> Session:
        """Bind ``user`` to a freshly issued token.

        A record already held under ``token`` is dropped first, so the client
        never ends up with two live sessions.
        """
        if token and self._sessions.get(token) is not None:
            self._sessions.destroy(token)
        new_token = self._sessions.issue_token()
        expires_at = datetime.now(UTC) + self._lifetime
        session = self._sessions.set(new_token, user, expires_at)
        logger.info(f"session.login: user_id={user.id}")
        return session

    def logout(self, token: str | None) -> LogoutOutcome:
        try:
            session = self.current_session(token)
        except InfrastructureError:
            logger.exception("session.logout: session lookup failed")
            return LogoutOutcome.DESTROY_FAILED
        if session is None:
            return LogoutOutcome.NO_SESSION
        try:
            self._sessions.destroy(session.token)
        except InfrastructureError:
            logger.exception(f"session.logout: destroy failed user_id={session.user.id}")
            return LogoutOutcome.DESTROY_FAILED
        logger.info(f"session.logout: ok user_id={session.user.id}")
        return LogoutOutcome.LOGGED_OUT
