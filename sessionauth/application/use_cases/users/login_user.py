# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sessionauth.application.result import Result
from sessionauth.application.services.credential_validator import (
    LOGIN_STEPS,
    CredentialValidator,
)
from sessionauth.application.services.session_manager import SessionManager
from sessionauth.domain.users.entities import Credentials, Session
from sessionauth.domain.users.exceptions import InvalidCredentialsError
from sessionauth.domain.users.repositories import PasswordHasher, UserStore


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserStore,
        validator: CredentialValidator,
        password_hasher: PasswordHasher,
        sessions: SessionManager,
    ) -> None:
        self._users = users
        self._validator = validator
        self._password_hasher = password_hasher
        self._sessions = sessions

    def execute(self, username: str, password: str, token: str | None = None) -> Result[Session]:
        checked = self._validator.pipeline(*LOGIN_STEPS).run(Credentials(username, password))
        if checked.error is not None:
            return Result.failure(checked.error)

        matches = self._users.find_by(username=username)
        user = matches[0] if matches else None
        password_valid = user is not None and self._password_hasher.verify(password, user.password_hash)

        if not password_valid:
            return Result.failure(InvalidCredentialsError())

        return Result.success(self._sessions.login(token, user))
