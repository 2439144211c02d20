# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sessionauth.application.result import Result
from sessionauth.application.services.credential_validator import (
    REGISTRATION_STEPS,
    CredentialValidator,
)
from sessionauth.domain.users.entities import Credentials, User
from sessionauth.domain.users.exceptions import UsernameTakenError
from sessionauth.domain.users.repositories import PasswordHasher, UserStore
from sessionauth.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserStore,
        validator: CredentialValidator,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._validator = validator
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> Result[User]:
        checked = self._validator.pipeline(*REGISTRATION_STEPS).run(Credentials(username, password))
        if checked.error is not None:
            return Result.failure(checked.error)

        hashed = self._password_hasher.hash(password)
        user = User(id=0, username=username, password_hash=hashed, created_at=datetime.now(UTC))
        try:
            persisted = self._users.add(user)
        except UsernameTakenError as exc:
            # Lost a race with a concurrent registration of the same name.
            logger.warning("auth.register: username claimed concurrently")
            return Result.failure(exc)
        return Result.success(persisted)
