# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Credential checks that run before any hashing or store mutation.

Checks are exposed individually and as named steps that a
:class:`ValidationPipeline` executes in a fixed order, stopping at the first
failure.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from sessionauth.application.result import Result
from sessionauth.domain.users.entities import Credentials
from sessionauth.domain.users.exceptions import (
    InvalidCredentialsError,
    PasswordTooShortError,
    UsernameTakenError,
)
from sessionauth.domain.users.repositories import UserStore
from sessionauth.shared.config.settings import PASSWORD_MIN_LENGTH
from sessionauth.shared.errors.base import DomainError

ValidationStep = Callable[[Credentials], DomainError | None]

REGISTRATION_STEPS = ("username_free", "password_length")
LOGIN_STEPS = ("username_exists",)


class ValidationPipeline:
    def __init__(self, steps: Sequence[tuple[str, ValidationStep]]) -> None:
        self._steps = tuple(steps)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._steps)

    def run(self, credentials: Credentials) -> Result[Credentials]:
        for _name, step in self._steps:
            error = step(credentials)
            if error is not None:
                return Result.failure(error)
        return Result.success(credentials)


class CredentialValidator:
    def __init__(self, *, users: UserStore) -> None:
        self._users = users
        self._steps: dict[str, ValidationStep] = {
            "username_free": lambda creds: self.check_username_free(creds.username),
            "username_exists": lambda creds: self.check_username_exists(creds.username),
            "password_length": lambda creds: self.check_password_length(creds.password),
        }

    def check_username_free(self, username: str) -> UsernameTakenError | None:
        if self._users.find_by(username=username):
            return UsernameTakenError()
        return None

    def check_username_exists(self, username: str) -> InvalidCredentialsError | None:
        if not self._users.find_by(username=username):
            return InvalidCredentialsError()
        return None

    def check_password_length(self, password: str) -> PasswordTooShortError | None:
        if len(password) < PASSWORD_MIN_LENGTH:
            return PasswordTooShortError()
        return None

    def pipeline(self, *names: str) -> ValidationPipeline:
        unknown = [name for name in names if name not in self._steps]
        if unknown:
            raise ValueError(f"Unknown validation steps: {unknown!r}")
        return ValidationPipeline([(name, self._steps[name]) for name in names])
