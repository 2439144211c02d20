# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from sessionauth.shared.errors.base import DomainError, InfrastructureError


class UsernameTakenError(DomainError):
    code = "username_taken"
    message = "Username taken"
    status = HTTPStatus.UNPROCESSABLE_ENTITY


class PasswordTooShortError(DomainError):
    code = "password_too_short"
    message = "Password must be longer than 3 chars"
    status = HTTPStatus.UNPROCESSABLE_ENTITY


class InvalidCredentialsError(DomainError):
    # Shared by "no such user" and "wrong password".
    code = "invalid_credentials"
    message = "Invalid credentials"
    status = HTTPStatus.UNAUTHORIZED


class SessionStoreError(InfrastructureError):
    def __init__(self, code: str = "session_store_error") -> None:
        super().__init__(code)
