# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users import (
    Credentials,
    InvalidCredentialsError,
    PasswordTooShortError,
    Session,
    SessionStoreError,
    User,
    UsernameTakenError,
)

__all__ = [
    "Credentials",
    "InvalidCredentialsError",
    "PasswordTooShortError",
    "Session",
    "SessionStoreError",
    "User",
    "UsernameTakenError",
]
