# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Credentials, Session, User
from .exceptions import (
    InvalidCredentialsError,
    PasswordTooShortError,
    SessionStoreError,
    UsernameTakenError,
)
from .repositories import PasswordHasher, SessionStore, UserStore

__all__ = [
    "Credentials",
    "InvalidCredentialsError",
    "PasswordHasher",
    "PasswordTooShortError",
    "Session",
    "SessionStore",
    "SessionStoreError",
    "User",
    "UserStore",
    "UsernameTakenError",
]
