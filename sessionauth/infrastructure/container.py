"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sessionauth.application.services.credential_validator import CredentialValidator
from sessionauth.application.services.password_hashing import WerkzeugPasswordHasher
from sessionauth.application.services.session_manager import SessionManager
from sessionauth.application.use_cases.users.login_user import LoginUserUseCase
from sessionauth.application.use_cases.users.logout_user import LogoutUserUseCase
from sessionauth.application.use_cases.users.register_user import RegisterUserUseCase
from sessionauth.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionStore,
    SqlAlchemyUserRepository,
)
from sessionauth.interfaces.http.controllers.auth_controller import AuthController
from sessionauth.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher.from_config(self._config.hashing)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def session_store(self) -> SqlAlchemySessionStore:
        return SqlAlchemySessionStore()

    @cached_property
    def credential_validator(self) -> CredentialValidator:
        return CredentialValidator(users=self.user_repository)

    @cached_property
    def session_manager(self) -> SessionManager:
        return SessionManager(
            sessions=self.session_store,
            lifetime=timedelta(seconds=self._config.session.lifetime),
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            validator=self.credential_validator,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            validator=self.credential_validator,
            password_hasher=self.password_hasher,
            sessions=self.session_manager,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_manager)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            session_config=self._config.session,
        )
