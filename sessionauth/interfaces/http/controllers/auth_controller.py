# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import Blueprint, Response, jsonify, request
from pydantic import BaseModel, ValidationError

from sessionauth.application.use_cases.users.login_user import LoginUserUseCase
from sessionauth.application.use_cases.users.logout_user import LogoutUserUseCase
from sessionauth.application.use_cases.users.register_user import RegisterUserUseCase
from sessionauth.interfaces.http.dto.auth import (
    LoginRequestDTO,
    MessageDTO,
    RegisteredUserDTO,
    RegisterRequestDTO,
)
from sessionauth.shared.config import SessionConfig, load_config
from sessionauth.shared.errors import handle_app_error
from sessionauth.shared.errors.validation import raise_validation_error
from sessionauth.shared.logging import logger

_DTO = TypeVar("_DTO", bound=BaseModel)


def _parse_body(dto_cls: type[_DTO]) -> _DTO:
    try:
        return dto_cls.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        session_config: SessionConfig | None = None,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._session_config = session_config or load_config().session

    def _session_token(self) -> str | None:
        return request.cookies.get(self._session_config.cookie_name) or None

    def register(self) -> tuple[Response, int]:
        dto = _parse_body(RegisterRequestDTO)

        result = self._register_use_case.execute(dto.username, dto.password)
        if result.error is not None:
            logger.info(f"auth.register: rejected code={result.error.code}")
            return handle_app_error(result.error)

        user = result.unwrap()
        logger.info(f"auth.register: ok user_id={user.id}")
        payload = RegisteredUserDTO(**user.to_public()).model_dump()
        return jsonify(payload), 200

    def login(self) -> tuple[Response, int]:
        dto = _parse_body(LoginRequestDTO)

        result = self._login_use_case.execute(dto.username, dto.password, self._session_token())
        if result.error is not None:
            logger.info(f"auth.login: rejected code={result.error.code}")
            return handle_app_error(result.error)

        session = result.unwrap()
        response = jsonify(MessageDTO.welcome(dto.username).model_dump())
        response.set_cookie(
            self._session_config.cookie_name,
            session.token,
            httponly=True,
            samesite=self._session_config.cookie_samesite,
            secure=self._session_config.cookie_secure,
            expires=session.expires_at,
        )
        logger.info(f"auth.login: ok user_id={session.user.id}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        outcome = self._logout_use_case.execute(self._session_token())

        response = jsonify(MessageDTO(message=outcome.value).model_dump())
        response.delete_cookie(
            self._session_config.cookie_name,
            httponly=True,
            samesite=self._session_config.cookie_samesite,
            secure=self._session_config.cookie_secure,
        )
        logger.info(f"auth.logout: {outcome.name.lower()}")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["GET"])
        return bp
