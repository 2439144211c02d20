from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from sessionauth.application.result import Result
from sessionauth.application.services.session_manager import LogoutOutcome
from sessionauth.application.use_cases.users.login_user import LoginUserUseCase
from sessionauth.application.use_cases.users.logout_user import LogoutUserUseCase
from sessionauth.application.use_cases.users.register_user import RegisterUserUseCase
from sessionauth.domain.users.entities import Session, User
from sessionauth.domain.users.exceptions import (
    InvalidCredentialsError,
    PasswordTooShortError,
    UsernameTakenError,
)
from sessionauth.interfaces.http.controllers.auth_controller import AuthController
from sessionauth.shared.config import SessionConfig
from sessionauth.shared.middleware.error_handler import configure_error_handling

_SESSION_CONFIG = SessionConfig(cookie_name="sid", lifetime=3600, cookie_secure=False, cookie_samesite="Lax")


def _user() -> User:
    return User(id=2, username="sue", password_hash="hash", created_at=datetime.now(UTC))


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _mount(flask_app: Flask, **use_cases) -> None:
    controller = AuthController(
        register_use_case=use_cases.get("register", MagicMock()),
        login_use_case=use_cases.get("login", MagicMock()),
        logout_use_case=use_cases.get("logout", MagicMock()),
        session_config=_SESSION_CONFIG,
    )
    flask_app.register_blueprint(controller.as_blueprint())


def test_register_returns_public_user(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str]] = {}

    class StubRegister:
        def execute(self, username: str, password: str) -> Result[User]:
            register_called["args"] = (username, password)
            return Result.success(_user())

    _mount(flask_app, register=cast(RegisterUserUseCase, StubRegister()))

    with flask_app.test_client() as client:
        response = client.post("/api/auth/register", json={"username": "sue", "password": "1234"})

    assert response.status_code == 200
    assert register_called["args"] == ("sue", "1234")
    assert response.get_json() == {"user_id": 2, "username": "sue"}


@pytest.mark.parametrize(
    ("error", "status", "message"),
    [
        (UsernameTakenError(), 422, "Username taken"),
        (PasswordTooShortError(), 422, "Password must be longer than 3 chars"),
    ],
)
def test_register_failures(flask_app: Flask, error, status: int, message: str) -> None:
    register = MagicMock()
    register.execute.return_value = Result.failure(error)
    _mount(flask_app, register=register)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/register", json={"username": "sue", "password": "1"})

    assert response.status_code == status
    assert response.get_json() == {"message": message}


def test_login_sets_session_cookie(flask_app: Flask) -> None:
    now = datetime.now(UTC)
    login = MagicMock()
    login.execute.return_value = Result.success(
        Session(token="opaque-token", user=_user(), created_at=now, expires_at=now + timedelta(hours=1))
    )
    _mount(flask_app, login=cast(LoginUserUseCase, login))

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"username": "sue", "password": "1234"})

    assert response.status_code == 200
    assert response.get_json() == {"message": "Welcome sue!"}
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("sid=opaque-token")
    assert "HttpOnly" in cookie
    login.execute.assert_called_once_with("sue", "1234", None)


def test_login_forwards_existing_cookie(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = Result.failure(InvalidCredentialsError())
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        client.set_cookie("sid", "previous-token")
        response = client.post("/api/auth/login", json={"username": "sue", "password": "nope"})

    assert response.status_code == 401
    assert response.get_json() == {"message": "Invalid credentials"}
    login.execute.assert_called_once_with("sue", "nope", "previous-token")


@pytest.mark.parametrize("body", [{"username": "sue"}, {"username": 1, "password": "1234"}, None])
def test_invalid_payload_returns_422(flask_app: Flask, body) -> None:
    _mount(flask_app)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json=body)

    assert response.status_code == 422
    payload = response.get_json()
    assert set(payload) == {"message", "fields"}
    assert payload["message"] == "Invalid request body"
    assert "1234" not in response.get_data(as_text=True)


@pytest.mark.parametrize("outcome", list(LogoutOutcome))
def test_logout_always_200(flask_app: Flask, outcome: LogoutOutcome) -> None:
    logout = MagicMock()
    logout.execute.return_value = outcome
    _mount(flask_app, logout=cast(LogoutUserUseCase, logout))

    with flask_app.test_client() as client:
        client.set_cookie("sid", "some-token")
        response = client.get("/api/auth/logout")

    assert response.status_code == 200
    assert response.get_json() == {"message": outcome.value}
    logout.execute.assert_called_once_with("some-token")


def test_unexpected_error_is_generic_500(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = RuntimeError("database is on fire at /var/lib/db")
    _mount(flask_app, register=register)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/register", json={"username": "sue", "password": "1234"})

    assert response.status_code == 500
    assert response.get_json() == {"message": "Internal server error"}
