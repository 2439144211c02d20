from __future__ import annotations

import pytest

from sessionauth.shared.config import AppConfig, HashingConfig, SessionConfig
from sessionauth.shared.logging import sanitize_message


def test_session_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("SESSION_COOKIE_NAME", "chocolatechip")
    monkeypatch.setenv("COOKIE_SECURE", "yes")
    monkeypatch.setenv("SESSION_LIFETIME", "60")

    config = SessionConfig()  # type: ignore[call-arg]

    assert config.cookie_name == "chocolatechip"
    assert config.cookie_secure is True
    assert config.lifetime == 60


def test_hashing_config_rejects_unknown_method(monkeypatch) -> None:
    monkeypatch.setenv("PASSWORD_HASH_METHOD", "md5")

    with pytest.raises(ValueError):
        HashingConfig()  # type: ignore[call-arg]


def test_production_warns_about_insecure_cookie(monkeypatch, capsys) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("COOKIE_SECURE", "false")

    config = AppConfig()  # type: ignore[call-arg]

    assert config.is_production()
    assert "Secure flag is DISABLED" in capsys.readouterr().err


def test_app_config_has_no_secret_key(monkeypatch) -> None:
    monkeypatch.setenv("SECRET_KEY", "dev")

    assert "secret_key" not in AppConfig.model_fields
    assert not hasattr(AppConfig(), "secret_key")  # type: ignore[call-arg]


@pytest.mark.parametrize(
    ("message", "leaked"),
    [
        ("login payload password=hunter22", "hunter22"),
        ('body {"password": "hunter22"}', "hunter22"),
        ("stored pbkdf2:sha256:600000$abcdefgh$0123456789abcdef", "0123456789abcdef"),
        ("Cookie: sessionauth=Zm9vYmFyYmF6cXV1eA", "Zm9vYmFyYmF6cXV1eA"),
        ("postgresql+psycopg://app:s3cr3t@db/auth", "s3cr3t"),
    ],
)
def test_sensitive_values_are_redacted(message: str, leaked: str) -> None:
    assert leaked not in sanitize_message(message)


def test_plain_messages_untouched() -> None:
    assert sanitize_message("auth.login: ok user_id=3") == "auth.login: ok user_id=3"
