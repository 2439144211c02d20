"""Use-case for ending the caller's session."""

from __future__ import annotations

from sessionauth.application.services.session_manager import LogoutOutcome, SessionManager


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionManager) -> None:
        self._sessions = sessions

    def execute(self, token: str | None) -> LogoutOutcome:
        return self._sessions.logout(token)
