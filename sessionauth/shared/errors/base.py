# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Shared error hierarchy for the service."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(eq=False)
class AppError(Exception):
    """Base application exception carrying structured metadata.

    Only ``message`` and ``context`` reach the client; ``code`` is for logs.
    """

    message: str
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": self.message}
        if self.context:
            payload.update(self.context)
        return payload


class DomainError(AppError):
    """Domain-level rule violation with a fixed, user-facing message."""

    def __init__(
        self,
        message: str | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_message = message or cast(str, getattr(self, "message", "Bad request"))
        resolved_code = cast(str, getattr(self, "code", "domain_error"))
        resolved_status = cast(HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST))
        super().__init__(
            message=resolved_message,
            code=resolved_code,
            status=resolved_status,
            context=context,
        )


class InfrastructureError(AppError):
    def __init__(self, code: str = "infrastructure_error") -> None:
        super().__init__(
            message="Internal server error",
            code=code,
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
        )


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message="Invalid request body",
            code=code,
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            context=context,
        )
