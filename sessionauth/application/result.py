# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Explicit outcome type returned by every protocol step."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from sessionauth.shared.errors.base import DomainError

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Result(Generic[T]):
    value: T | None = None
    error: DomainError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: DomainError) -> Result[T]:
        return cls(error=error)

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
