# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from giftbox.shared.errors import AppError

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class ServiceResponse(Generic[T]):
    """Result envelope returned by every gift editor operation.

    Callers must check ``is_success`` before trusting ``data``; failures carry
    a human ``message`` and a machine ``code``.
    """

    is_success: bool
    message: str = ""
    data: T | None = None
    code: str | None = None

    @classmethod
    def success(cls, data: T, message: str = "") -> ServiceResponse[T]:
        return cls(is_success=True, message=message, data=data)

    @classmethod
    def failure(cls, message: str, code: str | None = None) -> ServiceResponse[T]:
        return cls(is_success=False, message=message, code=code)

    @classmethod
    def from_error(cls, error: AppError) -> ServiceResponse[T]:
        return cls.failure(error.message, code=error.code)
