# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Protocol, TypeVar, runtime_checkable

from giftbox.domain import Gift, GiftItem, SugarRange, Sweet

from .response import ServiceResponse

T_contra = TypeVar("T_contra", contravariant=True)


@dataclass(slots=True, frozen=True)
class ValidationResult:
    has_error: bool
    error: str = ""

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(has_error=False)

    @classmethod
    def fail(cls, error: str) -> ValidationResult:
        return cls(has_error=True, error=error)


class Validator(Protocol[T_contra]):
    def validate(self, subject: T_contra | None) -> ValidationResult: ...


@runtime_checkable
class GiftEditor(Protocol):
    def get_by_id(self, gift: Gift | None, item_id: int) -> ServiceResponse[GiftItem]: ...

    def list_all(self, gift: Gift | None) -> ServiceResponse[list[GiftItem]]: ...

    def get_sweets_by_sugar_range(
        self, gift: Gift | None, sugar_range: SugarRange | None
    ) -> ServiceResponse[list[Sweet]]: ...

    def order_sweets_in_gift(
        self, gift: Gift | None, rule: Any
    ) -> ServiceResponse[list[GiftItem]]: ...

    def add(self, gift: Gift | None, item: GiftItem | None) -> ServiceResponse[Gift]: ...

    def update(self, gift: Gift | None, item: GiftItem | None) -> ServiceResponse[Gift]: ...

    def delete(self, gift: Gift | None, item: GiftItem | None) -> ServiceResponse[Gift]: ...

    def sweets_count(self, gift: Gift | None) -> ServiceResponse[int]: ...

    def total_weight(self, gift: Gift | None) -> ServiceResponse[float]: ...

    def total_price(self, gift: Gift | None) -> ServiceResponse[Decimal]: ...
