# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Validators consumed by the gift editor before it touches a gift."""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError

from giftbox.application.interfaces import ValidationResult
from giftbox.domain import GiftItem, SugarRange, Sweet
from giftbox.shared.errors import format_pydantic_errors


class _SugarRangeModel(BaseModel):
    min_weight: float = Field(ge=0)
    max_weight: float = Field(ge=0)

    # strict floats still take ints, but not numeric strings
    model_config = ConfigDict(frozen=True, strict=True)

    @model_validator(mode="after")
    def _check_bounds(self) -> _SugarRangeModel:
        if self.min_weight > self.max_weight:
            raise ValueError("min weight must be <= max weight")
        return self


class _GiftItemModel(BaseModel):
    count: StrictInt = Field(ge=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("count")
    @classmethod
    def _check_max_count(cls, value: int, info: ValidationInfo) -> int:
        max_count = (info.context or {}).get("max_count")
        if max_count is not None and value > max_count:
            raise ValueError(f"count must be <= {max_count}")
        return value


class SugarRangeValidator:
    def validate(self, subject: SugarRange | None) -> ValidationResult:
        if subject is None:
            return ValidationResult.fail("sugar range must not be null")
        try:
            _SugarRangeModel(min_weight=subject.min_weight, max_weight=subject.max_weight)
        except PydanticValidationError as exc:
            return ValidationResult.fail(format_pydantic_errors(exc))
        return ValidationResult.ok()


class GiftItemValidator:
    """Checks that an item can be placed into a gift.

    The sweet itself is already consistent (sweets check their own invariants on
    construction), so only the pairing and the quantity are verified here.
    """

    def __init__(self, *, max_count: int | None = None) -> None:
        self._max_count = max_count

    def validate(self, subject: GiftItem | None) -> ValidationResult:
        if subject is None:
            return ValidationResult.fail("gift item must not be null")
        if subject.sweet is None:
            return ValidationResult.fail("sweet must not be null")
        if not isinstance(subject.sweet, Sweet):
            return ValidationResult.fail("sweet must be a Sweet instance")
        try:
            _GiftItemModel.model_validate(
                {"count": subject.count}, context={"max_count": self._max_count}
            )
        except PydanticValidationError as exc:
            return ValidationResult.fail(format_pydantic_errors(exc))
        return ValidationResult.ok()


__all__ = ["GiftItemValidator", "SugarRangeValidator"]
