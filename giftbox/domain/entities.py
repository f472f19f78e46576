# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Domain entities that describe the contents of a gift box."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar

from .exceptions import InvariantViolation


def _require_text(value: Any, fld: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvariantViolation("must be a non-empty string", field=fld, value=value)
    return value


def _to_float(value: Any, fld: str) -> float:
    if isinstance(value, bool):
        raise InvariantViolation("must be a number", field=fld, value=value)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvariantViolation("must be a number", field=fld, value=value) from exc


def _to_decimal(value: Any, fld: str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvariantViolation("must be a number", field=fld, value=value)
    try:
        # floats go through str so 10.1 stays 10.1 instead of its binary expansion
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise InvariantViolation("must be a number", field=fld, value=value) from exc


@dataclass(slots=True, frozen=True)
class Sweet:
    """A piece of confectionery offered by the catalog.

    Sweets are value data: once built they are never modified, and two sweets
    with the same ``id`` are treated as the same catalog entry.
    """

    LABEL: ClassVar[str] = "Sweet"

    id: int
    name: str
    manufacturer: str
    weight: float
    sugar_weight: float
    price: Decimal

    def __post_init__(self) -> None:
        _require_text(self.name, "name")
        _require_text(self.manufacturer, "manufacturer")
        object.__setattr__(self, "weight", _to_float(self.weight, "weight"))
        object.__setattr__(self, "sugar_weight", _to_float(self.sugar_weight, "sugar_weight"))
        object.__setattr__(self, "price", _to_decimal(self.price, "price"))
        if self.weight <= 0:
            raise InvariantViolation("weight must be positive", field="weight", value=self.weight)
        if self.sugar_weight < 0:
            raise InvariantViolation(
                "sugar weight must be >= 0", field="sugar_weight", value=self.sugar_weight
            )
        if self.sugar_weight > self.weight:
            raise InvariantViolation(
                "sugar weight must be <= weight", field="sugar_weight", value=self.sugar_weight
            )
        if self.price < 0:
            raise InvariantViolation("price must be >= 0", field="price", value=self.price)

    def _details(self) -> str:
        return ""

    def __str__(self) -> str:
        text = (
            f"Id: {self.id}, {self.LABEL}: {self.name}, "
            f"Manufacturer: {self.manufacturer}, "
            f"Weight: {self.weight} g, Sugar: {self.sugar_weight} g, "
            f"Price: {self.price:.2f}"
        )
        return text + self._details()


@dataclass(slots=True, frozen=True)
class Lollipop(Sweet):
    LABEL: ClassVar[str] = "Lollipop"

    flavor: str

    def __post_init__(self) -> None:
        # zero-argument super() does not work inside slotted dataclasses
        Sweet.__post_init__(self)
        _require_text(self.flavor, "flavor")

    def _details(self) -> str:
        return f", Flavor: {self.flavor}"


@dataclass(slots=True, frozen=True)
class ChocolateSweet(Sweet):
    LABEL: ClassVar[str] = "Chocolate sweet"

    kind_of_chocolate: str

    def __post_init__(self) -> None:
        Sweet.__post_init__(self)
        _require_text(self.kind_of_chocolate, "kind_of_chocolate")

    def _details(self) -> str:
        return f", Chocolate: {self.kind_of_chocolate}"


@dataclass(slots=True)
class GiftItem:
    """One line of a gift: a sweet and how many of it the box holds.

    ``id`` stays ``0`` until the editor places the item into a gift.
    """

    sweet: Sweet
    count: int
    id: int = 0


@dataclass(slots=True)
class Gift:
    """Ordered, caller-owned collection of gift items."""

    items: list[GiftItem] = field(default_factory=list)

    def __iter__(self) -> Iterator[GiftItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(slots=True, frozen=True)
class SugarRange:
    """Inclusive sugar weight bounds, in grams. Checked by its validator, not here."""

    min_weight: float
    max_weight: float

    def contains(self, sugar_weight: float) -> bool:
        return self.min_weight <= sugar_weight <= self.max_weight
