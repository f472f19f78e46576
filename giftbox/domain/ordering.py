# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Ordering rules for the sweets of a gift."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from giftbox.shared.errors import UnsupportedOrderRuleError

from .entities import GiftItem, Sweet


class SweetsOrderRule(str, Enum):
    NAME = "name"
    MANUFACTURER = "manufacturer"
    PRICE = "price"
    WEIGHT = "weight"
    SUGAR_WEIGHT = "sugar_weight"


SweetKey = Callable[[Sweet], Any]

_SWEET_KEYS: dict[SweetsOrderRule, SweetKey] = {
    SweetsOrderRule.NAME: lambda sweet: sweet.name,
    SweetsOrderRule.MANUFACTURER: lambda sweet: sweet.manufacturer,
    SweetsOrderRule.PRICE: lambda sweet: sweet.price,
    SweetsOrderRule.WEIGHT: lambda sweet: sweet.weight,
    SweetsOrderRule.SUGAR_WEIGHT: lambda sweet: sweet.sugar_weight,
}


def resolve_rule(rule: Any) -> SweetsOrderRule:
    """Accept a rule member or its raw value."""

    if isinstance(rule, SweetsOrderRule):
        return rule
    try:
        return SweetsOrderRule(rule)
    except ValueError:
        raise UnsupportedOrderRuleError(rule) from None


def sweet_sort_key(rule: Any) -> SweetKey:
    return _SWEET_KEYS[resolve_rule(rule)]


def order_gift_items(items: Iterable[GiftItem], rule: Any) -> list[GiftItem]:
    """Return items sorted ascending by their sweet; equal keys keep input order."""

    key = sweet_sort_key(rule)
    return sorted(items, key=lambda item: key(item.sweet))


__all__ = [
    "SweetsOrderRule",
    "order_gift_items",
    "resolve_rule",
    "sweet_sort_key",
]
