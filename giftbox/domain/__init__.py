# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Domain layer for the gift box editor."""

from .entities import (
    ChocolateSweet,
    Gift,
    GiftItem,
    Lollipop,
    SugarRange,
    Sweet,
)
from .exceptions import DomainError, InvariantViolation
from .ordering import SweetsOrderRule, order_gift_items, sweet_sort_key

__all__ = [
    "ChocolateSweet",
    "Gift",
    "GiftItem",
    "Lollipop",
    "SugarRange",
    "Sweet",
    "SweetsOrderRule",
    "order_gift_items",
    "sweet_sort_key",
    "DomainError",
    "InvariantViolation",
]
