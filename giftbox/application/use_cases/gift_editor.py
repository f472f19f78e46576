# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from functools import wraps
from typing import Any, TypeVar

from giftbox.domain import Gift, GiftItem, SugarRange, Sweet, order_gift_items
from giftbox.shared.errors import (
    AppError,
    GiftItemNotFoundError,
    GiftItemRequiredError,
    GiftRequiredError,
    ValidationError,
)
from giftbox.shared.logging import logger

from ..interfaces import Validator
from ..response import ServiceResponse

_Op = TypeVar("_Op", bound=Callable[..., ServiceResponse[Any]])


def _responds(operation: _Op) -> _Op:
    """Turn expected failures raised by *operation* into failed responses."""

    @wraps(operation)
    def wrapper(self: GiftEditorService, *args: Any, **kwargs: Any) -> ServiceResponse[Any]:
        try:
            return operation(self, *args, **kwargs)
        except AppError as exc:
            logger.info(f"Gift editor {operation.__name__} rejected: {exc.code} ({exc.message})")
            return ServiceResponse.from_error(exc)

    return wrapper  # type: ignore[return-value]


def _require_gift(gift: Gift | None) -> list[GiftItem]:
    if gift is None:
        raise GiftRequiredError()
    return gift.items


def _require_item(item: GiftItem | None) -> GiftItem:
    if item is None:
        raise GiftItemRequiredError()
    return item


def _next_id(items: list[GiftItem]) -> int:
    if not items:
        return 1
    return max(gi.id for gi in items) + 1


class GiftEditorService:
    """Reads and edits the items of a caller-owned gift.

    The service keeps no state between calls. Mutating operations change
    ``gift.items`` in place and hand back the same gift, so two callers sharing
    one gift must serialize their calls themselves.
    """

    def __init__(
        self,
        *,
        sugar_range_validator: Validator[SugarRange],
        gift_item_validator: Validator[GiftItem],
    ) -> None:
        self._sugar_range_validator = sugar_range_validator
        self._gift_item_validator = gift_item_validator

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @_responds
    def get_by_id(self, gift: Gift | None, item_id: int) -> ServiceResponse[GiftItem]:
        items = _require_gift(gift)
        found = next((gi for gi in items if gi.id == item_id), None)
        if found is None:
            raise GiftItemNotFoundError(item_id)
        return ServiceResponse.success(found, message=f"item with id {item_id} found")

    @_responds
    def list_all(self, gift: Gift | None) -> ServiceResponse[list[GiftItem]]:
        """Return the gift's own item list, not a copy."""

        return ServiceResponse.success(_require_gift(gift))

    @_responds
    def get_sweets_by_sugar_range(
        self, gift: Gift | None, sugar_range: SugarRange | None
    ) -> ServiceResponse[list[Sweet]]:
        items = _require_gift(gift)
        self._check(self._sugar_range_validator, sugar_range)
        sweets = [
            gi.sweet
            for gi in items
            if sugar_range.contains(gi.sweet.sugar_weight)  # type: ignore[union-attr]
        ]
        return ServiceResponse.success(sweets)

    @_responds
    def order_sweets_in_gift(self, gift: Gift | None, rule: Any) -> ServiceResponse[list[GiftItem]]:
        """Sort the items by their sweet; the gift itself keeps its order.

        *rule* is a :class:`~giftbox.domain.SweetsOrderRule` or its value.
        """

        items = _require_gift(gift)
        return ServiceResponse.success(order_gift_items(items, rule))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @_responds
    def add(self, gift: Gift | None, item: GiftItem | None) -> ServiceResponse[Gift]:
        """Put *item* into the gift, merging it into an entry for the same sweet.

        Merging adds ``item.count`` to the existing entry and leaves ``item``
        untouched; otherwise ``item`` gets a fresh id and is appended.
        """

        items = _require_gift(gift)
        item = _require_item(item)
        self._check(self._gift_item_validator, item)

        existing = next((gi for gi in items if gi.sweet.id == item.sweet.id), None)
        if existing is not None:
            merged = GiftItem(
                sweet=existing.sweet, count=existing.count + item.count, id=existing.id
            )
            self._check(self._gift_item_validator, merged)
            existing.count = merged.count
            logger.debug(f"Merged sweet {item.sweet.id} into gift item {existing.id}")
        else:
            item.id = _next_id(items)
            items.append(item)
            logger.debug(f"Added gift item {item.id} for sweet {item.sweet.id}")
        return ServiceResponse.success(gift)

    @_responds
    def update(self, gift: Gift | None, item: GiftItem | None) -> ServiceResponse[Gift]:
        """Replace the item with the same id, or insert *item* when there is none."""

        items = _require_gift(gift)
        item = _require_item(item)
        self._check(self._gift_item_validator, item)

        index = next((i for i, gi in enumerate(items) if gi.id == item.id), None)
        if index is None:
            item.id = _next_id(items)
            items.append(item)
            logger.debug(f"Gift item not found on update, inserted as {item.id}")
        else:
            items[index] = item
            logger.debug(f"Replaced gift item {item.id} at position {index}")
        return ServiceResponse.success(gift)

    @_responds
    def delete(self, gift: Gift | None, item: GiftItem | None) -> ServiceResponse[Gift]:
        items = _require_gift(gift)
        item = _require_item(item)
        try:
            items.remove(item)
        except ValueError:
            logger.debug(f"Gift item {item.id} not present, nothing to delete")
        else:
            logger.debug(f"Removed gift item {item.id}")
        return ServiceResponse.success(gift)

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    @_responds
    def sweets_count(self, gift: Gift | None) -> ServiceResponse[int]:
        return ServiceResponse.success(sum(gi.count for gi in _require_gift(gift)))

    @_responds
    def total_weight(self, gift: Gift | None) -> ServiceResponse[float]:
        items = _require_gift(gift)
        return ServiceResponse.success(sum((gi.count * gi.sweet.weight for gi in items), 0.0))

    @_responds
    def total_price(self, gift: Gift | None) -> ServiceResponse[Decimal]:
        items = _require_gift(gift)
        total = sum((gi.count * gi.sweet.price for gi in items), Decimal("0"))
        return ServiceResponse.success(total)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _check(validator: Validator[Any], subject: Any) -> None:
        result = validator.validate(subject)
        if result.has_error:
            raise ValidationError(result.error)
