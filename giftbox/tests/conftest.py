from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

import pytest

from giftbox.application.services.validation import GiftItemValidator, SugarRangeValidator
from giftbox.application.use_cases.gift_editor import GiftEditorService
from giftbox.domain import Sweet

SweetFactory = Callable[..., Sweet]


@pytest.fixture()
def make_sweet() -> SweetFactory:
    def _make(
        sweet_id: int = 1,
        *,
        name: str = "Toffee",
        manufacturer: str = "Roshen",
        weight: float = 10.0,
        sugar_weight: float = 5.0,
        price: Decimal | str = "1.00",
    ) -> Sweet:
        return Sweet(
            id=sweet_id,
            name=name,
            manufacturer=manufacturer,
            weight=weight,
            sugar_weight=sugar_weight,
            price=Decimal(price),
        )

    return _make


@pytest.fixture()
def editor() -> GiftEditorService:
    return GiftEditorService(
        sugar_range_validator=SugarRangeValidator(),
        gift_item_validator=GiftItemValidator(max_count=1000),
    )
