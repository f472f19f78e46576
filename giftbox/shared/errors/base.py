# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class AppError(Exception):
    """Expected failure of an editor operation.

    These never leave the service layer: the gift editor turns them into
    failed ``ServiceResponse`` envelopes.
    """

    code: str
    message: str
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class ValidationError(AppError):
    def __init__(
        self,
        message: str,
        *,
        code: str = "validation_failed",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(code=code, message=message, context=context)


class GiftRequiredError(AppError):
    def __init__(self) -> None:
        super().__init__(code="gift_required", message="gift must not be null")


class GiftItemRequiredError(AppError):
    def __init__(self) -> None:
        super().__init__(code="gift_item_required", message="gift item must not be null")


class GiftItemNotFoundError(AppError):
    def __init__(self, item_id: int) -> None:
        super().__init__(
            code="gift_item_not_found",
            message=f"item with id {item_id} not found",
            context={"item_id": item_id},
        )


class UnsupportedOrderRuleError(AppError):
    def __init__(self, rule: Any) -> None:
        super().__init__(
            code="unsupported_order_rule",
            message="unsupported ordering rule",
            context={"rule": repr(rule)},
        )
