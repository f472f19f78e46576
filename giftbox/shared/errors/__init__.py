from .base import (
    AppError,
    GiftItemNotFoundError,
    GiftItemRequiredError,
    GiftRequiredError,
    UnsupportedOrderRuleError,
    ValidationError,
)
from .validation import format_pydantic_errors

__all__ = [
    "AppError",
    "GiftItemNotFoundError",
    "GiftItemRequiredError",
    "GiftRequiredError",
    "UnsupportedOrderRuleError",
    "ValidationError",
    "format_pydantic_errors",
]
