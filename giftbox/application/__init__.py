# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .interfaces import GiftEditor, ValidationResult, Validator
from .response import ServiceResponse
from .use_cases.gift_editor import GiftEditorService

__all__ = [
    "GiftEditor",
    "GiftEditorService",
    "ServiceResponse",
    "ValidationResult",
    "Validator",
]
