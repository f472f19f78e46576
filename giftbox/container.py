"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from giftbox.application.interfaces import GiftEditor
from giftbox.application.services.validation import GiftItemValidator, SugarRangeValidator
from giftbox.application.use_cases.gift_editor import GiftEditorService
from giftbox.shared.config import AppConfig, load_config
from giftbox.shared.logging import setup_logging


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    @cached_property
    def sugar_range_validator(self) -> SugarRangeValidator:
        return SugarRangeValidator()

    @cached_property
    def gift_item_validator(self) -> GiftItemValidator:
        return GiftItemValidator(max_count=self.config.editor.gift_item_max_count)

    @cached_property
    def gift_editor(self) -> GiftEditor:
        return GiftEditorService(
            sugar_range_validator=self.sugar_range_validator,
            gift_item_validator=self.gift_item_validator,
        )

    def configure_logging(self) -> None:
        setup_logging(self.config.effective_log_level(), self.config.log_file)
