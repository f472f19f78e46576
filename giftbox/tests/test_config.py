from __future__ import annotations

import pytest

from giftbox.application import GiftEditor
from giftbox.container import Container
from giftbox.domain import Gift, GiftItem
from giftbox.shared.config import AppConfig, EditorConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_LEVEL", "LOG_FILE", "DEBUG_LOGGING", "GIFT_ITEM_MAX_COUNT", "GIFT_EDITOR"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = AppConfig(_env_file=None)  # type: ignore[call-arg]

    assert config.log_level == "INFO"
    assert config.log_file is None
    assert config.debug_logging is False
    assert config.editor.gift_item_max_count == 10_000


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " warning ")
    monkeypatch.setenv("DEBUG_LOGGING", "yes")
    monkeypatch.setenv("GIFT_ITEM_MAX_COUNT", "3")

    config = AppConfig(_env_file=None)  # type: ignore[call-arg]

    assert config.log_level == "WARNING"
    assert config.debug_logging is True
    assert config.effective_log_level() == "DEBUG"
    assert config.editor.gift_item_max_count == 3


def test_rejects_non_positive_max_count(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GIFT_ITEM_MAX_COUNT", "0")
    with pytest.raises(ValueError):
        EditorConfig()  # type: ignore[call-arg]


def test_container_wires_editor_from_config(make_sweet) -> None:
    config = AppConfig(  # type: ignore[call-arg]
        _env_file=None,
        log_level="error",
        editor=EditorConfig(gift_item_max_count=2),  # type: ignore[call-arg]
    )
    container = Container(config)
    gift = Gift()

    editor = container.gift_editor
    assert container.gift_editor is editor
    assert isinstance(editor, GiftEditor)
    assert container.config.effective_log_level() == "ERROR"

    rejected = editor.add(gift, GiftItem(sweet=make_sweet(), count=3))
    accepted = editor.add(gift, GiftItem(sweet=make_sweet(), count=2))

    assert rejected.message == "count: count must be <= 2"
    assert accepted.is_success
    assert len(gift) == 1


def test_load_config_is_cached() -> None:
    load_config.cache_clear()
    try:
        assert load_config() is load_config()
    finally:
        load_config.cache_clear()
