"""Tests for the language/theme coordinator."""

import logging

from dna_blocks.models.constants import LANGUAGE_STORAGE_KEY, ThemeMode
from dna_blocks.models.global_settings import GlobalSettingsRegistry
from dna_blocks.ui.coordinator import Coordinator
from dna_blocks.ui.storage import MemoryPreferenceStore


class _FailingStore:
    def __init__(self) -> None:
        self.attempts = 0

    def get_item(self, key: str) -> str | None:
        raise OSError("storage unavailable")

    def set_item(self, key: str, value: str) -> None:
        self.attempts += 1
        raise OSError("quota exceeded")


def _theme_settings(value: str) -> GlobalSettingsRegistry:
    return GlobalSettingsRegistry.from_dict({"GL10": {"params": [{"value": ""}] * 6 + [{"value": value}]}})


def test_set_supported_language_updates_state_and_persists():
    store = MemoryPreferenceStore()
    c = Coordinator(store)
    assert c.set_language("fr") is True
    assert c.current_language == "fr"
    assert store.items[LANGUAGE_STORAGE_KEY] == "fr"


def test_unsupported_language_is_ignored_without_write():
    store = MemoryPreferenceStore()
    c = Coordinator(store, language="de")
    assert c.set_language("xx") is False
    assert c.current_language == "de"
    assert store.writes == []


def test_set_same_language_is_idempotent():
    changes = []
    store = MemoryPreferenceStore()
    c = Coordinator(store, on_change=lambda state: changes.append(state.language))
    c.set_language("uk")
    c.set_language("uk")
    assert c.current_language == "uk"
    assert changes == ["uk"]
    assert store.writes == [(LANGUAGE_STORAGE_KEY, "uk"), (LANGUAGE_STORAGE_KEY, "uk")]


def test_storage_failure_does_not_block_state_update(caplog):
    store = _FailingStore()
    c = Coordinator(store)
    with caplog.at_level(logging.WARNING, logger="dna_blocks.ui.coordinator"):
        assert c.set_language("pl") is True
    assert c.current_language == "pl"
    assert store.attempts == 1
    assert "Could not persist language preference" in caplog.text


def test_toggle_theme_twice_restores_original():
    c = Coordinator(theme=ThemeMode.LIGHT)
    assert c.toggle_theme() is ThemeMode.DARK
    assert c.is_dark is True
    assert c.toggle_theme() is ThemeMode.LIGHT
    assert c.current_theme is ThemeMode.LIGHT


def test_toggle_theme_notifies():
    seen = []
    c = Coordinator(on_change=lambda state: seen.append(state.theme))
    c.toggle_theme()
    assert seen == [ThemeMode.LIGHT]


def test_from_settings_seeds_theme_and_stored_language():
    store = MemoryPreferenceStore({LANGUAGE_STORAGE_KEY: "ru"})
    c = Coordinator.from_settings(_theme_settings("Light"), store)
    assert c.current_theme is ThemeMode.LIGHT
    assert c.current_language == "ru"
    assert store.writes == []


def test_from_settings_defaults():
    store = MemoryPreferenceStore({LANGUAGE_STORAGE_KEY: "klingon"})
    c = Coordinator.from_settings(_theme_settings("Neon"), store)
    assert c.current_theme is ThemeMode.DARK
    assert c.current_language == "en"

    c = Coordinator.from_settings(GlobalSettingsRegistry.empty())
    assert c.current_theme is ThemeMode.DARK
    assert c.current_language == "en"


def test_from_settings_survives_unreadable_storage():
    c = Coordinator.from_settings(GlobalSettingsRegistry.empty(), _FailingStore())
    assert c.current_language == "en"


def test_unsupported_initial_language_falls_back_to_base():
    assert Coordinator(language="xx").current_language == "en"


class _BrokenBackendStore(MemoryPreferenceStore):
    def set_item(self, key: str, value: str) -> None:
        raise RuntimeError("backend gone")


def test_any_storage_error_still_updates_and_notifies(caplog):
    seen = []
    c = Coordinator(_BrokenBackendStore(), on_change=lambda state: seen.append(state.language))
    with caplog.at_level(logging.WARNING, logger="dna_blocks.ui.coordinator"):
        assert c.set_language("fr") is True
    assert c.current_language == "fr"
    assert seen == ["fr"]
    assert "backend gone" in caplog.text
