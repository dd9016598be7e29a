"""Owner of the active language and theme.

Blocks read ``current_language`` and ``current_theme`` and never write
them; the only mutations are ``set_language`` and ``toggle_theme``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from dna_blocks.engine.resolver import theme_from_settings
from dna_blocks.engine.resolver_config import ResolverConfig
from dna_blocks.models.constants import (
    BASE_LANGUAGE,
    LANGUAGE_STORAGE_KEY,
    SUPPORTED_LANGUAGES,
    ThemeMode,
)
from dna_blocks.models.global_settings import GlobalSettingsRegistry
from dna_blocks.ui.state import SiteState
from dna_blocks.ui.storage import MemoryPreferenceStore, PreferenceStore


logger = logging.getLogger(__name__)


class Coordinator:
    """Holds site-wide language/theme state and persists language picks.

    Storage writes are best-effort: a failing write is logged and the
    in-memory state keeps the new language.
    """

    __slots__ = ("state", "storage", "supported_languages", "on_change")

    def __init__(
        self,
        storage: PreferenceStore | None = None,
        *,
        language: str = BASE_LANGUAGE,
        theme: ThemeMode = ThemeMode.DARK,
        supported_languages: tuple[str, ...] = SUPPORTED_LANGUAGES,
        on_change: Callable[[SiteState], None] | None = None,
    ) -> None:
        self.storage: PreferenceStore = storage if storage is not None else MemoryPreferenceStore()
        self.supported_languages = tuple(supported_languages)
        if language not in self.supported_languages:
            language = BASE_LANGUAGE
        self.state = SiteState(language=language, theme=ThemeMode.parse(theme))
        self.on_change = on_change

    @classmethod
    def from_settings(
        cls,
        settings: GlobalSettingsRegistry,
        storage: PreferenceStore | None = None,
        config: ResolverConfig | None = None,
        on_change: Callable[[SiteState], None] | None = None,
    ) -> "Coordinator":
        """Seed the theme from GL10 and the language from stored preference."""
        store: PreferenceStore = storage if storage is not None else MemoryPreferenceStore()
        stored = _read_stored_language(store)
        return cls(
            store,
            language=stored if stored in SUPPORTED_LANGUAGES else BASE_LANGUAGE,
            theme=theme_from_settings(settings, config),
            on_change=on_change,
        )

    # -- Read side ----------------------------------------------------------

    @property
    def current_language(self) -> str:
        return self.state.language

    @property
    def current_theme(self) -> ThemeMode:
        return self.state.theme

    @property
    def is_dark(self) -> bool:
        return self.state.theme is ThemeMode.DARK

    def is_supported(self, code: str) -> bool:
        return code in self.supported_languages

    # -- Actions ------------------------------------------------------------

    def set_language(self, code: str) -> bool:
        """Switch language. Returns False (and changes nothing) if unsupported."""
        if not self.is_supported(code):
            logger.debug("Ignoring unsupported language code %r", code)
            return False
        changed = code != self.state.language
        self.state.language = code
        self._persist_language(code)
        if changed:
            self._notify()
        return True

    def toggle_theme(self) -> ThemeMode:
        """Flip Light <-> Dark and return the new theme."""
        self.state.theme = self.state.theme.toggled()
        self._notify()
        return self.state.theme

    # -- Internals ----------------------------------------------------------

    def _persist_language(self, code: str) -> None:
        try:
            self.storage.set_item(LANGUAGE_STORAGE_KEY, code)
        except Exception:
            logger.warning("Could not persist language preference %r", code, exc_info=True)

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.state)


def _read_stored_language(storage: PreferenceStore) -> str | None:
    try:
        return storage.get_item(LANGUAGE_STORAGE_KEY)
    except Exception:
        logger.warning("Could not read language preference", exc_info=True)
        return None
