"""Bootstrap helpers for wiring settings, storage, and the coordinator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dna_blocks.config_loader import load_resolver_config, load_settings
from dna_blocks.engine.resolver import resolve
from dna_blocks.engine.resolver_config import ResolverConfig
from dna_blocks.models.global_settings import GlobalSettingsRegistry
from dna_blocks.models.overrides import LocalOverride
from dna_blocks.models.view_model import ResolvedViewModel
from dna_blocks.ui.coordinator import Coordinator
from dna_blocks.ui.storage import JsonPreferenceStore, PreferenceStore


def default_preferences_path() -> Path:
    """``$DNA_PREFS_PATH`` if set, else a per-user config file."""
    env_path = os.environ.get("DNA_PREFS_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "dna-blocks" / "prefs.json"


@dataclass(slots=True)
class SiteSession:
    """Runtime objects shared by every block on a page."""

    settings: GlobalSettingsRegistry
    coordinator: Coordinator
    config: ResolverConfig

    def render_block(
        self,
        local: LocalOverride,
        block_type: str = "",
    ) -> ResolvedViewModel:
        """Resolve one block against the current language and theme."""
        return resolve(
            local,
            self.settings,
            self.coordinator.current_theme,
            self.coordinator.current_language,
            block_type=block_type,
            config=self.config,
        )


def bootstrap_session(
    settings_path: Path | None = None,
    *,
    config_path: Path | None = None,
    storage: PreferenceStore | None = None,
) -> SiteSession:
    """Build a session from optional settings/config files and durable prefs."""
    settings = load_settings(settings_path) if settings_path else GlobalSettingsRegistry.empty()
    config = load_resolver_config(config_path) if config_path else ResolverConfig()
    if storage is None:
        storage = JsonPreferenceStore(default_preferences_path())
    coordinator = Coordinator.from_settings(settings, storage, config)
    return SiteSession(settings=settings, coordinator=coordinator, config=config)
