"""Language lists for the site-wide selector and per-block dropdowns.

The two lists are sourced differently and may diverge: the selector
always shows every supported language, while a block's dropdown shows
whatever GL12 lists.
"""

from __future__ import annotations

from collections.abc import Iterable

from dna_blocks.engine.resolver_config import ResolverConfig
from dna_blocks.models.constants import SUPPORTED_LANGUAGES
from dna_blocks.models.global_settings import GlobalSettingsRegistry
from dna_blocks.models.translations import language_name
from dna_blocks.models.view_model import LanguageOption


def parse_language_list(raw: object) -> tuple[str, ...]:
    """Split a comma-separated code list, dropping blank entries."""
    if not isinstance(raw, str):
        return ()
    return tuple(code.strip() for code in raw.split(",") if code.strip())


def available_languages(
    settings: GlobalSettingsRegistry,
    config: ResolverConfig | None = None,
) -> tuple[str, ...]:
    """Languages offered by a block dropdown.

    An absent, empty, or all-blank setting yields the fallback list rather
    than a single empty-string language.
    """
    cfg = config or ResolverConfig()
    key, index = cfg.languages_setting
    codes = parse_language_list(settings.get_value(key, index))
    return codes or tuple(cfg.fallback_languages)


def _options(
    codes: Iterable[str],
    current: str,
    active_background: str,
) -> list[LanguageOption]:
    rows: list[LanguageOption] = []
    for code in codes:
        meta = language_name(code)
        is_active = code == current
        rows.append(LanguageOption(
            code=code,
            name=meta.name,
            flag=meta.flag,
            is_active=is_active,
            background=active_background if is_active else "transparent",
        ))
    return rows


def selector_options(
    current: str,
    config: ResolverConfig | None = None,
) -> list[LanguageOption]:
    """Rows for the global selector: exactly the supported set, in order."""
    cfg = config or ResolverConfig()
    return _options(SUPPORTED_LANGUAGES, current, cfg.active_option_background)


def dropdown_options(
    codes: Iterable[str],
    current: str,
    config: ResolverConfig | None = None,
) -> list[LanguageOption]:
    """Rows for a block's dropdown, highlighting the current language."""
    cfg = config or ResolverConfig()
    return _options(codes, current, cfg.active_option_background)
