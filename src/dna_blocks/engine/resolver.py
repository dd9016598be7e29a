"""Resolve a navbar's render values from overrides, settings, and theme.

Each field is taken from the highest-precedence source that has a usable
value:

1. new-style local key (``style.backgroundColor``, ``layout.height``)
2. legacy local key (``style['F-S02']``, ``layout['F-L04']``)
3. theme/flag computed default (glass background per theme)
4. global settings parameter at a fixed (key, index)
5. literal default from ``ResolverConfig``

Resolution is pure: it reads its arguments and returns a new
``ResolvedViewModel``. Missing or malformed inputs never raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dna_blocks.engine import fields
from dna_blocks.engine.languages import available_languages
from dna_blocks.engine.resolver_config import ResolverConfig
from dna_blocks.engine.text import Translator
from dna_blocks.models.constants import ThemeMode, TriState
from dna_blocks.models.global_settings import GlobalSettingsRegistry
from dna_blocks.models.overrides import LocalOverride
from dna_blocks.models.view_model import NavLink, ResolvedViewModel


def theme_from_settings(
    settings: GlobalSettingsRegistry,
    config: ResolverConfig | None = None,
) -> ThemeMode:
    """Theme stored in GL10; absent or unknown values read as Dark."""
    cfg = config or ResolverConfig()
    key, index = cfg.theme_setting
    return ThemeMode.parse(settings.get_value(key, index))


def glass_state(local: LocalOverride) -> TriState:
    """Explicit glass setting from the override, or UNSET."""
    return fields.first_local(local, fields.GLASS, fields.coerce_tristate) or TriState.UNSET


def is_glass(
    local: LocalOverride,
    block_type: str,
    config: ResolverConfig | None = None,
) -> bool:
    """Explicit ON/OFF wins; otherwise the glass variant defaults to on."""
    cfg = config or ResolverConfig()
    state = glass_state(local)
    if state is TriState.ON:
        return True
    if state is TriState.OFF:
        return False
    return block_type == cfg.glass_variant


def resolve_height(local: LocalOverride, config: ResolverConfig | None = None) -> int:
    cfg = config or ResolverConfig()
    height = fields.first_local(local, fields.HEIGHT, fields.coerce_pixels)
    return cfg.default_height if height is None else height


def resolve_background(
    local: LocalOverride,
    theme: ThemeMode,
    glass: bool,
    config: ResolverConfig | None = None,
) -> str:
    cfg = config or ResolverConfig()
    explicit = fields.first_local(local, fields.BACKGROUND, fields.coerce_css)
    if explicit is not None:
        return explicit
    if glass:
        if theme is ThemeMode.DARK:
            return cfg.glass_background_dark
        return cfg.glass_background_light
    return cfg.default_background


def resolve_border_color(
    settings: GlobalSettingsRegistry,
    config: ResolverConfig | None = None,
) -> str:
    """Accent color from GL02 with the translucent alpha suffix appended."""
    cfg = config or ResolverConfig()
    key, index = cfg.border_color_setting
    base = settings.get_str(key, index, cfg.default_border_color)
    return f"{base}{cfg.border_alpha_suffix}"


def resolve_sticky(
    local: LocalOverride,
    settings: GlobalSettingsRegistry,
    config: ResolverConfig | None = None,
) -> bool:
    cfg = config or ResolverConfig()
    state = fields.first_local(local, fields.STICKY, fields.coerce_tristate)
    if state is not None:
        return state is TriState.ON
    key, index = cfg.sticky_setting
    return settings.get_flag(key, index, default=False)


def resolve_links(data: Mapping[str, Any]) -> tuple[NavLink, ...]:
    raw = data.get("links")
    if not isinstance(raw, (list, tuple)):
        return ()
    links: list[NavLink] = []
    for item in raw:
        if not isinstance(item, Mapping):
            continue
        label = item.get("label")
        url = item.get("url")
        links.append(NavLink(
            label="" if label is None else str(label),
            url=url if isinstance(url, str) else "",
        ))
    return tuple(links)


def resolve(
    local: LocalOverride | Mapping[str, Any] | None,
    settings: GlobalSettingsRegistry | Mapping[str, Any] | None,
    theme: ThemeMode | str,
    language: str,
    block_type: str = "",
    config: ResolverConfig | None = None,
) -> ResolvedViewModel:
    """Compute the full navbar view-model for one render pass."""
    cfg = config or ResolverConfig()
    if not isinstance(local, LocalOverride):
        local = LocalOverride.from_dict(local)
    if not isinstance(settings, GlobalSettingsRegistry):
        settings = GlobalSettingsRegistry.from_dict(settings)
    mode = theme if isinstance(theme, ThemeMode) else ThemeMode.parse(theme)
    is_dark = mode is ThemeMode.DARK

    glass = is_glass(local, block_type, cfg)
    border_color = resolve_border_color(settings, cfg)
    padding_x = fields.first_local(local, fields.PADDING_X, fields.coerce_pixels)
    width = fields.first_local(local, fields.WIDTH, fields.coerce_length)
    text_color = fields.first_local(local, fields.TEXT_COLOR, fields.coerce_css)
    dropdown_key, dropdown_index = cfg.border_color_setting

    translator = Translator(
        data=dict(local.data),
        language=language,
        base_language=cfg.base_language,
    )
    return ResolvedViewModel(
        height=resolve_height(local, cfg),
        background_color=resolve_background(local, mode, glass, cfg),
        text_color=cfg.default_text_color if text_color is None else text_color,
        glass_effect=glass,
        backdrop_filter=cfg.glass_blur if glass else "none",
        border_color=border_color,
        border_bottom=f"1px solid {border_color}",
        padding_x=cfg.default_padding_x if padding_x is None else padding_x,
        width=cfg.default_width if width is None else width,
        is_sticky=resolve_sticky(local, settings, cfg),
        is_dark=is_dark,
        header=translator("header") or cfg.default_header,
        links=resolve_links(local.data),
        available_languages=available_languages(settings, cfg),
        dropdown_background=(
            cfg.dropdown_background_dark if is_dark else cfg.dropdown_background_light
        ),
        dropdown_border_color=settings.get_str(
            dropdown_key, dropdown_index, cfg.default_dropdown_border
        ),
        text=translator,
    )
