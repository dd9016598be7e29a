"""Configuration knobs for the navbar resolver.

Defaults match the stock site theme. Themes or embedding sites may
override literal fallbacks, the glass variant, or registry coordinates.
"""

from dataclasses import dataclass

from dna_blocks.models.constants import (
    ACCENT_BORDER_COLOR,
    AVAILABLE_LANGUAGES,
    BASE_LANGUAGE,
    FALLBACK_LANGUAGES,
    GLASS_VARIANT,
    STICKY_HEADER,
    THEME_MODE,
)


@dataclass(slots=True)
class ResolverConfig:
    """Tuneable parameters that aren't stored in GL settings."""

    default_height: int = 80                       # px
    default_padding_x: int = 40                    # px
    default_width: str = "100%"
    default_background: str = "var(--dna-bg)"
    default_text_color: str = "var(--dna-text-prim)"
    default_border_color: str = "#000000"
    border_alpha_suffix: str = "20"                # hex alpha appended to border color
    default_dropdown_border: str = "#00000020"
    default_header: str = "000-GEN"
    glass_background_dark: str = "rgba(0,0,0,0.2)"
    glass_background_light: str = "rgba(255,255,255,0.2)"
    glass_blur: str = "blur(12px)"
    dropdown_background_dark: str = "rgba(0,0,0,0.95)"
    dropdown_background_light: str = "rgba(255,255,255,0.95)"
    active_option_background: str = "rgba(59, 130, 246, 0.2)"
    glass_variant: str = GLASS_VARIANT
    base_language: str = BASE_LANGUAGE
    fallback_languages: tuple[str, ...] = FALLBACK_LANGUAGES
    border_color_setting: tuple[str, int] = ACCENT_BORDER_COLOR
    theme_setting: tuple[str, int] = THEME_MODE
    sticky_setting: tuple[str, int] = STICKY_HEADER
    languages_setting: tuple[str, int] = AVAILABLE_LANGUAGES
