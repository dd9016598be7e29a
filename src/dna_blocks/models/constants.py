"""Registry coordinates, theme modes, and language codes shared by blocks.

Global settings groups are addressed by opaque IDs and read by fixed
positional index. The (key, index) pairs below are the contract between
the settings editor and every block that renders from it.
"""

from enum import Enum


class ThemeMode(str, Enum):
    """Site-wide color scheme.

    Only two values exist; anything else stored in settings reads as DARK.
    """
    LIGHT = "Light"
    DARK = "Dark"

    @classmethod
    def parse(cls, raw: object) -> "ThemeMode":
        if raw == cls.LIGHT.value:
            return cls.LIGHT
        return cls.DARK

    def toggled(self) -> "ThemeMode":
        return ThemeMode.DARK if self is ThemeMode.LIGHT else ThemeMode.LIGHT


class TriState(Enum):
    """Explicit on/off flag that can also be left unset.

    Keeps "explicitly false" apart from "not specified", which a plain
    Optional[bool] makes too easy to coalesce.
    """
    ON = "on"
    OFF = "off"
    UNSET = "unset"

    @classmethod
    def parse(cls, raw: object) -> "TriState":
        """Read a bool or a "true"/"false" string; anything else is UNSET."""
        if raw is True:
            return cls.ON
        if raw is False:
            return cls.OFF
        if isinstance(raw, str):
            token = raw.strip().lower()
            if token == "true":
                return cls.ON
            if token == "false":
                return cls.OFF
        return cls.UNSET

    @property
    def is_set(self) -> bool:
        return self is not TriState.UNSET


# (registry key, parameter index) pairs
ACCENT_BORDER_COLOR = ("GL02", 5)
THEME_MODE = ("GL10", 6)
STICKY_HEADER = ("GL11", 0)
AVAILABLE_LANGUAGES = ("GL12", 1)

BASE_LANGUAGE = "en"

# Languages offered by the site-wide selector, in display order.
SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "ru", "uk", "de", "fr", "es", "it", "zh", "pl")

# Per-block dropdown list when GL12 has nothing usable.
FALLBACK_LANGUAGES: tuple[str, ...] = ("en", "uk", "ru")

LANGUAGE_STORAGE_KEY = "dna-lang-pref"

# Block type id of the translucent navbar variant.
GLASS_VARIANT = "B0102"
