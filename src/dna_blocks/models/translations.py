"""Display metadata for language codes."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LanguageName:
    name: str
    flag: str


LANGUAGE_NAMES: dict[str, LanguageName] = {
    "en": LanguageName("English", "\U0001F1EC\U0001F1E7"),
    "ru": LanguageName("Русский", "\U0001F1F7\U0001F1FA"),
    "uk": LanguageName("Українська", "\U0001F1FA\U0001F1E6"),
    "de": LanguageName("Deutsch", "\U0001F1E9\U0001F1EA"),
    "fr": LanguageName("Français", "\U0001F1EB\U0001F1F7"),
    "es": LanguageName("Español", "\U0001F1EA\U0001F1F8"),
    "it": LanguageName("Italiano", "\U0001F1EE\U0001F1F9"),
    "zh": LanguageName("中文", "\U0001F1E8\U0001F1F3"),
    "pl": LanguageName("Polski", "\U0001F1F5\U0001F1F1"),
}

# Globe with meridians, shown for codes missing from the table.
UNKNOWN_FLAG = "\U0001F310"


def language_name(code: str) -> LanguageName:
    """Return display metadata, using the raw code for unknown languages."""
    return LANGUAGE_NAMES.get(code, LanguageName(code, UNKNOWN_FLAG))
