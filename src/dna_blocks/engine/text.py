"""Per-language text lookup for block content.

This is the single place that knows how translated content is keyed:
``data["header_fr"]`` holds the French variant of ``data["header"]``.
A missing or empty translation falls back to the base value, then to
the empty string. There is no fallback between related locales.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from dna_blocks.models.constants import BASE_LANGUAGE


def _text(value: Any) -> str | None:
    """Content value as display text; falsy and structured values are absent."""
    if value is None or isinstance(value, (bool, dict, list, tuple)):
        return None
    if isinstance(value, (int, float)) and not value:
        return None
    text = value if isinstance(value, str) else str(value)
    return text or None


def translated_key(key: str, language: str) -> str:
    return f"{key}_{language}"


def translate(
    data: Mapping[str, Any],
    key: str,
    language: str,
    base_language: str = BASE_LANGUAGE,
) -> str:
    """Resolve ``key`` for ``language`` against block content ``data``."""
    if not language or language == base_language:
        return _text(data.get(key)) or ""
    localized = _text(data.get(translated_key(key, language)))
    if localized is not None:
        return localized
    return _text(data.get(key)) or ""


@dataclass(frozen=True)
class Translator:
    """Callable bound to one block's content and the active language.

    Compares by value, so two resolutions of the same inputs are equal.
    """

    data: dict[str, Any] = field(default_factory=dict)
    language: str = BASE_LANGUAGE
    base_language: str = BASE_LANGUAGE

    def __call__(self, key: str) -> str:
        return translate(self.data, key, self.language, self.base_language)
