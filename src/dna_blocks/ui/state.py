"""Shared site state read by every rendered block."""

from dataclasses import dataclass

from dna_blocks.models.constants import BASE_LANGUAGE, ThemeMode


@dataclass(slots=True)
class SiteState:
    """Active language and theme; mutated only by the coordinator."""

    language: str = BASE_LANGUAGE
    theme: ThemeMode = ThemeMode.DARK
