"""Navbar configuration resolution."""

from dna_blocks.engine.languages import available_languages, dropdown_options, selector_options
from dna_blocks.engine.resolver import resolve, theme_from_settings
from dna_blocks.engine.resolver_config import ResolverConfig
from dna_blocks.engine.text import Translator, translate

__all__ = [
    "ResolverConfig",
    "Translator",
    "available_languages",
    "dropdown_options",
    "resolve",
    "selector_options",
    "theme_from_settings",
    "translate",
]
