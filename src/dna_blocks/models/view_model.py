"""Resolved render values for a navigation block.

Nothing here is computed; see ``dna_blocks.engine.resolver`` for how the
values are chosen. Instances are rebuilt on every render and never mutated.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class NavLink:
    label: str
    url: str

    @property
    def anchor(self) -> str | None:
        """Element id for in-page links (``#about`` -> ``about``)."""
        if self.url.startswith("#") and len(self.url) > 1:
            return self.url[1:]
        return None


@dataclass(frozen=True, slots=True)
class LanguageOption:
    """One row of a language picker."""

    code: str
    name: str
    flag: str
    is_active: bool
    background: str = "transparent"


@dataclass(frozen=True, slots=True)
class ResolvedViewModel:
    """Final visual configuration for one navbar render pass."""

    height: int
    background_color: str
    text_color: str
    glass_effect: bool
    backdrop_filter: str
    border_color: str
    border_bottom: str
    padding_x: int
    width: str
    is_sticky: bool
    is_dark: bool
    header: str
    links: tuple[NavLink, ...]
    available_languages: tuple[str, ...]
    dropdown_background: str
    dropdown_border_color: str
    text: Callable[[str], str] = field(hash=False)

    def css_style(self) -> dict[str, str]:
        """Inline style for the <nav> element."""
        return {
            "height": f"{self.height}px",
            "backgroundColor": self.background_color,
            "backdropFilter": self.backdrop_filter,
            "borderBottom": self.border_bottom,
            "width": self.width,
            "display": "flex",
            "alignItems": "center",
            "justifyContent": "space-between",
            "padding": f"0 {self.padding_x}px",
            "color": self.text_color,
        }

    def dropdown_style(self) -> dict[str, str]:
        return {
            "backgroundColor": self.dropdown_background,
            "backdropFilter": "blur(12px)",
            "borderColor": self.dropdown_border_color,
        }
