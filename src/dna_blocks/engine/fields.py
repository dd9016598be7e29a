"""Candidate override keys per rendered field, and value coercion.

Each field lists the local keys it may be read from, newest format
first. ``first_local`` walks them in order and returns the first value
that survives coercion; malformed values are skipped as if absent.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, TypeVar

from dna_blocks.models.constants import TriState
from dna_blocks.models.overrides import LocalOverride


logger = logging.getLogger(__name__)

T = TypeVar("T")

Section = Literal["data", "layout", "style"]

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True, slots=True)
class LocalKey:
    section: Section
    key: str


@dataclass(frozen=True, slots=True)
class FieldRule:
    """Ordered local lookup keys for one view-model field."""

    name: str
    candidates: tuple[LocalKey, ...]


HEIGHT = FieldRule("height", (
    LocalKey("layout", "height"),
    LocalKey("style", "height"),
    LocalKey("layout", "F-L04"),
))
BACKGROUND = FieldRule("background_color", (
    LocalKey("style", "backgroundColor"),
    LocalKey("style", "F-S02"),
))
TEXT_COLOR = FieldRule("text_color", (LocalKey("style", "textColor"),))
PADDING_X = FieldRule("padding_x", (LocalKey("layout", "paddingX"),))
WIDTH = FieldRule("width", (
    LocalKey("layout", "width"),
    LocalKey("layout", "F-L06"),
))
GLASS = FieldRule("glass_effect", (
    LocalKey("style", "glassEffect"),
    LocalKey("style", "F-S06"),
))
STICKY = FieldRule("is_sticky", (LocalKey("data", "stickyLogic"),))


def _section(local: LocalOverride, section: Section) -> dict[str, Any]:
    if section == "data":
        return local.data
    if section == "layout":
        return local.layout
    return local.style


def first_local(
    local: LocalOverride,
    rule: FieldRule,
    coerce: Callable[[Any], T | None],
) -> T | None:
    """Return the first coercible local value for ``rule``, or None."""
    for candidate in rule.candidates:
        raw = _section(local, candidate.section).get(candidate.key)
        if raw is None:
            continue
        value = coerce(raw)
        if value is not None:
            return value
        logger.debug(
            "Ignoring malformed %s.%s=%r for %s",
            candidate.section, candidate.key, raw, rule.name,
        )
    return None


# --- Coercion ---

def coerce_pixels(raw: Any) -> int | None:
    """Read a non-negative pixel count from an int, float, or "64"/"64px" string."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not math.isfinite(raw):
            return None
        value = int(raw)
    elif isinstance(raw, str):
        match = _LEADING_INT_RE.match(raw)
        if match is None:
            return None
        try:
            value = int(match.group(1))
        except ValueError:
            # digit run longer than the interpreter will convert
            return None
    else:
        return None
    return value if value >= 0 else None


def coerce_css(raw: Any) -> str | None:
    """Accept any non-blank string as a CSS value."""
    if isinstance(raw, str) and raw.strip():
        return raw
    return None


def coerce_length(raw: Any) -> str | None:
    """CSS length; bare numbers are taken as pixels."""
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        pixels = coerce_pixels(raw)
        return None if pixels is None else f"{pixels}px"
    return coerce_css(raw)


def coerce_tristate(raw: Any) -> TriState | None:
    state = TriState.parse(raw)
    return state if state.is_set else None
