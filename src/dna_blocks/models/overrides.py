"""Block-local override payload (content, layout, style)."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _as_dict(raw: Any) -> dict[str, Any]:
    if isinstance(raw, Mapping):
        return {str(k): v for k, v in raw.items()}
    return {}


@dataclass(frozen=True, slots=True)
class LocalOverride:
    """Per-block configuration that outranks global settings.

    Keys absent from any section mean "defer to the global or theme
    default", never "use an empty value".
    """

    data: dict[str, Any] = field(default_factory=dict)
    layout: dict[str, Any] = field(default_factory=dict)
    style: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any] | None) -> "LocalOverride":
        """Build from the editor's JSON shape; missing sections become empty."""
        if not isinstance(raw, Mapping):
            return cls()
        return cls(
            data=_as_dict(raw.get("data")),
            layout=_as_dict(raw.get("layout")),
            style=_as_dict(raw.get("style")),
        )

