"""Global settings (GL) registry with positional, never-raising accessors.

Provides a thin read-only interface over the settings store. Groups are
looked up by ID and parameters by index; any missing or malformed entry
resolves to ``None`` (or the accessor's default) instead of raising.
Every accessor takes a default so blocks render without any settings.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


ParamValue = str | bool | int | float


def _is_param_value(value: object) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, (str, bool, int))


@dataclass(frozen=True, slots=True)
class Parameter:
    """Single positional setting value."""

    index: int
    value: ParamValue
    name: str = ""


@dataclass(frozen=True, slots=True)
class SettingGroup:
    """Ordered parameters of one GL group."""

    key: str
    params: tuple[Parameter | None, ...] = ()

    def param(self, index: int) -> Parameter | None:
        if index < 0 or index >= len(self.params):
            return None
        return self.params[index]


def _coerce_param(index: int, raw: Any) -> Parameter | None:
    if isinstance(raw, Parameter):
        return raw
    if isinstance(raw, Mapping):
        value = raw.get("value")
        name = raw.get("name") or raw.get("id") or ""
    else:
        value = raw
        name = ""
    if not _is_param_value(value):
        return None
    return Parameter(index=index, value=value, name=str(name))


def _coerce_group(key: str, raw: Any) -> SettingGroup | None:
    """Interpret one stored group, or None when it is not list-shaped."""
    if isinstance(raw, SettingGroup):
        return raw
    params = raw.get("params") if isinstance(raw, Mapping) else raw
    if not isinstance(params, (list, tuple)):
        return None
    return SettingGroup(
        key=key,
        params=tuple(_coerce_param(i, p) for i, p in enumerate(params)),
    )


@dataclass
class GlobalSettingsRegistry:
    """Typed accessor over the raw GL settings mapping.

    Use from_dict() with the store's wire shape
    (``{"GL10": {"params": [{"value": "Dark"}, ...]}}``) or empty() when no
    settings are available. Groups are interpreted lazily, so one malformed
    group never affects lookups in another.
    """

    _groups: dict[str, Any] = field(default_factory=dict)

    def group(self, key: str) -> SettingGroup | None:
        raw = self._groups.get(key)
        if raw is None:
            return None
        return _coerce_group(key, raw)

    def get(self, key: str, index: int) -> Parameter | None:
        """Return the parameter at ``index`` of group ``key``, if present."""
        group = self.group(key)
        if group is None:
            return None
        return group.param(index)

    def get_value(self, key: str, index: int) -> ParamValue | None:
        param = self.get(key, index)
        return None if param is None else param.value

    def get_str(self, key: str, index: int, default: str) -> str:
        """Get a non-empty string setting, falling back to the default."""
        value = self.get_value(key, index)
        if value is None or isinstance(value, bool):
            return default
        text = str(value)
        return text if text else default

    def get_flag(self, key: str, index: int, default: bool = False) -> bool:
        """Read a boolean stored as True/False or "true"/"false"."""
        value = self.get_value(key, index)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            token = value.strip().lower()
            if token in ("true", "false"):
                return token == "true"
        return default

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "GlobalSettingsRegistry":
        """Wrap a plain mapping; non-mapping input yields an empty registry."""
        if not isinstance(data, Mapping):
            return cls()
        return cls(_groups={str(k): v for k, v in data.items()})

    @classmethod
    def empty(cls) -> "GlobalSettingsRegistry":
        return cls()
