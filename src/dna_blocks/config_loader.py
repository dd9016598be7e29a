"""Load settings registries, block overrides, and resolver config from files.

Accepts ``.json``, ``.yaml`` and ``.yml``. A broken input file is a caller
error, so these helpers raise ``ConfigurationError`` instead of degrading.
"""

from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from dna_blocks.engine.resolver_config import ResolverConfig
from dna_blocks.models.global_settings import GlobalSettingsRegistry
from dna_blocks.models.overrides import LocalOverride


SUPPORTED_FORMATS = frozenset({".json", ".yaml", ".yml"})


class ConfigurationError(ValueError):
    """Raised when an input file is missing, unsupported, or unparsable."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


def load_document(path: Path) -> Any:
    """Parse a JSON or YAML file into plain Python data."""
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_FORMATS:
        raise ConfigurationError(
            f"Unsupported config format {path.suffix!r}; "
            f"expected one of {', '.join(sorted(SUPPORTED_FORMATS))}",
            path,
        )
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file not found: {path}", path) from None
    except OSError as exc:
        raise ConfigurationError(f"Could not read {path}: {exc}", path) from exc
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse {path}: {exc}", path) from exc


def _require_mapping(data: Any, path: Path) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping at top level", path)
    return data


def load_settings(path: Path) -> GlobalSettingsRegistry:
    """Read a GL registry file (``{"GL10": {"params": [...]}, ...}``)."""
    data = _require_mapping(load_document(path), Path(path))
    # Exports from the site editor wrap groups under "globalSettings".
    if isinstance(data.get("globalSettings"), dict):
        data = data["globalSettings"]
    return GlobalSettingsRegistry.from_dict(data)


def load_override(path: Path) -> LocalOverride:
    """Read a block override file; accepts a bare override or one under "localOverrides"."""
    data = _require_mapping(load_document(path), Path(path))
    if isinstance(data.get("localOverrides"), dict):
        data = data["localOverrides"]
    return LocalOverride.from_dict(data)


def config_from_dict(data: dict[str, Any]) -> ResolverConfig:
    """Build a ResolverConfig, ignoring unknown keys."""
    known = {f.name for f in fields(ResolverConfig)}
    values: dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            continue
        if key == "fallback_languages" and isinstance(value, (list, tuple)):
            value = tuple(str(code) for code in value)
        elif key.endswith("_setting") and isinstance(value, (list, tuple)) and len(value) == 2:
            value = (str(value[0]), int(value[1]))
        values[key] = value
    return ResolverConfig(**values)


def load_resolver_config(path: Path) -> ResolverConfig:
    data = _require_mapping(load_document(path), Path(path))
    try:
        return config_from_dict(data)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid resolver config in {path}: {exc}", Path(path)) from exc
