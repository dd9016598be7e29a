"""Resolve a navbar block and print its render state as JSON.

Usage:
    python -m scripts.resolve_block --settings site.yaml --override nav.json \
        [--type B0102] [--lang fr] [--theme Light] [--prefs PATH]

Without --settings, every field falls back to its literal default.
Without --prefs, the language preference is kept in memory only.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dna_blocks.config_loader import ConfigurationError, load_override
from dna_blocks.models.constants import ThemeMode
from dna_blocks.models.overrides import LocalOverride
from dna_blocks.ui.bootstrap import bootstrap_session
from dna_blocks.ui.storage import JsonPreferenceStore, MemoryPreferenceStore
from dna_blocks.webui.export_state import build_block_state


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve a navbar block")
    parser.add_argument("--settings", type=Path, help="GL settings file (.json/.yaml)")
    parser.add_argument("--override", type=Path, help="Block override file (.json/.yaml)")
    parser.add_argument("--config", type=Path, help="Resolver config file (.json/.yaml)")
    parser.add_argument("--type", default="", help="Block type id, e.g. B0102")
    parser.add_argument("--lang", help="Language to switch to before resolving")
    parser.add_argument("--theme", choices=[m.value for m in ThemeMode])
    parser.add_argument("--prefs", type=Path, help="Preferences JSON file to read/write")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    storage = JsonPreferenceStore(args.prefs) if args.prefs else MemoryPreferenceStore()
    try:
        session = bootstrap_session(args.settings, config_path=args.config, storage=storage)
        local = load_override(args.override) if args.override else LocalOverride()
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.lang:
        session.coordinator.set_language(args.lang)
    if args.theme and session.coordinator.current_theme.value != args.theme:
        session.coordinator.toggle_theme()

    state = build_block_state(session, local, block_type=args.type)
    print(json.dumps(state, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
