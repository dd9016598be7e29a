"""Export resolved block and site state as JSON-ready payloads."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

from dna_blocks.engine.languages import dropdown_options, selector_options
from dna_blocks.engine.resolver_config import ResolverConfig
from dna_blocks.models.overrides import LocalOverride
from dna_blocks.models.view_model import ResolvedViewModel
from dna_blocks.ui.bootstrap import SiteSession
from dna_blocks.ui.coordinator import Coordinator


def view_model_payload(
    vm: ResolvedViewModel,
    current_language: str,
    config: ResolverConfig | None = None,
) -> dict[str, Any]:
    return {
        "height": int(vm.height),
        "background_color": vm.background_color,
        "text_color": vm.text_color,
        "glass_effect": bool(vm.glass_effect),
        "border_color": vm.border_color,
        "padding_x": int(vm.padding_x),
        "width": vm.width,
        "is_sticky": bool(vm.is_sticky),
        "is_dark": bool(vm.is_dark),
        "header": vm.header,
        "links": [
            {"label": link.label, "url": link.url, "anchor": link.anchor}
            for link in vm.links
        ],
        "style": vm.css_style(),
        "dropdown": {
            "style": vm.dropdown_style(),
            "options": [
                asdict(opt)
                for opt in dropdown_options(vm.available_languages, current_language, config)
            ],
        },
    }


def coordinator_payload(
    coordinator: Coordinator,
    config: ResolverConfig | None = None,
) -> dict[str, Any]:
    return {
        "language": coordinator.current_language,
        "theme": coordinator.current_theme.value,
        "selector": [asdict(opt) for opt in selector_options(coordinator.current_language, config)],
    }


def build_block_state(
    session: SiteSession,
    local: LocalOverride,
    block_type: str = "",
) -> dict[str, Any]:
    """Snapshot of site state plus one resolved block."""
    vm = session.render_block(local, block_type)
    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "site": coordinator_payload(session.coordinator, session.config),
        "block": {
            "type": block_type,
            **view_model_payload(vm, session.coordinator.current_language, session.config),
        },
    }
