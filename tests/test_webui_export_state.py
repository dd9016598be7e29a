import json

from dna_blocks.models.constants import GLASS_VARIANT, LANGUAGE_STORAGE_KEY, ThemeMode
from dna_blocks.models.overrides import LocalOverride
from dna_blocks.ui.bootstrap import bootstrap_session, default_preferences_path
from dna_blocks.ui.storage import MemoryPreferenceStore
from dna_blocks.webui.export_state import build_block_state


def _settings_file(tmp_path):
    path = tmp_path / "site.json"
    path.write_text(json.dumps({
        "GL02": {"params": [{"value": ""}] * 5 + [{"value": "#334455"}]},
        "GL10": {"params": [{"value": ""}] * 6 + [{"value": "Light"}]},
        "GL12": {"params": [{"value": ""}, {"value": "en,fr"}]},
    }))
    return path


def test_build_block_state_shape(tmp_path):
    store = MemoryPreferenceStore({LANGUAGE_STORAGE_KEY: "fr"})
    session = bootstrap_session(_settings_file(tmp_path), storage=store)
    local = LocalOverride(data={"header": "Home", "header_fr": "Accueil"})

    state = build_block_state(session, local, block_type=GLASS_VARIANT)

    assert "generated_at" in state
    assert state["site"]["language"] == "fr"
    assert state["site"]["theme"] == "Light"
    assert len(state["site"]["selector"]) == 9

    block = state["block"]
    assert block["type"] == GLASS_VARIANT
    assert block["header"] == "Accueil"
    assert block["background_color"] == "rgba(255,255,255,0.2)"
    assert block["style"]["borderBottom"] == "1px solid #33445520"
    assert [o["code"] for o in block["dropdown"]["options"]] == ["en", "fr"]
    assert [o["is_active"] for o in block["dropdown"]["options"]] == [False, True]
    json.dumps(state)


def test_session_follows_coordinator_actions(tmp_path):
    session = bootstrap_session(_settings_file(tmp_path), storage=MemoryPreferenceStore())
    local = LocalOverride(data={"header": "Home", "header_de": "Start"})

    assert session.render_block(local).header == "Home"
    session.coordinator.set_language("de")
    assert session.coordinator.toggle_theme() is ThemeMode.DARK
    vm = session.render_block(local, GLASS_VARIANT)
    assert vm.header == "Start"
    assert vm.background_color == "rgba(0,0,0,0.2)"


def test_bootstrap_without_files_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("DNA_PREFS_PATH", str(tmp_path / "prefs.json"))
    session = bootstrap_session()
    assert session.coordinator.current_theme is ThemeMode.DARK
    assert session.coordinator.current_language == "en"

    session.coordinator.set_language("it")
    assert (tmp_path / "prefs.json").exists()


def test_default_preferences_path(monkeypatch, tmp_path):
    monkeypatch.delenv("DNA_PREFS_PATH", raising=False)
    assert default_preferences_path().name == "prefs.json"
    monkeypatch.setenv("DNA_PREFS_PATH", str(tmp_path / "p.json"))
    assert default_preferences_path() == tmp_path / "p.json"
