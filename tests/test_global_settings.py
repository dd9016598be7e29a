"""Tests for the GL settings registry accessors."""

from dna_blocks.models.global_settings import GlobalSettingsRegistry, Parameter, SettingGroup


def _registry() -> GlobalSettingsRegistry:
    return GlobalSettingsRegistry.from_dict({
        "GL02": {"params": [{"value": p} for p in ["a", "b", "c", "d", "e", "#ff0000"]]},
        "GL10": {"params": [{"value": ""}] * 6 + [{"value": "Light"}]},
        "GL11": {"params": [{"value": "true"}]},
        "GL12": [{"value": 0}, {"value": "en,fr"}],
        "BROKEN": "not-a-list",
        "NESTED": {"params": {"0": {"value": "x"}}},
        "NUMERIC": {"params": [{"value": 42}, {"value": "17"}, {"value": "abc"}, {"value": True}]},
    })


def test_get_returns_parameter_by_position():
    param = _registry().get("GL02", 5)
    assert param == Parameter(index=5, value="#ff0000")


def test_bare_list_group_is_accepted():
    assert _registry().get_value("GL12", 1) == "en,fr"


def test_missing_and_out_of_range_lookups_return_none():
    reg = _registry()
    assert reg.get("GL99", 0) is None
    assert reg.get("GL02", 6) is None
    assert reg.get("GL02", -1) is None


def test_malformed_groups_do_not_raise():
    reg = _registry()
    assert reg.get("BROKEN", 0) is None
    assert reg.group("BROKEN") is None
    assert reg.get("NESTED", 0) is None
    assert reg.get_str("BROKEN", 0, "fallback") == "fallback"


def test_non_scalar_parameter_values_are_skipped():
    reg = GlobalSettingsRegistry.from_dict({"GL01": {"params": [{"value": {"x": 1}}, None, 3]}})
    assert reg.get("GL01", 0) is None
    assert reg.get("GL01", 1) is None
    assert reg.get_value("GL01", 2) == 3


def test_typed_accessors_fall_back_to_defaults():
    reg = _registry()
    assert reg.get_str("GL10", 0, "Dark") == "Dark"
    assert reg.get_str("GL10", 6, "Dark") == "Light"
    assert reg.get_flag("GL11", 0) is True
    assert reg.get_flag("GL02", 0, default=True) is True
    assert reg.get_flag("NUMERIC", 3) is True
    assert reg.get_value("NUMERIC", 0) == 42
    assert reg.get_str("NUMERIC", 0, "") == "42"
    assert reg.get_str("NUMERIC", 3, "x") == "x"


def test_non_mapping_input_builds_empty_registry():
    reg = GlobalSettingsRegistry.from_dict(["GL10"])  # type: ignore[arg-type]
    assert reg.group("GL10") is None
    assert reg.get("GL10", 6) is None


def test_setting_group_instances_are_used_as_is():
    group = SettingGroup("GL05", (Parameter(0, "x"),))
    reg = GlobalSettingsRegistry.from_dict({"GL05": group})
    assert reg.group("GL05") is group
    assert reg.get_value("GL05", 0) == "x"
