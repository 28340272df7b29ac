"""Tests for config/profiles.py — built-in profiles, YAML files, overrides."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from hygiene_budget.config import SensorProfile
from hygiene_budget.config.profiles import (
    apply_overrides,
    builtin_profile,
    deep_merge,
    get_path,
    list_profiles,
    load_profile,
    set_path,
)

SCENARIOS = Path(__file__).parent.parent / "scenarios"


def test_list_profiles():
    assert list_profiles() == ["extended", "basic"]


def test_builtin_extended_matches_fixture(extended_profile: SensorProfile):
    p = builtin_profile("extended")
    assert p.battery == extended_profile.battery
    assert p.radio == extended_profile.radio
    assert p.include_verification


def test_builtin_basic():
    p = builtin_profile("basic")
    assert p.radio.connect is None
    assert p.include_verification is False
    # Shares every other constant with the extended profile
    assert p.battery == builtin_profile("extended").battery


def test_unknown_profile():
    with pytest.raises(KeyError, match="unknown profile"):
        builtin_profile("solar")


@pytest.mark.parametrize("name", ["extended", "basic"])
def test_yaml_profile_matches_builtin(name: str):
    """The YAML copies in scenarios/ carry the same constants as the built-ins."""
    loaded = load_profile(SCENARIOS / f"{name}.yaml")
    assert loaded == builtin_profile(name)


def test_yaml_partial_profile(tmp_path: Path):
    path = tmp_path / "lithium.yaml"
    path.write_text(
        "name: lithium\n"
        "battery:\n"
        "  discharge_curve_factor: 0.95\n"
        "  fresh_voltage: 1.8\n"
        "  dead_voltage: 1.2\n"
    )
    p = load_profile(path)
    assert p.name == "lithium"
    assert p.battery.discharge_curve_factor == 0.95
    assert p.battery.rated_capacity_mah == 2_850
    assert p.led.resistor_ohm == 200


def test_yaml_invalid_profile(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("regulator:\n  efficiency: 1.5\n")
    with pytest.raises(ValidationError):
        load_profile(path)


def test_empty_yaml_gives_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_profile(path) == SensorProfile()


def test_deep_merge():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    deep_merge(base, {"a": {"b": 10}, "e": 4})
    assert base == {"a": {"b": 10, "c": 2}, "d": 3, "e": 4}


def test_apply_overrides_returns_new_profile(extended_profile: SensorProfile):
    p = apply_overrides(extended_profile, {"radio": {"static_current_a": 0.0001}})
    assert p.radio.static_current_a == 0.0001
    assert p.radio.connect == extended_profile.radio.connect
    assert extended_profile.radio.static_current_a == 0.0002


def test_apply_overrides_revalidates(extended_profile: SensorProfile):
    with pytest.raises(ValidationError):
        apply_overrides(extended_profile, {"battery": {"dead_voltage": 2.0}})


def test_overrides_enable_connect_on_basic(basic_profile: SensorProfile):
    p = apply_overrides(basic_profile, {"radio": {"connect": {"connects_per_day": 10}}})
    assert p.radio.connect is not None
    assert p.radio.connect.connects_per_day == 10
    assert p.radio.connect.time_s == 3.5


def test_set_and_get_path(extended_profile: SensorProfile):
    p = set_path(extended_profile, "radio.connect.connects_per_day", 250)
    assert get_path(p, "radio.connect.connects_per_day") == 250
    assert get_path(extended_profile, "radio.connect.connects_per_day") == 500


def test_get_path_through_missing_connect(basic_profile: SensorProfile):
    with pytest.raises(AttributeError):
        get_path(basic_profile, "radio.connect.current_a")
