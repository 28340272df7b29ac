"""Shared test fixtures — the two built-in profiles and their budgets."""

from __future__ import annotations

import pytest

from hygiene_budget.config import (
    BatteryConfig,
    CapSensorConfig,
    LedConfig,
    RadioConfig,
    RadioConnectConfig,
    RegulatorConfig,
    SensorProfile,
    UsageConfig,
)
from hygiene_budget.engine.orchestrator import run_budget
from hygiene_budget.models.results import EnergyBudget


@pytest.fixture
def battery() -> BatteryConfig:
    return BatteryConfig(
        rated_capacity_mah=2_850,
        cell_count=4,
        discharge_curve_factor=0.5,
        fresh_voltage=1.5,
        dead_voltage=0.8,
    )


@pytest.fixture
def regulator() -> RegulatorConfig:
    return RegulatorConfig(efficiency=0.9, output_voltage=2.0)


@pytest.fixture
def usage() -> UsageConfig:
    return UsageConfig(dispenses_per_day=200)


@pytest.fixture
def led() -> LedConfig:
    return LedConfig(on_time_s=0.7, forward_voltage=2.1, resistor_ohm=200)


@pytest.fixture
def capsensor() -> CapSensorConfig:
    return CapSensorConfig(current_a=0.001)


@pytest.fixture
def radio() -> RadioConfig:
    return RadioConfig(
        static_current_a=0.0002,
        dispense_current_a=0.005,
        dispense_time_s=0.7,
        connect=RadioConnectConfig(current_a=0.02, time_s=3.5, connects_per_day=500),
    )


@pytest.fixture
def extended_profile(
    battery: BatteryConfig,
    regulator: RegulatorConfig,
    usage: UsageConfig,
    led: LedConfig,
    capsensor: CapSensorConfig,
    radio: RadioConfig,
) -> SensorProfile:
    return SensorProfile(
        name="extended",
        battery=battery,
        regulator=regulator,
        usage=usage,
        led=led,
        capsensor=capsensor,
        radio=radio,
        include_verification=True,
    )


@pytest.fixture
def basic_profile(extended_profile: SensorProfile) -> SensorProfile:
    return extended_profile.model_copy(update={
        "name": "basic",
        "radio": extended_profile.radio.model_copy(update={"connect": None}),
        "include_verification": False,
    })


@pytest.fixture
def budget(extended_profile: SensorProfile) -> EnergyBudget:
    return run_budget(extended_profile)


@pytest.fixture
def basic_budget(basic_profile: SensorProfile) -> EnergyBudget:
    return run_budget(basic_profile)
