"""Daily total, shares, life expectancy and bench verification currents."""

from __future__ import annotations

from hygiene_budget.config.battery import BatteryConfig, RegulatorConfig
from hygiene_budget.config.loads import RadioConfig
from hygiene_budget.engine.loads import SECONDS_PER_DAY
from hygiene_budget.errors import ConfigurationError
from hygiene_budget.models.results import (
    CapSensorBudget,
    LedBudget,
    RadioBudget,
    TotalBudget,
    VerificationBudget,
)

DAYS_PER_YEAR = 365


def daily_components(
    led: LedBudget,
    capsensor: CapSensorBudget,
    radio: RadioBudget,
) -> dict[str, float]:
    """Daily energy by component, in summation order."""
    components = {
        "led": led.daily_energy_j,
        "capsensor": capsensor.daily_energy_j,
        "radio_dispense": radio.dispense_daily_energy_j,
        "radio_static": radio.static_daily_energy_j,
    }
    if radio.connect_daily_energy_j is not None:
        components["radio_connect"] = radio.connect_daily_energy_j
    return components


def compute_total_budget(components: dict[str, float], battery_energy_j: float) -> TotalBudget:
    """Total daily energy and life expectancy.

    Raises ``ConfigurationError`` when nothing draws any energy.
    """
    total = sum(components.values())
    if total <= 0:
        raise ConfigurationError(
            "total.daily_energy_j",
            "total daily energy is zero; every load is disabled",
        )

    life_days = battery_energy_j / total

    return TotalBudget(
        daily_energy_j=total,
        components_j=dict(components),
        shares_pct={key: value / total * 100 for key, value in components.items()},
        life_days=life_days,
        life_years=life_days / DAYS_PER_YEAR,
    )


def compute_verification(
    battery: BatteryConfig,
    regulator: RegulatorConfig,
    radio: RadioConfig,
    led: LedBudget,
    capsensor: CapSensorBudget,
    radio_budget: RadioBudget,
) -> VerificationBudget:
    """Currents a bench supply set to the fresh stack voltage should read."""
    source_voltage = battery.fresh_voltage * battery.cell_count

    static_current = (
        (radio_budget.static_daily_energy_j + capsensor.daily_energy_j)
        / (source_voltage * SECONDS_PER_DAY)
    )
    dispense_current = led.peak_current_a + (
        radio.dispense_current_a * regulator.output_voltage
        / (source_voltage * regulator.efficiency)
    )

    return VerificationBudget(
        source_voltage=source_voltage,
        static_current_a=static_current,
        dispense_current_a=dispense_current,
    )
