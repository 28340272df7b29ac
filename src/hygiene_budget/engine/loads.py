"""Per-subsystem daily energy — LED, capacitive sensor and radio.

Loads wired across the battery use the average stack voltage as their
voltage basis.  Loads behind the regulator use V_reg / η: the regulator
must draw more from the battery than it delivers.
"""

from __future__ import annotations

from hygiene_budget.config.battery import BatteryConfig, RegulatorConfig
from hygiene_budget.config.loads import (
    CapSensorConfig,
    LedConfig,
    RadioConfig,
    UsageConfig,
)
from hygiene_budget.errors import ConfigurationError
from hygiene_budget.models.results import (
    BatteryBudget,
    CapSensorBudget,
    LedBudget,
    RadioBudget,
)

SECONDS_PER_DAY = 86_400


def resistor_current(source_voltage: float, forward_voltage: float, resistance_ohm: float) -> float:
    """Current through a resistor-limited load (A).  May be negative."""
    return (source_voltage - forward_voltage) / resistance_ohm


def regulated_voltage_basis(regulator: RegulatorConfig) -> float:
    """Battery-side volts per amp drawn at the regulator output."""
    return regulator.output_voltage / regulator.efficiency


def duty_cycle_energy(
    events_per_day: float,
    on_time_s: float,
    current_a: float,
    voltage_basis: float,
) -> float:
    """Daily energy of a load that only draws during bounded events (J)."""
    return events_per_day * on_time_s * current_a * voltage_basis


def continuous_energy(current_a: float, regulator: RegulatorConfig) -> float:
    """Daily energy of an always-on load behind the regulator (J)."""
    return SECONDS_PER_DAY * current_a * regulated_voltage_basis(regulator)


def compute_led_budget(
    led: LedConfig,
    usage: UsageConfig,
    battery: BatteryConfig,
    battery_budget: BatteryBudget,
) -> LedBudget:
    """LED currents and daily energy.

    Raises ``ConfigurationError`` when the forward voltage exceeds the
    average stack voltage (negative current).
    """
    average_current = resistor_current(
        battery_budget.average_voltage, led.forward_voltage, led.resistor_ohm,
    )
    if average_current < 0:
        raise ConfigurationError(
            "led.forward_voltage",
            f"{led.forward_voltage} V exceeds the average battery voltage "
            f"({battery_budget.average_voltage:.2f} V); the LED would never light",
        )

    peak_current = resistor_current(
        battery.fresh_voltage * battery.cell_count, led.forward_voltage, led.resistor_ohm,
    )

    daily_energy = duty_cycle_energy(
        usage.dispenses_per_day, led.on_time_s, average_current, battery_budget.average_voltage,
    )

    return LedBudget(
        average_current_a=average_current,
        peak_current_a=peak_current,
        daily_energy_j=daily_energy,
    )


def compute_capsensor_budget(capsensor: CapSensorConfig, regulator: RegulatorConfig) -> CapSensorBudget:
    return CapSensorBudget(daily_energy_j=continuous_energy(capsensor.current_a, regulator))


def compute_radio_budget(
    radio: RadioConfig,
    usage: UsageConfig,
    regulator: RegulatorConfig,
) -> RadioBudget:
    """Radio static, dispense and (optionally) reconnect energy."""
    basis = regulated_voltage_basis(regulator)

    dispense_energy = duty_cycle_energy(
        usage.dispenses_per_day, radio.dispense_time_s, radio.dispense_current_a, basis,
    )
    static_energy = continuous_energy(radio.static_current_a, regulator)

    # Backoff after the connect window is not modelled; each connect costs
    # its full high-current window on top of the static draw.
    connect_energy = None
    if radio.connect is not None:
        c = radio.connect
        connect_energy = duty_cycle_energy(c.connects_per_day, c.time_s, c.current_a, basis)

    return RadioBudget(
        static_daily_energy_j=static_energy,
        dispense_daily_energy_j=dispense_energy,
        connect_daily_energy_j=connect_energy,
    )
