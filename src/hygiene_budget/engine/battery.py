"""Battery energy and regulator capacity.

Pure arithmetic: battery + regulator inputs → BatteryBudget.
"""

from __future__ import annotations

from hygiene_budget.config.battery import BatteryConfig, RegulatorConfig
from hygiene_budget.models.results import BatteryBudget

COULOMBS_PER_MAH = 3.6


def mah_to_coulombs(mah: float) -> float:
    """1 mAh = 3.6 C."""
    return mah * COULOMBS_PER_MAH


def battery_energy(battery: BatteryConfig) -> float:
    """Area under the voltage vs expended-charge curve for the whole stack (J).

    A rectangle up to the dead voltage plus the region between dead and fresh
    voltage, scaled by the discharge curve factor.
    """
    capacity_c = mah_to_coulombs(battery.rated_capacity_mah)
    return battery.cell_count * (
        battery.dead_voltage * capacity_c
        + (battery.fresh_voltage - battery.dead_voltage)
        * battery.discharge_curve_factor
        * capacity_c
    )


def average_battery_voltage(energy_j: float, capacity_c: float) -> float:
    return energy_j / capacity_c


def system_capacity_c(energy_j: float, regulator: RegulatorConfig) -> float:
    """Charge available to the system at the regulator output (C)."""
    return regulator.efficiency * energy_j / regulator.output_voltage


def compute_battery_budget(battery: BatteryConfig, regulator: RegulatorConfig) -> BatteryBudget:
    """Compute stack energy, average voltage and regulated capacity."""
    capacity_c = mah_to_coulombs(battery.rated_capacity_mah)
    energy_j = battery_energy(battery)
    system_c = system_capacity_c(energy_j, regulator)

    return BatteryBudget(
        capacity_c=capacity_c,
        energy_j=energy_j,
        energy_per_cell_j=energy_j / battery.cell_count,
        average_voltage=average_battery_voltage(energy_j, capacity_c),
        system_capacity_c=system_c,
        system_capacity_mah=system_c / COULOMBS_PER_MAH,
    )
