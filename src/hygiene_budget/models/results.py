"""Result types — the contract between engine, report renderer and API.

All values are unrounded and in SI units (J, C, A, V, days).  Display
precision is applied only when a report is rendered.
"""

from __future__ import annotations

from pydantic import BaseModel

from hygiene_budget.config.profile import SensorProfile


# ═══════════════════════════════════════════════════════════════════════════
# Battery & regulator
# ═══════════════════════════════════════════════════════════════════════════

class BatteryBudget(BaseModel):
    """Energy stored in the stack and charge available at the regulator output."""

    capacity_c: float
    """Rated single-cell capacity in coulombs = mAh × 3.6."""

    energy_j: float
    """Energy of the whole stack.
    = cells × (dead × Q + (fresh − dead) × curve_factor × Q)."""

    energy_per_cell_j: float
    """energy_j / cells."""

    average_voltage: float
    """Average stack voltage = energy_j / capacity_c.
    Cells are in series, so the single-cell charge applies."""

    system_capacity_c: float
    """Charge available at the regulator output = η × energy_j / V_reg."""

    system_capacity_mah: float
    """system_capacity_c / 3.6."""


# ═══════════════════════════════════════════════════════════════════════════
# Loads
# ═══════════════════════════════════════════════════════════════════════════

class LedBudget(BaseModel):
    """Indicator LED, connected directly to the batteries."""

    average_current_a: float
    """(average stack voltage − forward voltage) / R."""

    peak_current_a: float
    """(fresh cell voltage × cells − forward voltage) / R, as seen on a fresh stack."""

    daily_energy_j: float
    """dispenses/day × on-time × average current × average stack voltage."""


class CapSensorBudget(BaseModel):
    """Capacitive touch sensor behind the regulator."""

    daily_energy_j: float
    """86400 × current × V_reg / η."""


class RadioBudget(BaseModel):
    """Mesh radio behind the regulator."""

    static_daily_energy_j: float
    """Always-on draw: 86400 × static current × V_reg / η."""

    dispense_daily_energy_j: float
    """Dispense bursts: dispenses/day × burst time × burst current × V_reg / η."""

    connect_daily_energy_j: float | None = None
    """Reconnect efforts: connects/day × connect time × connect current × V_reg / η.
    None when the profile does not model connects."""


# ═══════════════════════════════════════════════════════════════════════════
# Totals & verification
# ═══════════════════════════════════════════════════════════════════════════

class TotalBudget(BaseModel):
    """Daily total, per-component shares and life expectancy."""

    daily_energy_j: float
    """Sum of every component's daily energy."""

    components_j: dict[str, float]
    """Daily energy by component key, in summation order."""

    shares_pct: dict[str, float]
    """component / total × 100, same keys as ``components_j``."""

    life_days: float
    """battery energy / total daily energy."""

    life_years: float
    """life_days / 365."""


class VerificationBudget(BaseModel):
    """Currents a bench supply at the fresh stack voltage should show."""

    source_voltage: float
    """Fresh cell voltage × cells."""

    static_current_a: float
    """(radio static + capsensor daily energy) / (source voltage × 86400)."""

    dispense_current_a: float
    """Peak LED current + radio dispense current referred through the regulator."""


class EnergyBudget(BaseModel):
    """Complete output of one budget run."""

    profile: SensorProfile
    battery: BatteryBudget
    led: LedBudget
    capsensor: CapSensorBudget
    radio: RadioBudget
    total: TotalBudget
    verification: VerificationBudget | None = None
