"""Plain-text report — one titled section per subsystem.

Converts an ``EnergyBudget`` into the bullet-point report printed by the
command line.  Display precision:

  - 0 decimals: joules, coulombs, mAh, µA, radio mA, shares
  - 1 decimal:  volts, seconds, shape factor, LED and connect mA
  - 2 decimals: average battery voltage, years, verification figures
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from hygiene_budget.engine.battery import COULOMBS_PER_MAH
from hygiene_budget.models.results import EnergyBudget
from hygiene_budget.report.headers import section_header


@dataclass
class ReportSection:
    """One titled block of the report."""

    title: str
    lines: list[str] = field(default_factory=list)


SHARE_LABELS: list[tuple[str, str]] = [
    ("led", "LED"),
    ("capsensor", "Capacitive sensor"),
    ("radio_static", "Radio static"),
    ("radio_connect", "Radio connect/disconnect"),
    ("radio_dispense", "Radio active"),
]


def _battery_section(budget: EnergyBudget) -> ReportSection:
    p = budget.profile
    b = budget.battery
    cells = p.battery.cell_count
    return ReportSection("Battery and regulator", [
        f"* Each cell contributes {b.energy_per_cell_j:.0f} joules, "
        f"sourcing {b.capacity_c:.0f} coulombs "
        f"({p.battery.rated_capacity_mah:.0f} mAh).",
        f"* Total battery energy is {b.energy_j:.0f} joules from {cells} cells.",
        f"* Batteries drain from {p.battery.fresh_voltage:.1f} volts to "
        f"{p.battery.dead_voltage:.1f} volts with a shape factor of "
        f"{p.battery.discharge_curve_factor:.1f}.",
        f"* Average battery voltage for {cells} cells in series is "
        f"{b.average_voltage:.2f} volts.",
        f"* System battery capacity at {p.regulator.output_voltage:g} volts is "
        f"{b.system_capacity_c:.0f} coulombs "
        f"({b.system_capacity_c / COULOMBS_PER_MAH:.0f} mAh).",
    ])


def _led_section(budget: EnergyBudget) -> ReportSection:
    p = budget.profile
    return ReportSection("LEDs", [
        f"* Average LED current is {budget.led.average_current_a * 1000:.1f} mA "
        f"for {p.led.on_time_s:.1f} seconds, "
        f"{p.usage.dispenses_per_day:.0f} times a day.",
        f"* Daily LED energy is {budget.led.daily_energy_j:.0f} joules.",
    ])


def _capsensor_section(budget: EnergyBudget) -> ReportSection:
    return ReportSection("Capacitive sensor", [
        f"* Daily capacitive sensor energy is {budget.capsensor.daily_energy_j:.0f} joules, "
        f"drawing {budget.profile.capsensor.current_a * 1e6:.0f} uA continuously.",
    ])


def _radio_section(budget: EnergyBudget) -> ReportSection:
    p = budget.profile
    r = budget.radio
    lines = [
        f"* Daily radio static energy is {r.static_daily_energy_j:.0f} joules, "
        f"drawing {p.radio.static_current_a * 1e6:.0f} uA continuously.",
        f"* Daily radio dynamic energy is {r.dispense_daily_energy_j:.0f} joules, "
        f"drawing {p.radio.dispense_current_a * 1e3:.0f} mA "
        f"{p.usage.dispenses_per_day:.0f} times a day.",
    ]
    if r.connect_daily_energy_j is not None and p.radio.connect is not None:
        c = p.radio.connect
        lines.append(
            f"* Daily radio connection energy is {r.connect_daily_energy_j:.0f} joules. "
            f"The radio connects and\n  disconnects {c.connects_per_day:.0f} times each day, drawing "
            f"{c.current_a * 1e3:.1f} mA before the "
            f"{c.time_s:.1f}\n  startup period expires."
        )
    return ReportSection("Radio", lines)


def _total_section(budget: EnergyBudget) -> ReportSection:
    t = budget.total
    lines = [f"* Total daily energy expenditure is {t.daily_energy_j:.0f} joules"]
    for key, label in SHARE_LABELS:
        if key in t.shares_pct:
            lines.append(f"* {label} share is {t.shares_pct[key]:.0f}%")
    lines.append(
        f"* Life expectancy is {t.life_days:.0f} days ({t.life_years:.2f} years)."
    )
    return ReportSection("Total", lines)


def _verification_section(budget: EnergyBudget) -> ReportSection:
    v = budget.verification
    return ReportSection("Verification", [
        f"* Static current draw from a {v.source_voltage:.2f} volt source is "
        f"{v.static_current_a * 1e6:.2f} uA.",
        f"* Current draw from a {v.source_voltage:.2f} volt source "
        f"during a dispense event is {v.dispense_current_a * 1e3:.2f} mA.",
    ])


def build_report(budget: EnergyBudget) -> list[ReportSection]:
    """Report sections in fixed order; Verification only if it was computed."""
    sections = [
        _battery_section(budget),
        _led_section(budget),
        _capsensor_section(budget),
        _radio_section(budget),
        _total_section(budget),
    ]
    if budget.verification is not None:
        sections.append(_verification_section(budget))
    return sections


def render_report(sections: list[ReportSection]) -> str:
    """Each section as blank line, header, blank line, bullets; one trailing blank line."""
    out: list[str] = []
    for section in sections:
        out.append("")
        out.append(section_header(section.title))
        out.append("")
        out.extend(section.lines)
    out.append("")
    return "\n".join(out) + "\n"


def write_report(budget: EnergyBudget, stream: TextIO | None = None) -> None:
    """Render ``budget`` and write it to ``stream`` (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    stream.write(render_report(build_report(budget)))
