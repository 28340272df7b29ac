"""Tests for the report renderer — literal text output."""

from __future__ import annotations

import io

from hygiene_budget.config.profiles import set_path
from hygiene_budget.engine.orchestrator import run_budget
from hygiene_budget.models.results import EnergyBudget
from hygiene_budget.report import (
    ReportSection,
    build_report,
    render_report,
    section_header,
    write_report,
)


# ═══════════════════════════════════════════════════════════════════════════
# Section headers
# ═══════════════════════════════════════════════════════════════════════════

def test_header_padding():
    # 2 × 31 + 4 ≥ 66
    assert section_header("LEDs") == "-" * 31 + " LEDs " + "-" * 31


def test_header_odd_title():
    # "Battery and regulator" is 21 chars → 23 dashes each side
    assert section_header("Battery and regulator") == "-" * 23 + " Battery and regulator " + "-" * 23


def test_header_long_title_keeps_single_dashes():
    title = "x" * 80
    assert section_header(title) == f"- {title} -"


def test_header_custom_width():
    assert section_header("ab", width=10) == "---- ab ----"


# ═══════════════════════════════════════════════════════════════════════════
# Sections
# ═══════════════════════════════════════════════════════════════════════════

def test_section_order(budget: EnergyBudget):
    titles = [s.title for s in build_report(budget)]
    assert titles == [
        "Battery and regulator", "LEDs", "Capacitive sensor", "Radio", "Total", "Verification",
    ]


def test_basic_section_order(basic_budget: EnergyBudget):
    titles = [s.title for s in build_report(basic_budget)]
    assert titles[-1] == "Total"
    assert "Verification" not in titles


def test_battery_lines(budget: EnergyBudget):
    lines = build_report(budget)[0].lines
    assert lines[0] == "* Each cell contributes 11799 joules, sourcing 10260 coulombs (2850 mAh)."
    assert lines[1] == "* Total battery energy is 47196 joules from 4 cells."
    assert lines[2] == "* Batteries drain from 1.5 volts to 0.8 volts with a shape factor of 0.5."
    assert lines[3] == "* Average battery voltage for 4 cells in series is 4.60 volts."
    assert lines[4].startswith("* System battery capacity at 2 volts is 21238 coulombs (")


def test_led_lines(budget: EnergyBudget):
    lines = build_report(budget)[1].lines
    assert lines[0] == "* Average LED current is 12.5 mA for 0.7 seconds, 200 times a day."
    assert lines[1] == "* Daily LED energy is 8 joules."


def test_capsensor_line(budget: EnergyBudget):
    assert build_report(budget)[2].lines == [
        "* Daily capacitive sensor energy is 192 joules, drawing 1000 uA continuously.",
    ]


def test_radio_lines(budget: EnergyBudget):
    lines = build_report(budget)[3].lines
    assert lines[0] == "* Daily radio static energy is 38 joules, drawing 200 uA continuously."
    assert lines[1] == "* Daily radio dynamic energy is 2 joules, drawing 5 mA 200 times a day."
    assert lines[2] == (
        "* Daily radio connection energy is 78 joules. The radio connects and\n"
        "  disconnects 500 times each day, drawing 20.0 mA before the 3.5\n"
        "  startup period expires."
    )


def test_basic_radio_has_no_connect_line(basic_budget: EnergyBudget):
    lines = build_report(basic_budget)[3].lines
    assert len(lines) == 2
    assert not any("connection" in line for line in lines)


def test_large_counts_print_as_integers(extended_profile):
    profile = set_path(extended_profile, "usage.dispenses_per_day", 1_000_000)
    profile = set_path(profile, "radio.connect.connects_per_day", 2_000_000)
    lines = build_report(run_budget(profile))[3].lines
    assert "1000000 times a day." in lines[1]
    assert "disconnects 2000000 times each day" in lines[2]
    assert "e+06" not in "".join(lines)


def test_total_lines(budget: EnergyBudget):
    assert build_report(budget)[4].lines == [
        "* Total daily energy expenditure is 318 joules",
        "* LED share is 3%",
        "* Capacitive sensor share is 60%",
        "* Radio static share is 12%",
        "* Radio connect/disconnect share is 24%",
        "* Radio active share is 0%",
        "* Life expectancy is 149 days (0.41 years).",
    ]


def test_basic_total_lines(basic_budget: EnergyBudget):
    assert build_report(basic_budget)[4].lines == [
        "* Total daily energy expenditure is 240 joules",
        "* LED share is 3%",
        "* Capacitive sensor share is 80%",
        "* Radio static share is 16%",
        "* Radio active share is 1%",
        "* Life expectancy is 197 days (0.54 years).",
    ]


def test_verification_lines(budget: EnergyBudget):
    assert build_report(budget)[5].lines == [
        "* Static current draw from a 6.00 volt source is 444.44 uA.",
        "* Current draw from a 6.00 volt source during a dispense event is 21.35 mA.",
    ]


# ═══════════════════════════════════════════════════════════════════════════
# Rendering
# ═══════════════════════════════════════════════════════════════════════════

def test_render_layout():
    text = render_report([ReportSection("A", ["* one", "* two"]), ReportSection("B", ["* three"])])
    assert text == (
        "\n" + section_header("A") + "\n\n* one\n* two\n"
        "\n" + section_header("B") + "\n\n* three\n"
        "\n"
    )


def test_write_report_to_stream(budget: EnergyBudget):
    buf = io.StringIO()
    write_report(budget, buf)
    text = buf.getvalue()
    assert text == render_report(build_report(budget))
    assert text.startswith("\n" + section_header("Battery and regulator") + "\n\n")
    assert text.endswith("mA.\n\n")


def test_write_report_defaults_to_stdout(budget: EnergyBudget, capsys):
    write_report(budget)
    assert "Life expectancy is 149 days" in capsys.readouterr().out
