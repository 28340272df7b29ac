"""Engine — pure energy budget computation."""

from hygiene_budget.engine.battery import compute_battery_budget
from hygiene_budget.engine.loads import (
    compute_capsensor_budget,
    compute_led_budget,
    compute_radio_budget,
)
from hygiene_budget.engine.totals import compute_total_budget, compute_verification
from hygiene_budget.engine.orchestrator import run_budget
from hygiene_budget.engine.sensitivity import run_sensitivity, sweep_parameter

__all__ = [
    "compute_battery_budget",
    "compute_led_budget",
    "compute_capsensor_budget",
    "compute_radio_budget",
    "compute_total_budget",
    "compute_verification",
    "run_budget",
    "run_sensitivity",
    "sweep_parameter",
]
