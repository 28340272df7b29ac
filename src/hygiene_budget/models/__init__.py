"""Result models — energy budget output contracts."""

from hygiene_budget.models.results import (
    BatteryBudget,
    CapSensorBudget,
    EnergyBudget,
    LedBudget,
    RadioBudget,
    TotalBudget,
    VerificationBudget,
)

__all__ = [
    "BatteryBudget",
    "CapSensorBudget",
    "EnergyBudget",
    "LedBudget",
    "RadioBudget",
    "TotalBudget",
    "VerificationBudget",
]
