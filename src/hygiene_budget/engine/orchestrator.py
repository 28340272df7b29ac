"""Energy budget orchestrator — one synchronous pass over the formula chain.

    battery → LED / capsensor / radio → total → verification

Entry point: ``run_budget(profile)``.
"""

from __future__ import annotations

import logging

from hygiene_budget.config.profile import SensorProfile
from hygiene_budget.engine.battery import compute_battery_budget
from hygiene_budget.engine.loads import (
    compute_capsensor_budget,
    compute_led_budget,
    compute_radio_budget,
)
from hygiene_budget.engine.totals import (
    compute_total_budget,
    compute_verification,
    daily_components,
)
from hygiene_budget.models.results import EnergyBudget

logger = logging.getLogger(__name__)


def run_budget(profile: SensorProfile) -> EnergyBudget:
    """Compute every derived quantity for ``profile``.

    Raises ``ConfigurationError`` if a derived quantity is physically invalid.
    """
    logger.info("Computing energy budget for profile %r", profile.name)

    battery = compute_battery_budget(profile.battery, profile.regulator)
    logger.debug(
        "Battery energy %.1f J, average voltage %.3f V",
        battery.energy_j, battery.average_voltage,
    )

    led = compute_led_budget(profile.led, profile.usage, profile.battery, battery)
    capsensor = compute_capsensor_budget(profile.capsensor, profile.regulator)
    radio = compute_radio_budget(profile.radio, profile.usage, profile.regulator)

    total = compute_total_budget(daily_components(led, capsensor, radio), battery.energy_j)
    logger.debug(
        "Total daily energy %.3f J, life expectancy %.1f days",
        total.daily_energy_j, total.life_days,
    )

    verification = None
    if profile.include_verification:
        verification = compute_verification(
            profile.battery, profile.regulator, profile.radio, led, capsensor, radio,
        )

    return EnergyBudget(
        profile=profile,
        battery=battery,
        led=led,
        capsensor=capsensor,
        radio=radio,
        total=total,
        verification=verification,
    )
