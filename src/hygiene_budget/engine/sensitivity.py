"""Sensitivity / tornado analysis on life expectancy.

Vary one input at a time, recompute the budget, measure the swing in life
expectancy (days).

Default sweep set:
  - battery.rated_capacity_mah ± 10%
  - regulator.efficiency ± 10%
  - usage.dispenses_per_day ± 25%
  - capsensor.current_a ± 20%
  - radio.static_current_a ± 20%
  - radio.connect.connects_per_day ± 25%
  - led.resistor_ohm ± 20%
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from hygiene_budget.config.profile import SensorProfile
from hygiene_budget.config.profiles import get_path, set_path
from hygiene_budget.engine.orchestrator import run_budget


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Dot-path into SensorProfile (e.g. 'radio.static_current_a')."""

    base_value: float
    low_value: float
    high_value: float

    life_days_at_low: float
    """Life expectancy when param = low_value."""

    life_days_at_high: float
    """Life expectancy when param = high_value."""

    delta_days: float
    """Total swing width, abs(life_days_at_high − life_days_at_low)."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    base_life_days: float
    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta_days (descending)."""


@dataclass(frozen=True)
class SweepPoint:
    """Life expectancy at one value of a swept parameter."""

    value: float
    life_days: float
    daily_energy_j: float


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Battery capacity", "battery.rated_capacity_mah", -0.10, 0.10),
    ("Regulator efficiency", "regulator.efficiency", -0.10, 0.10),
    ("Dispenses per day", "usage.dispenses_per_day", -0.25, 0.25),
    ("Capacitive sensor current", "capsensor.current_a", -0.20, 0.20),
    ("Radio static current", "radio.static_current_a", -0.20, 0.20),
    ("Radio connects per day", "radio.connect.connects_per_day", -0.25, 0.25),
    ("LED resistor", "led.resistor_ohm", -0.20, 0.20),
]


def _with_value(profile: SensorProfile, path: str, value: float) -> SensorProfile:
    """Copy of ``profile`` with ``path`` set; int fields are rounded first."""
    current = get_path(profile, path)
    if isinstance(current, int) and not isinstance(current, bool):
        value = round(value)
    return set_path(profile, path, value)


def _clamp_to_bounds(profile: SensorProfile, path: str, value: float) -> float:
    """Pull ``value`` back inside the ``ge``/``le`` limits of the field at ``path``."""
    parent_path, _, leaf = path.rpartition(".")
    parent = get_path(profile, parent_path) if parent_path else profile
    info = type(parent).model_fields[leaf]
    for constraint in info.metadata:
        lower = getattr(constraint, "ge", None)
        upper = getattr(constraint, "le", None)
        if lower is not None:
            value = max(value, lower)
        if upper is not None:
            value = min(value, upper)
    return value


def _life_days(profile: SensorProfile) -> float:
    return run_budget(profile).total.life_days


def run_sensitivity(
    profile: SensorProfile,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> SensitivityResult:
    """Run one-at-a-time sensitivity analysis.

    Parameters
    ----------
    profile : SensorProfile
        Base profile.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.  Paths that do not
        exist in ``profile`` (e.g. connect fields on the basic profile) are
        skipped.  Swept values are clamped to the field's declared bounds.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by life-expectancy impact.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base_life = _life_days(profile)
    bars: list[TornadoBar] = []

    for name, path, low_pct, high_pct in sweeps:
        try:
            base_val = float(get_path(profile, path))
        except AttributeError:
            continue

        # Bounded fields (efficiency <= 1) stop at their limit
        low_val = _clamp_to_bounds(profile, path, base_val * (1 + low_pct))
        high_val = _clamp_to_bounds(profile, path, base_val * (1 + high_pct))

        life_low = _life_days(_with_value(profile, path, low_val))
        life_high = _life_days(_with_value(profile, path, high_val))

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=base_val,
            low_value=low_val,
            high_value=high_val,
            life_days_at_low=life_low,
            life_days_at_high=life_high,
            delta_days=abs(life_high - life_low),
        ))

    # Largest swing first
    bars.sort(key=lambda b: b.delta_days, reverse=True)

    return SensitivityResult(base_life_days=base_life, bars=bars)


def sweep_parameter(
    profile: SensorProfile,
    path: str,
    start: float,
    stop: float,
    num: int = 11,
) -> list[SweepPoint]:
    """Life expectancy at ``num`` evenly spaced values of one parameter."""
    points: list[SweepPoint] = []
    for value in np.linspace(start, stop, num):
        budget = run_budget(_with_value(profile, path, float(value)))
        points.append(SweepPoint(
            value=float(value),
            life_days=budget.total.life_days,
            daily_energy_j=budget.total.daily_energy_j,
        ))
    return points
