"""Built-in profiles, YAML profile files and partial overrides."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from hygiene_budget.config.loads import RadioConfig
from hygiene_budget.config.profile import SensorProfile

logger = logging.getLogger(__name__)


def _extended() -> SensorProfile:
    return SensorProfile()


def _basic() -> SensorProfile:
    return SensorProfile(
        name="basic",
        description="Hygiene sensor without mesh reconnect modelling or verification figures",
        radio=RadioConfig(connect=None),
        include_verification=False,
    )


_BUILTIN = {
    "extended": _extended,
    "basic": _basic,
}


def list_profiles() -> list[str]:
    """Names of the built-in profiles."""
    return list(_BUILTIN)


def builtin_profile(name: str) -> SensorProfile:
    """Return a built-in profile by name.

    Raises ``KeyError`` for an unknown name.
    """
    try:
        factory = _BUILTIN[name]
    except KeyError:
        raise KeyError(f"unknown profile {name!r}; choose from {', '.join(_BUILTIN)}") from None
    return factory()


def load_profile(path: str | Path) -> SensorProfile:
    """Load a profile from a YAML file.  Missing fields take their defaults."""
    path = Path(path)
    logger.info("Loading profile from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return SensorProfile(**data)


def deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def apply_overrides(profile: SensorProfile, overrides: dict[str, Any]) -> SensorProfile:
    """Return a new, re-validated profile with a partial dict merged on top."""
    data = profile.model_dump()
    deep_merge(data, overrides)
    return SensorProfile(**data)


def set_path(profile: SensorProfile, path: str, value: Any) -> SensorProfile:
    """Return a new profile with one dot-path field replaced.

    ``set_path(p, "radio.connect.connects_per_day", 250)``
    """
    override: dict[str, Any] = {}
    node = override
    parts = path.split(".")
    for part in parts[:-1]:
        node = node.setdefault(part, {})
    node[parts[-1]] = value
    return apply_overrides(profile, override)


def get_path(profile: SensorProfile, path: str) -> Any:
    """Read a dot-path field.  Raises ``AttributeError`` if any step is missing."""
    current: Any = profile
    for part in path.split("."):
        if current is None:
            raise AttributeError(f"{path!r}: {part!r} is not set")
        current = getattr(current, part)
    return current
