"""Configuration models — every input of an energy budget run."""

from hygiene_budget.config.battery import BatteryConfig, RegulatorConfig
from hygiene_budget.config.loads import (
    CapSensorConfig,
    LedConfig,
    RadioConfig,
    RadioConnectConfig,
    UsageConfig,
)
from hygiene_budget.config.profile import SensorProfile
from hygiene_budget.config.profiles import (
    apply_overrides,
    builtin_profile,
    list_profiles,
    load_profile,
)

__all__ = [
    "BatteryConfig",
    "RegulatorConfig",
    "UsageConfig",
    "LedConfig",
    "CapSensorConfig",
    "RadioConnectConfig",
    "RadioConfig",
    "SensorProfile",
    "apply_overrides",
    "builtin_profile",
    "list_profiles",
    "load_profile",
]
