"""Top-level sensor profile — bundles every input of one budget run."""

from pydantic import BaseModel, ConfigDict, Field

from hygiene_budget.config.battery import BatteryConfig, RegulatorConfig
from hygiene_budget.config.loads import (
    CapSensorConfig,
    LedConfig,
    RadioConfig,
    UsageConfig,
)


class SensorProfile(BaseModel):
    """Complete input bundle for one energy budget."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    name: str = Field(default="extended", description="Profile label")
    description: str = Field(
        default="Hygiene sensor with mesh reconnect modelling and bench verification figures",
        description="Human description",
    )
    battery: BatteryConfig = Field(default_factory=BatteryConfig)
    regulator: RegulatorConfig = Field(default_factory=RegulatorConfig)
    usage: UsageConfig = Field(default_factory=UsageConfig)
    led: LedConfig = Field(default_factory=LedConfig)
    capsensor: CapSensorConfig = Field(default_factory=CapSensorConfig)
    radio: RadioConfig = Field(default_factory=RadioConfig)
    include_verification: bool = Field(
        default=True,
        description="Compute the currents a bench supply at the fresh stack voltage should show",
    )
