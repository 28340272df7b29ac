"""Subsystem loads — LED indicator, capacitive sensor and mesh radio."""

from pydantic import BaseModel, ConfigDict, Field


class UsageConfig(BaseModel):
    """How often the dispenser is used.  Shared by every dispense-driven load."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    dispenses_per_day: float = Field(default=200.0, ge=0, description="Dispense events per day")


class LedConfig(BaseModel):
    """Indicator LED wired straight across the battery stack through a resistor."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    on_time_s: float = Field(default=0.7, ge=0, description="LED on-time per dispense (s)")
    forward_voltage: float = Field(default=2.1, gt=0, description="LED forward voltage (V)")
    resistor_ohm: float = Field(default=200.0, gt=0, description="Series resistor (Ω)")


class CapSensorConfig(BaseModel):
    """Capacitive touch sensor, powered from the regulator.

    At 2 V the sensor runs a 16 MHz clock and sleeps 16 ms between 40 ms
    measurements (56 ms sample period).
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    current_a: float = Field(default=0.001, ge=0, description="Average continuous current (A)")


class RadioConnectConfig(BaseModel):
    """Mesh (re)connection effort.

    The radio and the processor ramp up while trying to join the mesh.  After
    ``time_s`` the device backs off and retries much less often; only the
    cost of the initial effort is counted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    current_a: float = Field(default=0.02, ge=0, description="Current during a connect effort (A)")
    time_s: float = Field(default=3.5, ge=0, description="High-current time before backoff (s)")
    connects_per_day: float = Field(default=500.0, ge=0, description="Spontaneous mesh disconnects per day")


class RadioConfig(BaseModel):
    """Mesh radio, powered from the regulator."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    static_current_a: float = Field(default=0.0002, ge=0, description="Always-on radio current (A)")
    dispense_current_a: float = Field(default=0.005, ge=0, description="Radio current during a dispense (A)")
    dispense_time_s: float = Field(default=0.7, ge=0, description="High-energy time per dispense (s)")
    connect: RadioConnectConfig | None = Field(
        default_factory=RadioConnectConfig,
        description="Connection-effort model.  None = connects are not modelled.",
    )
