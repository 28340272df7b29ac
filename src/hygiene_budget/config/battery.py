"""Battery stack and regulator — cells in series feeding a switching regulator."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BatteryConfig(BaseModel):
    """Primary cells wired in series, one set per device."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    rated_capacity_mah: float = Field(
        default=2_850.0, gt=0,
        description="Rated capacity of one cell (mAh), as printed on the package or datasheet",
    )
    cell_count: int = Field(default=4, ge=1, description="Number of cells in series")
    discharge_curve_factor: float = Field(
        default=0.5, ge=0, le=1.0,
        description="Area under the voltage vs expended-charge curve above the dead "
                    "voltage, relative to a rectangle.  ~1.0 for lithium (flat curve), "
                    "~0.5 for alkaline manganese dioxide (linear curve).",
    )
    fresh_voltage: float = Field(default=1.5, gt=0, description="Fresh cell voltage (V)")
    dead_voltage: float = Field(
        default=0.8, gt=0,
        description="Cell voltage after expending the rated capacity (V)",
    )

    @model_validator(mode="after")
    def _fresh_above_dead(self) -> "BatteryConfig":
        if self.fresh_voltage <= self.dead_voltage:
            raise ValueError(
                f"fresh_voltage ({self.fresh_voltage} V) must exceed "
                f"dead_voltage ({self.dead_voltage} V)"
            )
        return self


class RegulatorConfig(BaseModel):
    """Switching regulator between the battery stack and the system rail."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    efficiency: float = Field(
        default=0.9, gt=0, le=1.0,
        description="Fraction of battery energy delivered at the output",
    )
    output_voltage: float = Field(default=2.0, gt=0, description="System rail voltage (V), 2 or 3.3")
