import math

from influxdb_client import Point, WritePrecision
from pydantic import BaseModel, ConfigDict, Field, field_validator

VALUE_FIELD = 'value'

GaugeValue = int | float


class ReporterArguments(BaseModel):
    """Connection settings and backend-specific arguments handed to a reporter."""

    model_config = ConfigDict(frozen=True)

    server: str
    port: int = Field(gt=0, lt=65536)
    metrics_prefix: str
    remaining_args: dict[str, str] = Field(default_factory=dict)


class MeasurementPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    time_ms: int
    value: GaugeValue
    tags: dict[str, str] = Field(default_factory=dict)

    # Line protocol has no encoding for NaN or infinity; the client drops such fields.
    @field_validator('value')
    @classmethod
    def ensure_finite(cls, value: GaugeValue) -> GaugeValue:
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f'Gauge value must be finite, got {value}')
        return value

    def to_point(self) -> Point:
        point = Point(self.name)
        for key, tag_value in self.tags.items():
            point = point.tag(key, tag_value)
        return point.field(VALUE_FIELD, self.value).time(
            self.time_ms, WritePrecision.MS
        )
