"""Text and hourly forecast models."""

from typing import Any, Generic, TypeVar

from pydantic import Field, model_validator

from weathergov.models.common import ApiModel, QuantitativeValue, ResourceModel
from weathergov.models.points import PointMetadata


class ForecastPeriod(ApiModel):
    """Fields common to standard and hourly forecast periods."""

    number: int = 0
    name: str = ""
    start_time: str = ""
    end_time: str = ""
    is_daytime: bool = False
    temperature: float | None = None
    temperature_unit: str = ""
    temperature_trend: str | None = None
    wind_speed: str = ""
    wind_direction: str = ""
    icon: str = ""
    short_forecast: str = ""
    detailed_forecast: str = ""


class HourlyForecastPeriod(ApiModel):
    """An hourly period: the shared period fields plus hourly-only readings.

    Upstream sends one flat object; the shared keys are decoded into
    ``period`` and the rest stay on this record.
    """

    period: ForecastPeriod
    probability_of_precipitation: QuantitativeValue | None = None
    dewpoint: QuantitativeValue | None = None
    relative_humidity: QuantitativeValue | None = None

    @model_validator(mode="before")
    @classmethod
    def _nest_shared_fields(cls, data: Any) -> Any:
        if isinstance(data, dict) and "period" not in data:
            return {**data, "period": data}
        return data


PeriodT = TypeVar("PeriodT", ForecastPeriod, HourlyForecastPeriod)


class _ForecastDocument(ResourceModel, Generic[PeriodT]):
    updated: str = ""
    units: str = ""
    forecast_generator: str = ""
    generated_at: str = ""
    update_time: str = ""
    valid_times: str = ""
    elevation: QuantitativeValue = QuantitativeValue()
    periods: list[PeriodT] = []
    # Attached after decoding; never read from or written to the wire.
    point: PointMetadata | None = Field(default=None, exclude=True)


class Forecast(_ForecastDocument[ForecastPeriod]):
    pass


class HourlyForecast(_ForecastDocument[HourlyForecastPeriod]):
    pass
