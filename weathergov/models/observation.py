"""Latest station observation model."""

from datetime import datetime

from pydantic import Field

from weathergov.models.common import ApiModel, QuantitativeValue, ResourceModel


class PresentWeather(ApiModel):
    intensity: str | None = None
    modifier: str | None = None
    weather: str = ""
    in_vicinity: bool | None = None
    raw_string: str = ""


class CloudLayer(ApiModel):
    base: QuantitativeValue = QuantitativeValue()
    amount: str = ""


class Observation(ResourceModel):
    station: str = ""
    timestamp: datetime | None = None
    raw_message: str = ""
    text_description: str = ""
    present_weather: list[PresentWeather] = []
    cloud_layers: list[CloudLayer] = []

    elevation: QuantitativeValue = QuantitativeValue()
    temperature: QuantitativeValue = QuantitativeValue()
    dewpoint: QuantitativeValue = QuantitativeValue()
    wind_direction: QuantitativeValue = QuantitativeValue()
    wind_speed: QuantitativeValue = QuantitativeValue()
    wind_gust: QuantitativeValue = QuantitativeValue()
    barometric_pressure: QuantitativeValue = QuantitativeValue()
    sea_level_pressure: QuantitativeValue = QuantitativeValue()
    visibility: QuantitativeValue = QuantitativeValue()
    max_temperature_last_24_hours: QuantitativeValue = Field(
        default=QuantitativeValue(), alias="maxTemperatureLast24Hours"
    )
    min_temperature_last_24_hours: QuantitativeValue = Field(
        default=QuantitativeValue(), alias="minTemperatureLast24Hours"
    )
    precipitation_last_hour: QuantitativeValue = QuantitativeValue()
    precipitation_last_3_hours: QuantitativeValue = Field(
        default=QuantitativeValue(), alias="precipitationLast3Hours"
    )
    precipitation_last_6_hours: QuantitativeValue = Field(
        default=QuantitativeValue(), alias="precipitationLast6Hours"
    )
    relative_humidity: QuantitativeValue = QuantitativeValue()
    wind_chill: QuantitativeValue = QuantitativeValue()
    heat_index: QuantitativeValue = QuantitativeValue()
