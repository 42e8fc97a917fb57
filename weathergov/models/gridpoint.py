"""Raw gridpoint forecast models for /gridpoints/{wfo}/{x},{y}.

Every series is a list of values keyed by ISO 8601 intervals such as
``2019-07-04T18:00:00+00:00/PT3H``.
"""

from pydantic import Field

from weathergov.models.common import ApiModel, QuantitativeValue, ResourceModel
from weathergov.models.points import PointMetadata


class GridpointValue(ApiModel):
    valid_time: str = ""
    value: float | None = None


class GridpointSeries(ApiModel):
    uom: str = ""  # unit of measure, e.g. "wmoUnit:degC"
    values: list[GridpointValue] = []


class WeatherCondition(ApiModel):
    coverage: str | None = None
    weather: str | None = None
    intensity: str | None = None


class WeatherValue(ApiModel):
    valid_time: str = ""
    value: list[WeatherCondition] = []


class WeatherSeries(ApiModel):
    values: list[WeatherValue] = []


class HazardCondition(ApiModel):
    phenomenon: str = ""
    significance: str = ""
    event_number: int | None = Field(default=None, alias="event_number")


class HazardValue(ApiModel):
    valid_time: str = ""
    value: list[HazardCondition] = []


class HazardSeries(ApiModel):
    values: list[HazardValue] = []


_EMPTY = GridpointSeries()


class GridpointForecast(ResourceModel):
    update_time: str = ""
    elevation: QuantitativeValue = QuantitativeValue()
    weather: WeatherSeries = WeatherSeries()
    hazards: HazardSeries = HazardSeries()

    temperature: GridpointSeries = _EMPTY
    dewpoint: GridpointSeries = _EMPTY
    max_temperature: GridpointSeries = _EMPTY
    min_temperature: GridpointSeries = _EMPTY
    relative_humidity: GridpointSeries = _EMPTY
    apparent_temperature: GridpointSeries = _EMPTY
    heat_index: GridpointSeries = _EMPTY
    wind_chill: GridpointSeries = _EMPTY
    sky_cover: GridpointSeries = _EMPTY
    wind_direction: GridpointSeries = _EMPTY
    wind_speed: GridpointSeries = _EMPTY
    wind_gust: GridpointSeries = _EMPTY
    probability_of_precipitation: GridpointSeries = _EMPTY
    quantitative_precipitation: GridpointSeries = _EMPTY
    ice_accumulation: GridpointSeries = _EMPTY
    snowfall_amount: GridpointSeries = _EMPTY
    snow_level: GridpointSeries = _EMPTY
    ceiling_height: GridpointSeries = _EMPTY
    visibility: GridpointSeries = _EMPTY
    transport_wind_speed: GridpointSeries = _EMPTY
    transport_wind_direction: GridpointSeries = _EMPTY
    mixing_height: GridpointSeries = _EMPTY
    haines_index: GridpointSeries = _EMPTY
    lightning_activity_level: GridpointSeries = _EMPTY
    twenty_foot_wind_speed: GridpointSeries = _EMPTY
    twenty_foot_wind_direction: GridpointSeries = _EMPTY
    wave_height: GridpointSeries = _EMPTY
    wave_period: GridpointSeries = _EMPTY
    wave_direction: GridpointSeries = _EMPTY
    primary_swell_height: GridpointSeries = _EMPTY
    primary_swell_direction: GridpointSeries = _EMPTY
    secondary_swell_height: GridpointSeries = _EMPTY
    secondary_swell_direction: GridpointSeries = _EMPTY
    wave_period2: GridpointSeries = Field(default=_EMPTY, alias="wavePeriod2")
    wind_wave_height: GridpointSeries = _EMPTY
    dispersion_index: GridpointSeries = _EMPTY
    pressure: GridpointSeries = _EMPTY
    probability_of_tropical_storm_winds: GridpointSeries = _EMPTY
    probability_of_hurricane_winds: GridpointSeries = _EMPTY
    potential_of_15mph_winds: GridpointSeries = Field(default=_EMPTY, alias="potentialOf15mphWinds")
    potential_of_25mph_winds: GridpointSeries = Field(default=_EMPTY, alias="potentialOf25mphWinds")
    potential_of_35mph_winds: GridpointSeries = Field(default=_EMPTY, alias="potentialOf35mphWinds")
    potential_of_45mph_winds: GridpointSeries = Field(default=_EMPTY, alias="potentialOf45mphWinds")
    potential_of_20mph_wind_gusts: GridpointSeries = Field(
        default=_EMPTY, alias="potentialOf20mphWindGusts"
    )
    potential_of_30mph_wind_gusts: GridpointSeries = Field(
        default=_EMPTY, alias="potentialOf30mphWindGusts"
    )
    potential_of_40mph_wind_gusts: GridpointSeries = Field(
        default=_EMPTY, alias="potentialOf40mphWindGusts"
    )
    potential_of_50mph_wind_gusts: GridpointSeries = Field(
        default=_EMPTY, alias="potentialOf50mphWindGusts"
    )
    potential_of_60mph_wind_gusts: GridpointSeries = Field(
        default=_EMPTY, alias="potentialOf60mphWindGusts"
    )
    grassland_fire_danger_index: GridpointSeries = _EMPTY
    probability_of_thunder: GridpointSeries = _EMPTY
    davis_stability_index: GridpointSeries = _EMPTY
    atmospheric_dispersion_index: GridpointSeries = _EMPTY
    low_visibility_occurrence_risk_index: GridpointSeries = _EMPTY
    stability: GridpointSeries = _EMPTY
    red_flag_threat_index: GridpointSeries = _EMPTY

    point: PointMetadata | None = Field(default=None, exclude=True)
