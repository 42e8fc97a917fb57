"""Point metadata and station list models."""

from pydantic import Field

from weathergov.models.common import ResourceModel


class PointMetadata(ResourceModel):
    """Forecast office, grid cell and dependent endpoints for a lat/lon."""

    id: str = Field(default="", alias="@id")
    cwa: str = ""
    forecast_office: str = ""
    grid_id: str = ""
    grid_x: int = 0
    grid_y: int = 0
    county: str = ""
    fire_weather_zone: str = ""
    time_zone: str = ""
    radar_station: str = ""
    forecast: str = ""
    forecast_hourly: str = ""
    forecast_grid_data: str = ""
    observation_stations: str = ""


class StationList(ResourceModel):
    observation_stations: list[str] = []
