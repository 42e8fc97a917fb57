"""NOAA/NWS api.weather.gov client: forecasts, observations, alerts, offices."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from weathergov.config.loader import update_config
from weathergov.config.schema import ClientConfig
from weathergov.ingest.errors import DecodeError
from weathergov.ingest.fetcher import EndpointFetcher
from weathergov.ingest.point_cache import PointCache
from weathergov.ingest.point_resolver import PointResolver
from weathergov.models.alert import Alert, AlertCollection
from weathergov.models.forecast import Forecast, HourlyForecast
from weathergov.models.gridpoint import GridpointForecast
from weathergov.models.observation import Observation
from weathergov.models.office import Office
from weathergov.models.points import PointMetadata, StationList

logger = logging.getLogger(__name__)


class NoaaClient:
    """Blocking client for api.weather.gov.

    Coordinate-based calls resolve the point first (cached per client), then
    follow the endpoint URL the point metadata advertises. Every failure is
    raised as a NoaaApiError subclass; nothing is retried.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http: httpx.Client | None = None,
        point_cache: PointCache | None = None,
    ):
        self.fetcher = EndpointFetcher(config or ClientConfig(), http)
        self.resolver = PointResolver(self.fetcher, point_cache)

    @property
    def config(self) -> ClientConfig:
        return self.fetcher.config

    def update_config(self, **changes: Any) -> ClientConfig:
        """Replace the active config; later requests pick up the new values."""
        self.fetcher.config = update_config(self.fetcher.config, **changes)
        return self.fetcher.config

    def close(self) -> None:
        self.fetcher.close()

    def __enter__(self) -> "NoaaClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _with_units(self, endpoint: str) -> str:
        units = self.config.units
        if units:
            return f"{endpoint}?units={units}"
        return endpoint

    # --- Point-based ---

    def points(self, lat: str, lon: str) -> PointMetadata:
        return self.resolver.resolve(lat, lon)

    def forecast(self, lat: str, lon: str) -> Forecast:
        """Fetch the 12-hour period text forecast (about 14 periods)."""
        point = self.resolver.resolve(lat, lon)
        forecast = self.fetcher.fetch_model(self._with_units(point.forecast), Forecast)
        return forecast.model_copy(update={"point": point})

    def hourly_forecast(self, lat: str, lon: str) -> HourlyForecast:
        point = self.resolver.resolve(lat, lon)
        forecast = self.fetcher.fetch_model(
            self._with_units(point.forecast_hourly), HourlyForecast
        )
        return forecast.model_copy(update={"point": point})

    def gridpoint_forecast(self, lat: str, lon: str) -> GridpointForecast:
        """Fetch the raw numerical gridpoint time series."""
        point = self.resolver.resolve(lat, lon)
        forecast = self.fetcher.fetch_model(
            self._with_units(point.forecast_grid_data), GridpointForecast
        )
        return forecast.model_copy(update={"point": point})

    def stations(self, lat: str, lon: str) -> StationList:
        """Fetch the observation station URLs nearest to a point."""
        point = self.resolver.resolve(lat, lon)
        return self.fetcher.fetch_model(point.observation_stations, StationList)

    # --- Direct lookups ---

    def latest_observation(self, station_id: str) -> Observation:
        """Fetch the latest observation for a station.

        ``station_id`` is normally one of the URLs returned by stations(); a
        bare identifier like "KORD" is expanded against the base URL.
        """
        station = station_id
        if "://" not in station:
            station = f"{self.config.base_url}/stations/{station}"
        return self.fetcher.fetch_model(f"{station}/observations/latest", Observation)

    def office(self, office_id: str) -> Office:
        return self.fetcher.fetch_model(
            f"{self.config.base_url}/offices/{office_id}", Office
        )

    def alerts(self, lat: str, lon: str) -> list[Alert]:
        """Fetch active alerts around a point.

        An envelope without ``@graph`` yields an empty list, same as no
        active alerts; transport, status and decode failures still raise.
        """
        url = f"{self.config.base_url}/alerts/active?point={lat},{lon}"
        with self.fetcher.fetch(url) as resp:
            raw = resp.read()

        try:
            envelope = AlertCollection.model_validate_json(raw)
        except ValidationError as e:
            logger.error("Failed to decode alerts response from %s: %s", url, e)
            raise DecodeError(url, e) from e

        if envelope.graph is None:
            logger.debug("Alerts response from %s has no @graph", url)
            return []
        return envelope.graph
