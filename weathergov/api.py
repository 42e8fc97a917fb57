"""Module-level shortcuts backed by a lazily created process-wide client.

    from weathergov import api
    api.configure(user_agent="myapp (me@example.com)", units="si")
    api.forecast("41.837", "-87.685").periods[0].short_forecast
"""

import threading
from typing import Any

from weathergov.config.schema import ClientConfig
from weathergov.ingest.noaa_client import NoaaClient
from weathergov.models.alert import Alert
from weathergov.models.forecast import Forecast, HourlyForecast
from weathergov.models.gridpoint import GridpointForecast
from weathergov.models.observation import Observation
from weathergov.models.office import Office
from weathergov.models.points import PointMetadata, StationList

_lock = threading.Lock()
_client: NoaaClient | None = None


def get_client() -> NoaaClient:
    global _client
    with _lock:
        if _client is None:
            _client = NoaaClient()
        return _client


def get_config() -> ClientConfig:
    return get_client().config


def set_config(config: ClientConfig) -> None:
    get_client().fetcher.config = config


def configure(**changes: Any) -> ClientConfig:
    """Update individual settings on the default client."""
    return get_client().update_config(**changes)


def reset() -> None:
    """Close the default client; the next call creates a fresh one."""
    global _client
    with _lock:
        if _client is not None:
            _client.close()
        _client = None


def points(lat: str, lon: str) -> PointMetadata:
    return get_client().points(lat, lon)


def forecast(lat: str, lon: str) -> Forecast:
    return get_client().forecast(lat, lon)


def hourly_forecast(lat: str, lon: str) -> HourlyForecast:
    return get_client().hourly_forecast(lat, lon)


def gridpoint_forecast(lat: str, lon: str) -> GridpointForecast:
    return get_client().gridpoint_forecast(lat, lon)


def stations(lat: str, lon: str) -> StationList:
    return get_client().stations(lat, lon)


def latest_observation(station_id: str) -> Observation:
    return get_client().latest_observation(station_id)


def office(office_id: str) -> Office:
    return get_client().office(office_id)


def alerts(lat: str, lon: str) -> list[Alert]:
    return get_client().alerts(lat, lon)
