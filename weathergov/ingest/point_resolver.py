"""Resolves lat/lon pairs to point metadata through the point cache."""

from weathergov.ingest.fetcher import EndpointFetcher
from weathergov.ingest.point_cache import PointCache
from weathergov.models.points import PointMetadata


class PointResolver:
    def __init__(self, fetcher: EndpointFetcher, cache: PointCache | None = None):
        self.fetcher = fetcher
        self.cache = cache if cache is not None else PointCache()

    def point_url(self, lat: str, lon: str) -> str:
        # Coordinates are passed through untouched; bad input shows up as a 4xx.
        return f"{self.fetcher.config.base_url}/points/{lat},{lon}"

    def resolve(self, lat: str, lon: str) -> PointMetadata:
        """Return metadata for (lat, lon), fetching it at most once per URL."""
        url = self.point_url(lat, lon)
        return self.cache.get_or_load(
            url, lambda: self.fetcher.fetch_model(url, PointMetadata)
        )
