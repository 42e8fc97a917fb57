"""Thread-safe point metadata cache with per-key single-flight loading."""

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future

from weathergov.models.points import PointMetadata

logger = logging.getLogger(__name__)


class PointCache:
    """Memoizes PointMetadata by request URL for the lifetime of the instance.

    Concurrent first lookups of the same key share one load: the first caller
    runs the loader, later callers block on its Future and observe the same
    value or the same exception. Failed loads are never stored, and stored
    entries are never evicted.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, PointMetadata] = {}
        self._inflight: dict[str, Future[PointMetadata]] = {}

    def get_or_load(
        self, key: str, loader: Callable[[], PointMetadata]
    ) -> PointMetadata:
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                logger.debug("Point cache hit for %s", key)
                return cached
            future = self._inflight.get(key)
            leader = future is None
            if future is None:
                future = Future()
                self._inflight[key] = future

        if not leader:
            logger.debug("Waiting on in-flight point lookup for %s", key)
            return future.result()

        logger.debug("Point cache miss for %s", key)
        try:
            value = loader()
        except BaseException as e:
            with self._lock:
                del self._inflight[key]
            future.set_exception(e)
            raise

        with self._lock:
            self._entries[key] = value
            del self._inflight[key]
        future.set_result(value)
        return value

    def get(self, key: str) -> PointMetadata | None:
        with self._lock:
            return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
