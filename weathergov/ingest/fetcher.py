"""GET + status check + decode pipeline shared by every client operation."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from weathergov.config.schema import ClientConfig
from weathergov.ingest.errors import DecodeError, StatusError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def force_https(url: str) -> str:
    """Rewrite a plaintext ``http://`` link to ``https://``."""
    if url.startswith("http://"):
        return "https://" + url[len("http://"):]
    return url


class EndpointFetcher:
    def __init__(self, config: ClientConfig, http: httpx.Client | None = None):
        self.config = config
        self.http = http if http is not None else httpx.Client()

    def _headers(self) -> dict[str, str]:
        return {"Accept": self.config.accept, "User-Agent": self.config.user_agent}

    @contextmanager
    def fetch(self, endpoint: str) -> Iterator[httpx.Response]:
        """Open a streaming GET against ``endpoint``.

        Yields the response with its body still unread; the stream is closed
        when the block exits. Raises StatusError for anything but 200 and
        TransportError for failures below HTTP.
        """
        url = force_https(endpoint)
        logger.debug("GET %s", url)
        try:
            with self.http.stream(
                "GET", url, headers=self._headers(), timeout=self.config.timeout
            ) as resp:
                if resp.status_code != 200:
                    raise StatusError(url, resp.status_code, resp.reason_phrase)
                yield resp
        except httpx.RequestError as e:
            raise TransportError(url, e) from e

    def fetch_model(self, endpoint: str, model: type[ModelT]) -> ModelT:
        with self.fetch(endpoint) as resp:
            return decode(resp, model)

    def close(self) -> None:
        self.http.close()


def decode(resp: httpx.Response, model: type[ModelT]) -> ModelT:
    """Read the body and validate it into ``model``."""
    body = resp.read()
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(str(resp.url), e) from e
