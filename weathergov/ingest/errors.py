"""Errors raised by the weather.gov request/decode pipeline."""

from enum import StrEnum


class ErrorKind(StrEnum):
    TRANSPORT = "transport"
    STATUS = "status"
    DECODE = "decode"


class NoaaApiError(Exception):
    """Base class for every failure surfaced by the client."""

    kind: ErrorKind

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class TransportError(NoaaApiError):
    """Connection, DNS, TLS or read failure from the HTTP layer."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, url: str, cause: Exception):
        super().__init__(str(cause) or type(cause).__name__, url)
        self.cause = cause


class StatusError(NoaaApiError):
    """Upstream answered with anything other than 200 OK."""

    kind = ErrorKind.STATUS

    def __init__(self, url: str, status_code: int, reason: str):
        super().__init__(f"{status_code} {reason}".rstrip(), url)
        self.status_code = status_code
        self.reason = reason


class DecodeError(NoaaApiError):
    """Response body did not match the expected shape."""

    kind = ErrorKind.DECODE

    def __init__(self, url: str, cause: Exception):
        super().__init__(str(cause), url)
        self.cause = cause
