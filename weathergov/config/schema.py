"""Pydantic v2 client configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from weathergov.config.defaults import DEFAULT_ACCEPT, DEFAULT_USER_AGENT, NOAA_BASE_URL


class Units(StrEnum):
    DEFAULT = ""  # upstream decides
    US = "us"
    SI = "si"


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    base_url: str = NOAA_BASE_URL
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    accept: str = Field(default=DEFAULT_ACCEPT, min_length=1)
    units: Units = Units.DEFAULT
    timeout: float | None = Field(default=None, gt=0.0)
