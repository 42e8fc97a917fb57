"""Forecast office models for /offices/{id}."""

from pydantic import Field

from weathergov.models.common import ApiModel, ResourceModel


class OfficeAddress(ApiModel):
    type: str = Field(default="", alias="@type")
    street_address: str = ""
    address_locality: str = ""
    address_region: str = ""
    postal_code: str = ""


class Office(ResourceModel):
    type: str = Field(default="", alias="@type")
    uri: str = Field(default="", alias="@id")
    id: str = ""
    name: str = ""
    address: OfficeAddress = OfficeAddress()
    telephone: str = ""
    fax_number: str = ""
    email: str = ""
    same_as: str = ""
    nws_region: str = ""
    parent_organization: str = ""
    responsible_counties: list[str] = []
    responsible_forecast_zones: list[str] = []
    responsible_fire_zones: list[str] = []
    approved_observation_stations: list[str] = []
