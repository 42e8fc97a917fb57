"""Active alert models for /alerts/active."""

from pydantic import Field

from weathergov.models.common import ApiModel


class Alert(ApiModel):
    id: str = Field(default="", alias="@id")
    area_desc: str | None = None
    sent: str | None = None
    effective: str | None = None
    onset: str | None = None
    expires: str | None = None
    ends: str | None = None
    status: str | None = None
    message_type: str | None = None
    category: str | None = None
    severity: str | None = None
    certainty: str | None = None
    urgency: str | None = None
    event: str | None = None
    sender: str | None = None
    sender_name: str | None = None
    headline: str | None = None
    description: str | None = None
    instruction: str | None = None
    response: str | None = None


class AlertCollection(ApiModel):
    """JSON-LD envelope; the alerts themselves sit under ``@graph``."""

    graph: list[Alert] | None = Field(default=None, alias="@graph")
    title: str | None = None
    updated: str | None = None
