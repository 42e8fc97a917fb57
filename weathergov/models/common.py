"""Common base models shared by the weather.gov response schemas."""

from typing import Any

from pydantic import BaseModel, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Frozen record decoded from a camelCase JSON object.

    Unknown keys (``@context``, ``geometry`` and friends) are ignored.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
        "extra": "ignore",
    }

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # Upstream sends null for unset keys; non-optional fields fall back to their default.
        if value is None and info.field_name is not None:
            field = cls.model_fields[info.field_name]
            if not field.is_required() and field.default is not None:
                return field.default
        return value


class ResourceModel(ApiModel):
    """Top-level resource body.

    Accepts both the flat JSON-LD rendering and a GeoJSON Feature, whose
    ``properties`` object carries the same keys.
    """

    @model_validator(mode="before")
    @classmethod
    def _unwrap_feature(cls, data: Any) -> Any:
        if (
            isinstance(data, dict)
            and data.get("type") == "Feature"
            and isinstance(data.get("properties"), dict)
        ):
            return data["properties"]
        return data


class QuantitativeValue(ApiModel):
    value: float | None = None
    max_value: float | None = None
    min_value: float | None = None
    unit_code: str = ""
    quality_control: str | None = None
