"""Input and output schemas shared by the host bindings.

Hosts speak camelCase JSON; the models accept and dump that shape.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaValidationError
from pydantic.alias_generators import to_camel

from ...domain.errors import ValidationError
from ...domain.models import RouteQuery, TrafficReport, TrafficStatus


class TrafficInput(BaseModel):
    """Origin/destination pair as sent by a host."""

    model_config = ConfigDict(str_strip_whitespace=True)

    origin: str = Field(min_length=1, description="Origin name")
    destination: str = Field(min_length=1, description="Destination name")

    def to_query(self) -> RouteQuery:
        return RouteQuery(origin=self.origin, destination=self.destination)


class TrafficOutput(BaseModel):
    """TrafficReport as returned to a host."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    normal_time: str
    traffic_time: str
    distance: str
    status: TrafficStatus
    delay_minutes: int

    @classmethod
    def from_report(cls, report: TrafficReport) -> TrafficOutput:
        return cls.model_validate(report.to_dict())

    def to_host(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def parse_input(data: Mapping[str, Any]) -> TrafficInput:
    """Validate host input, raising the domain ValidationError."""
    try:
        return TrafficInput.model_validate(dict(data))
    except SchemaValidationError as e:
        errors = e.errors()
        field_name = str(errors[0]["loc"][0]) if errors and errors[0]["loc"] else ""
        raise ValidationError(
            f"Missing required parameter: {field_name or 'input'}",
            cause=e,
            field_name=field_name,
        ) from e
