"""Immutable domain models for the traffic monitor.

All models are frozen dataclasses with slots. A query, its raw metrics
and the resulting report live for a single lookup only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class TrafficStatus(str, Enum):
    """Coarse traffic severity derived from delay minutes."""

    LIGHT = "Light traffic"
    MODERATE = "Moderate traffic"
    HEAVY = "Heavy traffic"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class RouteQuery:
    """A driving route request between two named places.

    Both labels are free-form place descriptions resolved by the
    routing provider, not coordinates.

    Attributes:
        origin: Where the trip starts (e.g., 'Ikeja, Lagos')
        destination: Where the trip ends (e.g., 'Lekki')
    """

    origin: str
    destination: str


@dataclass(frozen=True, slots=True)
class RouteMetrics:
    """Raw figures read from the provider's primary route.

    Attributes:
        free_flow_duration_seconds: Travel time without live traffic
        current_duration_seconds: Traffic-aware travel time
        distance_meters: Route length
    """

    free_flow_duration_seconds: int = 0
    current_duration_seconds: int = 0
    distance_meters: int = 0

    @property
    def delay_seconds(self) -> int:
        """Return the traffic delay in seconds (may be negative)."""
        return self.current_duration_seconds - self.free_flow_duration_seconds


@dataclass(frozen=True, slots=True)
class TrafficReport:
    """Human-readable traffic summary for one route.

    Attributes:
        normal_time: Free-flow duration, e.g. '10 mins'
        traffic_time: Traffic-aware duration, e.g. '15 mins'
        distance: Route length, e.g. '10.00 mi'
        status: Severity tier
        delay_minutes: Extra minutes caused by traffic (may be negative)
    """

    normal_time: str
    traffic_time: str
    distance: str
    status: TrafficStatus
    delay_minutes: int

    def to_dict(self) -> Dict[str, Any]:
        """Render the report in the shape hosts bind to."""
        return {
            "normalTime": self.normal_time,
            "trafficTime": self.traffic_time,
            "distance": self.distance,
            "status": self.status.value,
            "delayMinutes": self.delay_minutes,
        }
