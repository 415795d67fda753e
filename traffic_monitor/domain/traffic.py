"""Pure traffic computations.

Everything between the provider's raw route and the TrafficReport:
duration parsing, delay rounding, unit conversion, formatting and
status classification. No I/O happens here.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from .errors import ProviderError
from .models import RouteMetrics, TrafficReport, TrafficStatus

METERS_TO_MILES = 0.000621371

MODERATE_THRESHOLD_MINUTES = 5
HEAVY_THRESHOLD_MINUTES = 15


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    round_half_up(4.5) == 5 and round_half_up(-4.5) == -4.
    """
    return int(math.floor(value + 0.5))


def _whole_number(value: Any, label: str) -> int:
    """Truncate a provider number to an int, rejecting NaN and infinities."""
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ProviderError(f"Malformed {label}: {value!r}", cause=e) from e


def parse_duration_seconds(raw: Optional[Any]) -> int:
    """Parse a provider duration such as '600s' into whole seconds.

    A missing value counts as zero seconds. Fractional values ('12.7s')
    are truncated.

    Raises:
        ProviderError: If the value is present but not a finite duration.
    """
    if raw is None or raw == "":
        return 0
    if isinstance(raw, bool):
        raise ProviderError(f"Malformed duration: {raw!r}")
    if isinstance(raw, (int, float)):
        return _whole_number(raw, "duration")

    text = str(raw).strip()
    if text.endswith("s"):
        text = text[:-1]
    try:
        seconds = float(text)
    except ValueError as e:
        raise ProviderError(f"Malformed duration: {raw!r}", cause=e) from e
    return _whole_number(seconds, "duration")


def metrics_from_route(route: Mapping[str, Any]) -> RouteMetrics:
    """Extract RouteMetrics from one provider route object.

    Missing durations and distance default to zero.
    """
    distance = route.get("distanceMeters") or 0
    if isinstance(distance, bool):
        raise ProviderError(f"Malformed distance: {distance!r}")

    return RouteMetrics(
        free_flow_duration_seconds=parse_duration_seconds(route.get("staticDuration")),
        current_duration_seconds=parse_duration_seconds(route.get("duration")),
        distance_meters=_whole_number(distance, "distance"),
    )


def compute_delay_minutes(metrics: RouteMetrics) -> int:
    """Traffic delay in whole minutes, not clamped at zero."""
    return round_half_up(metrics.delay_seconds / 60)


def classify_delay(delay_minutes: int) -> TrafficStatus:
    """Map delay minutes onto a status tier.

    Negative delays fall into the light tier.
    """
    if delay_minutes < MODERATE_THRESHOLD_MINUTES:
        return TrafficStatus.LIGHT
    if delay_minutes < HEAVY_THRESHOLD_MINUTES:
        return TrafficStatus.MODERATE
    return TrafficStatus.HEAVY


def format_minutes(seconds: int) -> str:
    return f"{round_half_up(seconds / 60)} mins"


def format_distance(meters: int) -> str:
    return f"{meters * METERS_TO_MILES:.2f} mi"


def build_report(metrics: RouteMetrics) -> TrafficReport:
    """Turn raw route metrics into a TrafficReport."""
    delay_minutes = compute_delay_minutes(metrics)
    return TrafficReport(
        normal_time=format_minutes(metrics.free_flow_duration_seconds),
        traffic_time=format_minutes(metrics.current_duration_seconds),
        distance=format_distance(metrics.distance_meters),
        status=classify_delay(delay_minutes),
        delay_minutes=delay_minutes,
    )
