"""Route delay resolver - The traffic lookup service.

Validates a query, asks the routing provider for the primary route and
turns its metrics into a TrafficReport. One provider call per lookup,
no caching, no retries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import ProviderError, ValidationError
from ..domain.models import RouteQuery, TrafficReport
from ..domain.traffic import build_report
from ..ports.routing import RoutingProviderPort


@dataclass
class RouteDelayResolver:
    """Resolve the current traffic delay between two places.

    The resolver keeps no mutable state, so a single instance can serve
    concurrent lookups.

    Attributes:
        provider: Routing provider used for the lookup
    """

    provider: RoutingProviderPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @staticmethod
    def validate(query: RouteQuery) -> None:
        """Reject a query with a missing or blank origin/destination.

        Raises:
            ValidationError: Naming the first offending field.
        """
        for field_name in ("origin", "destination"):
            value = getattr(query, field_name, None)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(
                    f"Missing required parameter: {field_name}",
                    field_name=field_name,
                )

    async def resolve(self, query: RouteQuery) -> TrafficReport:
        """Look up current traffic for a route.

        Args:
            query: Origin and destination labels.

        Returns:
            TrafficReport for the provider's primary route.

        Raises:
            ValidationError: If origin or destination is missing. Raised
                before the provider is contacted.
            ProviderError: If the provider call fails or yields no route.
        """
        self.validate(query)

        self._logger.info(
            "Fetching traffic",
            extra={"origin": query.origin, "destination": query.destination},
        )

        metrics = await self.provider.compute_route(query)
        report = build_report(metrics)

        self._logger.info(
            "Traffic resolved",
            extra={
                "status": report.status.value,
                "delay_minutes": report.delay_minutes,
            },
        )
        return report

    async def resolve_safe(
        self, query: RouteQuery
    ) -> tuple[Optional[TrafficReport], Optional[str]]:
        """Resolve traffic, returning an error message instead of raising.

        Only the domain errors are converted; anything else propagates.

        Returns:
            Tuple of (TrafficReport or None, error message or None).
        """
        try:
            return await self.resolve(query), None
        except ValidationError as e:
            return None, f"Error: {e.message}"
        except ProviderError as e:
            self._logger.warning("Traffic lookup failed", extra={"error": str(e)})
            return None, f"Failed to fetch traffic information: {e.message}"

    def format_report(self, query: RouteQuery, report: TrafficReport) -> str:
        """Format a report as a concise one-line summary."""
        return (
            f"{report.status.value} from {query.origin} to {query.destination}"
            f" - {report.delay_minutes} min delay"
            f" (traffic: {report.traffic_time}, normal: {report.normal_time},"
            f" {report.distance})"
        )
