"""Routing port - Abstraction for traffic-aware route lookups.

This protocol defines the contract for routing providers, allowing
different implementations (Google Routes, fakes in tests) to be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import RouteMetrics, RouteQuery


class RoutingProviderPort(Protocol):
    """Port for routing providers.

    Implementation: adapters/routing/google_routes_adapter.py

    A provider turns a named origin/destination pair into the raw
    duration and distance figures of the primary driving route.
    """

    async def compute_route(self, query: RouteQuery) -> RouteMetrics:
        """Fetch traffic-aware and free-flow metrics for a route.

        Args:
            query: A validated origin/destination pair.

        Returns:
            RouteMetrics for the first route returned by the provider.

        Raises:
            ProviderError: If the provider is unreachable, answers with a
                non-success status, or returns no routes.
        """
        ...
