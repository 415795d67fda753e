"""Routing adapters - Implementations of RoutingProviderPort.

Available implementations:
- GoogleRoutesAdapter: Google Routes API (computeRoutes)
"""

from .google_routes_adapter import GoogleRoutesAdapter

__all__ = ["GoogleRoutesAdapter"]
