"""Services layer - Application orchestration.

Available services:
- RouteDelayResolver: Traffic delay lookup for an origin/destination pair
"""

from .route_delay_resolver import RouteDelayResolver

__all__ = ["RouteDelayResolver"]
