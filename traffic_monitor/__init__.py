"""Top-level package for the traffic monitor.

Answers one question: how much is traffic delaying a drive between two
named places right now? The RouteDelayResolver service queries a
routing provider and classifies the delay; host adapters bind it to
agent tools and workflows.
"""

from .domain import (
    ProviderError,
    RouteQuery,
    TrafficReport,
    TrafficStatus,
    ValidationError,
)
from .services import RouteDelayResolver

__all__ = [
    "RouteDelayResolver",
    "RouteQuery",
    "TrafficReport",
    "TrafficStatus",
    "ValidationError",
    "ProviderError",
]
