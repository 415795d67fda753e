"""Domain layer - Core business models, errors and computations.

This module contains immutable domain models, typed errors and the
pure traffic computations used throughout the application.
No external dependencies.
"""

from .errors import (
    ConfigurationError,
    ProviderError,
    TrafficMonitorError,
    ValidationError,
)
from .models import RouteMetrics, RouteQuery, TrafficReport, TrafficStatus
from .traffic import build_report, classify_delay, metrics_from_route

__all__ = [
    # Models
    "RouteQuery",
    "RouteMetrics",
    "TrafficReport",
    "TrafficStatus",
    # Computations
    "build_report",
    "classify_delay",
    "metrics_from_route",
    # Errors
    "TrafficMonitorError",
    "ValidationError",
    "ProviderError",
    "ConfigurationError",
]
