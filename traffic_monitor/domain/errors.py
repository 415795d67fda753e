"""Typed domain errors for the traffic monitor.

Every failure of a traffic lookup surfaces as one of these types; no
error is ever folded into a zero-filled report.

All errors inherit from TrafficMonitorError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TrafficMonitorError(Exception):
    """Base error for the traffic monitor domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ValidationError(TrafficMonitorError):
    """Origin or destination missing or empty.

    Raised before any network call is attempted. Never retryable.

    Attributes:
        field_name: Name of the offending input field
    """

    field_name: str = ""


@dataclass
class ProviderError(TrafficMonitorError):
    """The routing provider could not produce a usable route.

    Covers transport failures, non-success HTTP statuses, undecodable
    payloads and responses without routes. Not retried internally.

    Attributes:
        status_code: HTTP status returned by the provider, if any
    """

    status_code: Optional[int] = None


@dataclass
class ConfigurationError(TrafficMonitorError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
