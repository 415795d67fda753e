"""Google Routes adapter.

Talks to the Routes API ``computeRoutes`` endpoint over HTTPS and
normalizes the primary route into RouteMetrics.

Responsibilities:
- Request body and field-mask construction
- API-key header injection (the key is never logged)
- Translation of httpx failures into ProviderError
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from ...config import RoutesConfig, get_config
from ...domain.errors import ConfigurationError, ProviderError
from ...domain.models import RouteMetrics, RouteQuery
from ...domain.traffic import metrics_from_route


@dataclass
class GoogleRoutesAdapter:
    """Routing provider backed by the Google Routes API.

    This adapter implements RoutingProviderPort.

    When ``client`` is given it is reused for every call (and left open,
    its owner closes it); otherwise a short-lived client is opened per
    call. httpx.AsyncClient is safe for concurrent use, so one pooled
    client can serve many simultaneous lookups.

    Attributes:
        config: Routing provider configuration
        client: Optional shared HTTP client
    """

    config: RoutesConfig = field(default_factory=lambda: get_config().routes)
    client: Optional[httpx.AsyncClient] = field(default=None, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if not self.config.api_key.get_secret_value():
            raise ConfigurationError(
                "Routing provider API key is not set",
                setting_name="TRAFFIC_ROUTES_API_KEY",
            )

    def build_request_body(self, query: RouteQuery) -> Dict[str, Any]:
        """Build the computeRoutes JSON body for a driving route.

        Route modifiers are fixed to "no avoidance" and alternatives are
        never requested.
        """
        return {
            "origin": {"address": query.origin},
            "destination": {"address": query.destination},
            "travelMode": "DRIVE",
            "routingPreference": "TRAFFIC_AWARE",
            "computeAlternativeRoutes": False,
            "routeModifiers": {
                "avoidTolls": False,
                "avoidHighways": False,
                "avoidFerries": False,
            },
            "languageCode": self.config.language_code,
            "units": self.config.units,
        }

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.config.api_key.get_secret_value(),
            "X-Goog-FieldMask": self.config.field_mask,
        }

    async def compute_route(self, query: RouteQuery) -> RouteMetrics:
        """Fetch metrics for the primary route between two places.

        Args:
            query: The origin/destination pair.

        Returns:
            RouteMetrics read from the first returned route.

        Raises:
            ProviderError: On transport failure, non-2xx status,
                undecodable payload or an empty route list.
        """
        body = self.build_request_body(query)
        self._logger.debug(
            "Requesting route",
            extra={"origin": query.origin, "destination": query.destination},
        )

        if self.client is not None:
            data = await self._post(self.client, body)
        else:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                data = await self._post(client, body)

        self._logger.debug("Routes payload received", extra={"payload": data})

        routes = data.get("routes") or []
        if not routes:
            self._logger.warning(
                "Provider returned no routes",
                extra={"origin": query.origin, "destination": query.destination},
            )
            raise ProviderError(
                f"No route found from {query.origin} to {query.destination}"
            )

        route = routes[0]
        if not isinstance(route, dict):
            raise ProviderError("Routes API returned an unexpected route entry")
        return metrics_from_route(route)

    async def _post(
        self, client: httpx.AsyncClient, body: Dict[str, Any]
    ) -> Dict[str, Any]:
        """POST the request and decode the JSON payload."""
        try:
            response = await client.post(
                self.config.base_url,
                json=body,
                headers=self._headers(),
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            self._logger.warning(
                "Routes API returned an error status",
                extra={"status_code": status},
            )
            raise ProviderError(
                f"Routes API returned HTTP {status}",
                cause=e,
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            self._logger.warning(
                "Routes API request failed",
                extra={"error": type(e).__name__},
            )
            raise ProviderError("Routes API is unreachable", cause=e) from e

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(
                "Routes API returned an undecodable payload",
                cause=e,
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise ProviderError(
                "Routes API returned an unexpected payload",
                status_code=response.status_code,
            )
        return data
