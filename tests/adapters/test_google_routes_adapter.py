"""Tests for the Google Routes adapter."""

import asyncio
import json
import logging

import httpx
import pytest

from traffic_monitor.adapters.routing import GoogleRoutesAdapter
from traffic_monitor.config import RoutesConfig
from traffic_monitor.domain.errors import ConfigurationError, ProviderError
from traffic_monitor.domain.models import RouteMetrics, RouteQuery

API_KEY = "test-secret-key"
ROUTE_PAYLOAD = {
    "routes": [
        {"duration": "900s", "staticDuration": "600s", "distanceMeters": 16093}
    ]
}


def make_adapter(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GoogleRoutesAdapter(config=RoutesConfig(api_key=API_KEY), client=client)


def compute(adapter, origin="Ikeja", destination="Lekki"):
    return asyncio.run(adapter.compute_route(RouteQuery(origin, destination)))


class TestGoogleRoutesAdapter:
    """Test suite for GoogleRoutesAdapter."""

    def test_request_shape(self):
        captured = {}

        def handler(request):
            captured["request"] = request
            return httpx.Response(200, json=ROUTE_PAYLOAD)

        compute(make_adapter(handler))
        request = captured["request"]

        assert request.method == "POST"
        assert str(request.url) == (
            "https://routes.googleapis.com/directions/v2:computeRoutes"
        )
        assert request.headers["X-Goog-Api-Key"] == API_KEY
        assert request.headers["X-Goog-FieldMask"] == (
            "routes.duration,routes.distanceMeters,routes.staticDuration"
        )
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {
            "origin": {"address": "Ikeja"},
            "destination": {"address": "Lekki"},
            "travelMode": "DRIVE",
            "routingPreference": "TRAFFIC_AWARE",
            "computeAlternativeRoutes": False,
            "routeModifiers": {
                "avoidTolls": False,
                "avoidHighways": False,
                "avoidFerries": False,
            },
            "languageCode": "en-US",
            "units": "IMPERIAL",
        }

    def test_parses_first_route(self):
        payload = {
            "routes": [
                {"duration": "900s", "staticDuration": "600s", "distanceMeters": 16093},
                {"duration": "10s", "staticDuration": "10s", "distanceMeters": 1},
            ]
        }
        adapter = make_adapter(lambda request: httpx.Response(200, json=payload))

        assert compute(adapter) == RouteMetrics(
            free_flow_duration_seconds=600,
            current_duration_seconds=900,
            distance_meters=16093,
        )

    def test_missing_fields_default_to_zero(self):
        payload = {"routes": [{"duration": "300s"}]}
        adapter = make_adapter(lambda request: httpx.Response(200, json=payload))

        metrics = compute(adapter)
        assert metrics.free_flow_duration_seconds == 0
        assert metrics.current_duration_seconds == 300
        assert metrics.distance_meters == 0

    @pytest.mark.parametrize("payload", [{"routes": []}, {}])
    def test_no_routes_is_provider_error(self, payload):
        adapter = make_adapter(lambda request: httpx.Response(200, json=payload))

        with pytest.raises(ProviderError) as exc_info:
            compute(adapter)
        assert "No route found from Ikeja to Lekki" in str(exc_info.value)

    def test_error_status_is_provider_error(self):
        adapter = make_adapter(
            lambda request: httpx.Response(403, json={"error": {"status": "PERMISSION_DENIED"}})
        )

        with pytest.raises(ProviderError) as exc_info:
            compute(adapter)
        assert exc_info.value.status_code == 403
        assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)

    def test_network_failure_is_provider_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ProviderError) as exc_info:
            compute(make_adapter(handler))
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    def test_undecodable_payload_is_provider_error(self):
        adapter = make_adapter(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(ProviderError) as exc_info:
            compute(adapter)
        assert exc_info.value.status_code == 200

    @pytest.mark.parametrize(
        "body",
        [
            '{"routes": [{"duration": NaN}]}',
            '{"routes": [{"duration": "1e400s"}]}',
            '{"routes": [{"distanceMeters": Infinity}]}',
            '{"routes": [{"distanceMeters": {"a": 1}}]}',
        ],
    )
    def test_non_finite_route_numbers_are_provider_errors(self, body):
        adapter = make_adapter(lambda request: httpx.Response(200, text=body))

        with pytest.raises(ProviderError) as exc_info:
            compute(adapter)
        assert "Malformed" in exc_info.value.message

    def test_non_object_payload_is_provider_error(self):
        adapter = make_adapter(lambda request: httpx.Response(200, json=[1, 2]))

        with pytest.raises(ProviderError):
            compute(adapter)

    def test_api_key_never_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="traffic_monitor")
        adapter = make_adapter(lambda request: httpx.Response(200, json=ROUTE_PAYLOAD))

        compute(adapter)

        assert caplog.records
        for record in caplog.records:
            assert API_KEY not in record.getMessage()
            assert API_KEY not in repr(vars(record))

    def test_missing_api_key_is_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            GoogleRoutesAdapter(config=RoutesConfig(api_key=""))
        assert exc_info.value.setting_name == "TRAFFIC_ROUTES_API_KEY"

    def test_config_repr_hides_api_key(self):
        adapter = make_adapter(lambda request: httpx.Response(200, json=ROUTE_PAYLOAD))
        assert API_KEY not in repr(adapter)


def test_per_call_client_when_none_injected(monkeypatch):
    """Without an injected client the adapter opens its own per call."""
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=ROUTE_PAYLOAD))
    original_client = httpx.AsyncClient
    created = []

    def client_factory(*args, **kwargs):
        kwargs["transport"] = transport
        client = original_client(*args, **kwargs)
        created.append(client)
        return client

    monkeypatch.setattr(httpx, "AsyncClient", client_factory)
    adapter = GoogleRoutesAdapter(config=RoutesConfig(api_key=API_KEY))

    compute(adapter)
    compute(adapter)

    assert len(created) == 2
    assert all(client.is_closed for client in created)
