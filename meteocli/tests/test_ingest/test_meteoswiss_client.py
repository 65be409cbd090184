"""Tests for the MeteoSwiss client with mocked httpx."""

import httpx
import pytest
import respx

from meteocli.ingest.meteoswiss_client import MeteoSwissClient, MeteoSwissError, plz6

BASE = "https://test-meteoswiss.example.com/v1"


@pytest.fixture
def client() -> MeteoSwissClient:
    return MeteoSwissClient(base_url=BASE, timeout=1.0)


class TestPlz6:
    def test_conversion(self):
        assert plz6(8000) == 800000
        assert plz6(3012) == 301200


class TestGetPlzDetail:
    @respx.mock
    def test_success(self, client: MeteoSwissClient, plz_payload: dict):
        route = respx.get(f"{BASE}/plzDetail", params={"plz": "800000"}).mock(
            return_value=httpx.Response(200, json=plz_payload)
        )
        result = client.get_plz_detail(8000)
        assert route.called
        assert result["currentWeather"]["temperature"] == 5.5

    @respx.mock
    def test_headers(self, client: MeteoSwissClient):
        route = respx.get(f"{BASE}/plzDetail").mock(
            return_value=httpx.Response(200, json={})
        )
        client.get_plz_detail(3000)
        request = route.calls[0].request
        assert request.headers["user-agent"].startswith("meteocli/")
        assert request.headers["accept"] == "application/json"
        assert request.url.params["plz"] == "300000"

    @respx.mock
    def test_http_error(self, client: MeteoSwissClient):
        route = respx.get(f"{BASE}/plzDetail").mock(
            return_value=httpx.Response(503)
        )
        with pytest.raises(MeteoSwissError, match="HTTP 503"):
            client.get_plz_detail(8000)
        # single attempt, no retry
        assert route.call_count == 1

    @respx.mock
    def test_not_found(self, client: MeteoSwissClient):
        respx.get(f"{BASE}/plzDetail").mock(return_value=httpx.Response(404))
        with pytest.raises(MeteoSwissError, match="8000"):
            client.get_plz_detail(8000)

    @respx.mock
    def test_request_error(self, client: MeteoSwissClient):
        respx.get(f"{BASE}/plzDetail").mock(
            side_effect=httpx.ConnectError("connection refused")
        )
        with pytest.raises(MeteoSwissError, match="connection refused") as exc_info:
            client.get_plz_detail(8000)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @respx.mock
    def test_invalid_json(self, client: MeteoSwissClient):
        respx.get(f"{BASE}/plzDetail").mock(
            return_value=httpx.Response(200, text="<html>oops</html>")
        )
        with pytest.raises(MeteoSwissError, match="decoding"):
            client.get_plz_detail(8000)

    @respx.mock
    def test_non_object_json(self, client: MeteoSwissClient):
        respx.get(f"{BASE}/plzDetail").mock(
            return_value=httpx.Response(200, json=[1, 2])
        )
        with pytest.raises(MeteoSwissError, match="JSON object"):
            client.get_plz_detail(8000)


class TestFetchPlzDetail:
    @respx.mock
    def test_parses_payload(self, client: MeteoSwissClient, plz_payload: dict):
        respx.get(f"{BASE}/plzDetail").mock(
            return_value=httpx.Response(200, json=plz_payload)
        )
        detail = client.fetch_plz_detail(8000)
        assert detail.current_weather is not None
        assert len(detail.forecast) == 3
        assert len(detail.warnings) == 2
        assert detail.graph is not None
        assert detail.graph.has_high_res

    @pytest.mark.parametrize(
        "payload",
        [
            {"graph": {"start": "soon", "precipitation10m": [1]}},
            {"currentWeather": {"icon": "sunny"}},
            {"forecast": {"dayDate": "2026-02-20"}},
            {"graph": {"start": 1771588800000, "precipitation10m": ["wet"]}},
        ],
    )
    @respx.mock
    def test_wrong_typed_payload(self, client: MeteoSwissClient, payload: dict):
        respx.get(f"{BASE}/plzDetail").mock(
            return_value=httpx.Response(200, json=payload)
        )
        with pytest.raises(MeteoSwissError, match="decoding response") as exc_info:
            client.fetch_plz_detail(8000)
        assert "8000" in str(exc_info.value)
        assert exc_info.value.__cause__ is not None
