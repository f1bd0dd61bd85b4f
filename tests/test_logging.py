"""Tests for api_logging.py: call log lines for repository and service calls."""

from __future__ import annotations

import logging

import httpx
import pytest
import respx

import fleetrisk.api_logging as api_logging
from fleetrisk.api_logging import describe_result
from fleetrisk.data.base import FleetDataRepository
from fleetrisk.data.errors import FleetDataError
from fleetrisk.data.gps_repo import GpsFleetRepository
from fleetrisk.models.fleet import FleetSummary
from fleetrisk.models.sensor import SensorSeries
from fleetrisk.services.fleet import FleetRiskService
from tests.conftest import (
    GPS_BASE_URL,
    NOW,
    SAMPLE_SENSORS_RAW,
    SAMPLE_VEHICLE,
    SAMPLE_WEATHER_RAW,
    WEATHER_BASE_URL,
)


class _OfflineRepo(FleetDataRepository):
    """Repository whose provider is down for everything but the vehicle list."""

    def __init__(self, vehicles=None) -> None:
        self._vehicles = vehicles

    def get_vehicles(self, group_code):
        if self._vehicles is None:
            raise FleetDataError(f"group {group_code} unavailable")
        return self._vehicles

    def get_sensor_series(self, vehicle_id, now=None):
        raise FleetDataError("sensors unavailable")

    def get_weather(self, lat, lng):
        raise FleetDataError("weather unavailable")

    def get_eco_event_count(self, vehicle_id, now=None):
        raise FleetDataError("eco unavailable")


@pytest.fixture
def repo(settings) -> GpsFleetRepository:
    return GpsFleetRepository(settings)


class TestRepositoryLogLines:
    @respx.mock
    def test_vehicle_list(self, repo, call_log):
        respx.get(f"{GPS_BASE_URL}/vehicles/group/G1").mock(
            return_value=httpx.Response(200, json=[SAMPLE_VEHICLE])
        )
        repo.get_vehicles("G1")
        content = call_log.read_text()
        assert "CALL: GpsFleetRepository.get_vehicles('G1')" in content
        assert "OK: GpsFleetRepository.get_vehicles('G1') -> 1 vehicles" in content

    @respx.mock
    def test_eco_count_is_logged_as_count(self, repo, call_log):
        respx.get(f"{GPS_BASE_URL}/vehicle/V-001/eco-driving-events").mock(
            return_value=httpx.Response(200, json=[{}, {}, {}])
        )
        repo.get_eco_event_count("V-001", NOW)
        lines = [ln for ln in call_log.read_text().splitlines() if "OK: " in ln]
        assert len(lines) == 1
        assert "GpsFleetRepository.get_eco_event_count('V-001'" in lines[0]
        assert lines[0].split(" -> ")[1].startswith("count=3 ")

    @respx.mock
    def test_sensor_series_counts_channels_and_samples(self, repo, call_log):
        respx.get(f"{GPS_BASE_URL}/vehicle/V-001/sensors/FuelActualVolume,Speed").mock(
            return_value=httpx.Response(200, json=SAMPLE_SENSORS_RAW)
        )
        repo.get_sensor_series("V-001", NOW)
        assert "-> 2 channels, 5 samples" in call_log.read_text()

    @respx.mock
    def test_weather_miss_then_hit(self, repo, call_log):
        route = respx.get(f"{WEATHER_BASE_URL}/weather").mock(
            return_value=httpx.Response(200, json=SAMPLE_WEATHER_RAW)
        )
        repo.get_weather(50.0755, 14.4378)
        repo.get_weather(50.0755, 14.4378)
        content = call_log.read_text()
        assert route.call_count == 1
        assert content.count("CACHE MISS: weather[50.0755_14.4378]") == 1
        assert content.count("CACHE HIT: weather[50.0755_14.4378]") == 1
        assert content.count("-> Rain 6.4C wind=9.3m/s precip=3.2mm") == 2

    @respx.mock
    def test_failure_names_exception(self, repo, call_log):
        respx.get(f"{GPS_BASE_URL}/vehicles/group/G9").mock(
            return_value=httpx.Response(503, text="down")
        )
        with pytest.raises(FleetDataError):
            repo.get_vehicles("G9")
        content = call_log.read_text()
        assert "FAIL: GpsFleetRepository.get_vehicles('G9') -> FleetDataError" in content
        assert "OK: " not in content


class TestServiceLogLines:
    def test_summary_result(self, call_log):
        FleetRiskService(_OfflineRepo()).summarize([])
        content = call_log.read_text()
        assert "SERVICE CALL: FleetRiskService.summarize([])" in content
        assert "SERVICE OK: FleetRiskService.summarize([]) -> total=0 critical=0 warning=0 ok=0" in content

    def test_vehicle_view_result(self, make_vehicle, call_log):
        service = FleetRiskService(_OfflineRepo())
        service.assess_vehicle(make_vehicle(speed=135), now=NOW)
        content = call_log.read_text()
        assert "SERVICE OK: FleetRiskService.assess_vehicle(" in content
        assert "-> V-001 warning score=4" in content

    def test_group_failure(self, call_log):
        with pytest.raises(FleetDataError, match="group G1 unavailable"):
            FleetRiskService(_OfflineRepo()).assess_group("G1", now=NOW)
        assert "SERVICE FAIL: FleetRiskService.assess_group('G1'" in call_log.read_text()

    def test_group_result(self, make_vehicle, call_log):
        vehicles = [make_vehicle(vehicle_id="V-1"), make_vehicle(vehicle_id="V-2")]
        FleetRiskService(_OfflineRepo(vehicles), max_workers=1).assess_group("G1", now=NOW)
        assert "-> 2 views" in call_log.read_text()


class TestDescribeResult:
    @pytest.mark.parametrize(
        "result, expected",
        [
            (None, "nothing"),
            (True, "True"),
            (0, "count=0"),
            ([], "0 items"),
            ((1, 2), "2 items"),
            (SensorSeries(vehicle_id="V-1"), "0 channels, 0 samples"),
            (FleetSummary(total=3, critical=1, warning=1, ok=1), "total=3 critical=1 warning=1 ok=1"),
        ],
    )
    def test_descriptions(self, result, expected):
        assert describe_result(result) == expected

    def test_unknown_type_falls_back_to_name(self):
        assert describe_result({"a": 1}) == "dict"


class TestLogFile:
    def test_creates_log_directory(self, call_log):
        assert not call_log.parent.exists()
        FleetRiskService(_OfflineRepo()).summarize([])
        assert call_log.exists()

    def test_writes_file_when_logger_already_has_handlers(self, call_log):
        named_logger = logging.getLogger(api_logging.LOGGER_NAME)
        foreign = logging.NullHandler()
        named_logger.addHandler(foreign)
        try:
            FleetRiskService(_OfflineRepo()).summarize([])
        finally:
            named_logger.removeHandler(foreign)
        assert "SERVICE OK: FleetRiskService.summarize" in call_log.read_text()

    def test_file_handler_attached_once(self, call_log, monkeypatch):
        service = FleetRiskService(_OfflineRepo())
        service.summarize([])
        monkeypatch.setattr(api_logging, "_logger", None)
        service.summarize([])
        handlers = [
            h
            for h in logging.getLogger(api_logging.LOGGER_NAME).handlers
            if isinstance(h, logging.FileHandler)
        ]
        assert len(handlers) == 1
        assert call_log.read_text().count("SERVICE OK: FleetRiskService.summarize") == 2

    def test_preserves_function_name(self, repo):
        assert repo.get_vehicles.__name__ == "get_vehicles"
        assert FleetRiskService.assess_group.__name__ == "assess_group"
