"""Tests for services/service_estimate.py."""

from __future__ import annotations

import pytest

from fleetrisk.models.service import ServiceStatus
from fleetrisk.services.service_estimate import (
    estimate_service,
    interval_for_odometer,
    mock_service_estimate,
    progress_percent,
    service_estimate_for,
    service_status,
    stable_hash,
)


class TestServiceStatus:
    @pytest.mark.parametrize(
        ("remaining", "status"),
        [
            (0, ServiceStatus.CRITICAL),
            (1000, ServiceStatus.CRITICAL),
            (1001, ServiceStatus.WARNING),
            (3000, ServiceStatus.WARNING),
            (3001, ServiceStatus.OK),
        ],
    )
    def test_thresholds(self, remaining, status):
        assert service_status(remaining) == status


class TestEstimateService:
    def test_remaining_exactly_1000_is_critical(self):
        result = estimate_service(14_000, interval=15_000)
        assert result.remaining_km == 1000
        assert result.status == ServiceStatus.CRITICAL

    def test_remaining_1001_is_warning(self):
        result = estimate_service(13_999, interval=15_000)
        assert result.remaining_km == 1001
        assert result.status == ServiceStatus.WARNING

    def test_milestones(self):
        result = estimate_service(48_250, interval=15_000)
        assert result.last_service_at == 45_000
        assert result.next_service_at == 60_000
        assert result.remaining_km == 11_750
        assert result.progress_percent == 22
        assert result.status == ServiceStatus.OK
        assert result.mocked is False

    def test_interval_seeded_from_odometer(self):
        assert interval_for_odometer(48_250.7) == 18_250
        result = estimate_service(48_250.7)
        assert result.service_interval == 18_250
        assert result.last_service_at == pytest.approx(36_500)
        assert result.next_service_at == pytest.approx(54_750)

    def test_interval_range(self):
        for odometer in (0, 9_999, 10_000, 123_456, 999_999):
            assert 10_000 <= interval_for_odometer(odometer) < 20_000

    def test_zero_odometer(self):
        result = estimate_service(0)
        assert result.service_interval == 10_000
        assert result.progress_percent == 0
        assert result.remaining_km == 10_000


class TestProgressPercent:
    def test_non_positive_interval(self):
        assert progress_percent(5_000, 0, 0) == 0
        assert progress_percent(5_000, 0, -10) == 0

    def test_clamped(self):
        assert progress_percent(30_000, 0, 10_000) == 100
        assert progress_percent(0, 5_000, 10_000) == 0

    def test_half(self):
        assert progress_percent(15_000, 10_000, 10_000) == 50


class TestMockServiceEstimate:
    def test_stable_hash_matches_known_values(self):
        assert stable_hash("") == 0
        assert stable_hash("a") == 97
        assert stable_hash("ab") == 97 * 31 + 98

    def test_stable_hash_wraps_to_32_bits(self):
        value = stable_hash("a much longer vehicle identifier 0123456789")
        assert 0 <= value <= 2**31

    def test_deterministic(self):
        assert mock_service_estimate("V-001") == mock_service_estimate("V-001")

    def test_ranges(self):
        for vid in ("V-001", "V-002", "TRUCK-77", "ž-42"):
            result = mock_service_estimate(vid)
            assert 10_000 <= result.service_interval < 20_000
            assert 10_000 <= result.odometer <= 180_000
            assert 0 < result.remaining_km <= result.service_interval
            assert result.next_service_at - result.last_service_at == result.service_interval
            assert 0 <= result.progress_percent <= 100
            assert result.mocked is True


class TestServiceEstimateFor:
    def test_uses_real_odometer(self, make_vehicle):
        result = service_estimate_for(make_vehicle(odometer=48_250.7))
        assert result.odometer == 48_250.7
        assert result.mocked is False

    def test_falls_back_to_mock(self, make_vehicle):
        result = service_estimate_for(make_vehicle(vehicle_id="V-009"))
        assert result == mock_service_estimate("V-009")
