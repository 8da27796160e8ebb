from __future__ import annotations

import io
import threading

import pytest

from garagemon.models import Alert, Reading, SensorKind
from garagemon.state import GarageMonitor, derive_status, format_status_line


def _feed(monitor: GarageMonitor, vehicle_id: str, rpm: float, load: float, temp: float) -> None:
    monitor.ingest(vehicle_id, SensorKind.RPM, rpm)
    monitor.ingest(vehicle_id, SensorKind.ENGINE_LOAD, load)
    monitor.ingest(vehicle_id, SensorKind.COOLANT_TEMP, temp)


def test_severe_stress_example() -> None:
    monitor = GarageMonitor()
    _feed(monitor, "A", 6500, 95, 120)

    status = monitor.status_of("A")

    assert status.has_all
    assert status.score == pytest.approx(-72.5, abs=1e-9)
    assert status.alert is Alert.SEVERE_STRESS


def test_score_exactly_at_threshold_has_no_alert() -> None:
    monitor = GarageMonitor()
    _feed(monitor, "A", 0, 0, 120)

    status = monitor.status_of("A")

    assert status.has_all
    assert status.score == pytest.approx(40.0, abs=1e-9)
    assert status.alert is Alert.NONE


def test_incomplete_vehicle_reports_sensor_failure() -> None:
    monitor = GarageMonitor()
    monitor.ingest("A", SensorKind.RPM, 1000)
    monitor.ingest("A", SensorKind.COOLANT_TEMP, 90)

    status = monitor.status_of("A")

    assert not status.has_all
    assert status.score is None
    assert status.alert is Alert.SENSOR_FAILURE


def test_unknown_vehicle_status_is_empty() -> None:
    monitor = GarageMonitor()

    status = monitor.status_of("missing")

    assert not status.has_all
    assert status.score is None
    assert status.alert is Alert.NONE
    assert not monitor.has_car("missing")


def test_ingest_creates_vehicle_on_first_reading() -> None:
    monitor = GarageMonitor()
    monitor.ingest("A", SensorKind.RPM, 1000)

    assert monitor.has_car("A")
    assert "A" in monitor
    assert len(monitor) == 1


def test_identifiers_are_case_sensitive() -> None:
    monitor = GarageMonitor()
    monitor.ingest("car1", SensorKind.RPM, 1000)

    assert monitor.has_car("car1")
    assert not monitor.has_car("Car1")


def test_unknown_kind_is_dropped_without_creating_vehicle() -> None:
    monitor = GarageMonitor()
    monitor.ingest("A", SensorKind.UNKNOWN, 1.0)

    assert not monitor.has_car("A")


def test_apply_reading() -> None:
    monitor = GarageMonitor()
    monitor.apply(Reading(vehicle_id="A", kind=SensorKind.ENGINE_LOAD, value=12.0))

    snapshot = monitor.snapshot("A")
    assert snapshot is not None
    assert snapshot.engine_load == 12.0


def test_average_score_over_complete_vehicles_only() -> None:
    monitor = GarageMonitor()
    _feed(monitor, "A", 3000, 0, 90)  # 70
    _feed(monitor, "B", 7000, 0, 90)  # 30
    monitor.ingest("C", SensorKind.RPM, 1000)

    assert monitor.average_score() == pytest.approx(50.0, abs=1e-9)


def test_average_score_absent_without_complete_vehicles() -> None:
    monitor = GarageMonitor()
    assert monitor.average_score() is None

    monitor.ingest("A", SensorKind.RPM, 1000)
    assert monitor.average_score() is None


def test_reingest_same_values_is_idempotent() -> None:
    monitor = GarageMonitor()
    _feed(monitor, "A", 2500, 40, 95)
    before = monitor.snapshot("A")

    for _ in range(3):
        _feed(monitor, "A", 2500, 40, 95)

    assert monitor.snapshot("A") == before


def test_snapshot_does_not_alias_registry_state() -> None:
    monitor = GarageMonitor()
    monitor.ingest("A", SensorKind.RPM, 1000)
    snapshot = monitor.snapshot("A")

    monitor.ingest("A", SensorKind.RPM, 2000)

    assert snapshot is not None
    assert snapshot.rpm == 1000.0
    assert monitor.snapshot("missing") is None


def test_statuses_are_in_key_order() -> None:
    monitor = GarageMonitor()
    for vehicle_id in ("b", "C", "a"):
        monitor.ingest(vehicle_id, SensorKind.RPM, 1000)

    assert list(monitor.statuses()) == ["C", "a", "b"]
    assert monitor.vehicle_ids() == ["C", "a", "b"]


def test_print_status_output() -> None:
    monitor = GarageMonitor()
    _feed(monitor, "A", 3000, 0, 90)
    _feed(monitor, "B", 6500, 95, 120)
    monitor.ingest("C", SensorKind.RPM, 1000)
    out = io.StringIO()

    monitor.print_status(out)

    assert out.getvalue().splitlines() == [
        "Car: A | Score: 70.00",
        "Car: B | Score: -72.50 | Alert: Severe Engine Stress",
        "Car: C | Status: Sensor Failure Detected",
    ]


def test_derive_status_and_format_for_unknown_vehicle() -> None:
    status = derive_status(None)

    assert status.alert is Alert.NONE
    assert format_status_line("X", status) == "Car: X | Status: Sensor Failure Detected"


def test_ensure_vehicles_only_seeds_empty_registry() -> None:
    monitor = GarageMonitor()
    assert monitor.ensure_vehicles(["X", "Y"])
    assert monitor.vehicle_ids() == ["X", "Y"]

    assert not monitor.ensure_vehicles(["Z"])
    assert not monitor.has_car("Z")


def test_concurrent_ingest_on_distinct_vehicles_loses_nothing() -> None:
    monitor = GarageMonitor()
    per_thread = 200

    def writer(prefix: str) -> None:
        for index in range(per_thread):
            vehicle_id = f"{prefix}-{index:03d}"
            monitor.ingest(vehicle_id, SensorKind.RPM, index)
            monitor.ingest(vehicle_id, SensorKind.ENGINE_LOAD, 0)
            monitor.ingest(vehicle_id, SensorKind.COOLANT_TEMP, 90)
            monitor.status_of(vehicle_id)
            monitor.average_score()

    threads = [threading.Thread(target=writer, args=(f"t{n}",)) for n in range(6)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(monitor) == 6 * per_thread
    assert all(status.has_all for status in monitor.statuses().values())
    expected = 100.0 - sum(index / 100.0 for index in range(per_thread)) / per_thread
    assert monitor.average_score() == pytest.approx(expected, abs=1e-9)
