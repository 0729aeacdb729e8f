"""
Unit tests for catpoint.notification.payload.
"""

from __future__ import annotations

from datetime import datetime

from catpoint.domain.models import AlarmStatus, ArmingStatus, Sensor, SensorType
from catpoint.notification.payload import build_cat_payload, build_status_payload, severity_for


def test_severity_mapping() -> None:
    assert severity_for(AlarmStatus.NO_ALARM) == "INFO"
    assert severity_for(AlarmStatus.PENDING_ALARM) == "WARNING"
    assert severity_for(AlarmStatus.ALARM) == "CRITICAL"


def test_status_payload_contains_event_and_totals() -> None:
    ts = datetime(2026, 1, 1, 10, 0, 0, 123456)
    sensors = [
        Sensor("Front Door", SensorType.DOOR, active=True),
        Sensor("Back Door", SensorType.DOOR),
        Sensor("Hallway", SensorType.MOTION, active=True),
    ]

    payload = build_status_payload(AlarmStatus.ALARM, ArmingStatus.ARMED_AWAY, sensors, ts)

    assert payload["type"] == "alarm_status"
    assert payload["event"] == {
        "alarm_status": "ALARM",
        "description": AlarmStatus.ALARM.description,
        "severity": "CRITICAL",
        "arming_status": "ARMED_AWAY",
        "timestamp": "2026-01-01T10:00:00",
    }
    assert payload["totals"] == {
        "sensors_total": 3,
        "sensors_active": 2,
        "active_sensors": ["Front Door", "Hallway"],
        "sensor_counts_by_type": {"DOOR": 2, "MOTION": 1},
    }


def test_status_payload_with_no_sensors() -> None:
    payload = build_status_payload(AlarmStatus.NO_ALARM, ArmingStatus.DISARMED, [], datetime(2026, 1, 1))

    assert payload["totals"]["sensors_total"] == 0
    assert payload["totals"]["active_sensors"] == []
    assert payload["totals"]["sensor_counts_by_type"] == {}


def test_cat_payload() -> None:
    payload = build_cat_payload(True, AlarmStatus.ALARM, ArmingStatus.ARMED_HOME, datetime(2026, 1, 1, 8, 30))

    assert payload == {
        "type": "cat_detection",
        "event": {
            "cat_detected": True,
            "alarm_status": "ALARM",
            "arming_status": "ARMED_HOME",
            "timestamp": "2026-01-01T08:30:00",
        },
    }
