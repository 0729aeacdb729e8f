"""
Unit tests for catpoint.domain.models.

These tests verify:
- Enum stability (members and string values used in payloads/config)
- Sensor identity by (name, type), independent of the active flag
"""

from __future__ import annotations

from catpoint.domain.models import AlarmStatus, ArmingStatus, Sensor, SensorType


def test_enum_values_are_stable() -> None:
    """
    These values appear in YAML config and webhook payloads.
    """
    assert [m.value for m in SensorType] == ["DOOR", "WINDOW", "MOTION"]
    assert [m.value for m in ArmingStatus] == ["DISARMED", "ARMED_HOME", "ARMED_AWAY"]
    assert [m.value for m in AlarmStatus] == ["NO_ALARM", "PENDING_ALARM", "ALARM"]


def test_every_status_has_a_description() -> None:
    for status in list(ArmingStatus) + list(AlarmStatus):
        assert status.description


def test_sensor_defaults_to_inactive() -> None:
    assert Sensor("Front Door", SensorType.DOOR).active is False


def test_sensor_equality_ignores_active_flag() -> None:
    a = Sensor("Front Door", SensorType.DOOR, active=True)
    b = Sensor("Front Door", SensorType.DOOR, active=False)

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_sensor_identity_includes_type() -> None:
    assert Sensor("Hall", SensorType.DOOR) != Sensor("Hall", SensorType.MOTION)
    assert Sensor("Hall", SensorType.DOOR) != Sensor("Hallway", SensorType.DOOR)


def test_sensor_stays_findable_in_set_after_toggle() -> None:
    sensor = Sensor("Window", SensorType.WINDOW)
    sensors = {sensor}

    sensor.active = True

    assert sensor in sensors
    assert Sensor("Window", SensorType.WINDOW) in sensors
