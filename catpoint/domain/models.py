"""
Domain models and enums.

This module defines the core domain-level types used across the system:
- Sensor types, arming statuses and alarm statuses
- The Sensor entity tracked by the security repository

Enums are ``str``-valued so they can be written directly into notification
payloads and YAML configuration without custom encoders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SensorType(str, Enum):
    """
    Kind of binary detector attached to the system.

    Members
    -------
    DOOR : str
        Door contact sensor.
    WINDOW : str
        Window contact sensor.
    MOTION : str
        Motion detector.
    """

    DOOR = "DOOR"
    WINDOW = "WINDOW"
    MOTION = "MOTION"


class ArmingStatus(str, Enum):
    """
    Whether the system is disarmed or armed, and with which profile.

    Members
    -------
    DISARMED : str
        System is off; sensor activity never escalates the alarm.
    ARMED_HOME : str
        Armed while occupants are home; cat detection raises the alarm.
    ARMED_AWAY : str
        Armed while the house is empty.
    """

    DISARMED = "DISARMED"
    ARMED_HOME = "ARMED_HOME"
    ARMED_AWAY = "ARMED_AWAY"

    @property
    def description(self) -> str:
        return _ARMING_DESCRIPTIONS[self]


class AlarmStatus(str, Enum):
    """
    Escalation level of the alarm.

    The levels form a ladder: NO_ALARM -> PENDING_ALARM -> ALARM.

    Members
    -------
    NO_ALARM : str
        Everything is fine.
    PENDING_ALARM : str
        One sensor tripped; a second activation raises the alarm.
    ALARM : str
        Alarm is sounding.
    """

    NO_ALARM = "NO_ALARM"
    PENDING_ALARM = "PENDING_ALARM"
    ALARM = "ALARM"

    @property
    def description(self) -> str:
        return _ALARM_DESCRIPTIONS[self]


_ARMING_DESCRIPTIONS = {
    ArmingStatus.DISARMED: "Disarmed",
    ArmingStatus.ARMED_HOME: "Armed - At Home",
    ArmingStatus.ARMED_AWAY: "Armed - Away",
}

_ALARM_DESCRIPTIONS = {
    AlarmStatus.NO_ALARM: "Cool and Good",
    AlarmStatus.PENDING_ALARM: "I'm in Danger...",
    AlarmStatus.ALARM: "Awooga!",
}


@dataclass(unsafe_hash=True)
class Sensor:
    """
    Named, typed binary detector.

    Two sensors are the same entity when their ``name`` and ``sensor_type``
    match. The ``active`` flag is mutable state and takes no part in equality
    or hashing, so a sensor keeps its place in a set while it toggles.

    Parameters
    ----------
    name
        Human-readable sensor name (e.g., "Front Door").
    sensor_type
        Kind of detector.
    active
        Whether the sensor is currently tripped.
    """

    name: str
    sensor_type: SensorType
    active: bool = field(default=False, compare=False)
