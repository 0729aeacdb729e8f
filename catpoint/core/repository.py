"""
Security repository contract.

The repository is the durable owner of the arming status, the alarm status and
the set of tracked sensors. The security service reads and writes through this
interface and keeps no storage of its own.
"""

from __future__ import annotations

from typing import Protocol, Set

from catpoint.domain.models import AlarmStatus, ArmingStatus, Sensor


class SecurityRepository(Protocol):
    """
    Protocol interface for security state persistence.

    Any class implementing these methods can back a
    :class:`~catpoint.services.security_service.SecurityService`; no
    inheritance is required.

    Methods
    -------
    get_arming_status() / set_arming_status(status)
        Read/write the arming status.
    get_alarm_status() / set_alarm_status(status)
        Read/write the alarm status.
    get_sensors()
        Return the tracked sensors.
    add_sensor(sensor) / remove_sensor(sensor) / update_sensor(sensor)
        Maintain the sensor set. Sensors are unique by (name, type).
    """

    def get_arming_status(self) -> ArmingStatus:
        ...

    def set_arming_status(self, status: ArmingStatus) -> None:
        ...

    def get_alarm_status(self) -> AlarmStatus:
        ...

    def set_alarm_status(self, status: AlarmStatus) -> None:
        ...

    def get_sensors(self) -> Set[Sensor]:
        ...

    def add_sensor(self, sensor: Sensor) -> None:
        ...

    def remove_sensor(self, sensor: Sensor) -> None:
        ...

    def update_sensor(self, sensor: Sensor) -> None:
        ...
