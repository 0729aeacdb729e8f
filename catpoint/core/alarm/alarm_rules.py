"""
Alarm status transition rules.

This module contains the stateless escalation ladder that maps
(current alarm status, trigger, arming status, sensor snapshot) to the next
alarm status. It performs no I/O; the security service reads the inputs from
the repository, calls :func:`next_alarm_status`, and persists/announces the
result.

Ladder
------
- SENSOR_ACTIVATED:   NO_ALARM -> PENDING_ALARM -> ALARM (ignored when DISARMED)
- SENSOR_DEACTIVATED: PENDING_ALARM -> NO_ALARM once every sensor is inactive
- CAT_DETECTED:       ALARM when ARMED_HOME, otherwise NO_ALARM
- CAT_NOT_DETECTED:   NO_ALARM

Disarming is not a trigger here: it is an unconditional reset handled by the
service.
"""

from __future__ import annotations

from enum import Enum

from catpoint.domain.models import AlarmStatus, ArmingStatus


class AlarmTrigger(str, Enum):
    """
    Event that may move the alarm status.

    Members
    -------
    SENSOR_ACTIVATED : str
        A sensor went from inactive to active.
    SENSOR_DEACTIVATED : str
        A sensor was set inactive (including an already-inactive sensor).
    CAT_DETECTED : str
        The image classifier found a cat in the camera image.
    CAT_NOT_DETECTED : str
        The image classifier found no cat.
    """

    SENSOR_ACTIVATED = "SENSOR_ACTIVATED"
    SENSOR_DEACTIVATED = "SENSOR_DEACTIVATED"
    CAT_DETECTED = "CAT_DETECTED"
    CAT_NOT_DETECTED = "CAT_NOT_DETECTED"


_ESCALATION = {
    AlarmStatus.NO_ALARM: AlarmStatus.PENDING_ALARM,
    AlarmStatus.PENDING_ALARM: AlarmStatus.ALARM,
    AlarmStatus.ALARM: AlarmStatus.ALARM,
}


def next_alarm_status(
    current: AlarmStatus,
    trigger: AlarmTrigger,
    arming: ArmingStatus,
    all_sensors_inactive: bool = False,
) -> AlarmStatus:
    """
    Compute the alarm status that follows ``trigger``.

    Parameters
    ----------
    current
        Alarm status before the event.
    trigger
        Event being applied.
    arming
        Current arming status.
    all_sensors_inactive
        Whether every tracked sensor is inactive after the event. Only
        consulted for SENSOR_DEACTIVATED.

    Returns
    -------
    AlarmStatus
        The new status. Equal to ``current`` when the event changes nothing.
    """
    if trigger is AlarmTrigger.SENSOR_ACTIVATED:
        if arming is ArmingStatus.DISARMED:
            return current
        return _ESCALATION[current]

    if trigger is AlarmTrigger.SENSOR_DEACTIVATED:
        if current is AlarmStatus.PENDING_ALARM and all_sensors_inactive:
            return AlarmStatus.NO_ALARM
        return current

    if trigger is AlarmTrigger.CAT_DETECTED and arming is ArmingStatus.ARMED_HOME:
        return AlarmStatus.ALARM

    # Cat absent, or cat present while not armed-home.
    return AlarmStatus.NO_ALARM
