from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Any, Dict, Iterable

from catpoint.domain.models import AlarmStatus, ArmingStatus, Sensor

_SEVERITY = {
    AlarmStatus.NO_ALARM: "INFO",
    AlarmStatus.PENDING_ALARM: "WARNING",
    AlarmStatus.ALARM: "CRITICAL",
}


def _iso(ts: datetime) -> str:
    """
    Convert datetime to ISO-8601 string with second precision.
    """
    return ts.isoformat(timespec="seconds")


def severity_for(status: AlarmStatus) -> str:
    """
    Map an alarm status to a notification severity label.
    """
    return _SEVERITY[status]


def _sensor_totals(sensors: Iterable[Sensor]) -> Dict[str, Any]:
    sensors = list(sensors)
    by_type = Counter(s.sensor_type.value for s in sensors)
    return {
        "sensors_total": len(sensors),
        "sensors_active": sum(1 for s in sensors if s.active),
        "active_sensors": sorted(s.name for s in sensors if s.active),
        "sensor_counts_by_type": {k: int(v) for k, v in by_type.items()},
    }


def build_status_payload(
    status: AlarmStatus,
    arming: ArmingStatus,
    sensors: Iterable[Sensor],
    ts: datetime,
) -> Dict[str, Any]:
    """
    Build a webhook payload for an alarm status change.

    Parameters
    ----------
    status
        New alarm status.
    arming
        Arming status at the time of the change.
    sensors
        Tracked sensors, used for the totals snapshot.
    ts
        Time of the change.

    Returns
    -------
    dict
        Payload with keys "type", "event" and "totals".
    """
    return {
        "type": "alarm_status",
        "event": {
            "alarm_status": status.value,
            "description": status.description,
            "severity": severity_for(status),
            "arming_status": arming.value,
            "timestamp": _iso(ts),
        },
        "totals": _sensor_totals(sensors),
    }


def build_cat_payload(
    present: bool,
    status: AlarmStatus,
    arming: ArmingStatus,
    ts: datetime,
) -> Dict[str, Any]:
    """
    Build a webhook payload for a processed camera image.

    Parameters
    ----------
    present
        Classifier result.
    status
        Alarm status after the image was processed.
    arming
        Current arming status.
    ts
        Time the image was processed.

    Returns
    -------
    dict
        Payload with keys "type" and "event".
    """
    return {
        "type": "cat_detection",
        "event": {
            "cat_detected": present,
            "alarm_status": status.value,
            "arming_status": arming.value,
            "timestamp": _iso(ts),
        },
    }
