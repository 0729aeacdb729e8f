from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from catpoint.domain.models import AlarmStatus


@dataclass(frozen=True)
class NotificationEvent:
    """
    Notification event contract used by the notification layer.

    A 'NotificationEvent' is a transport message that can be sent to
    one or more notifiers. It represents *what should be communicated*,
    not *how* it is delivered.

    Parameters
    ----------
    type
        Event type identifier (e.g., "alarm_status", "cat_detection").
    payload
        Structured JSON-ready payload.
    severity
        Optional severity label, derived from the alarm status.
    source
        Optional source identifier (e.g., "security_service").
    ts
        Optional ISO-8601 timestamp string.
    """

    type: str
    payload: Dict[str, Any]
    severity: Optional[str] = None
    source: Optional[str] = None
    ts: Optional[str] = None


class Notifier(Protocol):
    """
    Protocol interface for notification delivery.

    Methods
    -------
    notify(event)
        Deliver a notification event.
    """

    def notify(self, event: NotificationEvent) -> None:
        ...


class StatusListener(Protocol):
    """
    Observer of the security service.

    Listeners are called synchronously, on the thread that performed the
    operation. An exception raised by a listener propagates to that caller.

    Methods
    -------
    notify(status)
        Called after every alarm status change with the new status.
    cat_detected(present)
        Called after every processed image with the raw classification.
    """

    def notify(self, status: AlarmStatus) -> None:
        ...

    def cat_detected(self, present: bool) -> None:
        ...
