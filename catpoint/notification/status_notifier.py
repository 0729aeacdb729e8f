from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from catpoint.core.repository import SecurityRepository
from catpoint.domain.models import AlarmStatus
from catpoint.notification.base import NotificationEvent
from catpoint.notification.notification_thread import NotificationWorkerThread
from catpoint.notification.payload import build_cat_payload, build_status_payload, severity_for


class NotifyingStatusListener:
    """
    Status listener that bridges service callbacks -> NotificationWorkerThread.

    Responsibilities
    ----------------
    - Receive ``notify(status)`` / ``cat_detected(present)`` from the
      security service.
    - Build a webhook payload using a snapshot of the repository.
    - Emit a `NotificationEvent` to the worker, which delivers it on its own
      thread. The callbacks therefore return without network I/O.

    Parameters
    ----------
    repository
        Repository read for arming status and sensor totals.
    notifier
        Worker responsible for actual sending.
    clock
        Optional time source, mainly for tests.
    """

    source = "security_service"

    def __init__(
        self,
        repository: SecurityRepository,
        notifier: NotificationWorkerThread,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._repository = repository
        self._notifier = notifier
        self._clock = clock or datetime.now

    def notify(self, status: AlarmStatus) -> None:
        ts = self._clock()
        payload = build_status_payload(
            status,
            self._repository.get_arming_status(),
            self._repository.get_sensors(),
            ts,
        )
        self._notifier.emit(
            NotificationEvent(
                type="alarm_status",
                payload=payload,
                severity=severity_for(status),
                source=self.source,
                ts=ts.isoformat(timespec="seconds"),
            )
        )

    def cat_detected(self, present: bool) -> None:
        ts = self._clock()
        status = self._repository.get_alarm_status()
        payload = build_cat_payload(present, status, self._repository.get_arming_status(), ts)
        self._notifier.emit(
            NotificationEvent(
                type="cat_detection",
                payload=payload,
                severity=severity_for(status),
                source=self.source,
                ts=ts.isoformat(timespec="seconds"),
            )
        )
