from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import List

from catpoint.notification.base import NotificationEvent, Notifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationThreadConfig:
    max_queue: int = 2000
    retry_count: int = 3
    retry_backoff_s: float = 0.5
    poll_timeout_s: float = 0.5


class NotificationWorkerThread:
    """
    Background delivery of notification events.

    Producers call :meth:`emit`, which never blocks; a daemon thread drains the
    queue and hands each event to every notifier, retrying with exponential
    backoff. Events are dropped when the queue is full or when all retries
    fail.
    """

    def __init__(self, notifiers: List[Notifier], cfg: NotificationThreadConfig | None = None):
        self._notifiers = notifiers
        self._cfg = cfg or NotificationThreadConfig()
        self._q: "queue.Queue[NotificationEvent]" = queue.Queue(maxsize=self._cfg.max_queue)
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="notification-worker", daemon=True)

    def start(self) -> None:
        if not self._thread.is_alive():
            self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        try:
            self._q.put_nowait(NotificationEvent(type="__stop__", payload={}))
        except queue.Full:
            pass
        if self._thread.is_alive():
            self._thread.join(timeout=2.0)

    @property
    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def emit(self, event: NotificationEvent) -> None:
        try:
            self._q.put_nowait(event)
        except queue.Full:
            logger.warning("Notification queue full, dropping %s event", event.type)

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                event = self._q.get(timeout=self._cfg.poll_timeout_s)
            except queue.Empty:
                continue

            if event.type == "__stop__":
                break

            for notifier in self._notifiers:
                self._send_with_retries(notifier, event)

    def _send_with_retries(self, notifier: Notifier, event: NotificationEvent) -> None:
        for attempt in range(self._cfg.retry_count + 1):
            try:
                notifier.notify(event)
                return
            except Exception as e:
                if attempt >= self._cfg.retry_count:
                    logger.error("Giving up on %s event after %d attempts: %r", event.type, attempt + 1, e)
                    return
                time.sleep(self._cfg.retry_backoff_s * (2 ** attempt))
