from __future__ import annotations

import logging
from typing import List, Tuple, Union

from catpoint.domain.models import AlarmStatus

logger = logging.getLogger(__name__)


class LoggingStatusListener:
    """
    Status listener that writes every callback to the log.

    The operator console uses it in place of a display panel. Received
    callbacks are also kept in :attr:`history` as ``(kind, value)`` tuples.
    """

    def __init__(self) -> None:
        self.history: List[Tuple[str, Union[AlarmStatus, bool]]] = []

    def notify(self, status: AlarmStatus) -> None:
        self.history.append(("status", status))
        level = logging.WARNING if status is AlarmStatus.ALARM else logging.INFO
        logger.log(level, "Alarm status: %s (%s)", status.value, status.description)

    def cat_detected(self, present: bool) -> None:
        self.history.append(("cat", present))
        logger.info("Camera: %s", "cat detected" if present else "no cat")
