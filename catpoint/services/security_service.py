from __future__ import annotations

import logging
import threading
from typing import Any, FrozenSet, List

from catpoint.core.alarm.alarm_rules import AlarmTrigger, next_alarm_status
from catpoint.core.image.image_service import ImageService
from catpoint.core.repository import SecurityRepository
from catpoint.domain.models import AlarmStatus, ArmingStatus, Sensor
from catpoint.notification.base import StatusListener

logger = logging.getLogger(__name__)

CAT_CONFIDENCE_THRESHOLD = 50.0


class SecurityService:
    """
    Receive security events and decide how the system state changes.

    Responsibilities
    ----------------
    - Apply arming changes (disarming resets the alarm and every sensor).
    - Translate sensor and camera events into alarm status transitions via
      :func:`~catpoint.core.alarm.alarm_rules.next_alarm_status`.
    - Persist every change through the `SecurityRepository`.
    - Notify registered `StatusListener`s synchronously.

    Concurrency Model
    -----------------
    Every public operation runs under one re-entrant lock, so the
    read-status / compute / write-status sequence cannot interleave with
    another caller. Listener callbacks run while the lock is held.

    Parameters
    ----------
    repository
        Store of arming status, alarm status and sensors.
    image_service
        Cat classifier used by :meth:`process_image`.
    confidence_threshold
        Minimum classifier confidence, in percent.
    """

    def __init__(
        self,
        repository: SecurityRepository,
        image_service: ImageService,
        confidence_threshold: float = CAT_CONFIDENCE_THRESHOLD,
    ):
        self._repository = repository
        self._image_service = image_service
        self._confidence_threshold = confidence_threshold
        self._listeners: List[StatusListener] = []
        self._lock = threading.RLock()

    # --- Listener registry ---
    def add_status_listener(self, listener: StatusListener) -> None:
        """
        Register a listener. Registering the same object twice has no effect.
        """
        with self._lock:
            if not any(existing is listener for existing in self._listeners):
                self._listeners.append(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        with self._lock:
            self._listeners = [existing for existing in self._listeners if existing is not listener]

    # --- Arming ---
    def set_arming_status(self, status: ArmingStatus) -> None:
        """
        Change the arming status of the system.

        Disarming forces NO_ALARM. Any arming change resets every tracked
        sensor to inactive without running the sensor alarm rules; arming
        leaves the alarm status as it is.

        Parameters
        ----------
        status
            New arming status.
        """
        with self._lock:
            logger.info("Arming status -> %s", status.value)
            if status is ArmingStatus.DISARMED:
                self._set_alarm_status(AlarmStatus.NO_ALARM)
            self._reset_sensors()
            self._repository.set_arming_status(status)

    # --- Sensors ---
    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> None:
        """
        Change the activation flag of a sensor and update the alarm if needed.

        Transitions
        -----------
        - inactive -> active: sensor-activated rule.
        - active -> inactive: sensor-deactivated rule.
        - inactive -> inactive: also the sensor-deactivated rule, so a
          lingering PENDING_ALARM resolves once every sensor is inactive.
        - active -> active: no alarm evaluation.

        The sensor flag is written and persisted in every case.

        Parameters
        ----------
        sensor
            Tracked sensor.
        active
            Desired activation flag.
        """
        with self._lock:
            was_active = sensor.active
            logger.debug("Sensor %s (%s): %s -> %s", sensor.name, sensor.sensor_type.value, was_active, active)

            if not was_active and active:
                self._apply(AlarmTrigger.SENSOR_ACTIVATED)
            elif not active:
                # The sensor itself counts as inactive from here on.
                others_inactive = not any(
                    s.active for s in self._repository.get_sensors() if s != sensor
                )
                self._apply(AlarmTrigger.SENSOR_DEACTIVATED, all_sensors_inactive=others_inactive)

            sensor.active = active
            self._repository.update_sensor(sensor)

    def add_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self._repository.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self._repository.remove_sensor(sensor)

    # --- Camera ---
    def process_image(self, image: Any) -> None:
        """
        Classify a camera image and apply the cat-detection rule.

        Listeners receive ``cat_detected(result)`` whether or not the alarm
        status changed.

        Parameters
        ----------
        image
            Opaque image handle passed through to the image service.
        """
        with self._lock:
            cat = bool(self._image_service.image_contains_cat(image, self._confidence_threshold))
            logger.info("Image processed: cat=%s, arming=%s", cat, self._repository.get_arming_status().value)

            self._apply(AlarmTrigger.CAT_DETECTED if cat else AlarmTrigger.CAT_NOT_DETECTED)

            for listener in list(self._listeners):
                listener.cat_detected(cat)

    # --- Read accessors ---
    @property
    def alarm_status(self) -> AlarmStatus:
        return self._repository.get_alarm_status()

    @property
    def arming_status(self) -> ArmingStatus:
        return self._repository.get_arming_status()

    @property
    def sensors(self) -> FrozenSet[Sensor]:
        """
        Immutable view of the tracked sensors.

        Returns
        -------
        frozenset of Sensor
            Snapshot of the repository's sensor set.
        """
        return frozenset(self._repository.get_sensors())

    # --- Internals ---
    def _apply(self, trigger: AlarmTrigger, all_sensors_inactive: bool = False) -> None:
        """
        Run one transition and write the result if it differs.
        """
        current = self._repository.get_alarm_status()
        new = next_alarm_status(
            current,
            trigger,
            self._repository.get_arming_status(),
            all_sensors_inactive=all_sensors_inactive,
        )
        if new is not current:
            self._set_alarm_status(new)

    def _set_alarm_status(self, status: AlarmStatus) -> None:
        logger.info("Alarm status -> %s", status.value)
        self._repository.set_alarm_status(status)
        for listener in list(self._listeners):
            listener.notify(status)

    def _reset_sensors(self) -> None:
        for sensor in self._repository.get_sensors():
            if sensor.active:
                sensor.active = False
                self._repository.update_sensor(sensor)
