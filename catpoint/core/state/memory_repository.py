from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, Set

from catpoint.domain.models import AlarmStatus, ArmingStatus, Sensor


@dataclass
class InMemorySecurityRepository:
    """
    Thread-safe in-memory implementation of the security repository.

    Concurrency Model
    -----------------
    All reads/writes are guarded by a single re-entrant lock
    (`threading.RLock`), so background threads and the service can share one
    instance.

    Design Notes
    ------------
    - Sensors are keyed by themselves (hash/equality on name + type). Storing
      an equal sensor replaces the previous instance.
    - :meth:`get_sensors` returns a copy of the set; the sensor objects inside
      are the stored instances, so in-place mutation is visible to the store.

    Attributes
    ----------
    arming_status
        Current arming status.
    alarm_status
        Current alarm status.
    """

    arming_status: ArmingStatus = ArmingStatus.DISARMED
    alarm_status: AlarmStatus = AlarmStatus.NO_ALARM

    _sensors: Dict[Sensor, Sensor] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    # --- Status API ---
    def get_arming_status(self) -> ArmingStatus:
        with self._lock:
            return self.arming_status

    def set_arming_status(self, status: ArmingStatus) -> None:
        with self._lock:
            self.arming_status = status

    def get_alarm_status(self) -> AlarmStatus:
        with self._lock:
            return self.alarm_status

    def set_alarm_status(self, status: AlarmStatus) -> None:
        with self._lock:
            self.alarm_status = status

    # --- Sensor API ---
    def get_sensors(self) -> Set[Sensor]:
        """
        Snapshot of the tracked sensors.

        Returns
        -------
        set of Sensor
            New set containing the stored sensor instances.
        """
        with self._lock:
            return set(self._sensors.values())

    def add_sensor(self, sensor: Sensor) -> None:
        """
        Track a sensor. An equal sensor already present is replaced.
        """
        with self._lock:
            self._sensors.pop(sensor, None)
            self._sensors[sensor] = sensor

    def remove_sensor(self, sensor: Sensor) -> None:
        """
        Stop tracking a sensor. Unknown sensors are ignored.
        """
        with self._lock:
            self._sensors.pop(sensor, None)

    def update_sensor(self, sensor: Sensor) -> None:
        """
        Persist the current state of a sensor.

        Parameters
        ----------
        sensor
            Sensor whose ``active`` flag should be stored. If no equal sensor
            is tracked yet, it is added.
        """
        with self._lock:
            self._sensors.pop(sensor, None)
            self._sensors[sensor] = sensor
