"""
Stress tests for SecurityService and InMemorySecurityRepository concurrency.

These tests drive one service from many threads and check:
- no exceptions during concurrent sensor/camera/arming calls
- every alarm status write is a legal ladder step (no lost updates)
- the final state obeys the disarm invariant

Notes
-----
Threading tests are probabilistic: they increase confidence but do not prove
the absence of races. Run multiple times for higher confidence.
"""

from __future__ import annotations

import threading
from typing import Any, List, Tuple

import pytest

from catpoint.core.state.memory_repository import InMemorySecurityRepository
from catpoint.domain.models import AlarmStatus, ArmingStatus, Sensor, SensorType
from catpoint.services.security_service import SecurityService


class NoCat:
    def image_contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        return False


class TransitionRecorder:
    """Listener that records (previous, new) pairs as seen through notify()."""

    def __init__(self, repo: InMemorySecurityRepository) -> None:
        self._last = repo.get_alarm_status()
        self.pairs: List[Tuple[AlarmStatus, AlarmStatus]] = []

    def notify(self, status: AlarmStatus) -> None:
        self.pairs.append((self._last, status))
        self._last = status

    def cat_detected(self, present: bool) -> None:
        return None


@pytest.mark.stress
def test_concurrent_sensor_activity_only_takes_ladder_steps() -> None:
    """
    With only sensor events, every change must be a single ladder step or a
    PENDING -> NO_ALARM resolution.
    """
    repo = InMemorySecurityRepository(arming_status=ArmingStatus.ARMED_AWAY)
    sensors = [Sensor(f"S{i}", SensorType.MOTION) for i in range(8)]
    for s in sensors:
        repo.add_sensor(s)

    service = SecurityService(repo, NoCat())
    recorder = TransitionRecorder(repo)
    service.add_status_listener(recorder)

    start = threading.Barrier(len(sensors))
    errors: List[BaseException] = []

    def worker(sensor: Sensor) -> None:
        try:
            start.wait()
            for k in range(500):
                service.change_sensor_activation_status(sensor, k % 2 == 0)
        except BaseException as e:
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(s,)) for s in sensors]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert errors == []
    allowed = {
        (AlarmStatus.NO_ALARM, AlarmStatus.PENDING_ALARM),
        (AlarmStatus.PENDING_ALARM, AlarmStatus.ALARM),
        (AlarmStatus.PENDING_ALARM, AlarmStatus.NO_ALARM),
    }
    assert set(recorder.pairs) <= allowed
    assert all(not s.active for s in repo.get_sensors())


@pytest.mark.stress
def test_concurrent_mixed_operations_then_disarm() -> None:
    repo = InMemorySecurityRepository(arming_status=ArmingStatus.ARMED_HOME)
    sensors = [Sensor(f"D{i}", SensorType.DOOR) for i in range(4)]
    for s in sensors:
        repo.add_sensor(s)
    service = SecurityService(repo, NoCat())

    start = threading.Barrier(6)
    errors: List[BaseException] = []

    def toggler(sensor: Sensor) -> None:
        try:
            start.wait()
            for k in range(300):
                service.change_sensor_activation_status(sensor, k % 3 != 0)
        except BaseException as e:
            errors.append(e)

    def camera() -> None:
        try:
            start.wait()
            for k in range(300):
                service.process_image(k)
        except BaseException as e:
            errors.append(e)

    def arming() -> None:
        try:
            start.wait()
            for k in range(100):
                service.set_arming_status(ArmingStatus.ARMED_HOME if k % 2 else ArmingStatus.ARMED_AWAY)
                _ = service.sensors
        except BaseException as e:
            errors.append(e)

    threads = [threading.Thread(target=toggler, args=(s,)) for s in sensors]
    threads += [threading.Thread(target=camera), threading.Thread(target=arming)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert errors == []

    service.set_arming_status(ArmingStatus.DISARMED)

    assert service.alarm_status is AlarmStatus.NO_ALARM
    assert service.arming_status is ArmingStatus.DISARMED
    assert all(not s.active for s in service.sensors)
