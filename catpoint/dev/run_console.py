from __future__ import annotations

import sys
from typing import List, Optional

from catpoint.bootstrap import build_security_system
from catpoint.domain.models import ArmingStatus
from catpoint.logging_config import configure_logging


def _option(argv: List[str], name: str) -> Optional[str]:
    if name in argv:
        i = argv.index(name)
        if i + 1 < len(argv):
            return argv[i + 1]
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run a scripted console session against the configured system.

    The session arms the system (home), trips and clears every configured
    sensor, processes a few fake camera images and disarms again. Every
    status change is written to the log.

    Notes
    -----
    Optional CLI usage:
        python -m catpoint.dev.run_console --config path/to/config.yaml --images 3
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    config_path = _option(argv, "--config")
    images = int(_option(argv, "--images") or 3)

    wiring = build_security_system(config_path=config_path)
    configure_logging(wiring.config.log_level)
    service = wiring.service

    try:
        service.set_arming_status(ArmingStatus.ARMED_HOME)

        for sensor in sorted(service.sensors, key=lambda s: s.name):
            service.change_sensor_activation_status(sensor, True)
        for sensor in sorted(service.sensors, key=lambda s: s.name):
            service.change_sensor_activation_status(sensor, False)

        for frame in range(images):
            service.process_image(frame)

        service.set_arming_status(ArmingStatus.DISARMED)
    finally:
        wiring.shutdown()

    return 0


if __name__ == "__main__":
    sys.exit(main())
