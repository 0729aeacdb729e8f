from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

import yaml
from dotenv import load_dotenv

from catpoint.domain.models import ArmingStatus, Sensor, SensorType

E = TypeVar("E", ArmingStatus, SensorType)


@dataclass(frozen=True)
class SensorConfigData:
    """One configured sensor."""
    name: str
    sensor_type: SensorType

    def to_sensor(self) -> Sensor:
        return Sensor(name=self.name, sensor_type=self.sensor_type)


@dataclass(frozen=True)
class WebhookConfigData:
    """Webhook notifier configuration (URL + auth)."""
    url: str
    auth_header: Optional[str] = None
    timeout_s: float = 3.0
    verify_tls: bool = True


@dataclass(frozen=True)
class AppConfig:
    """
    Root application configuration loaded from YAML.

    Attributes
    ----------
    arming_status
        Arming status the repository starts in.
    sensors
        Sensors tracked from startup.
    confidence_threshold
        Cat classifier confidence threshold, in percent.
    log_level
        Root logging level name.
    webhook
        Optional webhook notifier settings. None disables remote notifications.
    """
    arming_status: ArmingStatus = ArmingStatus.DISARMED
    sensors: List[SensorConfigData] = field(default_factory=list)
    confidence_threshold: float = 50.0
    log_level: str = "INFO"
    webhook: Optional[WebhookConfigData] = None


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError("config.yaml must contain a YAML mapping at the root")
    return data


def _resolve_default_config_path() -> Path:
    """
    Resolve config.yaml location.

    Priority:
    1) CATPOINT_CONFIG env var if provided
    2) ./config.yaml in current working directory
    """
    env = os.getenv("CATPOINT_CONFIG")
    if env:
        return Path(env).expanduser().resolve()
    return Path("config.yaml").resolve()


def _enum(enum_cls: Type[E], raw: Any, what: str) -> E:
    try:
        return enum_cls(str(raw).upper())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"Invalid {what} {raw!r}; expected one of: {allowed}") from None


def load_app_config(path: Optional[str] = None) -> AppConfig:
    """
    Load application configuration from YAML and convert into typed config objects.

    A ``.env`` file next to the config file is loaded first; the
    ``CATPOINT_WEBHOOK_TOKEN`` variable, when set, becomes the webhook
    Authorization header.

    Parameters
    ----------
    path
        Explicit path to config.yaml. If None, uses default resolution.

    Returns
    -------
    AppConfig
        Parsed and validated configuration.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If required fields are missing or invalid.
    """
    cfg_path = Path(path).expanduser().resolve() if path else _resolve_default_config_path()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config not found: {cfg_path}")

    load_dotenv(cfg_path.parent / ".env")
    raw = _read_yaml(cfg_path)

    # ---- system ----
    system = raw.get("system", {}) or {}
    arming_status = _enum(ArmingStatus, system.get("arming_status", "DISARMED"), "arming_status")
    log_level = str(system.get("log_level", "INFO")).upper()

    # ---- sensors ----
    sensors: List[SensorConfigData] = []
    for item in raw.get("sensors", []) or []:
        if "name" not in item or "type" not in item:
            raise ValueError(f"Sensor entry needs 'name' and 'type': {item!r}")
        sensors.append(
            SensorConfigData(
                name=str(item["name"]),
                sensor_type=_enum(SensorType, item["type"], "sensor type"),
            )
        )

    # ---- camera ----
    camera = raw.get("camera", {}) or {}
    confidence_threshold = float(camera.get("confidence_threshold", 50.0))
    if not 0.0 <= confidence_threshold <= 100.0:
        raise ValueError("camera.confidence_threshold must be between 0 and 100")

    # ---- webhook ----
    webhook = None
    w = raw.get("webhook")
    if w:
        if "url" not in w:
            raise ValueError("webhook.url is required when a webhook section is present")
        auth_header = os.getenv("CATPOINT_WEBHOOK_TOKEN") or w.get("auth_header")
        webhook = WebhookConfigData(
            url=str(w["url"]),
            auth_header=auth_header,
            timeout_s=float(w.get("timeout_s", 3.0)),
            verify_tls=bool(w.get("verify_tls", True)),
        )

    return AppConfig(
        arming_status=arming_status,
        sensors=sensors,
        confidence_threshold=confidence_threshold,
        log_level=log_level,
        webhook=webhook,
    )
