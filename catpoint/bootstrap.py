from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from catpoint.core.config.yaml_config import AppConfig, load_app_config
from catpoint.core.image.image_service import FakeImageService, ImageService
from catpoint.core.state.memory_repository import InMemorySecurityRepository
from catpoint.notification.logging_listener import LoggingStatusListener
from catpoint.notification.notification_thread import NotificationWorkerThread
from catpoint.notification.status_notifier import NotifyingStatusListener
from catpoint.notification.webhook_notifier import WebhookConfig, WebhookNotifier
from catpoint.services.security_service import SecurityService


@dataclass(frozen=True)
class SecurityWiring:
    """Everything a front end needs to drive the system."""
    config: AppConfig
    repository: InMemorySecurityRepository
    service: SecurityService
    console: LoggingStatusListener
    notifier: Optional[NotificationWorkerThread] = None

    def shutdown(self) -> None:
        if self.notifier is not None:
            self.notifier.stop()


def build_repository(cfg: AppConfig) -> InMemorySecurityRepository:
    repository = InMemorySecurityRepository(arming_status=cfg.arming_status)
    for sensor_cfg in cfg.sensors:
        repository.add_sensor(sensor_cfg.to_sensor())
    return repository


def build_notifier(cfg: AppConfig) -> Optional[NotificationWorkerThread]:
    if cfg.webhook is None:
        return None

    auth_header = cfg.webhook.auth_header
    if auth_header and not auth_header.startswith("Bearer "):
        auth_header = f"Bearer {auth_header}"

    return NotificationWorkerThread(
        notifiers=[
            WebhookNotifier(
                WebhookConfig(
                    url=cfg.webhook.url,
                    auth_header=auth_header,
                    timeout_s=cfg.webhook.timeout_s,
                    verify_tls=cfg.webhook.verify_tls,
                )
            )
        ]
    )


def build_security_system(
    config_path: Optional[str] = None,
    image_service: Optional[ImageService] = None,
    cfg: Optional[AppConfig] = None,
) -> SecurityWiring:
    cfg = cfg or load_app_config(config_path)

    # --- STATE ---
    repository = build_repository(cfg)

    # --- CONTROLLER ---
    service = SecurityService(
        repository=repository,
        image_service=image_service or FakeImageService(),
        confidence_threshold=cfg.confidence_threshold,
    )

    # --- LISTENERS ---
    console = LoggingStatusListener()
    service.add_status_listener(console)

    notifier = build_notifier(cfg)
    if notifier is not None:
        notifier.start()
        service.add_status_listener(NotifyingStatusListener(repository, notifier))

    return SecurityWiring(
        config=cfg,
        repository=repository,
        service=service,
        console=console,
        notifier=notifier,
    )
