"""Django application configuration for core."""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """Configuration class for the core application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
    verbose_name = "Media Library"

    def ready(self) -> None:
        """Configure structured logging once the app registry is loaded."""
        if getattr(settings, "TEST_MODE", False):
            return

        from core.logging import setup_logging  # noqa: PLC0415

        setup_logging()
        logger.info("Structured logging initialized")
