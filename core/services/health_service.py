"""Health check service with a cached database probe."""

import logging
import time

from django.conf import settings
from django.db import connection
from django.db.utils import OperationalError

from core.enums import HealthStatus
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)


class HealthService:
    """Service for performing health checks with caching."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: Time to live for cached health check results
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._db_health_cache: DependencyHealth | None = None
        self._db_health_cache_time: float = 0.0

    def get_liveness_status(self) -> LivenessResponse:
        """Get liveness status (always returns alive)."""
        return LivenessResponse(status="alive")

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status from the database and AI configuration.

        The service is not ready without a database. A missing AI token only
        degrades it, since every other feature keeps working.

        Returns:
            ReadinessResponse with overall status and dependency health
        """
        db_health = self.check_database_health()
        ai_health = self.check_suggestions_configured()
        dependencies = {"database": db_health, "huggingface": ai_health}

        if not db_health.healthy:
            return ReadinessResponse(
                ready=False,
                status="not ready",
                degraded=True,
                dependencies=dependencies,
            )

        degraded = not ai_health.healthy
        return ReadinessResponse(
            ready=True,
            status="degraded" if degraded else "ready",
            degraded=degraded,
            dependencies=dependencies,
        )

    def check_database_health(self) -> DependencyHealth:
        """Check database connectivity with caching.

        Uses Django's ensure_connection() for socket validation without
        executing queries. Results are cached for cache_ttl_seconds.
        """
        current_time = time.time()
        if (
            self._db_health_cache is not None
            and (current_time - self._db_health_cache_time) < self.cache_ttl_seconds
        ):
            return self._db_health_cache

        start_time = time.perf_counter()
        try:
            connection.ensure_connection()
            new_health = DependencyHealth(
                healthy=True,
                status=HealthStatus.HEALTHY,
                message="Database connection successful",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
        except OperationalError as e:
            logger.warning(f"Database health check failed: {e}")
            new_health = DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )

        self._db_health_cache = new_health
        self._db_health_cache_time = current_time
        return new_health

    def check_suggestions_configured(self) -> DependencyHealth:
        """Report whether AI suggestions have a model token."""
        if settings.HUGGINGFACE_TOKEN:
            return DependencyHealth(
                healthy=True,
                status=HealthStatus.HEALTHY,
                message="AI suggestions configured",
            )
        return DependencyHealth(
            healthy=False,
            status=HealthStatus.UNHEALTHY,
            message="HUGGINGFACE_TOKEN is not configured",
        )


# Global health service instance
health_service = HealthService()
