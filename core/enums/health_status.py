"""Health status enumeration for service dependencies."""

from enum import Enum


class HealthStatus(str, Enum):
    """Health status of a single dependency."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
