"""Services for the core app."""

from core.services.health_service import HealthService, health_service

# Note: domain services are not exported here to avoid circular imports
# during Django app initialization. Import directly from the module.

__all__ = [
    "HealthService",
    "health_service",
]
