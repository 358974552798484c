"""Schemas for the core app."""

from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.ok_response import OkResponse

__all__ = [
    "DependencyHealth",
    "LivenessResponse",
    "OkResponse",
    "ReadinessResponse",
]
