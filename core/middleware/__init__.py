"""Middleware components for the media library service."""

from core.middleware.request_tracing import RequestTracingMiddleware

__all__ = ["RequestTracingMiddleware"]
