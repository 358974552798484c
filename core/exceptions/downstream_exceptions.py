"""Exceptions for calls to third-party HTTP services."""


class DownstreamServiceError(Exception):
    """A third-party service failed or returned an unusable response (502)."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service_name: str | None = None,
        status_code: int | None = None,
    ):
        """Initialize downstream service error.

        Args:
            message: Error message
            service_name: Name of the downstream service
            status_code: HTTP status code the service answered with, if any
        """
        self.message = message
        self.service_name = service_name
        self.upstream_status_code = status_code
        super().__init__(message)


class DownstreamServiceUnavailableError(DownstreamServiceError):
    """A third-party service is temporarily unavailable; retrying may help (503)."""

    status_code = 503

    def __init__(
        self,
        service_name: str,
        status_code: int | None = None,
        message: str | None = None,
    ):
        """Initialize service unavailable error.

        Args:
            service_name: Name of the downstream service
            status_code: HTTP status code the service answered with, if any
            message: Optional custom error message
        """
        super().__init__(
            message=message or f"{service_name} is unavailable",
            service_name=service_name,
            status_code=status_code,
        )


class ServiceNotConfiguredError(DownstreamServiceError):
    """A feature backed by a third-party service has no credentials (503)."""

    status_code = 503
