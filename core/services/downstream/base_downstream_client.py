"""Base client for third-party HTTP services."""

from typing import Any

import requests
import structlog

from core.exceptions import DownstreamServiceError, DownstreamServiceUnavailableError

logger = structlog.get_logger(__name__)


class BaseDownstreamClient:
    """Base class for third-party HTTP clients."""

    def __init__(self, service_name: str, base_url: str, timeout: float = 10):
        """Initialize base downstream client.

        Args:
            service_name: Name of the service (for logging/errors)
            base_url: Base URL for the service
            timeout: Request timeout in seconds
        """
        self.service_name = service_name
        self.base_url = base_url
        self.timeout = timeout

    def _get_headers(self) -> dict[str, str]:
        """Get common HTTP headers for requests."""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _make_request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        **kwargs,
    ) -> requests.Response:
        """Make HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Full URL for the request
            params: Query parameters
            json_data: JSON body data
            **kwargs: Additional arguments to pass to requests

        Returns:
            Response object

        Raises:
            DownstreamServiceError: For client errors (4xx except 404)
            DownstreamServiceUnavailableError: For server errors (5xx)
            requests.Timeout: For timeout errors
            requests.ConnectionError: For connection errors
        """
        headers = self._get_headers()

        # Merge custom headers if provided
        if "headers" in kwargs:
            headers.update(kwargs.pop("headers"))

        # Set default timeout if not provided
        if "timeout" not in kwargs:
            kwargs["timeout"] = self.timeout

        logger.info(
            "Making downstream service request",
            service=self.service_name,
            method=method,
            url=url,
        )

        try:
            response = requests.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json_data,
                **kwargs,
            )
        except requests.Timeout:
            logger.error(
                "Downstream service request timed out",
                service=self.service_name,
                method=method,
                url=url,
                timeout=kwargs["timeout"],
            )
            raise
        except requests.ConnectionError as e:
            logger.error(
                "Failed to connect to downstream service",
                service=self.service_name,
                method=method,
                url=url,
                error=str(e),
            )
            raise

        logger.info(
            "Received downstream service response",
            service=self.service_name,
            method=method,
            url=url,
            status_code=response.status_code,
        )
        self._raise_for_status(response)
        return response

    def _raise_for_status(self, response: requests.Response) -> None:
        """Turn error responses into exceptions.

        404 is left to specific clients.
        """
        if response.status_code >= 500:
            logger.error(
                "Downstream service returned server error",
                service=self.service_name,
                status_code=response.status_code,
                response_text=response.text[:400],
            )
            raise DownstreamServiceUnavailableError(
                service_name=self.service_name,
                status_code=response.status_code,
            )

        if response.status_code >= 400 and response.status_code != 404:
            logger.error(
                "Downstream service returned client error",
                service=self.service_name,
                status_code=response.status_code,
                response_text=response.text[:400],
            )
            raise DownstreamServiceError(
                message=f"{self.service_name} returned {response.status_code}",
                service_name=self.service_name,
                status_code=response.status_code,
            )
