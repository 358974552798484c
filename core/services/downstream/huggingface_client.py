"""Client for the HuggingFace Responses API."""

from typing import Any

from django.conf import settings

import requests
import structlog

from core.config.downstream_urls import HUGGINGFACE_ROUTER_URL
from core.exceptions import (
    DownstreamServiceError,
    DownstreamServiceUnavailableError,
    ServiceNotConfiguredError,
)
from core.services.downstream.base_downstream_client import BaseDownstreamClient

logger = structlog.get_logger(__name__)

SERVICE_NAME = "huggingface"
WARMING_UP_MESSAGE = "The AI model is warming up, please try again in about 20 seconds."


class HuggingFaceClient(BaseDownstreamClient):
    """Client for text generation through the HuggingFace router."""

    def __init__(self):
        """Initialize HuggingFace client with service configuration."""
        super().__init__(
            service_name=SERVICE_NAME,
            base_url=HUGGINGFACE_ROUTER_URL,
            timeout=60,
        )

    @property
    def token(self) -> str | None:
        """API token from settings, if configured."""
        return settings.HUGGINGFACE_TOKEN or None

    @property
    def model(self) -> str:
        """Text-generation model to use."""
        return settings.HUGGINGFACE_MODEL

    def _get_headers(self) -> dict[str, str]:
        headers = super()._get_headers()
        headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def generate(self, instructions: str, prompt: str) -> Any:
        """Run a text-generation request.

        Args:
            instructions: System instructions for the model
            prompt: User input

        Returns:
            The decoded response body (an empty dict when it is not JSON)

        Raises:
            ServiceNotConfiguredError: If no API token is configured
            DownstreamServiceUnavailableError: If the model is warming up (503)
            DownstreamServiceError: For any other failure
        """
        if not self.token:
            raise ServiceNotConfiguredError(
                message="HUGGINGFACE_TOKEN is not configured.",
                service_name=self.service_name,
            )

        try:
            response = self._make_request(
                "POST",
                self.base_url,
                json_data={
                    "model": self.model,
                    "instructions": instructions,
                    "input": prompt,
                },
            )
        except (requests.Timeout, requests.ConnectionError) as e:
            raise DownstreamServiceError(
                message="Failed to reach AI service.",
                service_name=self.service_name,
            ) from e

        return _json_or_empty(response)

    def _raise_for_status(self, response: requests.Response) -> None:
        if response.status_code < 400:
            return

        logger.error(
            "HuggingFace returned an error",
            status_code=response.status_code,
            response_text=response.text[:400],
        )
        if response.status_code == 503:
            raise DownstreamServiceUnavailableError(
                service_name=self.service_name,
                status_code=503,
                message=WARMING_UP_MESSAGE,
            )

        body = _json_or_empty(response)
        if not isinstance(body, dict):
            body = {}
        error = body.get("error")
        message = (
            (error.get("message") if isinstance(error, dict) else error)
            or body.get("message")
            or f"AI service error ({response.status_code})"
        )
        raise DownstreamServiceError(
            message=str(message),
            service_name=self.service_name,
            status_code=response.status_code,
        )


def _json_or_empty(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}


# Singleton instance for use throughout the application
huggingface_client = HuggingFaceClient()
