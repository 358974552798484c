"""Health probe endpoints."""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.services import health_service


class LivenessCheckView(APIView):
    """Liveness probe endpoint.

    Returns 200 if the service is alive and running.
    This should not check external dependencies.

    This endpoint is exempt from authentication to allow probes.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for liveness check.

        Args:
            _request: HTTP request object (unused).

        Returns:
            Response object with status OK if service is alive.
        """
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint.

    Returns 200 when the database is reachable, even if AI suggestions are
    not configured (reported as degraded), and 503 otherwise.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for readiness check."""
        readiness = health_service.get_readiness_status()
        http_status = (
            status.HTTP_200_OK
            if readiness.ready
            else status.HTTP_503_SERVICE_UNAVAILABLE
        )
        return Response(readiness.model_dump(mode="json"), status=http_status)
