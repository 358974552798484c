"""Request tracing middleware: request id correlation and timing."""

import logging
import time
import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.constants import PROCESS_TIME_HEADER, REQUEST_ID_HEADER, SLOW_REQUEST_THRESHOLD
from core.logging.context import clear_request_id, set_request_id

logger = logging.getLogger(__name__)


class RequestTracingMiddleware:
    """Tag every request with an id and measure how long it took.

    An incoming ``X-Request-ID`` is reused, otherwise a UUID is generated.
    The id is held thread-locally only while the request runs so log lines
    can be correlated; it is never used for authorization. Both the id and
    ``X-Process-Time`` (seconds) are echoed on the response, and requests
    slower than ``SLOW_REQUEST_THRESHOLD`` are logged as warnings.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        set_request_id(request_id)
        request.request_id = request_id  # type: ignore[attr-defined]

        started = time.perf_counter()
        try:
            response = self.get_response(request)
            elapsed = time.perf_counter() - started

            response[REQUEST_ID_HEADER] = request_id
            response[PROCESS_TIME_HEADER] = f"{elapsed:.6f}"

            if elapsed > SLOW_REQUEST_THRESHOLD:
                logger.warning(
                    f"Slow request: {request.method} {request.path} "
                    f"returned {response.status_code} in {elapsed:.2f}s"
                )
            return response
        finally:
            clear_request_id()
