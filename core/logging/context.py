"""Thread-local request id used to correlate log lines.

Only the request id lives here. Who is calling is never read from
thread-local state; services receive it explicitly as a RequestContext.
"""

import threading

_request_context = threading.local()


def set_request_id(request_id: str) -> None:
    """Remember the id of the request being handled on this thread."""
    _request_context.request_id = request_id


def get_request_id() -> str | None:
    """Return the current request id, or None outside a request."""
    return getattr(_request_context, "request_id", None)


def clear_request_id() -> None:
    """Forget the request id once the response has been produced."""
    if hasattr(_request_context, "request_id"):
        delattr(_request_context, "request_id")
