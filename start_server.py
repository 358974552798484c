"""Production server startup script for the media library service.

Entry point for starting the Django application with Gunicorn in
containers.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the media library service using Gunicorn.

    Binds to 0.0.0.0 on ``PORT`` (default 8000) with ``WEB_CONCURRENCY``
    worker processes (default 4), 2 threads per worker and a 60 second
    timeout, logging to stdout/stderr.
    """
    sys.argv = [
        "gunicorn",
        "media_library.wsgi:application",
        "--bind",
        f"0.0.0.0:{os.getenv('PORT', '8000')}",
        "--workers",
        os.getenv("WEB_CONCURRENCY", "4"),
        "--threads",
        "2",
        "--timeout",
        "60",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
