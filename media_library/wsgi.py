"""WSGI config for the media library service."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "media_library.settings")

application = get_wsgi_application()
