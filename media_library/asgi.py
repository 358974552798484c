"""ASGI config for the media library service."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "media_library.settings")

application = get_asgi_application()
