"""URL configuration for the media library service."""

from django.urls import include, path

urlpatterns = [
    path("api/v1/library/", include("core.urls")),
]
