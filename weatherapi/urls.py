"""Root URL configuration."""
from __future__ import annotations

from django.urls import include, path

urlpatterns = [
    path("", include("weatherapi.api.urls")),
]

handler404 = "weatherapi.api.views.not_found"
