"""CORS headers for the public, read-only API."""
from __future__ import annotations

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET",
    "Access-Control-Allow-Headers": "Content-Type",
}


class CorsHeadersMiddleware:
    """Allow any origin to issue GET requests."""

    def __init__(self, get_response) -> None:
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        for header, value in CORS_HEADERS.items():
            response[header] = value
        return response
