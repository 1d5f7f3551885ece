"""Render every failure as the JSON error envelope."""
from __future__ import annotations

import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException

from weatherapi.api.envelope import error_response
from weatherapi.core.errors import ValidationError, WeatherError


logger = logging.getLogger(__name__)


def envelope_exception_handler(exc, context):
    if isinstance(exc, ValidationError):
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, WeatherError):
        view = context.get("view")
        logger.error("Weather pipeline failed in %s: %s", view.__class__.__name__, exc)
        return error_response(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(exc, Http404):
        return error_response("Endpoint not found", status.HTTP_404_NOT_FOUND)
    if isinstance(exc, PermissionDenied):
        return error_response("Forbidden", status.HTTP_403_FORBIDDEN)
    if isinstance(exc, APIException):
        response = error_response(str(exc.detail), exc.status_code)
        if getattr(exc, "wait", None):
            response["Retry-After"] = str(int(exc.wait))
        return response

    logger.exception("Unhandled error", exc_info=exc)
    return error_response("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)
