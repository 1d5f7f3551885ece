"""JSON success/error envelope shared by every endpoint."""
from __future__ import annotations

import time
from typing import Any, Dict

from django.utils import timezone
from rest_framework.response import Response


def _stamp() -> Dict[str, Any]:
    return {
        "timestamp": int(time.time()),
        "formatted_time": timezone.localtime().strftime("%Y-%m-%d %H:%M:%S"),
    }


def success_payload(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data, **_stamp()}


def error_payload(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message, **_stamp()}


def success_response(data: Any) -> Response:
    return Response(success_payload(data), status=200)


def error_response(message: str, status: int) -> Response:
    return Response(error_payload(message), status=status)
