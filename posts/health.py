"""Health check endpoints for production monitoring."""

import logging
import os
import time
from typing import Any, Dict

from django.conf import settings
from django.db import connection
from django.db.utils import OperationalError
from django.http import JsonResponse
from django.utils import timezone

logger = logging.getLogger(__name__)

APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")
APP_START_TIME = time.time()


def _get_uptime_formatted() -> Dict[str, Any]:
    """Get uptime in human-readable format and raw seconds."""
    uptime_seconds = int(time.time() - APP_START_TIME)
    days, remainder = divmod(uptime_seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{seconds}s")

    return {"seconds": uptime_seconds, "formatted": " ".join(parts)}


def _no_cache(response: JsonResponse) -> JsonResponse:
    response["Cache-Control"] = "no-cache, no-store, must-revalidate, max-age=0"
    return response


def health_check(request):
    """
    Health check with a database round trip.
    Returns 503 when the database is unreachable.
    """
    database = "ok"
    status = 200
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except OperationalError as e:
        logger.error(f"Health check database failure: {e}")
        database = "unavailable"
        status = 503

    return _no_cache(JsonResponse(
        {
            "status": "healthy" if status == 200 else "unhealthy",
            "version": APP_VERSION,
            "environment": "production" if not settings.DEBUG else "development",
            "timestamp": timezone.now().isoformat(),
            "uptime": _get_uptime_formatted(),
            "checks": {"database": database},
        },
        status=status,
    ))


def liveness_check(request):
    """Liveness check; never touches the database."""
    return _no_cache(JsonResponse({
        "status": "alive",
        "timestamp": timezone.now().isoformat(),
    }))
