from rest_framework import exceptions
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny
from django.db import connections
from django.db.utils import OperationalError
from django.conf import settings
from django.utils import timezone
import time

from .permissions import HasCronSecret


class HealthCheckView(APIView):
    """
    Lightweight health endpoint for uptime checks.
    - Checks DB connectivity
    - Returns env and simple latency
    """
    permission_classes = [AllowAny]
    authentication_classes = []  # public endpoint

    def get(self, request, *args, **kwargs):
        start = time.time()

        db_ok = True
        try:
            connections["default"].cursor()
        except OperationalError:
            db_ok = False

        duration_ms = int((time.time() - start) * 1000)

        return Response(
            {
                "status": "ok" if db_ok else "degraded",
                "db": db_ok,
                "env": getattr(settings, "ENV", "unknown"),
                "latency_ms": duration_ms,
            }
        )


class CronJobView(APIView):
    """
    Base for scheduler-triggered jobs (GET /api/cron/<job>/).

    Subclasses implement `run()` and return the job's result dict; the
    response is {"success": true, "timestamp": ..., "results": ...}.
    Missing or wrong bearer secret -> 401.
    """
    authentication_classes = []
    permission_classes = [HasCronSecret]

    def get_authenticate_header(self, request):
        return "Bearer"

    def permission_denied(self, request, message=None, code=None):
        # missing or wrong secret is a 401
        raise exceptions.NotAuthenticated(detail=message or "Unauthorized")

    def run(self):
        raise NotImplementedError

    def get(self, request):
        started = timezone.now()
        results = self.run()
        return Response({
            "success": True,
            "timestamp": started.isoformat(),
            "results": results,
        })
