from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger("padel.api")


def custom_exception_handler(exc, context):
    """
    Wrap DRF + Django exceptions into a consistent response format:
    {"success": false, "status_code": ..., "errors": ...}

    Success responses (2xx) are not touched.
    Only errors come through here.
    """
    response = drf_exception_handler(exc, context)

    # If DRF handled it, wrap it (keep WWW-Authenticate / Retry-After)
    if response is not None:
        wrapped = Response(
            {
                "success": False,
                "status_code": response.status_code,
                "errors": response.data,
            },
            status=response.status_code,
        )
        for header in ("WWW-Authenticate", "Retry-After"):
            if header in response:
                wrapped[header] = response[header]
        return wrapped

    # Unhandled exceptions -> 500
    view = context.get("view")
    logger.exception(
        "Unhandled API exception in %s",
        view.__class__.__name__ if view else "unknown view",
        exc_info=exc,
    )

    return Response(
        {
            "success": False,
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "errors": {"detail": "Internal server error."},
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
