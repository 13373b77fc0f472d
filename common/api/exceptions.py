"""API exception handling.

Every error leaves the API as ``{"detail": <message>}``. Validation errors are
reduced to their first message; anything DRF does not know about is logged
and answered with a generic 500 so clients never see a traceback.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from common.validation import first_error_message

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "حدث خطأ غير متوقع، يرجى المحاولة مرة أخرى"
UNAUTHORIZED_MESSAGE = "غير مصرح"
THROTTLED_MESSAGE = "عدد المحاولات كثير، يرجى المحاولة لاحقاً"


def api_exception_handler(exc, context):
    """DRF exception handler installed via REST_FRAMEWORK["EXCEPTION_HANDLER"]."""
    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s",
            view.__class__.__name__ if view else "unknown view",
            exc_info=exc,
        )
        return Response(
            {"detail": GENERIC_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        response.data = {"detail": first_error_message(exc.detail)}
    elif isinstance(exc, exceptions.Throttled):
        response.data = {"detail": THROTTLED_MESSAGE}
    elif isinstance(exc, exceptions.NotAuthenticated):
        response.data = {"detail": UNAUTHORIZED_MESSAGE}
    return response
