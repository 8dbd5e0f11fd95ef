"""
DRF exception handler translating application exceptions into JSON responses
"""
import logging
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions import (
    BaseApplicationException, ValidationError, NotFoundError, ConflictError,
)

logger = logging.getLogger(__name__)

STATUS_BY_EXCEPTION = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def status_for(exc: BaseApplicationException) -> int:
    for exc_class, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def application_exception_handler(exc, context):
    """
    Application exceptions become ``{"detail", "code", "details"}`` with a 4xx
    status; everything else goes through DRF's default handler.
    """
    if isinstance(exc, BaseApplicationException):
        request = context.get('request')
        request_id = getattr(request, 'request_id', 'N/A') if request else 'N/A'
        status_code = status_for(exc)
        logger.info(
            f"[{request_id}] {type(exc).__name__} ({exc.code}): {exc.message}",
            extra={'request_id': request_id}
        )
        return Response(
            {'detail': exc.message, 'code': exc.code, 'details': exc.details},
            status=status_code
        )

    return exception_handler(exc, context)
