"""Maps domain errors onto HTTP responses with a stable error envelope.

    {"error": {"code": "CONFLICT", "message": "...", "availableSlots": 6}}

Internal errors are logged here and reach the caller only as a generic message.
"""

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from storefront.domain.errors import DomainError, ErrorCode
from storefront.logging_utils import get_storefront_logger

logger = get_storefront_logger("handlers")

STATUS_BY_CODE = {
    ErrorCode.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOO_MANY_REQUESTS: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorCode.INTERNAL_SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}
GENERIC_INTERNAL_MESSAGE = "Internal server error"


def error_body(code: ErrorCode, message: str, **details) -> dict:
    return {"error": {"code": code.value, "message": message, **details}}


def storefront_exception_handler(exc, context):
    """DRF EXCEPTION_HANDLER for the storefront API."""
    if isinstance(exc, DomainError):
        if exc.code is ErrorCode.INTERNAL_SERVER_ERROR:
            logger.error("Internal error: %s", exc.message)
            body = error_body(exc.code, GENERIC_INTERNAL_MESSAGE)
        else:
            body = error_body(exc.code, exc.message, **exc.details)
        return Response(body, status=STATUS_BY_CODE[exc.code])

    if isinstance(exc, exceptions.ValidationError):
        return Response(
            error_body(ErrorCode.BAD_REQUEST, "Invalid input", fields=exc.detail),
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is not None:
        response.data = error_body(
            _code_for_status(response.status_code),
            str(getattr(exc, "detail", exc)),
        )
    return response


def _code_for_status(status_code: int) -> ErrorCode:
    for code, mapped in STATUS_BY_CODE.items():
        if mapped == status_code:
            return code
    if status_code >= 500:
        return ErrorCode.INTERNAL_SERVER_ERROR
    return ErrorCode.BAD_REQUEST
