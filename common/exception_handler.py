"""Maps exceptions to the `{success: false, code, message}` response body.

Registered as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Internal error details
are only exposed when DEBUG is on.
"""

import logging

from django.conf import settings
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response

from common.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_AUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.NO_VALID_FIELDS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CATEGORY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CAPACITY_BELOW_SOLD: status.HTTP_409_CONFLICT,
    ErrorCode.RSVP_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ALREADY_RSVPED: status.HTTP_409_CONFLICT,
    ErrorCode.RSVP_REQUIRES_FREE_EVENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CAPACITY_EXCEEDED: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_CHECK_IN_COUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_REQUIRES_PAID_EVENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TICKET_ALREADY_USED: status.HTTP_409_CONFLICT,
    ErrorCode.TICKET_CANCELLED: status.HTTP_409_CONFLICT,
    ErrorCode.TICKET_NOT_CANCELLABLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_ENDED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_STARTED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CONTACT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_STATUS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EMAIL_TAKEN: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.CANNOT_DELETE_SELF: status.HTTP_400_BAD_REQUEST,
}


def error_response(code: ErrorCode, message: str, **extra) -> Response:
    body = {"success": False, "code": code.value, "message": message}
    body.update({key: value for key, value in extra.items() if value is not None})
    return Response(body, status=STATUS_BY_CODE[code])


def domain_exception_handler(exc, context) -> Response:
    """Translate domain, DRF and unexpected errors into the error envelope."""
    if isinstance(exc, DomainError):
        return error_response(exc.code, exc.message, data=exc.data)

    if isinstance(exc, exceptions.ValidationError):
        return error_response(
            ErrorCode.VALIDATION_ERROR,
            _first_message(exc.detail),
            errors=exc.detail,
        )

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        response = error_response(ErrorCode.NOT_AUTHENTICATED, str(exc.detail))
        if context.get("request") is not None:
            auth_header = context["view"].get_authenticate_header(context["request"])
            if auth_header:
                response["WWW-Authenticate"] = auth_header
        return response

    if isinstance(exc, exceptions.PermissionDenied):
        return error_response(ErrorCode.PERMISSION_DENIED, str(exc.detail))

    if isinstance(exc, Http404):
        return Response(
            {"success": False, "code": "NOT_FOUND", "message": "Resource not found"},
            status=status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, exceptions.APIException):
        return Response(
            {"success": False, "code": exc.default_code.upper(), "message": str(exc.detail)},
            status=exc.status_code,
        )

    view = context.get("view")
    logger.exception("Unhandled error in %s", type(view).__name__ if view else "view")
    return error_response(
        ErrorCode.SERVER_ERROR,
        "Server error",
        error=str(exc) if settings.DEBUG else None,
    )


def _first_message(detail) -> str:
    if isinstance(detail, dict):
        for key, value in detail.items():
            message = _first_message(value)
            return message if key == "non_field_errors" else f"{key}: {message}"
    if isinstance(detail, list) and detail:
        return _first_message(detail[0])
    return str(detail) or "Invalid request"
