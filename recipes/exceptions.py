"""Uniform JSON error bodies for every API failure."""

import logging
from http import HTTPStatus

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import exceptions
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(detail):
    """Pull the first non-empty human readable sentence out of a DRF error detail."""
    if isinstance(detail, dict):
        if "detail" in detail:
            return _first_message(detail["detail"])
        values = detail.values()
    elif isinstance(detail, (list, tuple)):
        values = detail
    else:
        return str(detail)
    for value in values:
        message = _first_message(value)
        if message:
            return message
    return ""


def api_exception_handler(exc, context):
    """Render errors as {status_code, error, message[, errors]}.

    Django model validation errors are reported as 400s; anything DRF does
    not recognise is left to Django (500) after being logged.
    """
    if isinstance(exc, DjangoValidationError):
        exc = exceptions.ValidationError(
            exc.message_dict if hasattr(exc, "error_dict") else {"detail": exc.messages}
        )

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", type(view).__name__ if view else "request", exc_info=exc)
        return None

    status_code = response.status_code
    body = {
        "status_code": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": _first_message(response.data),
    }
    if isinstance(exc, exceptions.ValidationError):
        errors = response.data if isinstance(response.data, dict) else {"non_field_errors": response.data}
        body["message"] = "Validation failed: " + body["message"] if body["message"] else "Validation failed"
        body["errors"] = errors
        logger.info("Rejected request with validation errors: %s", errors)
    elif status_code >= 500:
        logger.error("API error %s: %s", status_code, body["message"])

    response.data = body
    return response
