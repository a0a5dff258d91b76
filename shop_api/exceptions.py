# shop_api/exceptions.py
import logging

from rest_framework import exceptions, status
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def first_error(errors):
    """
    Return the first human readable message from a serializer ``errors``
    structure (dict of lists, list, or plain string).
    """
    if isinstance(errors, dict):
        for value in errors.values():
            return first_error(value)
        return ""
    if isinstance(errors, (list, tuple)):
        return first_error(errors[0]) if errors else ""
    return str(errors)


class BusinessRuleViolation(exceptions.APIException):
    """Request was well formed but breaks a domain rule (stock, quantity...)."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "business_rule"


class AuthenticationRequired(exceptions.NotAuthenticated):
    default_detail = "Authentication required"
    error_code = 1000


class InsufficientRole(exceptions.PermissionDenied):
    default_detail = "Insufficient privileges"
    error_code = 1001

    def __init__(self, role, current_roles=(), detail=None):
        super().__init__(detail)
        self.required_role = role
        self.current_roles = list(current_roles)


def envelope_exception_handler(exc, context):
    """
    Wrap DRF error responses into the ``{"message", "errors"}`` envelope.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data

    if isinstance(exc, exceptions.ValidationError):
        response.data = {"message": first_error(data), "errors": data}
        return response

    if isinstance(data, dict) and "detail" in data:
        body = {"message": str(data.pop("detail"))}
        body.update(data)
    elif isinstance(data, dict):
        body = {"message": first_error(data), "errors": data}
    else:
        body = {"message": first_error(data)}

    error_code = getattr(exc, "error_code", None)
    if error_code is not None:
        body["error_code"] = error_code
    required_role = getattr(exc, "required_role", None)
    if required_role is not None:
        body["required_role"] = required_role
    current_roles = getattr(exc, "current_roles", None)
    if current_roles is not None:
        body["current_roles"] = current_roles

    if response.status_code >= 500:
        logger.error("API error %s: %s", response.status_code, body["message"])

    response.data = body
    return response
