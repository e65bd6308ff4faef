# apps/core/exceptions.py
from logging import getLogger

from django.http import HttpResponse
from rest_framework import exceptions
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler

logger = getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server Error"


def flatten_validation_errors(detail, param=None):
    """
    Flattens DRF's nested error detail into a list of {"param", "msg"} dicts.
    Non-field errors carry no "param" key.
    """
    if isinstance(detail, dict):
        errors = []
        for field, value in detail.items():
            if field == api_settings.NON_FIELD_ERRORS_KEY:
                name = param
            else:
                name = f"{param}.{field}" if param else field
            errors.extend(flatten_validation_errors(value, name))
        return errors

    if isinstance(detail, (list, tuple)):
        errors = []
        for item in detail:
            errors.extend(flatten_validation_errors(item, param))
        return errors

    error = {"msg": str(detail)}
    if param:
        error["param"] = param
    return [error]


def api_exception_handler(exc, context):
    """
    Project-wide DRF exception handler.

    - ValidationError -> 400 {"errors": [{"param": ..., "msg": ...}, ...]}
    - Other API exceptions (401, 404, ...) -> {"msg": ...} with their status
    - Anything else is logged and answered with a plain-text 500.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        view_name = view.__class__.__name__ if view is not None else 'unknown view'
        logger.error(f"Unhandled error in {view_name}: {exc}", exc_info=exc)
        return HttpResponse(SERVER_ERROR_MESSAGE, status=500, content_type='text/plain')

    if isinstance(exc, exceptions.ValidationError):
        response.data = {"errors": flatten_validation_errors(response.data)}
        return response

    if isinstance(response.data, dict):
        detail = response.data.get('detail', '')
    else:
        detail = response.data
    response.data = {"msg": str(detail)}
    return response
