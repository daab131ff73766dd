"""
Error taxonomy shared by every app, and the DRF exception handler that renders it.

Each error carries a machine-readable ``kind`` next to a human-readable message.
Response bodies always look like ``{"error": "...", "kind": "..."}``.
"""
import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class TrailMatchError(exceptions.APIException):
    """Base class for errors raised by the domain services."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Internal server error'
    default_code = 'internal_failure'
    kind = 'internal_failure'


class RequestValidationError(TrailMatchError):
    """Malformed or out-of-range input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input data'
    default_code = 'validation_error'
    kind = 'validation_error'


class ResourceNotFound(TrailMatchError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found'
    default_code = 'not_found'
    kind = 'not_found'


class Conflict(TrailMatchError):
    """The request collides with existing state (duplicate swipe, existing friendship)."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Request conflicts with existing data'
    default_code = 'conflict'
    kind = 'conflict'


class Forbidden(TrailMatchError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Not authorized to perform this action'
    default_code = 'forbidden'
    kind = 'forbidden'


class InternalFailure(TrailMatchError):
    pass


KIND_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: 'validation_error',
    status.HTTP_401_UNAUTHORIZED: 'unauthenticated',
    status.HTTP_403_FORBIDDEN: 'forbidden',
    status.HTTP_404_NOT_FOUND: 'not_found',
    status.HTTP_405_METHOD_NOT_ALLOWED: 'validation_error',
}


def api_exception_handler(exc, context):
    """
    Wraps DRF's default handler so every error response has the same shape.

    Unhandled exceptions are logged and rendered as a generic 500; no traceback
    or internal identifier reaches the client.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}")
        return Response(
            {'error': InternalFailure.default_detail, 'kind': InternalFailure.kind},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        kind = 'unauthenticated'
    else:
        kind = getattr(exc, 'kind', None) or KIND_BY_STATUS.get(response.status_code, 'internal_failure')

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            'error': 'Invalid input data',
            'kind': kind,
            'details': response.data,
        }
    else:
        detail = getattr(exc, 'detail', None)
        message = str(detail) if detail is not None else str(exc)
        response.data = {'error': message, 'kind': kind}

    if response.status_code >= 500:
        logger.error(f"Request failed with {response.status_code}: {response.data['error']}")

    return response
