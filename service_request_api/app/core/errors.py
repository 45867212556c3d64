"""
Domain exceptions raised by the service layer.

All of them derive from ``ValueError`` so callers that only care about
"bad input" can keep catching ``ValueError``.  Endpoints map each
subclass to its HTTP status code.
"""


class ServiceRequestError(ValueError):
    """Base class for errors raised while handling service requests."""


class ValidationError(ServiceRequestError):
    """Missing or malformed input (HTTP 400)."""


class ConflictError(ServiceRequestError):
    """The requested slot is already taken (HTTP 409)."""


class NotFoundError(ServiceRequestError):
    """No service request with the given id (HTTP 404)."""


class StorageCorruptionError(ServiceRequestError):
    """Persisted data could not be parsed.

    Raised and handled inside the record store, which resets the data
    file instead of failing the request.
    """
