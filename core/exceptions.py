"""
Custom exceptions for the application.
Every domain failure maps to one of these; the API and the web UI translate
them into client-visible responses at the boundary.
"""


class BaseApplicationException(Exception):
    """Base exception for all application-specific exceptions"""
    default_message = "An application error occurred"
    default_code = "APPLICATION_ERROR"

    def __init__(self, message=None, code=None, details=None):
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(BaseApplicationException):
    """Raised when input is missing, malformed or violates a unique key"""
    default_message = "Validation failed"
    default_code = "VALIDATION_ERROR"


class NotFoundError(BaseApplicationException):
    """Raised when a referenced resource does not exist"""
    default_message = "Resource not found"
    default_code = "NOT_FOUND"

    def __init__(self, resource_type=None, resource_id=None, **kwargs):
        self.resource_type = resource_type
        self.resource_id = resource_id
        if resource_type and 'message' not in kwargs:
            kwargs['message'] = f"{resource_type} {resource_id} not found"
        super().__init__(**kwargs)


class ConflictError(BaseApplicationException):
    """Raised when a state-guarded operation is attempted in the wrong state"""
    default_message = "Operation conflicts with the current state of the resource"
    default_code = "CONFLICT"


class ConcurrencyError(ConflictError):
    """Raised when a record changed between read and write"""
    default_message = "Resource was modified by another request"
    default_code = "CONCURRENCY_CONFLICT"
