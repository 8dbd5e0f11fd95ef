"""
Logging configuration with request ID support
"""
import logging
import threading
import uuid

_request_state = threading.local()


def get_current_request_id():
    return getattr(_request_state, 'request_id', None)


class RequestIDFilter(logging.Filter):
    """
    Logging filter to add request ID to log records
    """
    def filter(self, record):
        request_id = getattr(record, 'request_id', None) or get_current_request_id()
        record.request_id = request_id or 'N/A'
        return True


class RequestIDMiddleware:
    """
    Middleware to generate and attach unique request ID to each request.
    Request ID is available in request.request_id and in all log messages.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        # Short 8-character ID
        request_id = str(uuid.uuid4())[:8]
        request.request_id = request_id
        _request_state.request_id = request_id

        try:
            response = self.get_response(request)
        finally:
            _request_state.request_id = None

        # Add to response headers for debugging
        response['X-Request-ID'] = request_id
        return response

    def process_exception(self, request, exception):
        """Log exceptions with request ID"""
        request_id = getattr(request, 'request_id', 'N/A')
        logger = logging.getLogger('django.request')
        logger.error(
            f"[{request_id}] Exception: {type(exception).__name__}: {str(exception)}",
            exc_info=True,
            extra={'request_id': request_id}
        )
