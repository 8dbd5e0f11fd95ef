"""
Custom decorators for error handling with request ID logging
"""
from functools import wraps
from django.shortcuts import redirect
from django.contrib import messages
from django.utils.http import url_has_allowed_host_and_scheme
import logging

from core.exceptions import BaseApplicationException, NotFoundError

logger = logging.getLogger(__name__)


def _get_request_id(request):
    """Get request ID from request object"""
    return getattr(request, 'request_id', 'N/A')


def _log_with_request_id(level, request, message, exc_info=False):
    """Log message with request ID context"""
    request_id = _get_request_id(request)
    extra = {'request_id': request_id}
    if level == 'error':
        logger.error(f"[{request_id}] {message}", exc_info=exc_info, extra=extra)
    elif level == 'warning':
        logger.warning(f"[{request_id}] {message}", extra=extra)
    elif level == 'info':
        logger.info(f"[{request_id}] {message}", extra=extra)


def _safe_referer(request):
    referer = request.META.get('HTTP_REFERER')
    if referer and url_has_allowed_host_and_scheme(
        referer, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return referer
    return None


def handle_application_errors(view_func=None, *, fallback='web:dashboard'):
    """
    Turn application exceptions raised by a view into a flash message and a
    redirect back to the referring page (or ``fallback``).

    Anything that is not an application exception propagates unchanged.
    """
    def decorator(func):
        @wraps(func)
        def _wrapped_view(request, *args, **kwargs):
            try:
                return func(request, *args, **kwargs)
            except BaseApplicationException as e:
                level = 'info' if isinstance(e, NotFoundError) else 'warning'
                _log_with_request_id(level, request,
                    f"{type(e).__name__} ({e.code}) in {func.__name__}: {e.message}")
                messages.error(request, e.message)
                return redirect(_safe_referer(request) or fallback)
        return _wrapped_view

    if view_func is not None:
        return decorator(view_func)
    return decorator
