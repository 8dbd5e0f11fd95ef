"""
Base service classes.
Services contain business logic and orchestrate between repositories.
"""
from django.db import transaction
import logging

logger = logging.getLogger(__name__)


class BaseService:
    """
    Base service class providing common functionality.
    Each public mutating method of a service runs inside one transaction.
    """

    def __init__(self):
        # Module-level logger name so the per-app LOGGING entries apply
        self.logger = logging.getLogger(self.__class__.__module__)

    @transaction.atomic
    def execute_in_transaction(self, func, *args, **kwargs):
        """Execute a function within a database transaction"""
        return func(*args, **kwargs)

    def log_info(self, message: str, **context):
        """Log info message with context"""
        self.logger.info(f"{message} | Context: {context}")

    def log_warning(self, message: str, **context):
        """Log warning message with context"""
        self.logger.warning(f"{message} | Context: {context}")

    def log_error(self, message: str, error: Exception = None, **context):
        """Log error message with context"""
        if error:
            self.logger.error(f"{message} | Context: {context}", exc_info=error)
        else:
            self.logger.error(f"{message} | Context: {context}")
