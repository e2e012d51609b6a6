# -*- coding: utf-8 -*-
"""
Error Boundary for Wizard Steps.

Keeps failures inside a step-view from escaping it:
- Catches exceptions during step lifecycle and actions
- Logs errors with context
- Converts them to a user-facing message emitted through error_occurred

The owning step turns that message into a step error in the state
manager; nothing is raised across the step completion callback.
"""

from typing import Optional, Callable
from functools import wraps

from PyQt5.QtCore import pyqtSignal, QObject

from services.error_mapper import map_exception
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorBoundary(QObject):
    """
    Error boundary for a wizard step.

    Wraps step methods with error handling to prevent crashes.
    """

    error_occurred = pyqtSignal(str, str)  # error_type, user message

    def __init__(self, step_name: str, parent: Optional[QObject] = None):
        """
        Initialize error boundary.

        Args:
            step_name: Name of the step being protected (for logs)
            parent: Owning QObject
        """
        super().__init__(parent)
        self.step_name = step_name
        self.error_count = 0
        self.last_error: Optional[Exception] = None

    def protect(self, func: Callable, operation_name: str = "operation") -> Callable:
        """
        Wrap a function with the error boundary.

        Args:
            func: Function to protect
            operation_name: Name of operation for logging

        Returns:
            Wrapped function that returns None instead of raising
        """
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                self.handle_error(e, operation_name)
                return None

        return wrapper

    def handle_error(self, error: Exception, operation: str) -> str:
        """
        Record an error raised in the step.

        Returns:
            The user-facing message that was emitted
        """
        self.error_count += 1
        self.last_error = error

        logger.error(f"Error in {self.step_name} during {operation}: {error}", exc_info=True)

        message = tr("error.step_view", error=map_exception(error, operation))
        self.error_occurred.emit(type(error).__name__, message)
        return message


def with_error_boundary(operation_name: str = "operation"):
    """
    Decorator routing exceptions of a step method to the step's boundary.

    The decorated method's owner must have an `error_boundary` attribute.

    Usage:
        @with_error_boundary("adding component")
        def add_component(self):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except Exception as e:
                self.error_boundary.handle_error(e, operation_name)
                return None

        return wrapper
    return decorator
