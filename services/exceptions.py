# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised for API errors."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    @property
    def server_message(self) -> str:
        """The `message` field of the JSON error body, if any."""
        if isinstance(self.response_data, dict):
            message = self.response_data.get("message")
            if isinstance(message, str) and message.strip():
                return message.strip()
        return ""

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ValidationException(Exception):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None, is_timeout: bool = False):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context
        self.is_timeout = is_timeout


class WizardContractError(Exception):
    """A wizard collaborator broke its contract (programming error)."""

    def __init__(self, message: str, step=None):
        super().__init__(message)
        self.message = message
        self.step = step


class MissingStepDataError(WizardContractError):
    """Required step data is absent when flattening the template payload."""

    def __init__(self, step):
        super().__init__(f"Missing data for required step: {step.value}", step)


class MissingStepViewError(WizardContractError):
    """No step-view is registered for a logical step."""

    def __init__(self, step):
        super().__init__(f"No step view registered for step: {step.value}", step)
