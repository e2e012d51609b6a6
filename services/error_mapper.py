# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.translation_manager import tr
from services.exceptions import (
    ApiException, ValidationException, NetworkException,
    WizardContractError, MissingStepDataError
)
from utils.logger import get_logger

logger = get_logger(__name__)


def map_api_error(error: ApiException) -> str:
    """Map API exception to the message shown to the user.

    The server's `message` field is surfaced as-is; without one the user
    gets a generic message chosen by status code.
    """
    status = error.status_code

    if status == 400:
        details = _extract_validation_details(error.response_data)
        if details:
            logger.warning(f"API validation error (400): {details}")
    elif status:
        logger.warning(f"API error ({status}): {error}")

    if error.server_message:
        return error.server_message

    if status and status >= 500:
        return tr("error.api.server")
    return tr("error.api.unknown")


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    if error.is_timeout:
        return tr("error.api.timeout")
    msg = str(error.original_error) if error.original_error else ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message.

    Technical details are logged only.
    """
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return error.message

    if isinstance(error, MissingStepDataError):
        return tr("error.missing_step_data", step=error.step.value)

    if isinstance(error, WizardContractError):
        logger.error(f"Wizard contract error: {error}")
        return tr("error.api.unknown")

    logger.warning(f"Unexpected error in {context or 'unknown'}: {error}")
    return tr("error.api.unknown")


def _extract_validation_details(response_data: dict) -> str:
    """Extract validation error details from API response."""
    if not response_data:
        return ""

    # Backend shape: {"success": false, "message": ..., "details": [...]}
    details = response_data.get("details") or response_data.get("errors", {})
    if isinstance(details, dict):
        lines = []
        for field, messages in details.items():
            if isinstance(messages, list):
                for msg in messages:
                    lines.append(f"• {field}: {msg}")
            else:
                lines.append(f"• {field}: {messages}")
        return "\n".join(lines)

    if isinstance(details, list):
        return "\n".join(f"• {e}" for e in details)

    return ""
