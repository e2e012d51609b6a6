# -*- coding: utf-8 -*-
"""
Tests for the error message mapper.
"""

import requests

from conftest import server_error
from services.error_mapper import map_exception
from services.exceptions import (
    ApiException, NetworkException, ValidationException, MissingStepDataError
)
from services.translation_manager import tr
from services.wizard.logical_steps import LogicalStep


def test_server_message_surfaces_verbatim():
    """Test the JSON `message` of a failed request is shown as-is."""
    assert map_exception(server_error("DB unavailable")) == "DB unavailable"


def test_server_error_without_message():
    error = ApiException(message="500 Server Error", status_code=500)
    assert map_exception(error) == tr("error.api.server")


def test_client_error_without_message():
    error = ApiException(message="404 Not Found", status_code=404)
    assert map_exception(error) == tr("error.api.unknown")


def test_validation_details_do_not_replace_message():
    error = ApiException(
        message="Bad request",
        status_code=400,
        response_data={"message": "Name is required", "details": ["name: required"]}
    )
    assert map_exception(error) == "Name is required"


def test_timeout():
    error = NetworkException("timed out", is_timeout=True)
    assert map_exception(error) == tr("error.api.timeout")


def test_timeout_detected_from_original_error():
    original = requests.exceptions.ReadTimeout("Read timed out")
    assert map_exception(NetworkException("x", original_error=original)) == tr("error.api.timeout")


def test_connection_error():
    original = requests.exceptions.ConnectionError("refused")
    assert map_exception(NetworkException("x", original_error=original)) == tr("error.api.connection")


def test_validation_exception():
    assert map_exception(ValidationException("Name is required", field="name")) == "Name is required"


def test_missing_step_data():
    message = map_exception(MissingStepDataError(LogicalStep.METADATA))
    assert message == tr("error.missing_step_data", step="metadata")


def test_unexpected_error():
    assert map_exception(RuntimeError("boom"), "upload") == tr("error.api.unknown")
