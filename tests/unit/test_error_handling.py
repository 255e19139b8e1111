"""Unit tests for the exception hierarchy."""

from presenter_hub.utils.error_handling import (
    AppException,
    GenerationError,
    StorageError,
    format_exception_for_logging,
)


def test_to_dict():
    error = StorageError("disk full", details={"path": "/tmp/x.json"})

    assert error.to_dict() == {
        "error": "StorageError",
        "message": "disk full",
        "details": {"path": "/tmp/x.json"},
    }
    assert isinstance(error, AppException)


def test_generation_error_keeps_response():
    error = GenerationError("Failed to generate presentation", status_code=502, body="bad gateway")

    assert error.status_code == 502
    assert error.body == "bad gateway"
    assert error.details == {"status_code": 502, "body": "bad gateway"}


def test_format_exception_for_logging():
    try:
        raise StorageError("disk full", details={"path": "p"})
    except StorageError as e:
        info = format_exception_for_logging(e)

    assert info["error_type"] == "StorageError"
    assert info["error_message"] == "disk full"
    assert info["error_details"] == {"path": "p"}
    assert "raise StorageError" in info["traceback"]


def test_format_plain_exception():
    info = format_exception_for_logging(ValueError("bad"))

    assert info["error_type"] == "ValueError"
    assert "error_details" not in info
