"""Tests for honeybadger_api.errors module."""

import pytest
from honeybadger_api import (
    APIError,
    DecodeError,
    HoneybadgerApiError,
    RequestBuildError,
    StructuredErrors,
    TextErrors,
)
from honeybadger_api.errors import default_message, parse_errors


def test_error_hierarchy() -> None:
    for exc in (APIError, DecodeError, RequestBuildError):
        assert issubclass(exc, HoneybadgerApiError)


def test_api_error_str() -> None:
    error = APIError("Access denied", 403)
    assert str(error) == "403: Access denied"
    assert error.errors is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param("Access denied", TextErrors(text="Access denied"), id="string"),
        pytest.param(
            ["a", "b"], StructuredErrors(value=["a", "b"]), id="array"
        ),
        pytest.param(
            {"name": ["taken"]}, StructuredErrors(value={"name": ["taken"]}), id="object"
        ),
        pytest.param(42, TextErrors(text="42"), id="number"),
    ],
)
def test_parse_errors(value: object, expected: object) -> None:
    assert parse_errors(value) == expected


@pytest.mark.parametrize(
    ("errors", "rendered"),
    [
        pytest.param(["too long", "invalid"], "too long; invalid", id="array"),
        pytest.param(
            {"email": ["is invalid"], "role": ["is not included in the list"]},
            "email: is invalid; role: is not included in the list",
            id="object-of-arrays",
        ),
        pytest.param({"base": "quota exceeded"}, "base: quota exceeded", id="object"),
        pytest.param(
            {"widgets": [{"index": 0}]}, 'widgets: {"index":0}', id="nested-object"
        ),
    ],
)
def test_structured_errors_render(errors: object, rendered: str) -> None:
    assert StructuredErrors(value=errors).render() == rendered  # type: ignore[arg-type]


def test_from_response_text_errors() -> None:
    error = APIError.from_response(403, b'{"errors": "Access denied"}')
    assert error.status_code == 403
    assert error.message == "Access denied"
    assert error.errors == TextErrors(text="Access denied")
    assert error.body == b'{"errors": "Access denied"}'


def test_from_response_structured_errors() -> None:
    error = APIError.from_response(422, b'{"errors": {"name": ["can\'t be blank"]}}')
    assert error.message == "name: can't be blank"
    assert isinstance(error.errors, StructuredErrors)


def test_from_response_empty_errors_uses_reason() -> None:
    error = APIError.from_response(400, b'{"errors": []}')
    assert error.message == "Bad Request"
    assert error.errors == StructuredErrors(value=[])


def test_from_response_json_without_errors() -> None:
    """Test JSON bodies without an errors field are kept as raw text."""
    error = APIError.from_response(500, b'{"error": "boom"}')
    assert error.message == '{"error": "boom"}'
    assert error.errors is None


def test_from_response_null_errors() -> None:
    error = APIError.from_response(400, b'{"errors": null}')
    assert error.message == '{"errors": null}'
    assert error.errors is None


def test_from_response_non_json() -> None:
    error = APIError.from_response(503, b"  Service Unavailable, try later \n")
    assert error.message == "Service Unavailable, try later"


def test_from_response_invalid_utf8() -> None:
    """Test undecodable bytes never make from_response raise."""
    error = APIError.from_response(500, b"\xff\xfe")
    assert error.status_code == 500
    assert error.message


@pytest.mark.parametrize(
    ("status_code", "message"),
    [
        pytest.param(404, "Not Found", id="known"),
        pytest.param(599, "HTTP 599", id="unknown"),
    ],
)
def test_default_message(status_code: int, message: str) -> None:
    assert default_message(status_code) == message
    assert APIError.from_response(status_code, b"").message == message
