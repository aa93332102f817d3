"""Exceptions raised by the Honeybadger API client.

Error taxonomy:

- RequestBuildError: the request could not be built (bad base URL, body not
  JSON serializable). Raised before any network I/O.
- APIError: the server answered with a non-2xx status code.
- DecodeError: the server answered 2xx but the body does not match the
  expected shape.

Network failures (connection errors, timeouts) are not wrapped, they
propagate as ``httpx.HTTPError`` subclasses.
"""

import json
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Literal

from honeybadger_api.json_utils import JSON_COMPACT_SEPARATORS


class HoneybadgerApiError(Exception):
    """Base exception for all client errors."""


class RequestBuildError(HoneybadgerApiError):
    """Request construction failed."""


class DecodeError(HoneybadgerApiError):
    """A successful response body could not be decoded."""

    def __init__(self, message: str, status_code: int, body: bytes = b"") -> None:
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)


@dataclass(frozen=True)
class TextErrors:
    """``errors`` field sent as a plain string."""

    text: str
    kind: Literal["text"] = "text"

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class StructuredErrors:
    """``errors`` field sent as a JSON array or object."""

    value: list[Any] | dict[str, Any]
    kind: Literal["structured"] = "structured"

    def render(self) -> str:
        return _flatten(self.value)


type ErrorsField = TextErrors | StructuredErrors


def _compact(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=JSON_COMPACT_SEPARATORS, sort_keys=True)


def _flatten(value: Any) -> str:
    if isinstance(value, list):
        return "; ".join(_flatten(item) for item in value)
    if isinstance(value, dict):
        parts = []
        for key, item in value.items():
            if isinstance(item, list):
                rendered = ", ".join(_compact(i) for i in item)
            else:
                rendered = _compact(item)
            parts.append(f"{key}: {rendered}")
        return "; ".join(parts)
    return _compact(value)


def parse_errors(value: Any) -> ErrorsField:
    """Classify the JSON value of an ``errors`` field."""
    if isinstance(value, str):
        return TextErrors(text=value)
    if isinstance(value, list | dict):
        return StructuredErrors(value=value)
    # numbers, booleans: keep the JSON representation
    return TextErrors(text=_compact(value))


def default_message(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return f"HTTP {status_code}"


class APIError(HoneybadgerApiError):
    """Non-2xx response from the Honeybadger API.

    Attributes:
        message: Human readable message normalized from the response body
        status_code: HTTP status code
        errors: The parsed ``errors`` field, if the body carried one
        body: Raw response body
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        errors: ErrorsField | None = None,
        body: bytes = b"",
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.errors = errors
        self.body = body
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"

    @classmethod
    def from_response(cls, status_code: int, body: bytes) -> "APIError":
        """Build an APIError from a raw error response.

        Never raises: a body that is not JSON, or JSON without an ``errors``
        field, falls back to the raw text or the status reason phrase.
        """
        text = body.decode("utf-8", errors="replace").strip()
        try:
            data = json.loads(text) if text else None
        except ValueError:
            data = None

        if isinstance(data, dict) and data.get("errors") is not None:
            errors = parse_errors(data["errors"])
            message = errors.render() or default_message(status_code)
            return cls(message, status_code, errors=errors, body=body)
        return cls(text or default_message(status_code), status_code, body=body)
