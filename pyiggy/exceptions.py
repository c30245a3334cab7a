# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Custom exceptions for the pyiggy topic codec.

All exceptions inherit from IggyError, making it easy to catch every
codec error with a single except clause:

    try:
        topic = decode_topic_json(body)
    except IggyError as e:
        print(f"pyiggy error: {e}")

Decoding faults share the DecodingError base and always name the
offending wire field:

    try:
        topic = decode_topic(payload)
    except MissingFieldError as e:
        print(f"Response is missing {e.field}")
    except TypeMismatchError as e:
        print(f"{e.field} should be {e.expected}")
"""

from __future__ import annotations

from typing import Any


class IggyError(Exception):
    """
    Base exception for all pyiggy errors.

    All pyiggy exceptions inherit from this class, allowing you to catch
    all codec-related errors with a single except clause.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        self.hint = hint
        if hint:
            message = f"{message}\n\n  Hint: {hint}"
        super().__init__(message)


class DecodingError(IggyError):
    """
    Base exception for wire-format decoding faults.

    A decoding fault is terminal for the current call: nothing is
    retried and no partially built entity is returned.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        *,
        hint: str | None = None,
    ) -> None:
        self.field = field
        self.reason = message
        super().__init__(message, hint=hint)

    def with_path(self, prefix: str) -> DecodingError:
        """Return a copy of this fault whose field is rooted at ``prefix``."""
        return DecodingError(self.reason, _join(prefix, self.field), hint=self.hint)


def _join(prefix: str, field: str | None) -> str:
    if not field:
        return prefix
    if field.startswith("["):
        return f"{prefix}{field}"
    return f"{prefix}.{field}"


class InvalidJsonError(DecodingError):
    """Raised when the response body is not valid JSON text."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(
            f"Response body is not valid JSON: {detail}",
            hint="Check that the server returned a JSON document and not an error page",
        )

    def with_path(self, prefix: str) -> InvalidJsonError:
        return self


class MissingFieldError(DecodingError):
    """
    Raised when a required wire field is absent.

    This typically means the server speaks a different API version or
    the payload is not a topic/partition object at all.
    """

    def __init__(self, field: str) -> None:
        super().__init__(
            f"Missing required field: {field}",
            field,
            hint="Check that the server version matches the pyiggy wire contract",
        )

    def with_path(self, prefix: str) -> MissingFieldError:
        return MissingFieldError(_join(prefix, self.field))


class TypeMismatchError(DecodingError):
    """
    Raised when a wire field holds the wrong kind of JSON value.

    Integers must be real JSON integers: booleans, floats and values
    outside the field's range are rejected.
    """

    def __init__(self, field: str, expected: str, received: Any = None) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"Field {field} expected {expected}, got {_describe(received)}",
            field,
        )

    def with_path(self, prefix: str) -> TypeMismatchError:
        return TypeMismatchError(_join(prefix, self.field), self.expected, self.received)


class MalformedQuantityError(DecodingError):
    """
    Raised when a size field is not a valid quantity string.

    Valid quantities look like "10 MB": an unsigned integer, one space and
    one of the units B, KB, MB, GB or TB.
    """

    def __init__(self, value: Any, field: str | None = None) -> None:
        self.value = value
        where = f" in field {field}" if field else ""
        super().__init__(
            f"Malformed quantity{where}: {value!r}",
            field,
            hint="Expected '<integer> <unit>' with unit one of B, KB, MB, GB, TB",
        )

    def with_path(self, prefix: str) -> MalformedQuantityError:
        return MalformedQuantityError(self.value, _join(prefix, self.field))


class UnknownEnumValueError(DecodingError):
    """Raised when an enumerated wire field holds an unrecognized value."""

    def __init__(self, value: str, field: str | None = None, allowed: list[str] | None = None) -> None:
        self.value = value
        self.allowed = allowed or []
        where = f" for field {field}" if field else ""
        hint = f"Allowed values: {', '.join(self.allowed)}" if self.allowed else None
        super().__init__(f"Unknown value{where}: {value!r}", field, hint=hint)

    def with_path(self, prefix: str) -> UnknownEnumValueError:
        return UnknownEnumValueError(self.value, _join(prefix, self.field), self.allowed)


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return f"integer {value}"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
