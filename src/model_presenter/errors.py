"""
Error types for presenter binding and JSON encoding.
"""

from __future__ import annotations


class PresenterError(Exception):
    """Base exception for all presenter errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PresenterClassNotDefinedError(PresenterError):
    """
    Raised when a model asks for its presenter but never declared one.

    Examples:
    - ``present()`` on a model class without a ``presenter`` attribute
    - ``presenter = None`` left on a model class
    """

    def __init__(self, message: str, model: str | None = None):
        self.model = model
        super().__init__(message)


class InvalidPresenterError(PresenterError, ValueError):
    """
    Raised when a declared presenter cannot be used.

    Examples:
    - Dotted path pointing at a module or class that does not exist
    - Class that does not implement ModelPresenterInterface
    - A value that is neither a class nor a string
    """

    def __init__(self, message: str, presenter_class: str | None = None):
        self.presenter_class = presenter_class
        super().__init__(message)


class JsonError(ValueError):
    """Base exception for strict JSON encoding and decoding."""

    prefix = "JSON error"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class JsonEncodeError(JsonError):
    """
    Raised when a value cannot be serialized.

    Examples:
    - Unsupported types (file handles, sets, bytes)
    - NaN or Infinity
    - Nesting deeper than the allowed depth, including cycles
    """

    prefix = "JSON encode error"


class JsonDecodeError(JsonError):
    """
    Raised when text cannot be parsed.

    Examples:
    - Malformed syntax or unterminated structures
    - Invalid UTF-8 in bytes input
    - Nesting deeper than the allowed depth
    """

    prefix = "JSON decode error"
