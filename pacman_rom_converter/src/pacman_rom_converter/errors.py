"""Exceptions raised while converting images to ROM data."""

from __future__ import annotations


class ConversionError(Exception):
    """Custom exception for conversion errors."""


class NotPalettedError(ConversionError):
    """Raised when the input image does not carry palette indices."""


class SizeMismatchError(ConversionError):
    """Raised when a palette, tile or sprite count is not the required one."""

    def __init__(self, what: str, expected: int, actual: int, detail: str | None = None):
        message = f"bad size - expected {expected} {what}, got {actual}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.what = what
        self.expected = expected
        self.actual = actual
