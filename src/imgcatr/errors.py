"""Errors raised by imgcatr, each knowing how to report itself."""

import sys
from typing import Any, TextIO


class ImgcatrError(Exception):
    """Base exception for all imgcatr errors."""

    exit_code = 1

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message

    def print_error(self, stream: TextIO | None = None) -> None:
        print(str(self), file=stream if stream is not None else sys.stderr)


class DecodeError(ImgcatrError):
    """The image could not be read or decoded."""


class FormatGuessError(DecodeError):
    exit_code = 1

    def __init__(self, filename: str) -> None:
        super().__init__("Failed to guess image format", filename)
        self.filename = filename


class ImageOpenError(DecodeError):
    exit_code = 2

    def __init__(self, filename: str, reason: str | None = None) -> None:
        message = "Failed to open image file"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, filename)
        self.filename = filename
        self.reason = reason


class InvalidSizeArgument(ImgcatrError):
    """A size string was not of the form NxM, or asked for a zero size."""

    exit_code = 3

    def __init__(self, size: str, reason: str = 'not a valid size (in format "NNNxMMM")') -> None:
        super().__init__(reason, size)
        self.size = size
        self.reason = reason


class InvalidGeometry(ImgcatrError):
    """The output bound has a zero dimension."""

    exit_code = 4

    def __init__(self, columns: int, rows: int) -> None:
        super().__init__("Can't render into a zero-sized area", f"{columns}x{rows}")
        self.columns = columns
        self.rows = rows


class TerminalSizeUnavailable(ImgcatrError):
    """The terminal did not report its size. Never fatal."""
