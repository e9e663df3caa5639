"""Typed exceptions for input parsing, layout and I/O."""

from __future__ import annotations

import os


class ReceiptError(ValueError):
    """Base class for receipt generation errors."""


class IOFormatError(ReceiptError):
    """Base class for I/O related errors."""


class InputFileError(IOFormatError):
    """Raised when the input data file cannot be opened or read."""

    def __init__(self, path: str | os.PathLike[str], reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"failed to open {self.path}: {reason}")


class DataFormatError(ReceiptError):
    """Base class for structural problems in the input data."""


class StructuralShortfallError(DataFormatError):
    """Raised when the file holds fewer lines than the schema requires."""

    def __init__(self, required: int, found: int) -> None:
        self.required = required
        self.found = found
        super().__init__(f"expected at least {required} lines, found {found}")


class MissingColumnError(DataFormatError):
    """Raised when required columns are absent from the header row."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = missing
        names = ", ".join(repr(name) for name in missing)
        super().__init__(f"missing required column(s): {names}")


class RowFormatError(DataFormatError):
    """Raised when a data row lacks the field a column points at."""

    def __init__(self, line_number: int, column: str) -> None:
        self.line_number = line_number
        self.column = column
        super().__init__(f"line {line_number}: no field for column {column!r}")


class LayoutOverflowError(ReceiptError):
    """Raised when a receipt block would be drawn below the page bottom."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no writer is registered for an output file format."""


class ImageFormatError(IOFormatError):
    """Raised when an image file cannot be decoded."""
