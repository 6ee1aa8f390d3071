# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""DataFile exceptions.

File system failures are not wrapped: ``read`` and ``write`` let the
``OSError`` raised by ``open`` reach the caller unchanged.
"""

from __future__ import annotations


class DataFileError(Exception):
    """Base exception for DataFile errors."""

    pass


class FormatError(DataFileError, ValueError):
    """Raised when a stored value does not parse as the requested type."""

    def __init__(self, text: str, expected: str) -> None:
        self.text = text
        self.expected = expected
        super().__init__(f"{text!r} is not a valid {expected}")


class OutOfRangeError(DataFileError, LookupError):
    """Base for lookups outside the current contents of a node."""

    pass


class ValueIndexError(OutOfRangeError, IndexError):
    """Raised when a typed accessor reads past the last stored value."""

    def __init__(self, item: int, count: int) -> None:
        self.item = item
        self.count = count
        super().__init__(f"value index {item} out of range ({count} values)")


class MissingChildError(OutOfRangeError, KeyError):
    """Raised when replacing a child that does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"no child named {self.name!r}"


class StructuralError(DataFileError):
    """Raised when braces do not balance while parsing."""

    def __init__(self, message: str, line_number: int = 0, line: str = '') -> None:
        self.line_number = line_number
        self.line = line
        if line_number:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InvalidParentError(DataFileError, ValueError):
    """Raised when a node is placed under an invalid parent."""

    pass
