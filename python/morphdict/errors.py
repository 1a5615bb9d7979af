"""Exceptions raised by morphdict.

Encoding classification itself never raises; these are raised when a
caller tries to decode or write with an encoding that cannot be used.
"""

from typing import Optional


class MorphdictError(Exception):
    """Base class for morphdict errors."""


class UnknownEncodingError(MorphdictError, ValueError):
    """File content matched neither supported encoding."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"Cannot detect encoding of {path} (expected utf-8 or windows-1251)"
        else:
            message = "Cannot decode or encode with an unknown encoding"
        super().__init__(message)


class UnencodableLineError(MorphdictError, ValueError):
    """A line cannot be represented in the target encoding."""

    def __init__(self, line: str, encoding: str, line_number: int):
        self.line = line
        self.encoding = encoding
        self.line_number = line_number
        super().__init__(
            f"Line {line_number} ({line!r}) cannot be encoded as {encoding}"
        )
