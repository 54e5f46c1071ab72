"""Exceptions raised by the buffer layer."""

from __future__ import annotations

from typing import Optional


class TextBufferError(Exception):
    """Base class for every error the buffer layer raises."""


class InvalidArgumentError(TextBufferError, ValueError):
    """Raised when an argument violates a plain precondition (type, sign)."""

    def __init__(self, message: str, *, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument


class IndexOutOfBoundsError(TextBufferError, IndexError):
    """Raised when an offset, range or length falls outside the buffer."""

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
        length: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.start = start
        self.end = end
        self.length = length
