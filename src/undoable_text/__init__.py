"""Mutable text buffer with snapshot-based undo."""

from .buffer import (
    DEFAULT_CAPACITY,
    History,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    Snapshot,
    TextBufferError,
    TextStorage,
    UndoableBuffer,
)

__all__ = [
    "DEFAULT_CAPACITY",
    "History",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "Snapshot",
    "TextBufferError",
    "TextStorage",
    "UndoableBuffer",
]

__version__ = "0.1.0"
