"""Text storage, snapshot history, and the undoable buffer built on them."""

from .buffer import Transaction, UndoableBuffer
from .errors import IndexOutOfBoundsError, InvalidArgumentError, TextBufferError
from .storage import DEFAULT_CAPACITY, TextStorage
from .undo import History, Snapshot

__all__ = [
    "DEFAULT_CAPACITY",
    "History",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "Snapshot",
    "TextBufferError",
    "TextStorage",
    "Transaction",
    "UndoableBuffer",
]
