"""Undoable text buffer façade combining storage and history."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from undoable_text.runtime import telemetry

from .storage import DEFAULT_CAPACITY, TextStorage
from .undo import History
from .validation import (
    coerce_text,
    ensure_length,
    ensure_offset,
    ensure_range,
)


class UndoableBuffer:
    """Mutable text whose every content change can be undone.

    Each mutator validates its arguments, decides whether it would change
    anything, and only then records a snapshot and mutates. Operations that
    would leave the text as it is record nothing, so a later ``undo`` always
    reverts a real change.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        *,
        name: str = "default",
    ) -> None:
        self.name = name
        self._storage = TextStorage(capacity)
        self.history = History()

    @classmethod
    def from_text(
        cls, text: Optional[str], *, name: str = "default"
    ) -> "UndoableBuffer":
        """Seed a buffer with ``text`` (``None`` seeds ``"null"``).

        The seed is not undoable.
        """

        seed = coerce_text(text)
        buffer = cls(max(DEFAULT_CAPACITY, len(seed)), name=name)
        buffer.append(seed)
        buffer.history.clear()
        return buffer

    # -- reads -----------------------------------------------------------

    def length(self) -> int:
        return self._storage.length()

    def capacity(self) -> int:
        return self._storage.capacity()

    def to_text(self) -> str:
        return self._storage.to_text()

    # -- mutators ----------------------------------------------------------

    def ensure_capacity(self, minimum: int) -> "UndoableBuffer":
        self._storage.ensure_capacity(minimum)
        return self

    def append(self, text: Optional[str]) -> "UndoableBuffer":
        with Transaction(self, "append") as tx:
            chars = coerce_text(text)
            if chars:
                tx.record()
                self._storage.write_at(self._storage.length(), chars)
        return self

    def insert(self, offset: int, text: Optional[str]) -> "UndoableBuffer":
        with Transaction(self, "insert") as tx:
            chars = coerce_text(text)
            offset = ensure_offset(offset, self._storage.length())
            if chars:
                tx.record()
                self._storage.write_at(offset, chars)
        return self

    def delete(self, start: int, end: int) -> "UndoableBuffer":
        with Transaction(self, "delete") as tx:
            start, end = ensure_range(start, end, self._storage.length())
            if start != end:
                tx.record()
                self._storage.remove(start, end)
        return self

    def set_length(self, new_length: int) -> "UndoableBuffer":
        with Transaction(self, "set_length") as tx:
            new_length = ensure_length(new_length)
            if new_length != self._storage.length():
                tx.record()
                self._storage.resize(new_length)
        return self

    def clear(self) -> "UndoableBuffer":
        with Transaction(self, "clear") as tx:
            if self._storage.length():
                tx.record()
                self._storage.clear()
        return self

    def undo(self) -> "UndoableBuffer":
        with telemetry.span(
            "buffer::undo", component="buffer", metadata={"buffer": self.name}
        ):
            self.history.undo(self._storage)
        return self

    # -- dunder ------------------------------------------------------------

    def __len__(self) -> int:
        return self._storage.length()

    def __str__(self) -> str:
        return self._storage.to_text()

    def __repr__(self) -> str:
        return (
            f"UndoableBuffer(name={self.name!r}, text={self.to_text()!r}, "
            f"capacity={self.capacity()}, history={len(self.history)})"
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Telemetry span around one mutator; ``record`` snapshots pre-state."""

    def __init__(self, buffer: UndoableBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def record(self) -> None:
        self.buffer.history.record(self.buffer._storage)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
