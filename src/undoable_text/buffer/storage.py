"""Growable character storage with a separate capacity and logical length."""

from __future__ import annotations

from typing import List, Optional

from .validation import (
    coerce_text,
    ensure_capacity_argument,
    ensure_int,
    ensure_length,
    ensure_offset,
    ensure_range,
)

DEFAULT_CAPACITY = 16
PAD_CHAR = "0"
_EMPTY_SLOT = "\0"


class TextStorage:
    """Character array in the style of a string builder.

    Only the first ``length()`` slots are visible. Slots past the length may
    hold stale characters after a truncation; they are never rendered and are
    overwritten on the next write that reaches them.
    """

    __slots__ = ("_value", "_count")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        size = ensure_capacity_argument(capacity)
        self._value: List[str] = [_EMPTY_SLOT] * size
        self._count = 0

    def length(self) -> int:
        return self._count

    def capacity(self) -> int:
        return len(self._value)

    def ensure_capacity(self, minimum: int) -> None:
        self._reserve(ensure_int(minimum, argument="minimum"))

    def _reserve(self, minimum: int) -> None:
        if minimum > len(self._value):
            self._grow(minimum)

    def _grow(self, minimum: int) -> None:
        new_capacity = max(len(self._value) * 2 + 2, minimum)
        self._value.extend([_EMPTY_SLOT] * (new_capacity - len(self._value)))

    def append(self, text: Optional[str]) -> None:
        self.write_at(self._count, coerce_text(text))

    def insert(self, offset: int, text: Optional[str]) -> None:
        chars = coerce_text(text)
        self.write_at(ensure_offset(offset, self._count), chars)

    def delete(self, start: int, end: int) -> None:
        self.remove(*ensure_range(start, end, self._count))

    def set_length(self, new_length: int) -> None:
        self.resize(ensure_length(new_length))

    # Unchecked primitives; callers pass already validated arguments.

    def write_at(self, offset: int, chars: str) -> None:
        size = len(chars)
        self._reserve(self._count + size)
        tail = self._value[offset : self._count]
        self._value[offset + size : self._count + size] = tail
        self._value[offset : offset + size] = chars
        self._count += size

    def remove(self, start: int, end: int) -> None:
        tail = self._value[end : self._count]
        self._value[start : start + len(tail)] = tail
        self._count -= end - start

    def resize(self, new_length: int) -> None:
        self._reserve(new_length)
        if new_length > self._count:
            self._value[self._count : new_length] = PAD_CHAR * (
                new_length - self._count
            )
        self._count = new_length

    def clear(self) -> None:
        self._count = 0

    def to_text(self) -> str:
        return "".join(self._value[: self._count])

    def restore(self, text: str) -> None:
        """Replace content with ``text``; capacity is re-derived, not kept."""

        capacity = max(len(text), DEFAULT_CAPACITY)
        self._value = list(text) + [_EMPTY_SLOT] * (capacity - len(text))
        self._count = len(text)

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        return self.to_text()
