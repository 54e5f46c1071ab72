"""Argument checks run before any buffer mutation."""

from __future__ import annotations

from typing import Optional

from .errors import IndexOutOfBoundsError, InvalidArgumentError

NULL_TEXT = "null"


def coerce_text(text: Optional[str], *, argument: str = "text") -> str:
    """Return ``text``, substituting ``"null"`` for ``None``."""

    if text is None:
        return NULL_TEXT
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"{argument} must be a str or None, got {type(text).__name__}",
            argument=argument,
        )
    return text


def ensure_int(value: object, *, argument: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{argument} must be an int, got {type(value).__name__}",
            argument=argument,
        )
    return value


def ensure_capacity_argument(capacity: object) -> int:
    value = ensure_int(capacity, argument="capacity")
    if value < 0:
        raise InvalidArgumentError(f"capacity < 0: {value}", argument="capacity")
    return value


def ensure_offset(offset: object, length: int) -> int:
    """Offsets may point one past the last character (append position)."""

    value = ensure_int(offset, argument="offset")
    if value < 0 or value > length:
        raise IndexOutOfBoundsError(
            f"index={value}, length={length}", index=value, length=length
        )
    return value


def ensure_range(start: object, end: object, length: int) -> tuple[int, int]:
    lo = ensure_int(start, argument="start")
    hi = ensure_int(end, argument="end")
    if lo < 0 or lo > hi or hi > length:
        raise IndexOutOfBoundsError(
            f"start={lo}, end={hi}, length={length}",
            start=lo,
            end=hi,
            length=length,
        )
    return lo, hi


def ensure_length(new_length: object) -> int:
    value = ensure_int(new_length, argument="new_length")
    if value < 0:
        raise IndexOutOfBoundsError(f"new_length={value}", index=value)
    return value
