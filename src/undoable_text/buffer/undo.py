"""Snapshot-based undo history for text storage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from undoable_text.runtime import telemetry

from .storage import TextStorage


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Copy of the visible text at one instant, paired with its length."""

    text: str
    length: int

    @classmethod
    def capture(cls, storage: TextStorage) -> "Snapshot":
        text = storage.to_text()
        return cls(text=text, length=len(text))


class History:
    """Linear undo stack. Entries are popped for good; there is no redo."""

    def __init__(self) -> None:
        self._entries: List[Snapshot] = []

    def record(self, storage: TextStorage) -> Snapshot:
        snapshot = Snapshot.capture(storage)
        self._entries.append(snapshot)
        return snapshot

    def can_undo(self) -> bool:
        return bool(self._entries)

    def peek(self) -> Optional[Snapshot]:
        if not self._entries:
            return None
        return self._entries[-1]

    def undo(self, storage: TextStorage) -> bool:
        """Restore ``storage`` from the newest snapshot; ``False`` if none."""

        if not self._entries:
            telemetry.record_event("history.undo_empty", level="debug")
            return False
        snapshot = self._entries.pop()
        storage.restore(snapshot.text)
        telemetry.record_event(
            "history.undo",
            level="debug",
            data={"depth": len(self._entries), "length": snapshot.length},
        )
        return True

    def clear(self) -> None:
        dropped = len(self._entries)
        self._entries.clear()
        telemetry.record_event(
            "history.clear", level="debug", data={"dropped": dropped}
        )

    def __len__(self) -> int:
        return len(self._entries)
