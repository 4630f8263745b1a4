"""
Minimal sorted priority queue.

Entries are kept in ascending priority order by linear-scan insertion.
Equal priorities keep insertion (FIFO) order, which the path searches
rely on for deterministic tie-breaking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class QueueEntry(Generic[T]):
    """
    One queued item.

    Attributes:
        item: Opaque payload
        priority: Sort key, fixed at insertion
    """

    item: T
    priority: float


class PriorityQueue(Generic[T]):
    """
    Ascending priority queue supporting removal from either end.

    There is no decrease-key: to change an item's priority, enqueue it again.
    """

    def __init__(self) -> None:
        self._entries: list[QueueEntry[T]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def enqueue(self, item: T, priority: float) -> None:
        """Insert before the first entry with a strictly greater priority."""
        entry = QueueEntry(item, priority)
        for index, existing in enumerate(self._entries):
            if priority < existing.priority:
                self._entries.insert(index, entry)
                return
        self._entries.append(entry)

    def dequeue_low(self) -> QueueEntry[T] | None:
        """Remove and return the lowest-priority entry, or None if empty."""
        if not self._entries:
            return None
        return self._entries.pop(0)

    def dequeue_high(self) -> QueueEntry[T] | None:
        """Remove and return the highest-priority entry, or None if empty."""
        if not self._entries:
            return None
        return self._entries.pop()

    def peek_low(self) -> QueueEntry[T] | None:
        return self._entries[0] if self._entries else None

    def peek_high(self) -> QueueEntry[T] | None:
        return self._entries[-1] if self._entries else None

    def priorities(self) -> list[float]:
        return [entry.priority for entry in self._entries]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(length={len(self._entries)})"
