# region Docstring
"""
clipwatch.history_store
Bounded, newest-first collection of clipboard history entries.
Overview:
- Holds HistoryEntry objects in strict insertion order with index 0 being the
    most recent observation. Entries are never reordered on access.
- Enforces a fixed capacity. Inserting past capacity evicts from the tail in the
    same locked step, and every evicted entry is released.
- The store owns every entry it holds; snapshot() hands out the immutable
    entries for display without transferring ownership.
Contents:
- HistoryStore:
    insert_front(), evict_tail(), snapshot(), newest(), clear()/close() and the
    sequence protocol (len, iteration over a snapshot, indexing).
Design notes:
- A single re-entrant lock guards the internal list so a presentation thread
    reading snapshot() never sees a half-applied insert.
- A capacity of 0 is valid and yields an always-empty store.
- The capacity invariant is checked after every mutation; a violation raises
    CapacityViolation and is never caught inside the package.
"""
# endregion
# region Imports
import logging
import threading
from logging import Logger
from typing import Iterator, Optional

from clipwatch.config import DEFAULT_CAPACITY
from clipwatch.errors import CapacityViolation
from clipwatch.logger import LOGGER_NAME
from clipwatch.models.history_entry import HistoryEntry

# endregion


class HistoryStore:
    """
    Ordered, bounded history of clipboard entries.

    Attributes:
        capacity (int): Maximum number of entries held at once.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, logger: Optional[Logger] = None):
        """
        Initializes an empty store.

        Args:
            capacity (int): Maximum number of entries. DEFAULT: 20
            logger (Optional[Logger]): Parent logger. DEFAULT: the "clipwatch" logger

        Raises:
            ValueError: If capacity is negative.
        """
        if capacity < 0:
            raise ValueError(f"Capacity must be zero or positive, got {capacity}.")
        self._capacity = capacity
        self._entries: list[HistoryEntry] = []
        self._lock = threading.RLock()
        self.logger = (logger or logging.getLogger(LOGGER_NAME)).getChild("HistoryStore")

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert_front(self, entry: HistoryEntry) -> list[HistoryEntry]:
        """
        Insert an entry as the most recent one, evicting past capacity.

        Args:
            entry (HistoryEntry): The new entry. The store takes ownership of it.

        Returns:
            list[HistoryEntry]: The evicted (and already released) entries, oldest first.
        """
        with self._lock:
            self._entries.insert(0, entry)
            self.logger.debug("Inserted %r (%d/%d).", entry, len(self._entries), self._capacity)
            evicted: list[HistoryEntry] = []
            while len(self._entries) > self._capacity:
                evicted.append(self._pop_tail())
            self._check_capacity()
            return evicted

    def evict_tail(self) -> Optional[HistoryEntry]:
        """
        Remove and release the oldest entry.

        Returns:
            Optional[HistoryEntry]: The released entry, or None if the store is empty.
        """
        with self._lock:
            if not self._entries:
                return None
            entry = self._pop_tail()
            self._check_capacity()
            return entry

    def snapshot(self) -> tuple[HistoryEntry, ...]:
        """Return the entries, newest first. Ownership stays with the store."""
        with self._lock:
            return tuple(self._entries)

    def newest(self) -> Optional[HistoryEntry]:
        """Return the most recent entry, or None if the store is empty."""
        with self._lock:
            return self._entries[0] if self._entries else None

    def clear(self) -> None:
        """Release and remove every entry."""
        with self._lock:
            entries, self._entries = self._entries, []
            for entry in entries:
                entry.release()
            if entries:
                self.logger.debug("Cleared %d entries.", len(entries))

    def close(self) -> None:
        """Tear the store down, releasing all entries."""
        self.clear()

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def _pop_tail(self) -> HistoryEntry:
        entry = self._entries.pop()
        entry.release()
        self.logger.debug("Evicted %r.", entry)
        return entry

    def _check_capacity(self) -> None:
        if len(self._entries) > self._capacity:
            raise CapacityViolation(len(self._entries), self._capacity)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.snapshot())

    def __getitem__(self, index: int) -> HistoryEntry:
        with self._lock:
            return self._entries[index]

    def __enter__(self) -> "HistoryStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<HistoryStore(entries={len(self)}, capacity={self._capacity})>"


__all__ = ["HistoryStore"]
