# region Docstring
"""
clipwatch.services.watcher
Service that drives the history engine from a clipboard backend.
Overview:
- Runs observe-and-update cycles: poll the backend, ask the ChangeDetector
    whether the snapshot is a genuine change, and insert the new entry into the
    HistoryStore.
- Restores a selected history entry by writing its payload back to the backend.
- Provides a blocking polling loop driven by a threading.Event so a caller can
    stop it from another thread. Cycles never overlap.
Contents:
- ClipboardWatcher:
    poll_once(), restore(), run() and the history property.
Design Notes:
- Capacity, preview height and poll interval come from ClipboardHistorySettings
    unless a store or detector is injected.
- Backend read errors are logged and reported as a "poll_failure" NoOp. Invariant
    errors (CapacityViolation) are not caught and stop the loop.
- The on_change callback runs after every insert, on the polling thread.
"""
# endregion
# region Imports
import logging
import threading
from logging import Logger
from typing import Callable, Optional

from clipwatch.change_detector import Action, ChangeDetector, Insert, NoOp
from clipwatch.clipboard import ClipboardBackend
from clipwatch.config import ClipboardHistorySettings, get_settings
from clipwatch.history_store import HistoryStore
from clipwatch.logger import LOGGER_NAME
from clipwatch.models.history_entry import HistoryEntry

# endregion
# region Clipboard Watcher Service


class ClipboardWatcher:
    """
    Polls a clipboard backend and maintains the clipboard history.
    """

    def __init__(
        self,
        backend: ClipboardBackend,
        store: Optional[HistoryStore] = None,
        detector: Optional[ChangeDetector] = None,
        settings: Optional[ClipboardHistorySettings] = None,
        on_change: Optional[Callable[[tuple[HistoryEntry, ...]], None]] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Initializes the ClipboardWatcher.

        Args:
            backend (ClipboardBackend): Source and sink of clipboard payloads.
            store (Optional[HistoryStore]): History to maintain. DEFAULT: built from settings
            detector (Optional[ChangeDetector]): Change detector. DEFAULT: built from settings
            settings (Optional[ClipboardHistorySettings]): DEFAULT: get_settings()
            on_change (Optional[Callable]): Called with the history snapshot after each insert.
            logger (Optional[Logger]): Parent logger. DEFAULT: the "clipwatch" logger
        """
        self.settings = settings or get_settings(ClipboardHistorySettings)
        parent = logger or logging.getLogger(LOGGER_NAME)
        self.logger = parent.getChild("ClipboardWatcher")
        self.backend = backend
        self.store = store if store is not None else HistoryStore(
            capacity=self.settings.capacity, logger=parent
        )
        self.detector = detector or ChangeDetector(
            preview_height=self.settings.preview_height, logger=parent
        )
        self.on_change = on_change
        self.cycles = 0

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """The current history, newest first."""
        return self.store.snapshot()

    def poll_once(self) -> Action:
        """
        Run a single observe-and-update cycle.

        Returns:
            Action: What the cycle did to the history.
        """
        self.cycles += 1
        try:
            snapshot = self.backend.poll_resource()
        except Exception as e:
            self.logger.exception(f"Clipboard poll failed: {e}")
            return NoOp(reason="poll_failure")

        action = self.detector.observe_and_apply(self.store, snapshot)
        if isinstance(action, Insert):
            self.logger.info(
                f"Recorded {action.entry.payload.type} entry {action.entry.entry_id} "
                f"({len(self.store)}/{self.store.capacity})."
            )
            if self.on_change is not None:
                self.on_change(self.store.snapshot())
        return action

    def restore(self, index: int) -> HistoryEntry:
        """
        Write the payload of a history entry back to the clipboard.

        The history itself is not modified; the next poll sees the restored
        content and re-surfaces it at the top unless it already is the newest entry.

        Args:
            index (int): Position of the entry, 0 being the most recent.

        Returns:
            HistoryEntry: The restored entry.

        Raises:
            IndexError: If no entry exists at index.
        """
        entry = self.store[index]
        # the store keeps ownership; eviction must not close what the clipboard holds
        self.backend.write_resource(entry.payload.copy_owned())
        self.logger.info(f"Restored {entry.payload.type} entry {entry.entry_id} to the clipboard.")
        return entry

    def run(
        self, stop_event: Optional[threading.Event] = None, max_cycles: Optional[int] = None
    ) -> None:
        """
        Poll the clipboard every poll_interval seconds until stopped.

        Args:
            stop_event (Optional[threading.Event]): Set it to stop the loop.
            max_cycles (Optional[int]): Stop after this many cycles. DEFAULT: unbounded
        """
        stop_event = stop_event or threading.Event()
        interval = self.settings.poll_interval
        self.logger.info(
            f"Watching the clipboard every {interval}s (capacity {self.store.capacity})."
        )
        completed = 0
        while not stop_event.is_set():
            self.poll_once()
            completed += 1
            if max_cycles is not None and completed >= max_cycles:
                break
            stop_event.wait(interval)
        self.logger.info(f"Stopped watching after {completed} cycles.")


# endregion

__all__ = ["ClipboardWatcher"]
