# region Docstring
"""
clipwatch.change_detector
Decides whether a freshly polled clipboard snapshot is a genuine change.
Overview:
- A snapshot is compared only with the newest history entry. The question is
    "did the clipboard change since the last observation", not "was this ever
    seen before", so re-copying an older item re-surfaces it at the top.
- Equality is decided on identity keys (clipwatch.identity), never on the
    payload objects themselves.
- Payload-level failures are recovered here and reported as a NoOp. The
    conservative policy is to miss an update rather than insert a malformed entry.
Contents:
- NoOp: Action meaning the store must not change, with the reason why.
- Insert: Action carrying the new entry to insert at the front of the store.
- Action: Union of NoOp and Insert.
- ChangeDetector:
    observe(store, snapshot) -> Action, and observe_and_apply() which also
    performs the insert.
Design notes:
- observe() does not mutate the store; callers (or observe_and_apply) apply the
    returned action. Cycles are expected to be serialised by the poller.
"""
# endregion
# region Imports
import logging
from logging import Logger
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from clipwatch.config import DEFAULT_PREVIEW_HEIGHT
from clipwatch.errors import EncodingFailure, InvalidImageDimensions
from clipwatch.history_store import HistoryStore
from clipwatch.identity import identity_of
from clipwatch.logger import LOGGER_NAME
from clipwatch.models.history_entry import HistoryEntry
from clipwatch.models.payload import Payload
from clipwatch.thumbnail import ThumbnailGenerator

# endregion
# region Actions

NoOpReason = Literal[
    "empty", "unchanged", "encoding_failure", "invalid_image", "poll_failure"
]


class NoOp(BaseModel):
    """
    The snapshot does not lead to a history change.

    Attributes:
        reason (NoOpReason): Why the snapshot was skipped.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["noop"] = "noop"
    reason: NoOpReason = Field(..., description="Why the snapshot was skipped")


class Insert(BaseModel):
    """
    The snapshot is a genuine change.

    Attributes:
        entry (HistoryEntry): The entry to insert at the front of the store.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["insert"] = "insert"
    entry: HistoryEntry = Field(..., description="The entry to insert")


Action = Union[NoOp, Insert]


# endregion
# region ChangeDetector


class ChangeDetector:
    """
    Turns polled snapshots into history actions.

    Attributes:
        preview_height (int): Height of previews built for image entries.
        thumbnailer (ThumbnailGenerator): Preview generator for image entries.
    """

    def __init__(
        self,
        preview_height: int = DEFAULT_PREVIEW_HEIGHT,
        thumbnailer: Optional[ThumbnailGenerator] = None,
        logger: Optional[Logger] = None,
    ):
        self.preview_height = preview_height
        self.thumbnailer = thumbnailer or ThumbnailGenerator()
        self.logger = (logger or logging.getLogger(LOGGER_NAME)).getChild("ChangeDetector")

    def observe(self, store: HistoryStore, snapshot: Optional[Payload]) -> Action:
        """
        Compare a snapshot with the newest entry of the store.

        Args:
            store (HistoryStore): The history to compare against. Not modified.
            snapshot (Optional[Payload]): The polled clipboard content, None when empty.

        Returns:
            Action: Insert with a new entry on a genuine change, NoOp otherwise.
        """
        if snapshot is None:
            return NoOp(reason="empty")

        try:
            identity = identity_of(snapshot)
        except EncodingFailure as e:
            self.logger.warning(f"Skipping unreadable clipboard image: {e}")
            return NoOp(reason="encoding_failure")

        newest = store.newest()
        if newest is not None and newest.identity == identity:
            return NoOp(reason="unchanged")

        try:
            entry = HistoryEntry.from_payload(
                snapshot,
                preview_height=self.preview_height,
                thumbnailer=self.thumbnailer,
                identity=identity,
            )
        except InvalidImageDimensions as e:
            self.logger.warning(f"Skipping clipboard image without a usable size: {e}")
            return NoOp(reason="invalid_image")

        self.logger.debug(f"Clipboard changed, new {snapshot.type} entry {entry.entry_id}.")
        return Insert(entry=entry)

    def observe_and_apply(
        self, store: HistoryStore, snapshot: Optional[Payload]
    ) -> Action:
        """Observe a snapshot and insert the resulting entry, if any, into the store."""
        action = self.observe(store, snapshot)
        if isinstance(action, Insert):
            store.insert_front(action.entry)
        return action


# endregion

__all__ = ["Action", "ChangeDetector", "Insert", "NoOp", "NoOpReason"]
