"""
clipwatch

Bounded, deduplicated clipboard history.

The package observes a single-slot clipboard, turns polled snapshots into
history entries when the content genuinely changed, and keeps the newest
entries in a capacity-bounded store. Image payloads are compared by a content
hash of a canonical PNG encoding and carry a fixed-height preview.
"""

from .change_detector import Action, ChangeDetector, Insert, NoOp  # noqa: F401
from .clipboard import ClipboardBackend, InMemoryClipboard, SystemClipboard  # noqa: F401
from .config import ClipboardHistorySettings, get_settings  # noqa: F401
from .errors import (  # noqa: F401
    CapacityViolation,
    ClipwatchError,
    EncodingFailure,
    InvalidImageDimensions,
)
from .history_store import HistoryStore  # noqa: F401
from .identity import IdentityKey, identity_of  # noqa: F401
from .models.history_entry import HistoryEntry  # noqa: F401
from .models.payload import ImagePayload, Payload, TextPayload  # noqa: F401
from .services.watcher import ClipboardWatcher  # noqa: F401
from .thumbnail import ThumbnailGenerator  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "Action",
    "CapacityViolation",
    "ChangeDetector",
    "ClipboardBackend",
    "ClipboardHistorySettings",
    "ClipboardWatcher",
    "ClipwatchError",
    "EncodingFailure",
    "HistoryEntry",
    "HistoryStore",
    "IdentityKey",
    "ImagePayload",
    "InMemoryClipboard",
    "Insert",
    "InvalidImageDimensions",
    "NoOp",
    "Payload",
    "SystemClipboard",
    "TextPayload",
    "ThumbnailGenerator",
    "get_settings",
    "identity_of",
]
