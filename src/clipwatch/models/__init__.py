"""
clipwatch.models
Pydantic models for clipboard payloads and history entries.

Contents:
- payload: TextPayload, ImagePayload and the Payload union (re-exported here).
- history_entry: HistoryEntry, the immutable history record. Import it from
    clipwatch.models.history_entry or from the top-level package; it depends on
    clipwatch.identity, which in turn depends on the payload models.
"""

from .payload import ImagePayload, Payload, TextPayload  # noqa: F401

__all__ = ["ImagePayload", "Payload", "TextPayload"]
