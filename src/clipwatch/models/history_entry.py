# region Docstring
"""
clipwatch.models.history_entry
Immutable record of one observed clipboard payload.
Overview:
- A HistoryEntry couples a payload with the artifacts derived from it at
    construction: an identity key for deduplication and, for images, a preview.
- Entries are never mutated after construction. Replacing content is always
    modelled as inserting a new entry and evicting an old one.
- An entry owns its pixel buffers. Image payloads are copied on construction and
    closed again by release(), which the HistoryStore calls on eviction or
    teardown.
Contents:
- HistoryEntry:
    Frozen Pydantic model with payload, preview, identity, created_at and
    entry_id. Provides from_payload() to derive the preview and identity,
    release() to free the image buffers, and a summary property for display.
Design notes:
- The invariant `preview is present iff payload is an image` is validated when
    the model is built, so no entry can exist in a half-derived state.
- Equality between entries is never used for deduplication; that is what the
    identity key is for.
"""
# endregion
# region Imports
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from clipwatch.config import DEFAULT_PREVIEW_HEIGHT
from clipwatch.identity import IdentityKey, identity_of
from clipwatch.models.payload import ImagePayload, Payload, TextPayload
from clipwatch.thumbnail import ThumbnailGenerator
from clipwatch.utils import get_time, truncate

# endregion


# region History Entry Model
class HistoryEntry(BaseModel):
    """
    A single entry of clipboard history.

    Attributes:
        payload (Payload): The captured text or image.
        preview (Optional[Image.Image]): Fixed-height preview, present only for images.
        identity (IdentityKey): Key used to compare this entry with new snapshots.
        created_at (datetime): When the payload was observed (UTC).
        entry_id (str): Random identifier for presentation layers.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    payload: Payload = Field(..., description="The captured text or image")
    preview: Optional[Image.Image] = Field(
        None, description="Fixed-height preview, present only for images"
    )
    identity: IdentityKey = Field(
        ..., description="Key used to compare this entry with new snapshots"
    )
    created_at: datetime = Field(
        default_factory=get_time, description="When the payload was observed (UTC)"
    )
    entry_id: str = Field(
        default_factory=lambda: uuid4().hex,
        description="Random identifier for presentation layers",
    )

    _released: bool = PrivateAttr(default=False)

    @model_validator(mode="after")
    def check_preview_matches_payload(self) -> "HistoryEntry":
        if (self.preview is not None) != self.payload.is_image:
            raise ValueError(
                "An entry carries a preview if and only if its payload is an image."
            )
        if self.identity.kind != self.payload.type:
            raise ValueError(
                f"Identity of kind '{self.identity.kind}' does not match a "
                f"'{self.payload.type}' payload."
            )
        return self

    @classmethod
    def from_payload(
        cls,
        payload: Payload,
        preview_height: int = DEFAULT_PREVIEW_HEIGHT,
        thumbnailer: Optional[ThumbnailGenerator] = None,
        identity: Optional[IdentityKey] = None,
    ) -> "HistoryEntry":
        """
        Build an entry, deriving its identity and preview.

        Args:
            payload (Payload): The observed payload. Image pixels are copied.
            preview_height (int): Height of the image preview. DEFAULT: 70
            thumbnailer (Optional[ThumbnailGenerator]): Preview generator. DEFAULT: bilinear
            identity (Optional[IdentityKey]): Precomputed identity, to avoid hashing twice.

        Returns:
            HistoryEntry: The new entry.

        Raises:
            InvalidImageDimensions: If an image payload cannot be previewed.
            EncodingFailure: If the identity has to be computed and encoding fails.
        """
        if identity is None:
            identity = identity_of(payload)
        if isinstance(payload, ImagePayload):
            thumbnailer = thumbnailer or ThumbnailGenerator()
            preview = thumbnailer.generate(payload.image, preview_height)
            return cls(
                payload=payload.copy_owned(), preview=preview, identity=identity
            )
        return cls(payload=payload, identity=identity)

    @property
    def is_text(self) -> bool:
        return self.payload.is_text

    @property
    def is_image(self) -> bool:
        return self.payload.is_image

    @property
    def text(self) -> Optional[str]:
        """The text payload, or None for images."""
        return self.payload.text if isinstance(self.payload, TextPayload) else None

    @property
    def image(self) -> Optional[Image.Image]:
        """The full image, or None for text."""
        return self.payload.image if isinstance(self.payload, ImagePayload) else None

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Close the image buffers owned by this entry. Safe to call twice."""
        if self._released:
            return
        self._released = True
        if self.preview is not None:
            self.preview.close()
        if isinstance(self.payload, ImagePayload):
            self.payload.image.close()

    @property
    def summary(self) -> dict[str, Any]:
        """Return a summary dictionary of the entry for display."""
        if isinstance(self.payload, ImagePayload):
            width, height = self.payload.size
            label = f"Image {width}x{height}"
        else:
            label = truncate(self.payload.text)
        return {
            "entry_id": self.entry_id,
            "kind": self.payload.type,
            "label": label,
            "created_at": self.created_at.isoformat(),
        }

    def __repr__(self) -> str:
        return f"<HistoryEntry(entry_id={self.entry_id}, kind='{self.payload.type}', created_at={self.created_at})>"


# endregion

__all__ = ["HistoryEntry"]
