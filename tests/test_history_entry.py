from datetime import timezone
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from clipwatch.identity import IdentityKey, identity_of
from clipwatch.models.history_entry import HistoryEntry
from clipwatch.models.payload import ImagePayload, TextPayload


# region Construction


class TestFromPayload:
    def test_text_entry(self):
        """Text entries carry the text, its identity and no preview."""
        entry = HistoryEntry.from_payload(TextPayload(text="hello"))
        assert entry.is_text and not entry.is_image
        assert entry.text == "hello"
        assert entry.image is None
        assert entry.preview is None
        assert entry.identity == IdentityKey(kind="text", value="hello")

    def test_image_entry(self, image_payload):
        """Image entries carry a preview of the configured height."""
        entry = HistoryEntry.from_payload(image_payload, preview_height=70)
        assert entry.is_image
        assert entry.text is None
        assert entry.preview is not None
        assert entry.preview.size == (140, 70)
        assert entry.identity == identity_of(image_payload)

    def test_image_pixels_are_copied(self, image_payload):
        """The entry owns its own copy of the image."""
        entry = HistoryEntry.from_payload(image_payload)
        before = entry.image.tobytes()
        image_payload.image.putpixel((0, 0), (0, 0, 0, 0))
        assert entry.image is not image_payload.image
        assert entry.image.tobytes() == before

    def test_precomputed_identity_used(self):
        """A supplied identity is not recomputed."""
        key = IdentityKey(kind="text", value="abc")
        with patch("clipwatch.models.history_entry.identity_of") as mock_identity:
            entry = HistoryEntry.from_payload(TextPayload(text="abc"), identity=key)
        mock_identity.assert_not_called()
        assert entry.identity is key

    def test_timestamps_are_utc(self):
        """created_at is timezone aware."""
        entry = HistoryEntry.from_payload(TextPayload(text="t"))
        assert entry.created_at.tzinfo == timezone.utc

    def test_entry_ids_are_unique(self):
        """Two entries for the same text still get distinct ids."""
        first = HistoryEntry.from_payload(TextPayload(text="same"))
        second = HistoryEntry.from_payload(TextPayload(text="same"))
        assert first.entry_id != second.entry_id


# endregion
# region Invariants


class TestInvariants:
    def test_text_with_preview_rejected(self, make_image):
        """A text entry cannot carry a preview."""
        with pytest.raises(ValidationError):
            HistoryEntry(
                payload=TextPayload(text="x"),
                preview=make_image(2, 2),
                identity=IdentityKey(kind="text", value="x"),
            )

    def test_image_without_preview_rejected(self, image_payload):
        """An image entry must carry a preview."""
        with pytest.raises(ValidationError):
            HistoryEntry(payload=image_payload, identity=identity_of(image_payload))

    def test_identity_kind_must_match(self):
        """An image identity cannot describe a text payload."""
        with pytest.raises(ValidationError):
            HistoryEntry(
                payload=TextPayload(text="x"),
                identity=IdentityKey(kind="image", value="00"),
            )

    def test_entries_are_frozen(self):
        """Fields cannot be reassigned after construction."""
        entry = HistoryEntry.from_payload(TextPayload(text="x"))
        with pytest.raises(ValidationError):
            entry.payload = TextPayload(text="y")


# endregion
# region Release and Summary


class TestRelease:
    def test_release_closes_images(self, image_payload):
        """Release closes both the payload image and the preview."""
        entry = HistoryEntry.from_payload(image_payload)
        with patch.object(entry.preview, "close") as preview_close, patch.object(
            entry.image, "close"
        ) as image_close:
            entry.release()
            entry.release()
        preview_close.assert_called_once()
        image_close.assert_called_once()
        assert entry.released

    def test_release_text_entry(self):
        """Text entries can be released too."""
        entry = HistoryEntry.from_payload(TextPayload(text="x"))
        assert not entry.released
        entry.release()
        assert entry.released

    def test_release_leaves_source_open(self, image_payload):
        """Releasing an entry does not touch the observed snapshot."""
        entry = HistoryEntry.from_payload(image_payload)
        entry.release()
        assert image_payload.image.tobytes()


class TestSummary:
    def test_text_summary(self):
        """Long text labels are truncated to a single line."""
        entry = HistoryEntry.from_payload(TextPayload(text="line\n" * 100))
        summary = entry.summary
        assert summary["kind"] == "text"
        assert "\n" not in summary["label"]
        assert len(summary["label"]) == 120
        assert summary["entry_id"] == entry.entry_id

    def test_image_summary(self, image_payload):
        """Image labels show the dimensions."""
        summary = HistoryEntry.from_payload(image_payload).summary
        assert summary["kind"] == "image"
        assert summary["label"] == "Image 200x100"


# endregion
