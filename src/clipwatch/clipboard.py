# region Docstring
"""
clipwatch.clipboard
Read/write access to the shared clipboard resource.
Overview:
- The history engine only needs two operations from its environment: polling the
    current clipboard content and writing a payload back when a history entry is
    restored. ClipboardBackend captures that seam.
- InMemoryClipboard is a deterministic backend for tests and for embedding the
    engine behind another clipboard source.
- SystemClipboard talks to the OS clipboard: text through pyperclip, images
    through Pillow's ImageGrab.
Contents:
- ClipboardBackend: Protocol with poll_resource() and write_resource().
- InMemoryClipboard: Single-slot clipboard held in memory.
- SystemClipboard: OS clipboard backend.
Design notes:
- Text wins over images when both are present, mirroring how desktop clipboards
    expose a text flavour for mixed content.
- A read failure is logged and reported as an absent snapshot; the polling loop
    must never die because the clipboard was briefly locked by another process.
- Neither pyperclip nor Pillow can place images on the clipboard, so
    SystemClipboard logs a warning instead of restoring image entries.
"""
# endregion
# region Imports
import logging
from logging import Logger
from typing import Optional, Protocol, runtime_checkable

import pyperclip
from PIL import Image, ImageGrab

from clipwatch.logger import LOGGER_NAME
from clipwatch.models.payload import ImagePayload, Payload, TextPayload

# endregion
# region Protocol


@runtime_checkable
class ClipboardBackend(Protocol):
    """Source and sink of clipboard payloads."""

    def poll_resource(self) -> Optional[Payload]:
        """Return the current clipboard payload, or None when empty or unreadable."""
        ...

    def write_resource(self, payload: Payload) -> None:
        """Place a payload on the clipboard."""
        ...


# endregion
# region In-memory Backend


class InMemoryClipboard:
    """
    Clipboard held in process memory.

    Attributes:
        content (Optional[Payload]): The current payload, None when empty.
        writes (list[Payload]): Every payload written through write_resource().
    """

    def __init__(self, content: Optional[Payload] = None):
        self.content = content
        self.writes: list[Payload] = []

    def set_text(self, text: str) -> None:
        self.content = TextPayload(text=text)

    def set_image(self, image: Image.Image) -> None:
        self.content = ImagePayload(image=image)

    def clear(self) -> None:
        self.content = None

    def poll_resource(self) -> Optional[Payload]:
        return self.content

    def write_resource(self, payload: Payload) -> None:
        self.writes.append(payload)
        self.content = payload


# endregion
# region System Backend


class SystemClipboard:
    """
    Backend for the operating system clipboard.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = (logger or logging.getLogger(LOGGER_NAME)).getChild("SystemClipboard")

    def _read_text(self) -> Optional[str]:
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            self.logger.error(f"Failed to read text from the clipboard: {e}")
            return None
        return text or None

    def _read_image(self) -> Optional[Image.Image]:
        try:
            grabbed = ImageGrab.grabclipboard()
        except (OSError, NotImplementedError) as e:
            self.logger.error(f"Failed to read an image from the clipboard: {e}")
            return None
        # grabclipboard returns a list of file names when files were copied
        if isinstance(grabbed, Image.Image):
            grabbed.load()
            return grabbed
        return None

    def poll_resource(self) -> Optional[Payload]:
        text = self._read_text()
        if text is not None:
            return TextPayload(text=text)
        image = self._read_image()
        if image is not None:
            return ImagePayload(image=image)
        return None

    def write_resource(self, payload: Payload) -> None:
        if isinstance(payload, TextPayload):
            try:
                pyperclip.copy(payload.text)
            except pyperclip.PyperclipException as e:
                self.logger.error(f"Failed to write text to the clipboard: {e}")
            return
        self.logger.warning(
            "Writing images to the system clipboard is not supported on this platform."
        )


# endregion

__all__ = ["ClipboardBackend", "InMemoryClipboard", "SystemClipboard"]
