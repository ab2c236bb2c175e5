import logging

import pytest
from PIL import Image

from clipwatch.change_detector import ChangeDetector
from clipwatch.clipboard import InMemoryClipboard
from clipwatch.config import ClipboardHistorySettings, get_settings
from clipwatch.history_store import HistoryStore
from clipwatch.logger import LOGGER_NAME
from clipwatch.models.history_entry import HistoryEntry
from clipwatch.models.payload import ImagePayload, TextPayload

CLIPWATCH_ENV_VARS = [
    "CLIPWATCH_CAPACITY",
    "CLIPWATCH_PREVIEW_HEIGHT",
    "CLIPWATCH_POLL_INTERVAL",
    "CLIPWATCH_LOG_LEVEL",
    "CLIPWATCH_LOG_FILE",
]


def checkerboard(width: int, height: int, mode: str = "RGBA") -> Image.Image:
    """Build a deterministic two-colour test image."""
    image = Image.new(mode, (width, height))
    dark = (20, 40, 60, 255)[: len(mode)]
    light = (200, 180, 160, 255)[: len(mode)]
    image.putdata(
        [dark if (x + y) % 2 else light for y in range(height) for x in range(width)]
    )
    return image


def text_entry(text: str) -> HistoryEntry:
    return HistoryEntry.from_payload(TextPayload(text=text))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear clipwatch environment overrides and the settings cache."""
    for key in CLIPWATCH_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any dictConfig applied by a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> ClipboardHistorySettings:
    """Settings with a small capacity and a fast poll interval."""
    return ClipboardHistorySettings(capacity=3, preview_height=70, poll_interval=0.01)


@pytest.fixture
def store() -> HistoryStore:
    store = HistoryStore(capacity=20)
    yield store
    store.close()


@pytest.fixture
def detector() -> ChangeDetector:
    return ChangeDetector(preview_height=70)


@pytest.fixture
def clipboard() -> InMemoryClipboard:
    return InMemoryClipboard()


@pytest.fixture
def image_payload() -> ImagePayload:
    """A 200x100 RGBA image payload."""
    return ImagePayload(image=checkerboard(200, 100))


@pytest.fixture
def make_image():
    """Factory fixture for deterministic test images."""
    return checkerboard


@pytest.fixture
def make_text_entry():
    """Factory fixture for text history entries."""
    return text_entry
