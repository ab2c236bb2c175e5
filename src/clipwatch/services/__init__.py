"""
clipwatch.services
Services that drive the history engine from a clipboard source.
"""

from .watcher import ClipboardWatcher  # noqa: F401

__all__ = ["ClipboardWatcher"]
