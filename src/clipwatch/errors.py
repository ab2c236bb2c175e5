# region Docstring
"""
clipwatch.errors
Exception hierarchy for the clipboard history engine.
Overview:
- Payload-level failures (bad image dimensions, encoding failures) are raised by
    the identity and thumbnail layers and recovered by the ChangeDetector, which
    turns them into a NoOp for the current observe cycle.
- Invariant failures (CapacityViolation) are programming errors and propagate.
Contents:
- ClipwatchError: Base class for every error raised by the package.
- InvalidImageDimensions: Source image cannot be scaled (zero height or a
    non-positive target height).
- EncodingFailure: The canonical encoding of an image payload failed.
- CapacityViolation: A HistoryStore exceeded its capacity after a public operation.
"""
# endregion


class ClipwatchError(Exception):
    """Base class for clipwatch errors."""


class InvalidImageDimensions(ClipwatchError):
    """
    Raised when an image cannot be scaled to a preview.

    Attributes:
        width (int): Width of the offending image.
        height (int): Height of the offending image.
    """

    def __init__(self, width: int, height: int, message: str | None = None):
        self.width = width
        self.height = height
        super().__init__(
            message or f"Cannot derive a preview from a {width}x{height} image."
        )


class EncodingFailure(ClipwatchError):
    """Raised when an image payload cannot be canonically encoded for hashing."""


class CapacityViolation(ClipwatchError):
    """
    Raised when a HistoryStore holds more entries than its capacity allows.

    This is never recovered internally.
    """

    def __init__(self, length: int, capacity: int):
        self.length = length
        self.capacity = capacity
        super().__init__(
            f"History store holds {length} entries but capacity is {capacity}."
        )


__all__ = [
    "ClipwatchError",
    "InvalidImageDimensions",
    "EncodingFailure",
    "CapacityViolation",
]
