# region Docstring
"""
clipwatch.identity
Stable identity keys for clipboard payloads.
Overview:
- Text payloads are identified by their exact value (case-sensitive, no
    normalisation).
- Image payloads are identified by the SHA-256 digest of a canonical lossless
    PNG encoding of their pixels. Hashing the canonical encoding instead of the
    in-memory bytes makes two images with the same pixels compare equal even when
    their buffers differ in stride, mode, palette or attached metadata.
Contents:
- IdentityKey: Frozen, hashable (kind, value) pair used only for equality.
- canonical_png_bytes(image): The canonical encoding used for hashing.
- identity_of(payload): Compute the identity key of a payload.
Design notes:
- A single canonical format is used for every image regardless of where it came
    from, so logically identical images never hash differently across formats.
- Any Pillow error while encoding is reported as EncodingFailure.
"""
# endregion
# region Imports
from hashlib import sha256
from io import BytesIO
from typing import Literal, Union

from PIL import Image
from pydantic import BaseModel, ConfigDict

from clipwatch.errors import EncodingFailure
from clipwatch.models.payload import ImagePayload, TextPayload

# endregion

CANONICAL_MODE = "RGBA"
CANONICAL_FORMAT = "PNG"
CANONICAL_COMPRESS_LEVEL = 6


class IdentityKey(BaseModel):
    """
    Identity of a payload, compared by value.

    Attributes:
        kind (Literal["text", "image"]): Which payload variant produced the key.
        value (str): The text itself, or the hex digest of the canonical image encoding.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["text", "image"]
    value: str

    def __repr__(self) -> str:
        shown = self.value if len(self.value) <= 16 else self.value[:16] + "..."
        return f"<IdentityKey(kind='{self.kind}', value='{shown}')>"


def canonical_png_bytes(image: Image.Image) -> bytes:
    """
    Encode an image to the canonical PNG used for hashing.

    The pixels are converted to RGBA and copied into a fresh image so no
    palette, ICC profile, transparency key or other `info` metadata reaches
    the encoder.

    Raises:
        EncodingFailure: If the image is empty or Pillow cannot encode it.
    """
    width, height = image.size
    if width <= 0 or height <= 0:
        raise EncodingFailure(f"Cannot encode an empty {width}x{height} image.")
    try:
        pixels = image if image.mode == CANONICAL_MODE else image.convert(CANONICAL_MODE)
        canonical = Image.frombytes(CANONICAL_MODE, pixels.size, pixels.tobytes())
        buffer = BytesIO()
        canonical.save(
            buffer,
            format=CANONICAL_FORMAT,
            optimize=False,
            compress_level=CANONICAL_COMPRESS_LEVEL,
        )
    except (OSError, ValueError, SystemError) as e:
        raise EncodingFailure(f"Failed to encode image for hashing: {e}") from e
    return buffer.getvalue()


def identity_of(payload: Union[TextPayload, ImagePayload]) -> IdentityKey:
    """
    Compute the identity key of a payload.

    Args:
        payload (Payload): A text or image payload.

    Returns:
        IdentityKey: The key to compare against other payloads.

    Raises:
        EncodingFailure: If an image payload cannot be canonically encoded.

    Example:
        >>> identity_of(TextPayload(text="hello")) == identity_of(TextPayload(text="hello"))
        True
    """
    if isinstance(payload, TextPayload):
        return IdentityKey(kind="text", value=payload.text)
    if isinstance(payload, ImagePayload):
        digest = sha256(canonical_png_bytes(payload.image)).hexdigest()
        return IdentityKey(kind="image", value=digest)
    raise TypeError(f"Unsupported payload type: {type(payload).__name__}")


__all__ = ["IdentityKey", "canonical_png_bytes", "identity_of"]
