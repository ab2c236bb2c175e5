# region Docstring
"""
clipwatch.models.payload
Domain models for the content captured from the clipboard at one observation.
Overview:
- A payload is either text or an image, never both. The two variants form a
    Pydantic discriminated union on the `type` field.
- Image payloads wrap a Pillow image. They can also be built from a raw pixel
    buffer with an explicit row stride, which is how platform clipboards usually
    hand bitmaps over.
Contents:
- TextPayload: Text content, stored verbatim.
- ImagePayload: Pillow image content with convenience accessors for dimensions.
- Payload: Annotated union of both variants, discriminated by `type`.
Design notes:
- Both models are frozen; entries built from them never change after capture.
- Equality between payloads for deduplication is not decided here, see
    clipwatch.identity.
"""
# endregion
# region Imports
from typing import Annotated, Literal, Optional, Union

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field


# endregion
# region Text Payload
class TextPayload(BaseModel):
    """
    Text captured from the clipboard.

    Attributes:
        type (Literal["text"]): The discriminator for text payloads.
        text (str): The captured text, unmodified.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str = Field(..., description="The captured text, unmodified")

    @property
    def is_text(self) -> bool:
        return True

    @property
    def is_image(self) -> bool:
        return False

    def copy_owned(self) -> "TextPayload":
        # str is immutable, sharing is safe
        return self


# endregion
# region Image Payload
class ImagePayload(BaseModel):
    """
    Image captured from the clipboard.

    Attributes:
        type (Literal["image"]): The discriminator for image payloads.
        image (PIL.Image.Image): The captured pixels.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: Literal["image"] = "image"
    image: Image.Image = Field(..., description="The captured pixels")

    @classmethod
    def from_buffer(
        cls,
        data: bytes,
        width: int,
        height: int,
        mode: str = "RGBA",
        stride: Optional[int] = None,
    ) -> "ImagePayload":
        """
        Build an image payload from a raw pixel buffer.

        Args:
            data (bytes): Row-major pixel data.
            width (int): Width in pixels.
            height (int): Height in pixels.
            mode (str): Pillow mode of the pixel data. DEFAULT: "RGBA"
            stride (Optional[int]): Bytes per row including padding. DEFAULT: tightly packed

        Returns:
            ImagePayload: A payload owning a copy of the pixels.
        """
        image = Image.frombytes(mode, (width, height), data, "raw", mode, stride or 0)
        return cls(image=image)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    @property
    def mode(self) -> str:
        return self.image.mode

    @property
    def is_text(self) -> bool:
        return False

    @property
    def is_image(self) -> bool:
        return True

    def copy_owned(self) -> "ImagePayload":
        """Return a payload holding an independent copy of the pixels."""
        return ImagePayload(image=self.image.copy())


# endregion

Payload = Annotated[Union[TextPayload, ImagePayload], Field(discriminator="type")]
"""Text-or-image content captured at one observation."""

__all__ = ["TextPayload", "ImagePayload", "Payload"]
