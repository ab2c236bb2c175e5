# region Docstring
"""
clipwatch.thumbnail
Fixed-height preview generation for image payloads.
Overview:
- Scales an image to a target height while keeping its aspect ratio; the width
    is floor(width * target_height / height).
- Always returns a new image; the source image is left untouched.
Design notes:
- Images with an alpha channel (RGBA, LA, or P with transparency) are resampled
    as RGBA so transparency survives; every other mode is resampled as RGB.
- Resampling is deterministic for identical input (bilinear by default).
"""
# endregion
# region Imports
from PIL import Image

from clipwatch.errors import InvalidImageDimensions

# endregion


class ThumbnailGenerator:
    """
    Derives bounded-height previews from images.

    Attributes:
        resample (Image.Resampling): Pillow resampling filter used for scaling.
    """

    def __init__(self, resample: Image.Resampling = Image.Resampling.BILINEAR):
        self.resample = resample

    @staticmethod
    def target_size(width: int, height: int, target_height: int) -> tuple[int, int]:
        """
        Compute the preview size for an image.

        Args:
            width (int): Source width in pixels.
            height (int): Source height in pixels.
            target_height (int): Height of the preview in pixels.

        Returns:
            tuple[int, int]: (target_width, target_height). Widths that floor to
                zero are clamped to one pixel.

        Raises:
            InvalidImageDimensions: If the image is empty or target_height is not positive.

        Example:
            >>> ThumbnailGenerator.target_size(200, 100, 70)
            (140, 70)
        """
        if height <= 0 or width <= 0:
            raise InvalidImageDimensions(width, height)
        if target_height <= 0:
            raise InvalidImageDimensions(
                width,
                height,
                f"Preview height must be positive, got {target_height}.",
            )
        target_width = width * target_height // height
        return max(target_width, 1), target_height

    def generate(self, image: Image.Image, target_height: int) -> Image.Image:
        """
        Scale an image to target_height, preserving its aspect ratio.
        The width is floored but never below one pixel, see target_size().

        Args:
            image (Image.Image): The source image. Not modified.
            target_height (int): Height of the preview in pixels.

        Returns:
            Image.Image: A new image of exactly the computed preview size.
        """
        size = self.target_size(image.width, image.height, target_height)

        if image.mode in ("RGBA", "LA") or (
            image.mode == "P" and "transparency" in image.info
        ):
            source = image.convert("RGBA")
        else:
            source = image.convert("RGB")
        return source.resize(size, resample=self.resample)


__all__ = ["ThumbnailGenerator"]
