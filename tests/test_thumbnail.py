import pytest
from PIL import Image

from clipwatch.errors import InvalidImageDimensions
from clipwatch.thumbnail import ThumbnailGenerator


@pytest.fixture
def generator() -> ThumbnailGenerator:
    return ThumbnailGenerator()


class TestTargetSize:
    def test_preserves_aspect_ratio(self):
        """200x100 scaled to 70 high is 140 wide."""
        assert ThumbnailGenerator.target_size(200, 100, 70) == (140, 70)

    def test_floor_rounding(self):
        """Fractional widths are floored."""
        # 333 * 70 / 100 = 233.1
        assert ThumbnailGenerator.target_size(333, 100, 70) == (233, 70)
        # 99 * 70 / 100 = 69.3
        assert ThumbnailGenerator.target_size(99, 100, 70) == (69, 70)

    def test_upscales_small_images(self):
        """Images shorter than the target are scaled up."""
        assert ThumbnailGenerator.target_size(20, 10, 70) == (140, 70)

    def test_width_clamped_to_one_pixel(self):
        """Very tall images keep at least one column."""
        assert ThumbnailGenerator.target_size(1, 1000, 70) == (1, 70)

    def test_zero_height_rejected(self):
        """A zero-height source cannot be scaled."""
        with pytest.raises(InvalidImageDimensions) as exc_info:
            ThumbnailGenerator.target_size(100, 0, 70)
        assert exc_info.value.width == 100
        assert exc_info.value.height == 0

    def test_non_positive_target_rejected(self):
        """Preview height must be positive."""
        with pytest.raises(InvalidImageDimensions):
            ThumbnailGenerator.target_size(100, 50, 0)


class TestGenerate:
    def test_output_size(self, generator, make_image):
        """A 200x100 image becomes a 140x70 preview."""
        preview = generator.generate(make_image(200, 100), 70)
        assert preview.size == (140, 70)

    def test_zero_height_image_fails(self, generator):
        """A 100x0 image fails with InvalidImageDimensions."""
        with pytest.raises(InvalidImageDimensions):
            generator.generate(Image.new("RGB", (100, 0)), 70)

    def test_source_not_modified(self, generator, make_image):
        """The source image keeps its size, mode and pixels."""
        source = make_image(50, 25)
        before = source.tobytes()
        preview = generator.generate(source, 70)
        assert preview is not source
        assert source.size == (50, 25)
        assert source.mode == "RGBA"
        assert source.tobytes() == before

    def test_deterministic(self, generator, make_image):
        """Identical input yields identical previews."""
        first = generator.generate(make_image(64, 48), 70)
        second = generator.generate(make_image(64, 48), 70)
        assert first.tobytes() == second.tobytes()

    def test_alpha_preserved(self, generator, make_image):
        """Images with transparency stay RGBA."""
        assert generator.generate(make_image(10, 10, mode="RGBA"), 5).mode == "RGBA"

    def test_opaque_images_are_rgb(self, generator, make_image):
        """Images without alpha are resampled as RGB."""
        assert generator.generate(make_image(10, 10, mode="RGB"), 5).mode == "RGB"

    def test_palette_image(self, generator):
        """Palette images are converted before resampling."""
        palette = Image.new("P", (30, 15), 3)
        assert generator.generate(palette, 70).size == (140, 70)

    def test_tall_image_keeps_one_column(self, generator):
        """A width that floors to zero is generated one pixel wide."""
        assert generator.generate(Image.new("RGB", (1, 1000)), 70).size == (1, 70)

    def test_custom_resample(self, make_image):
        """The resampling filter is configurable."""
        generator = ThumbnailGenerator(resample=Image.Resampling.NEAREST)
        assert generator.generate(make_image(4, 2), 70).size == (140, 70)
