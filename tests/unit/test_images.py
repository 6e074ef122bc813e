"""Unit tests for generated image handles."""

import re

import pytest

from fluxworks.core.errors import ServerError
from fluxworks.core.images import image_filename, save_generated_image


class TestImageFilename:
    def test_pattern(self):
        assert image_filename(1700000000123) == "flux-image-1700000000123.png"


class TestSaveGeneratedImage:
    """Tests for save_generated_image."""

    def test_writes_bytes_unchanged(self, temp_dir, png_bytes):
        image = save_generated_image(png_bytes, temp_dir, now_ms=1234)

        assert image.path == temp_dir / "flux-image-1234.png"
        assert image.path.read_bytes() == png_bytes
        assert image.size_bytes == len(png_bytes)

    def test_reads_dimensions(self, temp_dir, png_bytes):
        image = save_generated_image(png_bytes, temp_dir, now_ms=1)
        assert (image.width, image.height) == (64, 48)

    def test_filename_uses_current_time(self, temp_dir, png_bytes):
        image = save_generated_image(png_bytes, temp_dir)
        assert re.fullmatch(r"flux-image-\d+\.png", image.filename)

    def test_creates_missing_directory(self, temp_dir, png_bytes):
        target = temp_dir / "nested" / "outputs"
        image = save_generated_image(png_bytes, target, now_ms=5)
        assert image.path.exists()

    def test_non_image_body_is_server_error(self, temp_dir):
        with pytest.raises(ServerError, match="not an image") as exc_info:
            save_generated_image(b"<html>oops</html>", temp_dir, status_code=200)

        assert exc_info.value.status_code == 200
        assert not list(temp_dir.iterdir())
