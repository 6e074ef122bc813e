"""Local image resources for generated images.

A successful generation yields opaque image bytes. They are written to the
outputs directory so the page can use the same file both as the image source
and as the download target. Each new success produces a new file; earlier
files are left in place for the lifetime of the process.
"""

import io
import logging
import time
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import ServerError

logger = logging.getLogger(__name__)

FILENAME_PREFIX = "flux-image-"


def image_filename(created_ms: int) -> str:
    """Return the download filename for an image created at ``created_ms``."""
    return f"{FILENAME_PREFIX}{created_ms}.png"


@dataclass(frozen=True)
class GeneratedImage:
    """Handle to the image produced by a successful generation."""

    path: Path
    created_ms: int
    width: int
    height: int
    size_bytes: int

    @property
    def filename(self) -> str:
        """Filename offered by the download control."""
        return self.path.name


def save_generated_image(
    data: bytes,
    outputs_dir: Path,
    status_code: int = 200,
    now_ms: int | None = None,
) -> GeneratedImage:
    """Write an image payload to disk and return its handle.

    The bytes are stored unchanged; Pillow is only used to check that the
    payload is an image and to read its dimensions.

    Args:
        data: Binary body of the successful response
        outputs_dir: Directory to write the file into
        status_code: HTTP status of the response, reported if decoding fails
        now_ms: Creation time in epoch milliseconds (default: current time)

    Returns:
        GeneratedImage describing the written file

    Raises:
        ServerError: If the payload is not a decodable image
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            width, height = image.size
    except (UnidentifiedImageError, OSError) as e:
        raise ServerError(status_code, "response body is not an image") from e

    created_ms = now_ms if now_ms is not None else int(time.time() * 1000)
    outputs_dir.mkdir(parents=True, exist_ok=True)
    path = outputs_dir / image_filename(created_ms)
    path.write_bytes(data)

    logger.info(f"Saved {width}x{height} image ({len(data)} bytes) to {path}")

    return GeneratedImage(
        path=path,
        created_ms=created_ms,
        width=width,
        height=height,
        size_bytes=len(data),
    )
