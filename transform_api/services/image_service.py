"""
Image conversion service - business logic for POST /jpeg-to-png.
Challenge: Decode untrusted JPEG bytes, fit them to a square box, re-encode as PNG.
Design: Each step is a plain function; decode errors are client errors,
encode errors are server errors. Nothing here terminates the process.
"""

import io
import logging

from PIL import Image, UnidentifiedImageError

from transform_api.core.deadline import Deadline, check_deadline
from transform_api.core.errors import EnvironmentFailure, MalformedInput

logger = logging.getLogger(__name__)

DEFAULT_BOUND = 256
JPEG_SOI = b"\xff\xd8"
MISSING_SOI_MESSAGE = "invalid JPEG format: missing start-of-image marker"
UNRECOGNIZED_MESSAGE = "invalid JPEG format: unrecognized image data"
CORRUPT_MESSAGE = "invalid JPEG format: image data is truncated or corrupt"
TOO_LARGE_MESSAGE = "invalid JPEG format: image dimensions exceed the decoder limit"

# Modes kept as-is; anything else a JPEG decodes to (CMYK, YCbCr) goes through RGB
_PNG_MODES = {"L", "RGB", "RGBA"}


def decode_jpeg(raw_body: bytes) -> Image.Image:
    """Open and fully decode a JPEG. Raises MalformedInput for anything else."""
    if not raw_body.startswith(JPEG_SOI):
        raise MalformedInput(MISSING_SOI_MESSAGE)
    try:
        image = Image.open(io.BytesIO(raw_body), formats=["JPEG"])
        image.load()
    except UnidentifiedImageError as exc:
        raise MalformedInput(UNRECOGNIZED_MESSAGE, detail=str(exc)) from exc
    except Image.DecompressionBombError as exc:
        raise MalformedInput(TOO_LARGE_MESSAGE, detail=str(exc)) from exc
    except (OSError, SyntaxError, ValueError) as exc:
        # Pillow's wording goes to the log only
        raise MalformedInput(CORRUPT_MESSAGE, detail=str(exc)) from exc
    return image


def _scale(bound: int, short: int, long: int) -> int:
    # round(bound * short / long), half-up, in integers; never below one pixel
    return max(1, (2 * bound * short + long) // (2 * long))


def target_dimensions(width: int, height: int, bound: int = DEFAULT_BOUND) -> tuple[int, int]:
    """Pin the longer axis at `bound` and scale the other to keep the aspect ratio.

    Square images become bound x bound; smaller images are scaled up.
    """
    if height > width:
        return _scale(bound, width, height), bound
    if width > height:
        return bound, _scale(bound, height, width)
    return bound, bound


def resize(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    if image.mode not in _PNG_MODES:
        image = image.convert("RGB")
    return image.resize(size, Image.Resampling.LANCZOS)


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    try:
        image.save(buffer, format="PNG")
    except (OSError, ValueError) as exc:
        raise EnvironmentFailure(f"Error encoding PNG from JPEG file: {exc}") from exc
    return buffer.getvalue()


class ImageConversionService:
    """Handles the /jpeg-to-png use case."""

    def __init__(self, bound: int = DEFAULT_BOUND):
        self.bound = bound

    def process(self, raw_body: bytes, deadline: Deadline | None = None) -> bytes:
        """Return PNG bytes of the JPEG body resized into the bounding box."""
        check_deadline(deadline, "JPEG decode")
        image = decode_jpeg(raw_body)
        width, height = image.size
        size = target_dimensions(width, height, self.bound)
        logger.debug(
            "Resizing %dx%d JPEG to %dx%d", width, height, *size,
            extra={"width": width, "height": height},
        )
        check_deadline(deadline, "image resize")
        resized = resize(image, size)
        check_deadline(deadline, "PNG encode")
        return encode_png(resized)
