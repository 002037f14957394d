from pathlib import Path

from PIL import Image

from .config import JPEG_QUALITY
from .errors import EncodeError


def save_jpeg(path: Path, rgb: bytes, width: int, height: int, quality: int = JPEG_QUALITY):
    """packed RGB (3 bytes/pixel) → JPEG 파일"""
    if width <= 0 or height <= 0:
        raise EncodeError(f"invalid image size {width}x{height}")
    if len(rgb) != 3 * width * height:
        raise EncodeError(
            f"buffer size {len(rgb)} does not match {width}x{height} RGB ({3 * width * height})"
        )
    try:
        img = Image.frombytes("RGB", (width, height), rgb)
        img.save(path, format="JPEG", quality=quality)
    except (OSError, ValueError) as e:
        raise EncodeError(f"error writing {path}: {e}") from e
