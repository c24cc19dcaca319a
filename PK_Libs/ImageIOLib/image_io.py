"""
Pillow-backed decode/encode adapter for Pixel Kit.

The transforms never touch file formats themselves; this module is the
narrow boundary where encoded images become PixelBuffers and back.

Functions:
    from_pil_image: Convert a PIL Image to a PixelBuffer
    to_pil_image: Convert a PixelBuffer to an RGBA PIL Image
    read_image: Read an image file, returning None when it cannot be read
    save_image: Encode a PixelBuffer to disk
    is_supported_format: Check a path against the supported extensions
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from PK_Libs.constants import (
    BUFFER_IMAGE_MODE,
    DEFAULT_OUTPUT_FORMAT,
    SUPPORTED_STANDARD_IMAGES,
)
from PK_Libs.PixelLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def from_pil_image(image: Any) -> PixelBuffer:
    """
    Convert a PIL Image to a PixelBuffer.

    Args:
        image: A PIL Image in any mode; it is converted to RGBA first

    Returns:
        A new PixelBuffer holding a copy of the pixels

    Raises:
        TypeError: If image is not a PIL Image
    """
    if not hasattr(image, "convert"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    if image.mode != BUFFER_IMAGE_MODE:
        image = image.convert(BUFFER_IMAGE_MODE)

    return PixelBuffer.from_array(np.asarray(image))


def to_pil_image(buffer: PixelBuffer) -> Any:
    """Convert a PixelBuffer to a new RGBA PIL Image."""
    return Image.fromarray(buffer.to_array(), BUFFER_IMAGE_MODE)


def is_supported_format(file_path: PathLike) -> bool:
    """
    Check if a file path has a supported image extension.

    Args:
        file_path: Path to the file

    Returns:
        True if the extension is one of SUPPORTED_STANDARD_IMAGES
    """
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


def read_image(file_path: PathLike) -> Optional[PixelBuffer]:
    """
    Read an image from a file without raising on failure.

    A missing, unreadable or undecodable file is an expected condition for
    callers (they usually fall back to a placeholder icon), so it is
    reported as None instead of an exception.

    Args:
        file_path: Path to the image file

    Returns:
        The decoded PixelBuffer, or None
    """
    path = Path(file_path)

    if not path.is_file():
        logger.debug(f"Image file not found: {path}")
        return None

    try:
        with Image.open(path) as image:
            image.load()
            return from_pil_image(image)
    except (OSError, UnidentifiedImageError) as exc:
        logger.debug(f"Could not read image {path}: {exc}")
        return None


def save_image(
    buffer: PixelBuffer,
    file_path: PathLike,
    image_format: str = DEFAULT_OUTPUT_FORMAT,
) -> Path:
    """
    Save a PixelBuffer to disk.

    Args:
        buffer: The image to encode
        file_path: Destination path
        image_format: Pillow format name (default PNG)

    Returns:
        The path the image was written to

    Raises:
        OSError: If the destination directory does not exist or the file
            cannot be written
    """
    path = Path(file_path)

    if not path.parent.exists():
        raise OSError(f"Output directory does not exist: {path.parent}")

    if not path.parent.is_dir():
        raise OSError(f"Output path is not a directory: {path.parent}")

    to_pil_image(buffer).save(path, format=image_format)
    return path
