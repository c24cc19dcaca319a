"""
ImageIOLib - Decode/encode adapter

This module converts between encoded image files, PIL Images
and PixelBuffers.
"""

from PK_Libs.ImageIOLib.image_io import (
    from_pil_image,
    to_pil_image,
    read_image,
    save_image,
    is_supported_format,
)

__all__ = [
    "from_pil_image",
    "to_pil_image",
    "read_image",
    "save_image",
    "is_supported_format",
]
