"""
PixelLib - Color values and the PixelBuffer raster

This module provides the Color value type, the per-color operations,
and the PixelBuffer grid all transforms work on.
"""

from PK_Libs.PixelLib.color_ops import (
    Color,
    RgbaColor,
    within_tolerance,
    invert,
    grayscale,
    with_alpha,
)
from PK_Libs.PixelLib.pixel_buffer import PixelBuffer

__all__ = [
    "Color",
    "RgbaColor",
    "within_tolerance",
    "invert",
    "grayscale",
    "with_alpha",
    "PixelBuffer",
]
