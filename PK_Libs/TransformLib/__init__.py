"""
TransformLib - Raster transforms

This module provides geometry (crop/flip/rotate), resize, and
whole-image color transforms over PixelBuffer.
"""

from PK_Libs.TransformLib.geometry_ops import (
    flip,
    flip_horizontally,
    flip_vertically,
    rotate90,
    rotate180,
    rotate270,
    crop,
    crop_by_percentage,
)
from PK_Libs.TransformLib.resize_engine import (
    ResizeQuality,
    resize,
    instant_resize,
    progressive_resize,
    sample_nearest,
    sample_bilinear,
)
from PK_Libs.TransformLib.color_transform_ops import (
    invert_colors,
    to_grayscale,
    replace_color,
    set_transparency,
    extract_unique_colors,
    apply_color_mapping,
)

__all__ = [
    "flip",
    "flip_horizontally",
    "flip_vertically",
    "rotate90",
    "rotate180",
    "rotate270",
    "crop",
    "crop_by_percentage",
    "ResizeQuality",
    "resize",
    "instant_resize",
    "progressive_resize",
    "sample_nearest",
    "sample_bilinear",
    "invert_colors",
    "to_grayscale",
    "replace_color",
    "set_transparency",
    "extract_unique_colors",
    "apply_color_mapping",
]
