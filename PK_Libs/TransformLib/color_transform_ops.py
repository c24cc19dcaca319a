"""
Whole-image color operations for Pixel Kit.

Each operation works on a copy of its input. The per-color formulas from
PixelLib.color_ops are applied to the whole (height, width, 4) array at
once, which gives the same result as a pixel-by-pixel loop.

Functions:
    invert_colors: Invert the RGB channels of every pixel
    to_grayscale: Replace every pixel with its grayscale equivalent
    replace_color: Replace colors within a tolerance of a target color
    set_transparency: Set the alpha channel of every pixel
    extract_unique_colors: Extract all unique colors from an image
    apply_color_mapping: Apply exact color-to-color replacements
"""

from typing import Dict, List, Union

import numpy as np

from PK_Libs.constants import CHANNEL_COUNT, MAX_CHANNEL_VALUE
from PK_Libs.errors import InvalidArgumentError
from PK_Libs.PixelLib.color_ops import Color, RgbaColor, with_alpha
from PK_Libs.PixelLib.pixel_buffer import PixelBuffer

ColorArg = Union[Color, RgbaColor]


def _as_color(value: ColorArg) -> Color:
    if isinstance(value, Color):
        return value
    return Color.from_rgba(tuple(value))


def invert_colors(buffer: PixelBuffer) -> PixelBuffer:
    """
    Invert all colors of an image. Alpha is preserved.

    Args:
        buffer: The original image

    Returns:
        A new PixelBuffer with inverted colors
    """
    pixels = buffer.to_array()
    pixels[:, :, :3] = MAX_CHANNEL_VALUE - pixels[:, :, :3]
    return PixelBuffer.from_array(pixels)


def to_grayscale(buffer: PixelBuffer) -> PixelBuffer:
    """
    Convert an image to grayscale using the truncated RGB mean.

    Args:
        buffer: The original image

    Returns:
        A new PixelBuffer where every pixel has red == green == blue
    """
    pixels = buffer.to_array()
    mean_value = pixels[:, :, :3].sum(axis=2, dtype=np.uint16) // 3
    pixels[:, :, :3] = mean_value[:, :, None]
    return PixelBuffer.from_array(pixels)


def replace_color(
    buffer: PixelBuffer,
    target: ColorArg,
    replacement: ColorArg,
    threshold: int = 0,
) -> PixelBuffer:
    """
    Identify a color in an image and replace it with another.

    Colors close to `target` are replaced too, depending on `threshold`
    (see color_ops.within_tolerance). A replaced pixel takes the RGB channels
    of `replacement` and keeps its own alpha. With the default threshold of 0
    only exact RGB matches are altered.

    Args:
        buffer: The image to alter
        target: The color to be replaced
        replacement: The color providing the new RGB channels
        threshold: Acceptable per-channel difference from `target`

    Returns:
        A new PixelBuffer with matching pixels replaced

    Raises:
        InvalidArgumentError: If threshold is negative
    """
    if threshold < 0:
        raise InvalidArgumentError(
            f"Threshold: {threshold} - cannot be a negative number."
        )

    target_color = _as_color(target)
    replacement_color = _as_color(replacement)

    difference = np.abs(
        buffer.view()[:, :, :3].astype(np.int16) - np.array(target_color.rgb, dtype=np.int16)
    )
    # differences never exceed 255, so larger thresholds behave like 255
    matches = np.all(difference <= min(threshold, MAX_CHANNEL_VALUE), axis=2)

    pixels = buffer.to_array()
    pixels[matches, :3] = replacement_color.rgb
    return PixelBuffer.from_array(pixels)


def set_transparency(buffer: PixelBuffer, alpha: int) -> PixelBuffer:
    """
    Set the transparency level of every pixel.

    Args:
        buffer: The original image
        alpha: New alpha value (0-255)

    Returns:
        A new PixelBuffer with the same RGB channels and the given alpha

    Raises:
        InvalidArgumentError: If alpha is outside [0, 255]
    """
    # Validate before any allocation.
    with_alpha(Color(0, 0, 0), alpha)
    pixels = buffer.to_array()
    pixels[:, :, 3] = alpha
    return PixelBuffer.from_array(pixels)


def extract_unique_colors(buffer: PixelBuffer) -> List[RgbaColor]:
    """
    Extract all unique colors from an image.

    Args:
        buffer: The image to inspect

    Returns:
        A sorted list of unique RGBA color tuples found in the image
    """
    flat = buffer.view().reshape(-1, CHANNEL_COUNT)
    return sorted(tuple(entry) for entry in np.unique(flat, axis=0).tolist())


def apply_color_mapping(buffer: PixelBuffer, color_mappings: Dict[RgbaColor, RgbaColor]) -> PixelBuffer:
    """
    Apply color replacements to an image based on a mapping dictionary.

    Only colors present in the mapping are changed; matching is exact on
    all four channels.

    Args:
        buffer: The image to process
        color_mappings: Dictionary mapping source RGBA tuples to replacements

    Returns:
        A new PixelBuffer with color replacements applied
    """
    source_pixels = buffer.view()
    pixels = buffer.to_array()

    # Match against the source so one replacement never feeds another
    for source, target in color_mappings.items():
        matches = np.all(source_pixels == _as_color(source).rgba, axis=2)
        pixels[matches] = _as_color(target).rgba

    return PixelBuffer.from_array(pixels)
