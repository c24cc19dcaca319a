"""
Geometry transforms for Pixel Kit.

Pure pixel-coordinate remapping: every function returns a new PixelBuffer
and leaves its input untouched. Calls that cannot change the image return
the input buffer itself.

Functions:
    flip: Mirror horizontally and/or vertically
    flip_horizontally: Mirror left-right
    flip_vertically: Mirror top-bottom
    rotate90: Rotate 90 degrees clockwise
    rotate180: Rotate 180 degrees
    rotate270: Rotate 270 degrees clockwise (90 counter-clockwise)
    crop: Remove absolute pixel rows/columns from each edge
    crop_by_percentage: Remove a percentage of each dimension from each edge

Example:
    >>> icon = PixelBuffer(64, 32)
    >>> rotated = rotate90(icon)
    >>> rotated.size
    (32, 64)
    >>> cropped = crop_by_percentage(icon, 25, 0, 25, 0)
    >>> cropped.size
    (64, 16)
"""

import logging
import math

import numpy as np

from PK_Libs.constants import MAX_CROP_PERCENT, MIN_CROP_PERCENT
from PK_Libs.errors import InvalidArgumentError
from PK_Libs.PixelLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


# ============================================================================
# Flip
# ============================================================================

def flip(buffer: PixelBuffer, horizontal: bool, vertical: bool) -> PixelBuffer:
    """
    Create a flipped version of an image.

    Source pixel (x, y) lands at (width-1-x if horizontal else x,
    height-1-y if vertical else y).

    Args:
        buffer: The image to flip
        horizontal: Mirror left-right
        vertical: Mirror top-bottom

    Returns:
        A new PixelBuffer, or `buffer` itself when both flags are False
    """
    if not horizontal and not vertical:
        logger.debug("flip called with no axis, returning input unchanged")
        return buffer

    pixels = buffer.view()
    if horizontal:
        pixels = pixels[:, ::-1]
    if vertical:
        pixels = pixels[::-1, :]

    return PixelBuffer.from_array(pixels)


def flip_horizontally(buffer: PixelBuffer) -> PixelBuffer:
    return flip(buffer, True, False)


def flip_vertically(buffer: PixelBuffer) -> PixelBuffer:
    return flip(buffer, False, True)


# ============================================================================
# Rotate
# ============================================================================

def rotate90(buffer: PixelBuffer) -> PixelBuffer:
    """
    Rotate an image 90 degrees clockwise.

    Input pixel (x, y) lands at (height-1-y, x); the output is
    height pixels wide and width pixels tall.
    """
    # np.rot90 turns from the first axis towards the second; k=-1 is clockwise
    # for a row-major (y, x) raster.
    return PixelBuffer.from_array(np.rot90(buffer.view(), k=-1))


def rotate180(buffer: PixelBuffer) -> PixelBuffer:
    """Rotate an image 180 degrees; (x, y) lands at (width-1-x, height-1-y)."""
    return PixelBuffer.from_array(np.rot90(buffer.view(), k=2))


def rotate270(buffer: PixelBuffer) -> PixelBuffer:
    """Rotate an image 270 degrees clockwise, the inverse of rotate90."""
    return PixelBuffer.from_array(np.rot90(buffer.view(), k=1))


# ============================================================================
# Crop
# ============================================================================

def _require_non_negative_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(f"{name} crop must be an integer, got {type(value)}")
    if value < 0:
        raise InvalidArgumentError(f"{name} crop cannot be negative, got {value}")


def crop(buffer: PixelBuffer, top: int, right: int, bottom: int, left: int) -> PixelBuffer:
    """
    Create a cropped version of an image.

    Each parameter is the number of pixel rows/columns removed from that edge.

    Args:
        buffer: The image to crop
        top: Rows removed at the top
        right: Columns removed on the right
        bottom: Rows removed at the bottom
        left: Columns removed on the left

    Returns:
        A new PixelBuffer, or `buffer` itself when nothing is removed

    Raises:
        InvalidArgumentError: If a parameter is negative, or the remaining
            width or height would not be positive
    """
    for name, value in (("top", top), ("right", right), ("bottom", bottom), ("left", left)):
        _require_non_negative_int(name, value)

    if top + bottom >= buffer.height:
        raise InvalidArgumentError(
            f"Cannot crop {top + bottom} rows from an image {buffer.height} pixels tall "
            f"- invalid top and bottom parameters: {top}, {bottom}"
        )

    if right + left >= buffer.width:
        raise InvalidArgumentError(
            f"Cannot crop {right + left} columns from an image {buffer.width} pixels wide "
            f"- invalid right and left parameters: {right}, {left}"
        )

    if top == right == bottom == left == 0:
        logger.debug("crop called with zero offsets, returning input unchanged")
        return buffer

    pixels = buffer.view()[top:buffer.height - bottom, left:buffer.width - right]
    return PixelBuffer.from_array(pixels)


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def crop_by_percentage(
    buffer: PixelBuffer,
    top: int,
    right: int,
    bottom: int,
    left: int,
) -> PixelBuffer:
    """
    Create a cropped version of an image using percentages.

    Top and bottom are percentages of the height, right and left of the
    width. The sum of top and bottom, as well as the sum of right and left,
    cannot be over 100. Pixel offsets are rounded half away from zero and
    passed to `crop`, which rejects a crop that leaves no pixels (so a pair
    summing to exactly 100 passes here and fails there).

    Args:
        buffer: The image to crop
        top: Percentage of the height removed at the top (0-100)
        right: Percentage of the width removed on the right (0-100)
        bottom: Percentage of the height removed at the bottom (0-100)
        left: Percentage of the width removed on the left (0-100)

    Returns:
        A new PixelBuffer

    Raises:
        InvalidArgumentError: If a parameter is outside [0, 100], a pair sums
            past 100, or the rounded offsets leave no pixels
    """
    params = (("top", top), ("right", right), ("bottom", bottom), ("left", left))
    for name, value in params:
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidArgumentError(f"{name} crop must be an integer, got {type(value)}")
        if not MIN_CROP_PERCENT <= value <= MAX_CROP_PERCENT:
            raise InvalidArgumentError(
                f"Cropping parameters value must be between {MIN_CROP_PERCENT} "
                f"and {MAX_CROP_PERCENT}, got {name}={value}."
            )

    if top + bottom > MAX_CROP_PERCENT:
        raise InvalidArgumentError(
            f"Cannot crop image by more than 100% - invalid top and bottom parameters: {top}, {bottom}"
        )

    if right + left > MAX_CROP_PERCENT:
        raise InvalidArgumentError(
            f"Cannot crop image by more than 100% - invalid right and left parameters: {right}, {left}"
        )

    height = buffer.height
    width = buffer.width

    return crop(
        buffer,
        _round_half_away_from_zero(height * top / 100),
        _round_half_away_from_zero(width * right / 100),
        _round_half_away_from_zero(height * bottom / 100),
        _round_half_away_from_zero(width * left / 100),
    )
