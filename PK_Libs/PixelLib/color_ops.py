"""
Color values and per-color operations for Pixel Kit.

This module defines the immutable Color value type and the pure functions
that operate on single colors. Nothing here knows about PixelBuffer.

Classes:
    Color: Immutable RGBA color with 8-bit channels

Functions:
    within_tolerance: Compare two colors channel by channel (alpha ignored)
    invert: Invert the RGB channels of a color
    grayscale: Replace the RGB channels with their truncated mean
    with_alpha: Return a color with its alpha channel replaced

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Optional, Sequence, Tuple

from PK_Libs.constants import MAX_CHANNEL_VALUE, MIN_CHANNEL_VALUE, OPAQUE_ALPHA
from PK_Libs.errors import InvalidArgumentError

RgbaColor = Tuple[int, int, int, int]


def _check_channel(name: str, value: int) -> None:
    if not MIN_CHANNEL_VALUE <= value <= MAX_CHANNEL_VALUE:
        raise InvalidArgumentError(
            f"{name} value: {value} - out of range "
            f"[{MIN_CHANNEL_VALUE}, {MAX_CHANNEL_VALUE}]."
        )


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit unsigned channels.

    Attributes:
        red: Red channel (0-255)
        green: Green channel (0-255)
        blue: Blue channel (0-255)
        alpha: Alpha channel (0-255), fully opaque by default
    """

    red: int
    green: int
    blue: int
    alpha: int = OPAQUE_ALPHA

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            # numpy integers register as numbers.Integral; floats and bools do not pass
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidArgumentError(
                    f"{name.capitalize()} value: {value!r} - must be an integer."
                )
            object.__setattr__(self, name, int(value))
            _check_channel(name.capitalize(), int(value))

    @property
    def rgba(self) -> RgbaColor:
        return self.red, self.green, self.blue, self.alpha

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue

    @classmethod
    def from_rgba(cls, values: Sequence[int]) -> "Color":
        """
        Build a Color from an RGB or RGBA sequence.

        Args:
            values: 3 or 4 channel values; a missing alpha means opaque

        Returns:
            A new Color

        Raises:
            InvalidArgumentError: If the sequence length is not 3 or 4
        """
        if len(values) == 3:
            return cls(values[0], values[1], values[2])
        if len(values) == 4:
            return cls(values[0], values[1], values[2], values[3])
        raise InvalidArgumentError(
            f"Expected 3 or 4 channel values, got {len(values)}"
        )


def within_tolerance(
    first: Optional[Color],
    second: Optional[Color],
    threshold: int,
) -> bool:
    """
    Check whether two colors are within a tolerance of each other.

    Each of the red, green and blue channels must differ by at most
    `threshold`. Alpha is never compared. A missing color never matches.

    Args:
        first: A color to compare
        second: The color to compare against
        threshold: Maximum allowed per-channel absolute difference

    Returns:
        True if every RGB channel is within the threshold

    Raises:
        InvalidArgumentError: If threshold is negative
    """
    if threshold < 0:
        raise InvalidArgumentError(
            f"Threshold: {threshold} - cannot be a negative number."
        )

    if first is None or second is None:
        return False

    if abs(first.red - second.red) > threshold:
        return False

    if abs(first.green - second.green) > threshold:
        return False

    return abs(first.blue - second.blue) <= threshold


def invert(color: Color) -> Color:
    """Return the color with inverted RGB channels; alpha is kept."""
    return Color(
        MAX_CHANNEL_VALUE - color.red,
        MAX_CHANNEL_VALUE - color.green,
        MAX_CHANNEL_VALUE - color.blue,
        color.alpha,
    )


def grayscale(color: Color) -> Color:
    """Return the grayscale equivalent: RGB replaced by their truncated mean."""
    mean_value = (color.red + color.green + color.blue) // 3
    return Color(mean_value, mean_value, mean_value, color.alpha)


def with_alpha(color: Color, alpha: int) -> Color:
    """
    Return a copy of the color with a new transparency level.

    Args:
        color: The original color
        alpha: New alpha value (0-255)

    Returns:
        A Color with the same RGB channels and the given alpha

    Raises:
        InvalidArgumentError: If alpha is outside [0, 255]
    """
    _check_channel("Alpha", alpha)
    return Color(color.red, color.green, color.blue, alpha)
