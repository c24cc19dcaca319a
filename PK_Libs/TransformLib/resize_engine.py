"""
Resize engine for Pixel Kit.

Provides single-pass and progressive multi-step scaling behind one `resize`
entry point that dispatches on ResizeQuality:

- LOW: one nearest-neighbor pass straight to the target size
- HIGH: progressive bilinear scaling; each dimension is halved (or doubled)
  one step at a time until it reaches the target, which avoids the aliasing
  a single large-ratio bilinear pass produces

Samplers are plain functions over (height, width, 4) uint8 arrays, so the
per-pixel interpolation can be swapped without touching the step logic.

Example:
    >>> photo = PixelBuffer(300, 200, fill=(255, 0, 0, 255))
    >>> thumb = resize(photo, 150, 0, ResizeQuality.HIGH)
    >>> thumb.size
    (150, 100)
"""

import logging
from enum import Enum
from typing import Any, Callable, Tuple, Union

import numpy as np

from PK_Libs.constants import (
    MAX_CHANNEL_VALUE,
    MIN_CHANNEL_VALUE,
    PROGRESSIVE_STEP_FACTOR,
    RESIZE_QUALITY_HIGH,
    RESIZE_QUALITY_LOW,
)
from PK_Libs.errors import InvalidArgumentError
from PK_Libs.PixelLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

# (pixels, target_width, target_height) -> resampled pixels
Sampler = Callable[[np.ndarray, int, int], np.ndarray]


class ResizeQuality(Enum):
    LOW = RESIZE_QUALITY_LOW
    HIGH = RESIZE_QUALITY_HIGH


QualityLike = Union[ResizeQuality, str, int]


# ============================================================================
# Samplers
# ============================================================================

def sample_nearest(pixels: np.ndarray, target_width: int, target_height: int) -> np.ndarray:
    """
    Nearest-neighbor resample.

    Output pixel (x, y) copies input pixel
    (x * width // target_width, y * height // target_height).
    """
    height, width = pixels.shape[:2]
    xs = (np.arange(target_width) * width) // target_width
    ys = (np.arange(target_height) * height) // target_height
    return pixels[ys[:, None], xs[None, :]]


def _bilinear_axis(source_size: int, target_size: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    # Align pixel centres, then clamp so edge pixels reuse the border sample.
    positions = (np.arange(target_size) + 0.5) * (source_size / target_size) - 0.5
    positions = np.clip(positions, 0, source_size - 1)
    lower = np.floor(positions).astype(np.intp)
    upper = np.minimum(lower + 1, source_size - 1)
    weights = positions - lower
    return lower, upper, weights


def sample_bilinear(pixels: np.ndarray, target_width: int, target_height: int) -> np.ndarray:
    """
    Bilinear resample with pixel-centre alignment and edge clamping.

    Colour is interpolated premultiplied by alpha and divided back out
    afterwards, so fully transparent pixels add no colour to their
    neighbours. A pixel whose blended alpha is 0 gets RGB 0. Results are
    rounded to the nearest integer.

    Args:
        pixels: Source array of shape (height, width, 4), dtype uint8
        target_width: Output width (> 0)
        target_height: Output height (> 0)

    Returns:
        New array of shape (target_height, target_width, 4), dtype uint8
    """
    height, width = pixels.shape[:2]
    x0, x1, fx = _bilinear_axis(width, target_width)
    y0, y1, fy = _bilinear_axis(height, target_height)

    data = pixels.astype(np.float64)
    alpha = data[:, :, 3:]
    premultiplied = np.concatenate([data[:, :, :3] * (alpha / MAX_CHANNEL_VALUE), alpha], axis=2)

    fx = fx[None, :, None]
    fy = fy[:, None, None]

    top_rows = premultiplied[y0]
    bottom_rows = premultiplied[y1]
    top = top_rows[:, x0] * (1.0 - fx) + top_rows[:, x1] * fx
    bottom = bottom_rows[:, x0] * (1.0 - fx) + bottom_rows[:, x1] * fx
    blended = top * (1.0 - fy) + bottom * fy

    blended_alpha = blended[:, :, 3:]
    coverage = blended_alpha / MAX_CHANNEL_VALUE
    rgb = np.divide(
        blended[:, :, :3],
        coverage,
        out=np.zeros_like(blended[:, :, :3]),
        where=coverage > 0,
    )
    result = np.concatenate([rgb, blended_alpha], axis=2)

    return np.clip(np.rint(result), MIN_CHANNEL_VALUE, MAX_CHANNEL_VALUE).astype(np.uint8)


# ============================================================================
# Resize algorithms
# ============================================================================

def _require_positive_target(target_width: Any, target_height: Any) -> None:
    for name, value in (("target_width", target_width), ("target_height", target_height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidArgumentError(f"{name} must be an integer, got {type(value)}")
        if value <= 0:
            raise InvalidArgumentError(f"{name} must be positive, got {value}")


def instant_resize(
    buffer: PixelBuffer,
    target_width: int,
    target_height: int,
    sampler: Sampler = sample_nearest,
) -> PixelBuffer:
    """
    Resize in a single sampler pass.

    Args:
        buffer: The image to resize
        target_width: Output width (> 0)
        target_height: Output height (> 0)
        sampler: Interpolation function (default nearest-neighbor)

    Returns:
        A new PixelBuffer, or `buffer` itself when the size is unchanged
    """
    _require_positive_target(target_width, target_height)

    if buffer.size == (target_width, target_height):
        return buffer

    return PixelBuffer.from_array(sampler(buffer.view(), target_width, target_height))


def _next_step_size(current: int, target: int) -> int:
    if current > target:
        current //= PROGRESSIVE_STEP_FACTOR
        if current < target:
            current = target

    if current < target:
        current *= PROGRESSIVE_STEP_FACTOR
        if current > target:
            current = target

    return current


def progressive_resize(
    buffer: PixelBuffer,
    target_width: int,
    target_height: int,
    sampler: Sampler = sample_bilinear,
) -> PixelBuffer:
    """
    Resize in halving/doubling steps toward the target size.

    Each dimension independently halves while larger than its target and
    doubles while smaller, clamped so it never overshoots. Every step is a
    sampler pass from the previous intermediate; intermediates are dropped
    as soon as the next one exists. The loop ends when both dimensions
    equal their targets, so it runs O(log(scale ratio)) steps.

    Args:
        buffer: The image to resize
        target_width: Output width (> 0)
        target_height: Output height (> 0)
        sampler: Interpolation function (default bilinear)

    Returns:
        A new PixelBuffer, or `buffer` itself when the size is unchanged
    """
    _require_positive_target(target_width, target_height)

    width, height = buffer.size
    if (width, height) == (target_width, target_height):
        return buffer

    pixels = buffer.view()
    step = 0
    while (width, height) != (target_width, target_height):
        width = _next_step_size(width, target_width)
        height = _next_step_size(height, target_height)
        pixels = sampler(pixels, width, height)
        step += 1
        logger.debug(f"Progressive resize step {step}: {width}x{height}")

    return PixelBuffer.from_array(pixels)


def _resolve_quality(quality: QualityLike) -> ResizeQuality:
    if isinstance(quality, ResizeQuality):
        return quality

    if isinstance(quality, str):
        try:
            return ResizeQuality[quality.strip().upper()]
        except KeyError:
            raise InvalidArgumentError(f"Quality parameter out of range: {quality!r}") from None

    if isinstance(quality, (int, np.integer)) and not isinstance(quality, bool):
        try:
            return ResizeQuality(int(quality))
        except ValueError:
            raise InvalidArgumentError(f"Quality parameter out of range: {quality}") from None

    raise InvalidArgumentError(f"Quality parameter out of range: {quality!r}")


def _infer_target_size(buffer: PixelBuffer, target_width: int, target_height: int) -> Tuple[int, int]:
    for name, value in (("target_width", target_width), ("target_height", target_height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidArgumentError(f"{name} must be an integer, got {type(value)}")

    if target_width <= 0 and target_height <= 0:
        raise InvalidArgumentError(
            f"At least one target dimension must be positive, got {target_width}x{target_height}"
        )

    width, height = buffer.size

    if target_width <= 0:
        target_width = max(1, width * target_height // height)

    if target_height <= 0:
        target_height = max(1, height * target_width // width)

    return int(target_width), int(target_height)


def resize(
    buffer: PixelBuffer,
    target_width: int,
    target_height: int,
    quality: QualityLike = ResizeQuality.HIGH,
) -> PixelBuffer:
    """
    Create a resized version of an image.

    If one target dimension is not positive it is inferred from the other so
    the original proportions are kept (truncated, never below 1).

    Args:
        buffer: The image to resize
        target_width: Output width, or <= 0 to infer it from target_height
        target_height: Output height, or <= 0 to infer it from target_width
        quality: ResizeQuality.LOW for a fast nearest-neighbor pass,
                 ResizeQuality.HIGH for progressive bilinear scaling.
                 The names "low"/"high" and the values 0/1 are accepted too.

    Returns:
        A new PixelBuffer, or `buffer` itself when the size is unchanged

    Raises:
        InvalidArgumentError: If quality is unsupported or both target
            dimensions are <= 0
    """
    resolved_quality = _resolve_quality(quality)
    target_width, target_height = _infer_target_size(buffer, target_width, target_height)

    if buffer.size == (target_width, target_height):
        logger.debug("resize target equals current size, returning input unchanged")
        return buffer

    if resolved_quality is ResizeQuality.LOW:
        return instant_resize(buffer, target_width, target_height, sample_nearest)

    return progressive_resize(buffer, target_width, target_height, sample_bilinear)
