"""
Tests for the Resize Engine.

Tests cover:
- Aspect-preserving target inference
- No-op fast path
- Nearest-neighbor single pass
- Progressive halving/doubling steps
- Bilinear sampler
- Quality resolution and error handling
"""

import unittest

import numpy as np

from PK_Libs.errors import InvalidArgumentError
from PK_Libs.PixelLib.color_ops import Color
from PK_Libs.PixelLib.pixel_buffer import PixelBuffer
from PK_Libs.TransformLib.resize_engine import (
    ResizeQuality,
    instant_resize,
    progressive_resize,
    resize,
    sample_bilinear,
    sample_nearest,
)


def make_gradient(width, height):
    """Build a buffer where every pixel has a distinct color."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            pixels[y, x] = (10 * x, 10 * y, 5 * (x + y), 200 + x)
    return PixelBuffer.from_array(pixels)


class TestResizeTargets(unittest.TestCase):
    """Test target size inference."""

    def setUp(self):
        self.red = PixelBuffer(300, 200, fill=(255, 0, 0, 255))

    def test_high_quality_preserves_aspect(self):
        """Test 300x200 to (150, 0) yields 150x100 and stays red."""
        result = resize(self.red, 150, 0, ResizeQuality.HIGH)

        self.assertEqual(result.size, (150, 100))
        self.assertTrue(np.all(result.to_array() == (255, 0, 0, 255)))

    def test_low_quality_infers_width(self):
        """Test (0, 50) infers the width from the height."""
        self.assertEqual(resize(self.red, 0, 50, ResizeQuality.LOW).size, (75, 50))

    def test_negative_dimension_is_inferred(self):
        """Test any non-positive dimension is inferred."""
        self.assertEqual(resize(self.red, -10, 20, ResizeQuality.LOW).size, (30, 20))
        self.assertEqual(resize(self.red, 100, -20, ResizeQuality.LOW).size, (100, 66))

    def test_inferred_dimension_truncates(self):
        """Test the inferred dimension is truncated, not rounded."""
        image = PixelBuffer(347, 463)

        self.assertEqual(resize(image, 50, 0, ResizeQuality.HIGH).size, (50, 66))
        self.assertEqual(resize(image, 0, 25, ResizeQuality.LOW).size, (18, 25))

    def test_inferred_dimension_never_below_one(self):
        """Test a very flat image still gets at least one row."""
        image = PixelBuffer(100, 1)

        self.assertEqual(resize(image, 10, 0, ResizeQuality.LOW).size, (10, 1))

    def test_both_dimensions_non_positive_raise(self):
        """Test at least one target dimension must be positive."""
        with self.assertRaises(InvalidArgumentError):
            resize(self.red, 0, 0, ResizeQuality.HIGH)
        with self.assertRaises(InvalidArgumentError):
            resize(self.red, -1, -5, ResizeQuality.LOW)

    def test_same_size_returns_input(self):
        """Test the no-op fast path for both qualities."""
        self.assertIs(resize(self.red, 300, 200, ResizeQuality.LOW), self.red)
        self.assertIs(resize(self.red, 300, 200, ResizeQuality.HIGH), self.red)
        self.assertIs(resize(self.red, 300, 0, ResizeQuality.HIGH), self.red)


class TestResizeQuality(unittest.TestCase):
    """Test quality argument handling."""

    def setUp(self):
        self.image = PixelBuffer(8, 8)

    def test_accepts_names_and_values(self):
        """Test names and integer values resolve to a quality."""
        for quality in ("low", "HIGH", " High ", 0, 1, ResizeQuality.LOW):
            self.assertEqual(resize(self.image, 4, 4, quality).size, (4, 4))

    def test_unsupported_quality_raises(self):
        """Test anything else is rejected."""
        for quality in ("medium", 2, -1, None, True, 1.0):
            with self.assertRaises(InvalidArgumentError):
                resize(self.image, 4, 4, quality)

    def test_quality_checked_before_targets(self):
        """Test an unsupported quality is reported even for a no-op size."""
        with self.assertRaises(InvalidArgumentError):
            resize(self.image, 8, 8, "ultra")


class TestNearestNeighbor(unittest.TestCase):
    """Test single-pass nearest-neighbor resizing."""

    def test_downscale_samples_truncated_coordinates(self):
        """Test output (x, y) copies input (x*w//tw, y*h//th)."""
        image = make_gradient(6, 4)
        result = resize(image, 3, 2, ResizeQuality.LOW)

        for x, y, color in result.iter_pixels():
            self.assertEqual(color, image.get(x * 6 // 3, y * 4 // 2))

    def test_upscale_repeats_pixels(self):
        """Test doubling repeats every pixel in a 2x2 block."""
        image = make_gradient(2, 2)
        result = resize(image, 4, 4, ResizeQuality.LOW)

        for x, y, color in result.iter_pixels():
            self.assertEqual(color, image.get(x // 2, y // 2))

    def test_result_is_independent(self):
        """Test the output owns its pixels."""
        image = make_gradient(6, 4)
        before = image.deep_copy()
        result = instant_resize(image, 5, 5)
        result.set(0, 0, Color(1, 2, 3))

        self.assertEqual(image, before)
        self.assertFalse(result.shares_storage_with(image))


class TestProgressiveResize(unittest.TestCase):
    """Test progressive halving/doubling."""

    def _record_steps(self, source, target_width, target_height):
        steps = []

        def recording_sampler(pixels, width, height):
            steps.append((width, height))
            return sample_nearest(pixels, width, height)

        result = progressive_resize(source, target_width, target_height, sampler=recording_sampler)
        return result, steps

    def test_halves_until_target(self):
        """Test downscaling halves each step."""
        result, steps = self._record_steps(PixelBuffer(64, 64), 8, 8)

        self.assertEqual(steps, [(32, 32), (16, 16), (8, 8)])
        self.assertEqual(result.size, (8, 8))

    def test_clamps_final_step(self):
        """Test a step that would overshoot lands exactly on the target."""
        _, down = self._record_steps(PixelBuffer(100, 100), 30, 30)
        _, up = self._record_steps(PixelBuffer(10, 10), 35, 35)

        self.assertEqual(down, [(50, 50), (30, 30)])
        self.assertEqual(up, [(20, 20), (35, 35)])

    def test_dimensions_move_independently(self):
        """Test one dimension can shrink while the other grows."""
        _, steps = self._record_steps(PixelBuffer(100, 10), 30, 40)

        self.assertEqual(steps, [(50, 20), (30, 40)])

    def test_step_count_is_logarithmic(self):
        """Test a 1024x reduction takes ten steps."""
        _, steps = self._record_steps(PixelBuffer(1024, 1), 1, 1)

        self.assertEqual(len(steps), 10)
        self.assertEqual(steps[-1], (1, 1))

    def test_same_size_returns_input(self):
        """Test no steps run when the size already matches."""
        image = PixelBuffer(4, 4)
        result, steps = self._record_steps(image, 4, 4)

        self.assertIs(result, image)
        self.assertEqual(steps, [])

    def test_non_positive_target_raises(self):
        """Test the direct entry point requires positive targets."""
        with self.assertRaises(InvalidArgumentError):
            progressive_resize(PixelBuffer(4, 4), 0, 2)

    def test_high_quality_upscale(self):
        """Test HIGH quality can grow an image."""
        image = make_gradient(6, 4)
        result = resize(image, 140, 100, ResizeQuality.HIGH)

        self.assertEqual(result.size, (140, 100))
        self.assertEqual(image, make_gradient(6, 4))


class TestBilinearSampler(unittest.TestCase):
    """Test the bilinear sampler."""

    def test_halving_averages_neighbours(self):
        """Test a 2:1 reduction averages each pair."""
        pixels = np.array([[[0, 0, 0, 255], [100, 200, 50, 255]]], dtype=np.uint8)

        result = sample_bilinear(pixels, 1, 1)

        self.assertEqual(result.shape, (1, 1, 4))
        self.assertEqual(result[0, 0].tolist(), [50, 100, 25, 255])

    def test_uniform_image_stays_uniform(self):
        """Test interpolation between equal samples changes nothing."""
        pixels = np.full((3, 5, 4), (17, 34, 51, 68), dtype=np.uint8)

        result = sample_bilinear(pixels, 11, 7)

        self.assertEqual(result.shape, (7, 11, 4))
        self.assertTrue(np.all(result == (17, 34, 51, 68)))

    def test_single_pixel_source(self):
        """Test a 1x1 source is replicated."""
        pixels = np.array([[[1, 2, 3, 4]]], dtype=np.uint8)

        result = sample_bilinear(pixels, 3, 2)

        self.assertTrue(np.all(result == (1, 2, 3, 4)))

    def test_transparent_neighbour_adds_no_colour(self):
        """Test a transparent pixel does not darken an opaque one."""
        pixels = np.array([[[0, 0, 0, 0], [255, 0, 0, 255]]], dtype=np.uint8)

        result = sample_bilinear(pixels, 1, 1)

        self.assertEqual(result[0, 0].tolist(), [255, 0, 0, 128])

    def test_partial_alpha_is_weighted(self):
        """Test colours are weighted by their alpha."""
        pixels = np.array([[[255, 0, 0, 255], [0, 0, 255, 85]]], dtype=np.uint8)

        result = sample_bilinear(pixels, 1, 1)

        # red carries 3x the coverage of blue: 255 * 3/4 and 255 * 1/4
        self.assertEqual(result[0, 0].tolist(), [191, 0, 64, 170])

    def test_fully_transparent_area_has_no_colour(self):
        """Test zero blended alpha yields RGB 0."""
        pixels = np.full((2, 2, 4), (90, 120, 200, 0), dtype=np.uint8)

        result = sample_bilinear(pixels, 1, 1)

        self.assertEqual(result[0, 0].tolist(), [0, 0, 0, 0])

    def test_high_quality_resize_of_transparent_edge(self):
        """Test the HIGH path keeps an icon's colour next to transparency."""
        image = PixelBuffer(2, 1)
        image.set(1, 0, Color(255, 0, 0, 255))

        result = resize(image, 1, 1, ResizeQuality.HIGH)

        self.assertEqual(result.get(0, 0), Color(255, 0, 0, 128))

    def test_output_dtype(self):
        """Test the sampler returns uint8 data."""
        pixels = np.zeros((4, 4, 4), dtype=np.uint8)

        self.assertEqual(sample_bilinear(pixels, 2, 2).dtype, np.uint8)


if __name__ == "__main__":
    unittest.main()
