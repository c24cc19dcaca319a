"""
Pytest configuration and shared fixtures for Pixel Kit tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import numpy as np
import pytest

from PK_Libs.PixelLib.pixel_buffer import PixelBuffer


@pytest.fixture
def temp_output_dir(tmp_path):
    """
    Provide a temporary directory for encoded images.

    Args:
        tmp_path: Pytest's built-in temporary directory fixture

    Returns:
        Path object pointing to a temporary directory
    """
    return tmp_path


@pytest.fixture
def sample_rgba_colors():
    """
    Provide a list of sample RGBA color tuples for testing.

    Returns:
        List of (R, G, B, A) tuples with common test colors
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),      # Black
        (128, 128, 128, 255),  # Gray
        (12, 200, 99, 40),   # Translucent teal
    ]


@pytest.fixture
def gradient_buffer():
    """
    Provide a 6x4 buffer where every pixel has a distinct color.

    Returns:
        PixelBuffer with pixel (x, y) = (10x, 10y, 5(x+y), 200+x)
    """
    pixels = np.zeros((4, 6, 4), dtype=np.uint8)
    for y in range(4):
        for x in range(6):
            pixels[y, x] = (10 * x, 10 * y, 5 * (x + y), 200 + x)
    return PixelBuffer.from_array(pixels)
