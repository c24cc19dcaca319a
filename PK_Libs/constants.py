"""
Constants and configuration values for Pixel Kit.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the library.
"""

# Channel constants
MIN_CHANNEL_VALUE = 0
MAX_CHANNEL_VALUE = 255
CHANNEL_COUNT = 4
OPAQUE_ALPHA = 255

# Default fill for freshly allocated buffers (transparent black)
DEFAULT_FILL_COLOR = (0, 0, 0, 0)

# Percentage crop bounds
MIN_CROP_PERCENT = 0
MAX_CROP_PERCENT = 100

# Resize quality values (kept compatible with the integer constants
# consumers used before ResizeQuality existed)
RESIZE_QUALITY_LOW = 0
RESIZE_QUALITY_HIGH = 1

# Progressive resize step factor
PROGRESSIVE_STEP_FACTOR = 2

# Pillow image mode used for every decoded buffer
BUFFER_IMAGE_MODE = "RGBA"

# File naming
DEFAULT_OUTPUT_FORMAT = "PNG"

# Supported file formats
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}
