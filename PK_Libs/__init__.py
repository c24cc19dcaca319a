"""
PK_Libs - Pixel Kit Library Modules

This package contains the raster transform engine used to prepare
display-ready icon images, organized into specialized sub-packages:

- PixelLib: Color values, per-color operations and the PixelBuffer grid
- TransformLib: Geometry, resize and whole-image color transforms
- ImageIOLib: Pillow-backed decode/encode adapter
"""

__version__ = "0.1.0"
