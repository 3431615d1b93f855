"""Camera module for primary ray generation.

Components:
    pinhole: Pinhole camera with a view transform
"""

from whitted.camera.pinhole import Camera

__all__ = ["Camera"]
