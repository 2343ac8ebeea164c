# camera/camera.py
from typing import Optional, Tuple

from raycaster.core.vector import Vector3
from raycaster.core.ray import Ray

# Depth of the point each camera ray is aimed at.
FAR_Z = 1.0
SOURCE_Z = -1.0


class Camera:
    """
    Maps pixel coordinates to world-space rays.

    The viewing size may differ from the window size: a larger viewing size
    spreads the rays over a wider area of the scene (zooming out), a smaller
    one zooms in. Both are centred on the window.
    """
    def __init__(self, window_size: Tuple[int, int],
                 viewing_size: Optional[Tuple[int, int]] = None,
                 far_z: float = FAR_Z):
        if viewing_size is None:
            viewing_size = window_size
        self.window_size = (int(window_size[0]), int(window_size[1]))
        if self.window_size[0] <= 0 or self.window_size[1] <= 0:
            raise ValueError(f"Window size must be at least one pixel, got {window_size}")

        self.viewing_size = (int(viewing_size[0]), int(viewing_size[1]))
        self.far_z = far_z

        self.x_mult = self.viewing_size[0] / self.window_size[0]
        self.y_mult = self.viewing_size[1] / self.window_size[1]
        self.x_offset = (self.viewing_size[0] - self.window_size[0]) / 2
        self.y_offset = (self.viewing_size[1] - self.window_size[1]) / 2

    def get_ray(self, pixel: Tuple[int, int]) -> Ray:
        """Returns the normalized ray through the given pixel."""
        px, py = pixel
        source = Vector3(px, py, SOURCE_Z)
        lead = Vector3(px * self.x_mult - self.x_offset,
                       py * self.y_mult - self.y_offset,
                       self.far_z)
        return Ray(source, (lead - source).normalize())
