# renderer/tone_mapping.py
import numpy as np
from numba import njit


@njit
def _clamp_to_rgb8(linear_image, output_image):
    width, height, channels = linear_image.shape
    for x in range(width):
        for y in range(height):
            for c in range(channels):
                v = linear_image[x, y, c]
                if v != v:
                    v = 0.0
                elif v < 0.0:
                    v = 0.0
                elif v > 1.0:
                    v = 1.0
                output_image[x, y, c] = int(v * 255.0 + 0.5)


def to_rgb8(frame: np.ndarray) -> np.ndarray:
    """
    Convert a linear [0, 1] colour buffer to 8-bit, clamping out-of-range
    and NaN values. Shading is never clamped before this point.
    """
    linear = np.ascontiguousarray(frame, dtype=np.float32)
    output = np.empty(linear.shape, dtype=np.uint8)
    _clamp_to_rgb8(linear, output)
    return output
