# renderer/display.py
from typing import Optional, Tuple

import numpy as np
import pygame
from PIL import Image

from raycaster.core.vector import Vector3
from raycaster.renderer.tone_mapping import to_rgb8


class Display:
    """
    Pixel sink for the renderer. Colours are stored unclamped in a float
    buffer indexed [x, y] and converted to 8-bit only when shown.

    Subclasses decide where the finished frame goes in show_and_hold().
    """
    def __init__(self):
        self.size: Optional[Tuple[int, int]] = None
        self.framebuffer: Optional[np.ndarray] = None

    def init(self, window_size: Tuple[int, int]) -> bool:
        width, height = int(window_size[0]), int(window_size[1])
        if width <= 0 or height <= 0:
            return False
        self.size = (width, height)
        self.framebuffer = np.zeros((width, height, 3), dtype=np.float32)
        return True

    def _require_init(self):
        if self.framebuffer is None:
            raise RuntimeError("Display used before init()")

    def set_background(self, color: Vector3):
        self._require_init()
        self.framebuffer[:, :] = color.to_tuple()

    def draw_pixel(self, position: Tuple[int, int], color: Vector3):
        self._require_init()
        x, y = position
        if 0 <= x < self.size[0] and 0 <= y < self.size[1]:
            self.framebuffer[x, y] = color.to_tuple()

    def draw_frame(self, frame: np.ndarray):
        """Copy a whole [x, y] colour buffer in one go."""
        self._require_init()
        self.framebuffer[:, :] = frame

    def to_rgb8(self) -> np.ndarray:
        self._require_init()
        return to_rgb8(self.framebuffer)

    def show_and_hold(self) -> int:
        raise NotImplementedError("show_and_hold() must be implemented by subclasses.")


class PygameDisplay(Display):
    """
    Shows the frame in a pygame window and blocks until the window is closed
    or Escape is pressed.
    """
    def __init__(self, caption: str = "Ray Caster"):
        super().__init__()
        self.caption = caption
        self.screen = None

    def init(self, window_size: Tuple[int, int]) -> bool:
        if not super().init(window_size):
            return False
        try:
            pygame.init()
            self.screen = pygame.display.set_mode(self.size, 0, 32)
            pygame.display.set_caption(self.caption)
        except pygame.error as e:
            print(f"Could not open window: {e}")
            pygame.quit()
            return False
        return True

    def show_and_hold(self) -> int:
        self._require_init()
        pygame.surfarray.blit_array(self.screen, self.to_rgb8())
        pygame.display.flip()

        clock = pygame.time.Clock()
        try:
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return 0
                    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        return 0
                clock.tick(30)
        finally:
            pygame.quit()


class ImageDisplay(Display):
    """
    Writes the frame to an image file instead of opening a window.
    """
    def __init__(self, path: str):
        super().__init__()
        self.path = path

    def show_and_hold(self) -> int:
        # Pillow expects rows first.
        pixels = np.transpose(self.to_rgb8(), (1, 0, 2))
        try:
            Image.fromarray(np.ascontiguousarray(pixels)).save(self.path)
        except (OSError, ValueError) as e:
            print(f"Could not write image {self.path}: {e}")
            return 1
        print(f"Saved image to {self.path}")
        return 0
