# renderer/raytracer.py
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, Optional, Tuple

import numpy as np

from raycaster.core.vector import Vector3
from raycaster.core.ray import Ray
from raycaster.camera.camera import Camera
from raycaster.geometry.hittable import Shape
from raycaster.geometry.world import DEFAULT_LIGHT, Scene


def nearest_hit(ray: Ray, scene: Scene) -> Optional[Tuple[Shape, Vector3]]:
    """
    Returns the shape whose intersection is closest to the ray origin, with
    the intersection point, or None. Ties go to the shape added first.
    """
    closest = None
    closest_distance = float("inf")
    for shape in scene:
        hit_data = shape.hit(ray)
        if not hit_data.hit:
            continue
        distance = (hit_data.point - ray.origin).length_squared()
        if distance < closest_distance:
            closest_distance = distance
            closest = (shape, hit_data.point)
    return closest


def trace(ray: Ray, scene: Scene) -> Vector3:
    """
    Colour seen along the ray. Pure: reads the scene, never mutates it.
    """
    found = nearest_hit(ray, scene)
    if found is None:
        return scene.background
    shape, point = found
    return shape.color * scene.shade(shape, point)


class RayTracer:
    """
    Traces rays against the scene it currently holds.
    """
    def __init__(self, scene: Optional[Scene] = None):
        self.scene = scene if scene is not None else Scene(DEFAULT_LIGHT)

    def set_scene(self, scene: Scene):
        self.scene = scene

    def trace_ray(self, ray: Ray) -> Vector3:
        return trace(ray, self.scene)


def trace_pixels(tracer: RayTracer, camera: Camera, size: Tuple[int, int],
                 x_start: int = 0, x_stop: Optional[int] = None
                 ) -> Iterator[Tuple[Tuple[int, int], Vector3]]:
    """
    Yields (pixel, colour) for every pixel in the columns [x_start, x_stop).
    """
    width, height = size
    if x_stop is None:
        x_stop = width
    for x in range(x_start, x_stop):
        for y in range(height):
            yield (x, y), tracer.trace_ray(camera.get_ray((x, y)))


def _render_columns(tracer: RayTracer, camera: Camera, frame: np.ndarray,
                    x_start: int, x_stop: int):
    size = (frame.shape[0], frame.shape[1])
    for (x, y), color in trace_pixels(tracer, camera, size, x_start, x_stop):
        frame[x, y] = color.to_tuple()


def render_frame(tracer: RayTracer, camera: Camera, size: Tuple[int, int],
                 workers: int = 1) -> np.ndarray:
    """
    Traces every pixel and returns a float32 colour buffer indexed [x, y].

    With more than one worker the columns are split into contiguous bands
    traced on a thread pool; each band writes only its own columns.
    """
    width, height = size
    frame = np.zeros((width, height, 3), dtype=np.float32)
    if workers <= 1 or width < 2:
        _render_columns(tracer, camera, frame, 0, width)
        return frame

    band = -(-width // workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_render_columns, tracer, camera, frame, start, min(start + band, width))
            for start in range(0, width, band)
        ]
        for future in futures:
            future.result()
    return frame
