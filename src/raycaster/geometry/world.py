# geometry/world.py
from typing import Iterator, Tuple

from raycaster.core.vector import Vector2, Vector3
from raycaster.geometry.hittable import DEFAULT_FALLOFF, Shape
from raycaster.geometry.sphere import Sphere
from raycaster.geometry.planar import Circle, Rectangle, Triangle

SHAPE_TYPES = (Sphere, Rectangle, Circle, Triangle)
BLACK = Vector3(0, 0, 0)
DEFAULT_LIGHT = Vector3(1, -1, -1)


class Scene:
    """
    An ordered collection of shapes lit by a single directional light.
    The scene owns its shapes; it is built once and only read while rendering.
    """
    def __init__(self, light_direction: Vector3, background: Vector3 = BLACK,
                 falloff: float = DEFAULT_FALLOFF):
        self.light_direction = light_direction
        self.background = background
        self.falloff = falloff
        self._shapes = []

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        return tuple(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def add(self, shape: Shape) -> Shape:
        if not isinstance(shape, SHAPE_TYPES):
            raise TypeError(f"Unsupported shape type: {type(shape).__name__}")
        self._shapes.append(shape)
        return shape

    def add_sphere(self, position: Vector3, radius: float, color: Vector3) -> Sphere:
        return self.add(Sphere(position, radius, color))

    def add_rectangle(self, position: Vector3, width: float, height: float,
                      color: Vector3) -> Rectangle:
        return self.add(Rectangle(position, width, height, color))

    def add_circle(self, position: Vector3, radius: float, color: Vector3) -> Circle:
        return self.add(Circle(position, radius, color))

    def add_triangle(self, position: Vector3, vertex_a: Vector2, vertex_b: Vector2,
                     vertex_c: Vector2, color: Vector3) -> Triangle:
        return self.add(Triangle(position, vertex_a, vertex_b, vertex_c, color))

    def shade(self, shape: Shape, point: Vector3) -> float:
        """
        Colour modifier for a point on one of the scene's shapes.
        """
        return shape.shade(self.light_direction, point, self.falloff)

    def __repr__(self) -> str:
        return (f"Scene(light_direction={self.light_direction!r}, "
                f"shapes={len(self._shapes)})")
