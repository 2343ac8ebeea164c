# geometry/planar.py
"""
Flat shapes lying in a plane of constant z. The ray is projected onto the
shape's plane and the projected point is tested in 2D.
"""
from dataclasses import dataclass
from typing import Optional

from raycaster.core.vector import Vector2, Vector3
from raycaster.core.ray import Ray
from raycaster.core.utils import point_at_z, point_in_triangle
from raycaster.geometry.hittable import (DEFAULT_FALLOFF, PLANAR_NORMAL, HitData,
                                         Shape, brightness)


def project_onto_plane(ray: Ray, z: float) -> Optional[Vector3]:
    """
    Returns the point where the ray reaches the plane at depth z, or None if
    it runs parallel to the plane or the plane is behind the ray origin.
    """
    point = point_at_z(ray, z)
    if point is None:
        return None
    if (point - ray.origin).dot(ray.direction) < 0:
        return None
    return point


class PlanarShape(Shape):
    """
    Common shading for the 2D shapes: they are lit as if facing the camera
    regardless of orientation.
    """

    def shade(self, light_direction: Vector3, point: Vector3,
              falloff: float = DEFAULT_FALLOFF) -> float:
        return brightness(light_direction, PLANAR_NORMAL, falloff)


def _within_bounds(point: Vector3, center: Vector3, width: float, height: float) -> bool:
    return (abs(point.x - center.x) <= width / 2 and
            abs(point.y - center.y) <= height / 2)


@dataclass(frozen=True)
class Rectangle(PlanarShape):
    """Axis-aligned rectangle centred on position, in the plane z = position.z."""
    position: Vector3
    width: float
    height: float
    color: Vector3

    kind = "rectangle"

    def hit(self, ray: Ray) -> HitData:
        point = project_onto_plane(ray, self.position.z)
        if point is None or not _within_bounds(point, self.position, self.width, self.height):
            return HitData.miss()
        return HitData(True, point)


@dataclass(frozen=True)
class Circle(PlanarShape):
    """Disc centred on position, in the plane z = position.z."""
    position: Vector3
    radius: float
    color: Vector3

    kind = "circle"

    def hit(self, ray: Ray) -> HitData:
        # Bounding square first, then the radial check.
        point = project_onto_plane(ray, self.position.z)
        diameter = 2 * self.radius
        if point is None or not _within_bounds(point, self.position, diameter, diameter):
            return HitData.miss()
        offset = Vector2(point.x - self.position.x, point.y - self.position.y)
        if offset.x * offset.x + offset.y * offset.y > self.radius * self.radius:
            return HitData.miss()
        return HitData(True, point)


@dataclass(frozen=True)
class Triangle(PlanarShape):
    """
    Triangle in the plane z = position.z. The vertices are offsets from the
    shape's x/y position.
    """
    position: Vector3
    vertex_a: Vector2
    vertex_b: Vector2
    vertex_c: Vector2
    color: Vector3

    kind = "triangle"

    @property
    def base_z(self) -> float:
        return self.position.z

    def vertices(self):
        """World-space x/y of the three vertices."""
        origin = Vector2(self.position.x, self.position.y)
        return (origin + self.vertex_a, origin + self.vertex_b, origin + self.vertex_c)

    def hit(self, ray: Ray) -> HitData:
        point = project_onto_plane(ray, self.base_z)
        if point is None:
            return HitData.miss()
        a, b, c = self.vertices()
        if not point_in_triangle(a, b, c, Vector2(point.x, point.y)):
            return HitData.miss()
        return HitData(True, point)
