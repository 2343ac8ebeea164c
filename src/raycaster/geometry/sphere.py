# geometry/sphere.py
import math
from dataclasses import dataclass

from raycaster.core.vector import Vector3
from raycaster.core.ray import Ray
from raycaster.core.utils import check_ahead_ray, closest_point_on_line
from raycaster.geometry.hittable import DEFAULT_FALLOFF, HitData, Shape, brightness


@dataclass(frozen=True)
class Sphere(Shape):
    """
    Represents a sphere defined by its center, radius, and colour.
    """
    position: Vector3
    radius: float
    color: Vector3

    kind = "sphere"

    def contains(self, point: Vector3) -> bool:
        return (self.position - point).length() <= self.radius

    def hit(self, ray: Ray) -> HitData:
        a = ray.origin
        n = ray.direction

        # A ray starting inside (or on) the sphere is not an intersection.
        if self.contains(a):
            return HitData.miss()

        closest = closest_point_on_line(ray, self.position)
        if not check_ahead_ray(ray, closest):
            return HitData.miss()

        d = (self.position - closest).length()
        if d > self.radius:
            return HitData.miss()

        x = math.sqrt(max(self.radius * self.radius - d * d, 0.0))
        first_intersection = a + n * ((self.position - a).dot(n) - x)
        return HitData(True, first_intersection)

    def normal_at(self, point: Vector3) -> Vector3:
        return (point - self.position).normalize()

    def shade(self, light_direction: Vector3, point: Vector3,
              falloff: float = DEFAULT_FALLOFF) -> float:
        return brightness(light_direction, self.normal_at(point), falloff)
