# core/ray.py
from dataclasses import dataclass

from raycaster.core.vector import Vector3


@dataclass(frozen=True)
class Ray:
    """
    Represents a ray in 3D space with an origin and direction.

    The direction is not normalized here; callers that rely on a unit
    direction (camera rays, sphere intersection) pass one in.
    """
    origin: Vector3
    direction: Vector3

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t
