# core/utils.py
from typing import Optional

from raycaster.core.ray import Ray
from raycaster.core.vector import Vector2, Vector3

# Below this magnitude a ray's z direction is treated as parallel to a z-plane.
EPSILON = 1e-9
AHEAD_TOLERANCE = 1e-3
AREA_TOLERANCE = 1e-9


def direction_difference(dir1: Vector3, dir2: Vector3) -> float:
    """
    Returns half the distance between the two normalized directions:
    0.0 when they coincide, 1.0 when they are opposite.
    """
    return (dir1.normalize() - dir2.normalize()).length() / 2


def closest_point_on_line(ray: Ray, query_point: Vector3) -> Vector3:
    """
    Projects query_point onto the infinite line through the ray.
    The ray direction must be unit length.
    """
    a = ray.origin
    n = ray.direction
    return a + n * (query_point - a).dot(n)


def check_ahead_ray(ray: Ray, query_point: Vector3, tolerance: float = AHEAD_TOLERANCE) -> bool:
    """
    Checks that query_point lies in front of the ray origin, along its direction.
    """
    to_point = (query_point - ray.origin).normalize()
    return to_point.isclose(ray.direction.normalize(), tolerance)


def point_at_z(ray: Ray, z: float) -> Optional[Vector3]:
    """
    Returns the point where the ray's line crosses the plane at depth z,
    or None when the ray runs parallel to that plane.
    """
    if abs(ray.direction.z) < EPSILON:
        return None
    t = (z - ray.origin.z) / ray.direction.z
    return ray.at(t)


def signed_area(a: Vector2, b: Vector2, c: Vector2) -> float:
    return (b - a).cross(c - a) / 2


def triangle_area(a: Vector2, b: Vector2, c: Vector2) -> float:
    return abs(signed_area(a, b, c))


def point_in_triangle(a: Vector2, b: Vector2, c: Vector2, p: Vector2) -> bool:
    """
    Tests whether p lies inside (or on an edge of) the triangle abc.

    Each sub-triangle formed by p and one edge must wind the same way as
    the full triangle. Zero-area triangles contain nothing.
    """
    total = signed_area(a, b, c)
    if abs(total) <= AREA_TOLERANCE:
        return False
    sign = 1.0 if total > 0 else -1.0
    tolerance = AREA_TOLERANCE * max(1.0, abs(total))
    for area in (signed_area(p, b, c), signed_area(a, p, c), signed_area(a, b, p)):
        if area * sign < -tolerance:
            return False
    return True
