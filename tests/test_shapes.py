import dataclasses
import unittest

from raycaster.core.ray import Ray
from raycaster.core.vector import Vector2, Vector3
from raycaster.geometry import Circle, Rectangle, Sphere, Triangle

RED = Vector3(1, 0, 0)
FORWARD = Vector3(0, 0, 1)


class SphereTests(unittest.TestCase):
    def setUp(self) -> None:
        self.sphere = Sphere(Vector3(0, 0, 0), 2, RED)

    def test_hit_returns_entry_point(self) -> None:
        hit = self.sphere.hit(Ray(Vector3(0, 0, -10), FORWARD))
        self.assertTrue(hit.hit)
        self.assertTrue(hit.point.isclose(Vector3(0, 0, -2)))

    def test_off_centre_hit_lies_on_surface(self) -> None:
        hit = self.sphere.hit(Ray(Vector3(1, 0, -10), FORWARD))
        self.assertTrue(hit.hit)
        self.assertAlmostEqual(hit.point.length(), 2.0)
        self.assertLess(hit.point.z, 0)

    def test_lateral_miss(self) -> None:
        self.assertFalse(self.sphere.hit(Ray(Vector3(3, 0, -10), FORWARD)).hit)

    def test_sphere_behind_ray_is_missed(self) -> None:
        self.assertFalse(self.sphere.hit(Ray(Vector3(0, 0, 10), FORWARD)).hit)

    def test_origin_inside_sphere_never_hits(self) -> None:
        for direction in (FORWARD, Vector3(0, 0, -1), Vector3(1, 1, 0).normalize()):
            hit = self.sphere.hit(Ray(Vector3(0.5, 0, 0), direction))
            self.assertFalse(hit.hit)
            self.assertEqual(hit.point, Vector3(0, 0, 0))

    def test_origin_on_surface_never_hits(self) -> None:
        self.assertFalse(self.sphere.hit(Ray(Vector3(0, 0, -2), FORWARD)).hit)

    def test_shade_facing_light_is_full(self) -> None:
        modifier = self.sphere.shade(Vector3(0, 0, -1), Vector3(0, 0, -2))
        self.assertAlmostEqual(modifier, 1.0)

    def test_shade_facing_away_is_dark(self) -> None:
        modifier = self.sphere.shade(Vector3(0, 0, 1), Vector3(0, 0, -2))
        self.assertAlmostEqual(modifier, 0.0)

    def test_shade_falloff(self) -> None:
        light = Vector3(1, 0, -1)
        point = Vector3(0, 0, -2)
        linear = self.sphere.shade(light, point, falloff=1)
        squared = self.sphere.shade(light, point)
        self.assertAlmostEqual(squared, linear ** 2)

    def test_frozen(self) -> None:
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.sphere.radius = 5  # type: ignore[misc]

    def test_position_cannot_be_moved(self) -> None:
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.sphere.position.x = 50  # type: ignore[misc]
        self.assertTrue(self.sphere.hit(Ray(Vector3(0, 0, -10), FORWARD)).hit)


class RectangleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.rectangle = Rectangle(Vector3(0, 0, 5), 4, 2, RED)

    def test_hit_inside_bounds(self) -> None:
        hit = self.rectangle.hit(Ray(Vector3(1, 0.5, -1), FORWARD))
        self.assertTrue(hit.hit)
        self.assertTrue(hit.point.isclose(Vector3(1, 0.5, 5)))

    def test_edge_is_inside(self) -> None:
        self.assertTrue(self.rectangle.hit(Ray(Vector3(2, 1, -1), FORWARD)).hit)

    def test_miss_outside_bounds(self) -> None:
        self.assertFalse(self.rectangle.hit(Ray(Vector3(3, 0, -1), FORWARD)).hit)
        self.assertFalse(self.rectangle.hit(Ray(Vector3(0, 1.5, -1), FORWARD)).hit)

    def test_parallel_ray_misses(self) -> None:
        self.assertFalse(self.rectangle.hit(Ray(Vector3(0, 0, 5), Vector3(1, 0, 0))).hit)

    def test_plane_behind_origin_misses(self) -> None:
        self.assertFalse(self.rectangle.hit(Ray(Vector3(0, 0, 10), FORWARD)).hit)

    def test_shade_uses_camera_facing_normal(self) -> None:
        self.assertAlmostEqual(self.rectangle.shade(Vector3(0, 0, -1), Vector3(0, 0, 5)), 1.0)
        self.assertAlmostEqual(self.rectangle.shade(Vector3(0, 0, 1), Vector3(0, 0, 5)), 0.0)


class CircleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.circle = Circle(Vector3(0, 0, 5), 2, RED)

    def test_hit_inside_radius(self) -> None:
        self.assertTrue(self.circle.hit(Ray(Vector3(1, 1, -1), FORWARD)).hit)

    def test_bounding_square_corner_misses(self) -> None:
        self.assertFalse(self.circle.hit(Ray(Vector3(1.9, 1.9, -1), FORWARD)).hit)

    def test_outside_square_misses(self) -> None:
        self.assertFalse(self.circle.hit(Ray(Vector3(0, 2.5, -1), FORWARD)).hit)

    def test_parallel_ray_misses(self) -> None:
        self.assertFalse(self.circle.hit(Ray(Vector3(0, 0, 5), Vector3(1, 0, 0))).hit)

    def test_plane_behind_origin_misses(self) -> None:
        self.assertFalse(self.circle.hit(Ray(Vector3(0, 0, 10), FORWARD)).hit)


class TriangleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.triangle = Triangle(Vector3(10, 10, 3), Vector2(0, 0), Vector2(10, 0), Vector2(0, 10), RED)

    def test_base_z(self) -> None:
        self.assertEqual(self.triangle.base_z, 3)

    def test_vertices_offset_by_position(self) -> None:
        a, b, c = self.triangle.vertices()
        self.assertEqual((a, b, c), (Vector2(10, 10), Vector2(20, 10), Vector2(10, 20)))

    def test_hit_inside(self) -> None:
        hit = self.triangle.hit(Ray(Vector3(13, 13, -1), FORWARD))
        self.assertTrue(hit.hit)
        self.assertAlmostEqual(hit.point.z, 3)

    def test_miss_outside(self) -> None:
        self.assertFalse(self.triangle.hit(Ray(Vector3(19, 19, -1), FORWARD)).hit)
        self.assertFalse(self.triangle.hit(Ray(Vector3(3, 3, -1), FORWARD)).hit)

    def test_parallel_ray_misses(self) -> None:
        self.assertFalse(self.triangle.hit(Ray(Vector3(13, 13, 3), Vector3(1, 0, 0))).hit)

    def test_plane_behind_origin_misses(self) -> None:
        self.assertFalse(self.triangle.hit(Ray(Vector3(13, 13, 10), FORWARD)).hit)

    def test_kinds(self) -> None:
        kinds = [shape.kind for shape in (Sphere(Vector3(0, 0, 0), 1, RED), Rectangle(Vector3(0, 0, 0), 1, 1, RED),
                                          Circle(Vector3(0, 0, 0), 1, RED), self.triangle)]
        self.assertEqual(kinds, ["sphere", "rectangle", "circle", "triangle"])


if __name__ == "__main__":
    unittest.main()
