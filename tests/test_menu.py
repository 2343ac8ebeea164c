import unittest

from raycaster.core.vector import Vector2, Vector3
from raycaster.menu import ConsoleSceneBuilder, InputFinished


def scripted(answers):
    remaining = iter(answers)

    def read(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError()

    return read


class ConsoleSceneBuilderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.messages = []

    def build(self, answers):
        return ConsoleSceneBuilder(read=scripted(answers), write=self.messages.append).build()

    def test_builds_every_shape_kind(self) -> None:
        scene = self.build([
            "1 -1 -1",
            "4", "100 100 20", "20", "255 0 0",
            "1", "0 0 5", "10", "20", "0 255 0",
            "2", "0 0 1", "0 0", "10 0", "0 10", "0 0 255",
            "3", "5 5 5", "3", "255 255 255",
            "5",
        ])
        self.assertEqual(scene.light_direction, Vector3(1, -1, -1))
        self.assertEqual([shape.kind for shape in scene], ["sphere", "rectangle", "triangle", "circle"])

        sphere, rectangle, triangle, circle = scene.shapes
        self.assertEqual(sphere.color, Vector3(1, 0, 0))
        self.assertEqual((rectangle.width, rectangle.height), (10, 20))
        self.assertEqual(triangle.vertex_b, Vector2(10, 0))
        self.assertEqual(circle.radius, 3)

    def test_malformed_answers_are_asked_again(self) -> None:
        scene = self.build([
            "1 -1",
            "one two three",
            "1, -1, -1",
            "9",
            "4", "0 0 10", "big", "2", "300 0 0", "0 0 128",
            "5",
        ])
        self.assertEqual(len(scene), 1)
        self.assertAlmostEqual(scene.shapes[0].color.z, 128 / 255)
        self.assertIn("Please enter 3 numbers.", self.messages)
        self.assertIn("Unknown option '9'.", self.messages)
        self.assertIn("Colour channels must be between 0 and 255.", self.messages)

    def test_fractional_colour_is_asked_again(self) -> None:
        scene = self.build(["0 0 1", "4", "0 0 10", "2", "12.5 0 0", "12 0 0", "5"])
        self.assertAlmostEqual(scene.shapes[0].color.x, 12 / 255)
        self.assertIn("Colour channels must be whole numbers.", self.messages)

    def test_end_of_input_finishes_scene(self) -> None:
        scene = self.build(["0 0 1", "3", "0 0 5", "2", "10 10 10"])
        self.assertEqual(len(scene), 1)

    def test_end_of_input_before_light_raises(self) -> None:
        with self.assertRaises(InputFinished):
            self.build([])


if __name__ == "__main__":
    unittest.main()
