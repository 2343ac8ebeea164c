# menu.py
"""Console menu for building a scene by hand."""
from typing import Callable, List, Optional

from raycaster.core.vector import Vector2, Vector3
from raycaster.geometry.hittable import DEFAULT_FALLOFF
from raycaster.geometry.world import Scene

MENU = """
Add a shape:
  1) Rectangle
  2) Triangle
  3) Circle
  4) Sphere
  5) Done"""

RECTANGLE, TRIANGLE, CIRCLE, SPHERE, DONE = "1", "2", "3", "4", "5"


class InputFinished(Exception):
    """Raised when the input stream runs out."""


class ConsoleSceneBuilder:
    """
    Builds a Scene from answers typed at the console.

    Reads the light direction once, then keeps offering the shape menu until
    the operator picks Done (or input ends). Malformed answers are reported
    and asked again.
    """
    def __init__(self, read: Callable[[str], str] = input,
                 write: Callable[[str], None] = print,
                 falloff: float = DEFAULT_FALLOFF):
        self.read = read
        self.write = write
        self.falloff = falloff

    def _ask(self, prompt: str) -> str:
        try:
            return self.read(prompt)
        except EOFError:
            raise InputFinished()

    def ask_numbers(self, prompt: str, count: int) -> List[float]:
        while True:
            parts = self._ask(prompt).replace(",", " ").split()
            if len(parts) != count:
                self.write(f"Please enter {count} number{'s' if count > 1 else ''}.")
                continue
            try:
                return [float(p) for p in parts]
            except ValueError:
                self.write("Not a number, try again.")

    def ask_vector(self, prompt: str) -> Vector3:
        return Vector3(*self.ask_numbers(f"{prompt} (x y z): ", 3))

    def ask_vertex(self, prompt: str) -> Vector2:
        return Vector2(*self.ask_numbers(f"{prompt} (x y): ", 2))

    def ask_scalar(self, prompt: str) -> float:
        return self.ask_numbers(f"{prompt}: ", 1)[0]

    def ask_color(self) -> Vector3:
        while True:
            r, g, b = self.ask_numbers("Colour (r g b, 0-255): ", 3)
            if not all(c.is_integer() for c in (r, g, b)):
                self.write("Colour channels must be whole numbers.")
            elif all(0 <= c <= 255 for c in (r, g, b)):
                return Vector3(r, g, b) / 255
            else:
                self.write("Colour channels must be between 0 and 255.")

    def ask_choice(self) -> str:
        while True:
            self.write(MENU)
            choice = self._ask("> ").strip()
            if choice in (RECTANGLE, TRIANGLE, CIRCLE, SPHERE, DONE):
                return choice
            self.write(f"Unknown option {choice!r}.")

    def add_shape(self, scene: Scene, choice: str):
        position = self.ask_vector("Position")
        if choice == RECTANGLE:
            width = self.ask_scalar("Width")
            height = self.ask_scalar("Height")
            scene.add_rectangle(position, width, height, self.ask_color())
        elif choice == TRIANGLE:
            a = self.ask_vertex("Vertex A")
            b = self.ask_vertex("Vertex B")
            c = self.ask_vertex("Vertex C")
            scene.add_triangle(position, a, b, c, self.ask_color())
        elif choice == CIRCLE:
            radius = self.ask_scalar("Radius")
            scene.add_circle(position, radius, self.ask_color())
        elif choice == SPHERE:
            radius = self.ask_scalar("Radius")
            scene.add_sphere(position, radius, self.ask_color())

    def build(self) -> Scene:
        scene: Optional[Scene] = None
        try:
            scene = Scene(self.ask_vector("Light direction"), falloff=self.falloff)
            while True:
                choice = self.ask_choice()
                if choice == DONE:
                    break
                self.add_shape(scene, choice)
        except InputFinished:
            self.write("Input ended.")
            if scene is None:
                raise
        return scene
