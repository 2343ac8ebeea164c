# scenes.py
"""Fixed scenes that can be rendered without the console menu."""
from typing import Callable, Dict

from raycaster.core.vector import Vector2, Vector3
from raycaster.geometry.hittable import DEFAULT_FALLOFF
from raycaster.geometry.world import DEFAULT_LIGHT, Scene

RED = Vector3(1, 0, 0)
GREEN = Vector3(0, 1, 0)
BLUE = Vector3(0, 0, 1)


def three_spheres(light_direction: Vector3 = DEFAULT_LIGHT,
                  falloff: float = DEFAULT_FALLOFF) -> Scene:
    scene = Scene(light_direction, falloff=falloff)
    scene.add_sphere(Vector3(100, 100, 20), 20, RED)
    scene.add_sphere(Vector3(300, 300, 30), 30, BLUE)
    scene.add_sphere(Vector3(220, 220, 200), 160, GREEN)
    return scene


def mixed_shapes(light_direction: Vector3 = DEFAULT_LIGHT,
                 falloff: float = DEFAULT_FALLOFF) -> Scene:
    """One of each shape kind, with some overlap to exercise depth ordering."""
    scene = Scene(light_direction, falloff=falloff)
    scene.add_rectangle(Vector3(460, 120, 60), 160, 100, Vector3(1, 1, 0))
    scene.add_circle(Vector3(520, 180, 40), 50, Vector3(1, 0, 1))
    scene.add_triangle(Vector3(80, 400, 10),
                       Vector2(0, 0), Vector2(160, 0), Vector2(80, -140),
                       Vector3(0, 1, 1))
    scene.add_sphere(Vector3(300, 240, 120), 90, GREEN)
    scene.add_sphere(Vector3(360, 300, 20), 30, RED)
    return scene


SCENES: Dict[str, Callable[..., Scene]] = {
    "spheres": three_spheres,
    "mixed": mixed_shapes,
}


def build_scene(name: str, light_direction: Vector3 = DEFAULT_LIGHT,
                falloff: float = DEFAULT_FALLOFF) -> Scene:
    if name not in SCENES:
        raise KeyError(f"Unknown scene {name!r}; choose from {', '.join(sorted(SCENES))}")
    return SCENES[name](light_direction, falloff)
