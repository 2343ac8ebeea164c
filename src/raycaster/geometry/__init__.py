from raycaster.geometry.hittable import HitData, Shape
from raycaster.geometry.sphere import Sphere
from raycaster.geometry.planar import Circle, Rectangle, Triangle
from raycaster.geometry.world import SHAPE_TYPES, Scene

__all__ = [
    "HitData",
    "Shape",
    "Sphere",
    "Rectangle",
    "Circle",
    "Triangle",
    "Scene",
    "SHAPE_TYPES",
]
