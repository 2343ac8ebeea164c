# geometry/hittable.py
from dataclasses import dataclass, field

from raycaster.core.vector import Vector3
from raycaster.core.ray import Ray
from raycaster.core.utils import direction_difference

DEFAULT_FALLOFF = 2
# 2D shapes are lit as if they face the camera.
PLANAR_NORMAL = Vector3(0, 0, -1)


@dataclass(frozen=True)
class HitData:
    """
    Result of a ray-shape intersection test. When hit is False the point
    is a placeholder and carries no meaning.
    """
    hit: bool
    point: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))

    @classmethod
    def miss(cls) -> "HitData":
        return cls(False)


def brightness(light_direction: Vector3, normal: Vector3, falloff: float = DEFAULT_FALLOFF) -> float:
    """
    Colour modifier for a surface with the given normal: the closer the
    normal is to the light direction, the brighter.
    """
    return (1 - direction_difference(light_direction, normal)) ** falloff


class Shape:
    """
    Base class of the closed set of renderable shapes. Subclasses are frozen
    dataclasses with position and color fields and must implement hit()
    and shade().
    """
    kind = "shape"

    def hit(self, ray: Ray) -> HitData:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def shade(self, light_direction: Vector3, point: Vector3,
              falloff: float = DEFAULT_FALLOFF) -> float:
        raise NotImplementedError("shade() must be implemented by subclasses.")
