# config.py
import argparse
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from raycaster.core.vector import Vector3
from raycaster.camera.camera import FAR_Z
from raycaster.geometry.hittable import DEFAULT_FALLOFF
from raycaster.geometry.world import BLACK, DEFAULT_LIGHT
from raycaster.scenes import SCENES

DEFAULT_WINDOW_SIZE = (640, 480)
DEFAULT_SCENE = "spheres"


@dataclass
class RenderSettings:
    window_size: Tuple[int, int] = DEFAULT_WINDOW_SIZE
    viewing_size: Optional[Tuple[int, int]] = None
    far_z: float = FAR_Z
    light_direction: Vector3 = field(default_factory=lambda: DEFAULT_LIGHT)
    background: Vector3 = field(default_factory=lambda: BLACK)
    falloff: float = DEFAULT_FALLOFF
    scene: str = DEFAULT_SCENE
    interactive: bool = False
    output: Optional[str] = None
    workers: int = 1

    @property
    def effective_viewing_size(self) -> Tuple[int, int]:
        return self.viewing_size if self.viewing_size is not None else self.window_size

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RenderSettings":
        window_size = (args.width, args.height)
        viewing_size = None
        if args.view_width is not None or args.view_height is not None:
            viewing_size = (args.view_width if args.view_width is not None else args.width,
                            args.view_height if args.view_height is not None else args.height)
        return cls(
            window_size=window_size,
            viewing_size=viewing_size,
            far_z=args.far_z,
            light_direction=Vector3(*args.light),
            falloff=args.falloff,
            scene=args.scene,
            interactive=args.interactive,
            output=args.output,
            workers=args.workers,
        )


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Minimal ray caster for spheres, rectangles, circles and triangles")
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WINDOW_SIZE[0],
                        help=f"Window width in pixels (default: {DEFAULT_WINDOW_SIZE[0]})")
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_WINDOW_SIZE[1],
                        help=f"Window height in pixels (default: {DEFAULT_WINDOW_SIZE[1]})")
    parser.add_argument("--view-width", type=_positive_int, default=None,
                        help="Width of the viewed area (default: window width)")
    parser.add_argument("--view-height", type=_positive_int, default=None,
                        help="Height of the viewed area (default: window height)")
    parser.add_argument("--far-z", type=float, default=FAR_Z,
                        help=f"Depth camera rays are aimed at (default: {FAR_Z})")
    parser.add_argument(
        "--light",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        default=DEFAULT_LIGHT.to_tuple(),
        help="Directional light vector components",
    )
    parser.add_argument("--falloff", type=float, default=DEFAULT_FALLOFF,
                        help="Brightness falloff exponent: 2 squared, 1 linear (default: 2)")
    parser.add_argument("--scene", choices=sorted(SCENES), default=DEFAULT_SCENE,
                        help=f"Built-in scene to render (default: {DEFAULT_SCENE})")
    parser.add_argument("--interactive", action="store_true",
                        help="Build the scene from the console menu instead")
    parser.add_argument("--output", type=str, default=None,
                        help="Write the image to this file instead of opening a window")
    parser.add_argument("--workers", type=_positive_int, default=1,
                        help="Threads used to trace columns (default: 1)")
    return parser


def parse_arguments(argv: Optional[Sequence[str]] = None) -> RenderSettings:
    return RenderSettings.from_args(build_parser().parse_args(argv))
