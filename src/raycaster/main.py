# main.py
import sys
import time
from typing import Optional, Sequence

from raycaster.camera.camera import Camera
from raycaster.config import RenderSettings, parse_arguments
from raycaster.geometry.world import Scene
from raycaster.menu import ConsoleSceneBuilder, InputFinished
from raycaster.renderer.display import Display, ImageDisplay, PygameDisplay
from raycaster.renderer.raytracer import RayTracer, render_frame, trace_pixels
from raycaster.scenes import build_scene


def create_display(settings: RenderSettings) -> Display:
    if settings.output:
        return ImageDisplay(settings.output)
    return PygameDisplay()


def create_scene(settings: RenderSettings) -> Scene:
    if settings.interactive:
        scene = ConsoleSceneBuilder(falloff=settings.falloff).build()
    else:
        scene = build_scene(settings.scene, settings.light_direction, settings.falloff)
    scene.background = settings.background
    return scene


def render(settings: RenderSettings, display: Display, scene: Scene) -> int:
    """
    Trace the whole frame into the display and hand control to it.
    Returns the display's exit code.
    """
    camera = Camera(settings.window_size, settings.effective_viewing_size, settings.far_z)
    tracer = RayTracer()
    tracer.set_scene(scene)

    print(f"Rendering {len(scene)} shapes at {settings.window_size[0]}x{settings.window_size[1]} "
          f"(viewing {settings.effective_viewing_size[0]}x{settings.effective_viewing_size[1]}, "
          f"workers: {settings.workers})")
    start = time.perf_counter()
    if settings.workers > 1:
        display.draw_frame(render_frame(tracer, camera, settings.window_size, settings.workers))
    else:
        for position, color in trace_pixels(tracer, camera, settings.window_size):
            display.draw_pixel(position, color)
    print(f"Frame traced in {time.perf_counter() - start:.2f}s")

    return display.show_and_hold()


def run(settings: RenderSettings, display: Optional[Display] = None) -> int:
    # Scene authoring happens before the window opens so the console stays usable.
    try:
        scene = create_scene(settings)
    except InputFinished:
        print("No scene was entered.")
        return 1

    display = display if display is not None else create_display(settings)
    if not display.init(settings.window_size):
        print("Failed to initialise the display.")
        return -1
    display.set_background(scene.background)
    return render(settings, display, scene)


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = parse_arguments(argv)
    try:
        return run(settings)
    except KeyboardInterrupt:
        print("Interrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
