"""Minimal ray caster for spheres, rectangles, circles and triangles."""

__version__ = "0.1.0"
