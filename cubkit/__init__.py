"""Scene file checks, XPM texture reading and pixel helpers for a raycasting game."""

__version__ = "0.1.0"
__all__ = ["colors", "pixelformat", "text", "image", "xpm", "cubfile", "scene", "mapcheck", "cli"]