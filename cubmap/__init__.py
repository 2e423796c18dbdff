"""Parsing and validation of .cub raycaster scenes and decoding of XPM textures."""

__version__ = "0.1.0"

__all__ = [
    "colornames",
    "elements",
    "errors",
    "mapgrid",
    "parser",
    "pixels",
    "scene",
    "wordtab",
    "xpm",
]