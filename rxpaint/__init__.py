"""Colors, geometry, shapes, sprites, PNG images, history and parsing for a pixel editor."""

__version__ = "0.5.2"