"""A small 2D physics sandbox: sphere and box bodies, force generators,
collision checks, contact resolution and a pygame window to play with them."""

__version__ = "0.1.0"