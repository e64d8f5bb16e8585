"""Interactive chaos game renderer for the Sierpinski triangle."""

__version__ = "0.3.0"
