"""Render a subset of MathML presentation elements to Pillow images."""

__version__ = "0.1.0"
__all__ = ["elements", "text_rendering"]