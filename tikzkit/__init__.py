"""Helpers for a TikZ diagram editor: maths utilities, screen geometry, named colours,
update checks, canvas view state and editing tools."""

__version__ = "2.1.7"

__all__ = ["colors", "geometry", "tools", "updates", "util", "view"]