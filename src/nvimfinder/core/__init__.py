"""Core module - host-agnostic utilities"""

from .ids import lower_hyphens, make_surface_name

__all__ = [
    "make_surface_name",
    "lower_hyphens",
]
