"""Neovim adapter for nvim-finder."""

from .adapter import NvimAdapter
from .client import NvimClient

__all__ = ["NvimAdapter", "NvimClient"]
