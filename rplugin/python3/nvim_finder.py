"""Remote plugin shim: Neovim loads this file, the package does the work."""

from nvimfinder.plugin import FinderPlugin

__all__ = ["FinderPlugin"]
