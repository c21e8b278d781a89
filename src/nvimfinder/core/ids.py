"""Surface identifier utilities

A pane's surface is looked up by its buffer name, never by a cached handle.
The name joins the working directory with ``<base>-<index>``:

- /home/user/project/finder-0
- /home/user/project/finder-1
"""

import os
import re

_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def make_surface_name(cwd: str, base: str, index: int) -> str:
    """Create the surface name for a pane.

    Args:
        cwd: Working directory the pane is rooted at
        base: Configured base name (e.g. "finder")
        index: Pane index within the session

    Returns:
        Name like "/home/user/finder-0"
    """
    return os.path.join(cwd, f"{base}-{index}")


def lower_hyphens(name: str) -> str:
    """Convert a CamelCase command name to lower-hyphen form.

    Examples:
        "GoToLowerOrOpen" -> "go-to-lower-or-open"
        "CloseAllPanes" -> "close-all-panes"
    """
    return _CAMEL_RE.sub("-", name).lower()
