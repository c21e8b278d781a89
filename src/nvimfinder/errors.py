"""Error taxonomy for finder sessions.

Cancellation is not an error and has no exception here; it travels as the
``Cancelled`` result value (see ``nvimfinder.tree.types``).
"""


class FinderError(Exception):
    """Base class for all finder errors."""


class HostError(FinderError):
    """A host primitive failed (raised by adapters)."""


class HostSurfaceError(FinderError):
    """The host refused to create, configure or close a pane surface."""


class RenderError(FinderError):
    """Writing content to a pane surface failed."""


class BufferNotFoundError(FinderError):
    """No focused host buffer matches the pane's surface name."""

    def __init__(self, name: str):
        super().__init__(f"finder buffer not found: {name}")
        self.name = name


class ConfigError(FinderError):
    """A configuration value cannot be used."""


class TreeModelLoadError(FinderError):
    """The tree-model factory could not be resolved."""


class CommandError(FinderError):
    """A tree-model operation reported failure."""

    def __init__(self, command: str, error: BaseException):
        super().__init__(f"{command} failed: {error}")
        self.command = command
        self.error = error
