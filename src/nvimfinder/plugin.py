"""Neovim remote plugin

Exposes ``:Finder`` (toggle) and one ``Finder<Name>()`` function per entry of
the command table. The Session is created on the first call and kept for the
lifetime of the plugin host process.
"""

import pynvim

from . import config, keymap
from .adapters.factory import create_adapter
from .session.commands import COMMANDS, CommandSpec
from .session.registry import Session
from .telemetry import configure_logging, get_logger

logger = get_logger(__name__)


class FinderPlugin:
    """pynvim plugin object; one per plugin host."""

    def __init__(self, nvim: pynvim.Nvim):
        self.nvim = nvim
        self._session: Session | None = None
        configure_logging(config.LOG_LEVEL)

    @property
    def session(self) -> Session:
        """The process-wide session, created on first use."""
        if self._session is None:
            host = create_adapter("nvim", nvim=self.nvim)
            self._session = Session(host)
            keymap.install(host, self._session.settings().file_type)
            logger.info("[Plugin] Session started")
        return self._session

    def run(self, name: str) -> None:
        self.session.run(name)

    @pynvim.command("Finder", nargs="0", sync=True)
    def on_finder(self, args):
        self.run("TogglePane")


def _make_handler(spec: CommandSpec):
    def handler(self, args):
        self.run(spec.name)

    handler.__name__ = f"on_{spec.handler}_{spec.name.lower()}"
    return pynvim.function(spec.function_name, sync=True)(handler)


for _spec in COMMANDS:
    _handler = _make_handler(_spec)
    setattr(FinderPlugin, _handler.__name__, _handler)

FinderPlugin = pynvim.plugin(FinderPlugin)
