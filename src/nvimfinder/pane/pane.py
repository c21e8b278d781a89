"""Pane - 宿主 surface 上的文件树视图

A pane owns one SurfaceBinding and one tree-model instance rooted at the
working directory that was current when it was opened.

Liveness is never stored: ``closed()`` asks the host every time, because the
user can close the window without going through the session.
"""

from collections.abc import Sequence

from .. import config
from ..adapters.base import HostAdapter, Side
from ..config import FinderSettings
from ..core.ids import make_surface_name
from ..errors import FinderError
from ..telemetry import format_pane_log, get_logger, metrics
from ..tree.base import TreeFactory, TreeModel
from ..tree.types import NavigationContext
from .dispatcher import CommandDispatcher
from .interaction import PaneIO
from .phrasing import Action
from .surface import SurfaceBinding

logger = get_logger(__name__)


class Pane:
    """A session-owned file-tree view.

    Attributes:
        index: position in the session when opened
        surface: host surface binding
        tree: tree-model instance (never shared with another pane)
        commands: command dispatcher for this pane
    """

    def __init__(
        self,
        host: HostAdapter,
        index: int,
        surface: SurfaceBinding,
        tree: TreeModel,
    ):
        self.host = host
        self.index = index
        self.surface = surface
        self.tree = tree
        self.commands = CommandDispatcher(self)

    @classmethod
    def open(
        cls,
        host: HostAdapter,
        index: int,
        context: NavigationContext,
        settings: FinderSettings,
        tree_factory: TreeFactory,
    ) -> "Pane":
        """Create the tree-model and the surface, then render once.

        Any failure propagates; a half-built pane must be discarded by the
        caller, not retried.

        Args:
            host: host adapter
            index: session index used in the surface name
            context: the session's shared navigation context
            settings: resolved configuration
            tree_factory: builds the tree-model for the working directory

        Raises:
            HostSurfaceError, RenderError, BufferNotFoundError, CommandError
        """
        cwd = host.working_directory()
        name = make_surface_name(cwd, settings.buffer_name, index)

        tree = tree_factory(cwd, context)
        surface = SurfaceBinding.create(host, name, settings.width, settings.file_type)
        pane = cls(host, index, surface, tree)

        pane.commands.open()
        metrics.inc("pane.opened")
        logger.info(format_pane_log("Pane", name, f"opened at {cwd}"))
        return pane

    @property
    def name(self) -> str:
        return self.surface.name

    @property
    def file_type(self) -> str:
        return self.surface.file_type

    @property
    def width(self) -> int:
        return self.surface.width

    # === tree-model callbacks ===

    def render(self, lines: Sequence[str]) -> None:
        """Output sink of the tree-model."""
        self.surface.write(lines)

    def cursor(self) -> int:
        return self.surface.cursor_position()

    def set_cursor(self, row: int) -> None:
        self.surface.set_cursor_position(row)

    def io(self, action: Action | None = None) -> PaneIO:
        """Interactive request object for one command."""
        return PaneIO(self, action)

    def open_file(self, path: str) -> None:
        """Show a file outside the pane.

        Reuses the first window that is not a pane (by file type) so there
        stays a single content area. When every window is a pane, splits on
        the opposite side and restores this pane's width, since the new split
        resizes existing ones.
        """
        for window in self.host.list_windows():
            if window.file_type != self.file_type:
                self.host.open_in_window(window.window_id, path)
                self.host.focus_window(window.window_id)
                logger.debug(format_pane_log("Pane", self.name, f"opened {path} in window {window.window_id}"))
                return

        window_id = self.host.create_window(Side.RIGHT, path)
        self.reset_width()
        self.host.focus_window(window_id)
        logger.debug(format_pane_log("Pane", self.name, f"opened {path} in new window {window_id}"))

    def reset_width(self) -> None:
        self.surface.reset_width()

    def register_yank(self, text: str) -> None:
        self.host.set_register(config.YANK_REGISTER, text)

    # === liveness ===

    def focused(self) -> bool:
        """Whether this pane's buffer is the focused one."""
        try:
            self.surface.buffer()
        except FinderError:
            return False
        return True

    def closed(self) -> bool:
        """True iff no host window shows this pane's surface.

        A failing lookup counts as open, so a transient host error never
        abandons a pane.
        """
        try:
            return len(self.surface.locate()) == 0
        except FinderError as e:
            logger.warning(format_pane_log("Pane", self.name, f"liveness check failed: {e}"))
            return False

    def close(self) -> None:
        """Close every window showing this pane.

        Raises:
            HostSurfaceError: the host refused to close a window
        """
        self.surface.close()
        metrics.inc("pane.closed")
        logger.info(format_pane_log("Pane", self.name, "closed"))
