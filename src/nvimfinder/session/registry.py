"""Session - pane 注册表与命令入口

Owns everything that lives for the whole plugin process:
- the host adapter
- the ordered list of panes (creation order = left-to-right order)
- the one NavigationContext shared by every pane's tree-model
- the tree-model factory

The "current pane" is resolved on every command, never stored: the first
pane whose buffer is focused. Host commands enter through ``Session.run``.
"""

import threading

from ..adapters.base import HostAdapter
from ..config import FinderSettings, load_settings
from ..pane.pane import Pane
from ..telemetry import get_logger, metrics
from ..tree.base import TreeFactory
from ..tree.loader import load_tree_factory
from ..tree.types import CommandResult, NavigationContext
from .commands import get_command

logger = get_logger(__name__)


class Session:
    """Session registry.

    Attributes:
        host: host adapter
        panes: registered panes, in creation order
        context: navigation context shared by all panes
    """

    def __init__(self, host: HostAdapter, tree_factory: TreeFactory | None = None):
        """初始化

        Args:
            host: host adapter
            tree_factory: tree-model factory; resolved from settings on first
                open when None
        """
        self.host = host
        self.panes: list[Pane] = []
        self.context = NavigationContext()
        self._tree_factory = tree_factory
        # Host commands may arrive on another thread; registry and context
        # access stays serialized.
        self._lock = threading.RLock()

    # === entry point ===

    def run(self, name: str) -> CommandResult | None:
        """Execute a named host command.

        Lifecycle commands act on the registry. Pane commands go to the
        focused, live pane; without one they are a silent no-op.

        Args:
            name: command name (e.g. "Remove")

        Returns:
            The tree-model result for pane commands, None otherwise

        Raises:
            ValueError: unknown command
            FinderError: any failure once a live pane was resolved
        """
        spec = get_command(name)
        with self._lock:
            if spec.lifecycle:
                getattr(self, spec.handler)()
                return None

            pane = self.live_pane()
            if pane is None:
                metrics.inc("command.skipped", {"command": spec.name})
                logger.debug(f"[Session] No live pane for {spec.name}, skipped")
                return None
            return getattr(pane.commands, spec.handler)()

    # === resolution ===

    def settings(self) -> FinderSettings:
        """Settings as currently configured in the host."""
        return load_settings(self.host.get_var)

    def current_pane(self) -> Pane | None:
        """First pane whose buffer is focused, if any."""
        for pane in self.panes:
            if pane.focused():
                return pane
        return None

    def live_pane(self) -> Pane | None:
        """Current pane, unless it has been closed."""
        pane = self.current_pane()
        if pane is None or pane.closed():
            return None
        return pane

    def closed(self) -> bool:
        """True when there are no panes or every pane is closed."""
        return all(pane.closed() for pane in self.panes)

    # === lifecycle ===

    def toggle(self) -> None:
        """Open a first pane if nothing is open, otherwise close everything."""
        if self.closed():
            self.panes = []
            self.open_pane()
            return
        self.close_all()

    def open_pane(self) -> Pane:
        """Open a new pane at the next free index.

        Raises:
            TreeModelLoadError, HostSurfaceError, RenderError, CommandError
        """
        settings = self.settings()
        pane = Pane.open(
            self.host,
            self._next_index(),
            self.context,
            settings,
            self._resolve_tree_factory(settings),
        )
        self.panes.append(pane)
        self._update_gauge()
        logger.info(f"[Session] Opened pane {pane.index} ({len(self.panes)} total)")
        return pane

    def close_pane(self) -> None:
        """Close the focused pane; no-op when no pane is focused."""
        pane = self.current_pane()
        if pane is None:
            return
        pane.close()
        self.panes = [p for p in self.panes if p is not pane]
        self._update_gauge()
        logger.info(f"[Session] Closed pane {pane.index} ({len(self.panes)} left)")

    def close_all(self) -> None:
        """Close every pane and empty the registry."""
        for pane in self.panes:
            pane.close()
        count = len(self.panes)
        self.panes = []
        self._update_gauge()
        logger.info(f"[Session] Closed all panes ({count})")

    # === helpers ===

    def _next_index(self) -> int:
        """Smallest index not used by a registered pane."""
        used = {pane.index for pane in self.panes}
        index = 0
        while index in used:
            index += 1
        return index

    def _resolve_tree_factory(self, settings: FinderSettings) -> TreeFactory:
        if self._tree_factory is None:
            self._tree_factory = load_tree_factory(settings.tree_model)
        return self._tree_factory

    def _update_gauge(self) -> None:
        metrics.gauge("session.panes", len(self.panes))
