"""CommandDispatcher - binds host interaction to tree-model operations

Every command has the same shape: build a PaneIO for the command, call the
tree-model operation with it, then act on the result:

- Completed(lines): render lines (if any)
- Cancelled(): print the action's cancel notice once, render nothing
- Failed(error): raise CommandError

Liveness is checked by the session before a dispatcher method is reached.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from ..errors import CommandError
from ..telemetry import format_pane_log, get_logger, metrics
from ..tree.base import CommandIO
from ..tree.types import Cancelled, CommandResult, Failed
from .phrasing import Action, cancel_notice

if TYPE_CHECKING:
    from .pane import Pane

logger = get_logger(__name__)

Operation = Callable[[CommandIO], CommandResult]


class CommandDispatcher:
    """Per-pane command methods."""

    def __init__(self, pane: "Pane"):
        self._pane = pane

    def _execute(self, command: str, operation: Operation, action: Action | None = None) -> CommandResult:
        """Run one tree-model operation and apply its result.

        Args:
            command: command name for logs and metrics
            operation: bound tree-model method
            action: prompt/notice phrasing used by the command, if it prompts

        Returns:
            The tree-model result (Completed or Cancelled)

        Raises:
            CommandError: the tree-model returned Failed
        """
        labels = {"command": command}
        metrics.inc("command.dispatched", labels)
        logger.debug(format_pane_log("Dispatch", self._pane.name, command))

        result = operation(self._pane.io(action))

        if isinstance(result, Cancelled):
            metrics.inc("command.cancelled", labels)
            if action is not None:
                self._pane.host.echo(cancel_notice(action))
            logger.debug(format_pane_log("Dispatch", self._pane.name, f"{command} cancelled"))
            return result

        if isinstance(result, Failed):
            metrics.inc("command.failed", labels)
            raise CommandError(command, result.error) from result.error

        if result.lines is not None:
            self._pane.render(result.lines)
        return result

    # === navigation ===

    def open(self) -> CommandResult:
        return self._execute("open", self._pane.tree.open)

    def cd(self) -> CommandResult:
        """Prompt for a directory; also changes the host cwd."""
        return self._execute("cd", self._pane.tree.cd, Action.CD)

    def root(self) -> CommandResult:
        return self._execute("root", self._pane.tree.root)

    def home(self) -> CommandResult:
        return self._execute("home", self._pane.tree.home)

    def trash(self) -> CommandResult:
        return self._execute("trash", self._pane.tree.trash)

    def project(self) -> CommandResult:
        return self._execute("project", self._pane.tree.project)

    def up(self) -> CommandResult:
        return self._execute("up", self._pane.tree.up)

    def down(self) -> CommandResult:
        """Descend into a directory, or open a file through Pane.open_file."""
        return self._execute("down", self._pane.tree.down)

    # === selection / expansion ===

    def select(self) -> CommandResult:
        return self._execute("select", self._pane.tree.select)

    def reverse_selected(self) -> CommandResult:
        return self._execute("reverse_selected", self._pane.tree.reverse_selected)

    def toggle(self) -> CommandResult:
        return self._execute("toggle", self._pane.tree.toggle)

    def toggle_recursive(self) -> CommandResult:
        return self._execute("toggle_recursive", self._pane.tree.toggle_recursive)

    # === mutation ===

    def create_dir(self) -> CommandResult:
        return self._execute("create_dir", self._pane.tree.create_dir, Action.CREATE_DIR)

    def create_file(self) -> CommandResult:
        return self._execute("create_file", self._pane.tree.create_file, Action.CREATE_FILE)

    def rename(self) -> CommandResult:
        return self._execute("rename", self._pane.tree.rename, Action.RENAME)

    def move(self) -> CommandResult:
        return self._execute("move", self._pane.tree.move, Action.MOVE)

    def remove(self) -> CommandResult:
        return self._execute("remove", self._pane.tree.remove, Action.REMOVE)

    def restore(self) -> CommandResult:
        return self._execute("restore", self._pane.tree.restore, Action.RESTORE)

    def remove_permanently(self) -> CommandResult:
        return self._execute(
            "remove_permanently", self._pane.tree.remove_permanently, Action.REMOVE_PERMANENTLY
        )

    # === external ===

    def open_externally(self) -> CommandResult:
        return self._execute("open_externally", self._pane.tree.open_externally)

    def open_dir_externally(self) -> CommandResult:
        return self._execute("open_dir_externally", self._pane.tree.open_dir_externally)

    # === clipboard ===

    def copy(self) -> CommandResult:
        """Mark the cursor/selection in the shared clipboard; no prompt, no render."""
        return self._execute("copy", self._pane.tree.copy)

    def copied_list(self) -> CommandResult:
        return self._execute("copied_list", self._pane.tree.copied_list)

    def paste(self) -> CommandResult:
        return self._execute("paste", self._pane.tree.paste)

    def yank(self) -> CommandResult:
        """Write the cursor/selection paths to the host register."""
        return self._execute("yank", self._pane.tree.yank)
