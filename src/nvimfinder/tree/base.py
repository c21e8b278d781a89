"""Tree-model collaborator contract

The tree-model engine (traversal, selection, trash, clipboard, on-disk
mutation) lives outside this package. Panes talk to it through two
interfaces:

1. TreeModel: one instance per pane, rooted at a working directory. Every
   operation takes a CommandIO and returns a CommandResult.
2. CommandIO: the per-command request object a pane hands to the tree-model.
   Interactive requests return the answer or Cancelled(); they never raise for
   a user abort.

Contract for implementations:
- Render through ``io.render`` zero or more times, or return Completed(lines).
- On Cancelled() from any request (or a False confirmation), return Cancelled()
  without rendering or mutating anything, including earlier batch members.
- Report internal failures as Failed(error) rather than raising.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from .types import Cancelled, CommandResult, NavigationContext, Operand


class CommandIO(ABC):
    """Host interaction available to a tree-model operation."""

    # === cursor / output ===

    @abstractmethod
    def cursor(self) -> int:
        """Current 0-based cursor row in the pane."""

    @abstractmethod
    def set_cursor(self, row: int) -> None:
        """Move the pane cursor to a 0-based row."""

    @abstractmethod
    def render(self, lines: Sequence[str]) -> None:
        """Replace the pane content."""

    @abstractmethod
    def open_file(self, path: str) -> None:
        """Show a file in the content area.

        Focus moves to the content window, and the pane can only be rendered
        while focused. An operation that opens a file must not render
        afterwards and returns Completed() without lines.
        """

    # === interactive requests ===

    @abstractmethod
    def request_directory(self) -> str | Cancelled:
        """Ask for a destination directory and make it the host cwd.

        Returns:
            The resolved working directory after the change
        """

    @abstractmethod
    def request_names(self) -> list[str] | Cancelled:
        """Ask for one or more names of entries to create."""

    @abstractmethod
    def request_rename(self, operand: Operand) -> str | Cancelled:
        """Ask for the new name of a single operand."""

    @abstractmethod
    def request_renames(self, operands: Sequence[Operand]) -> list[str] | Cancelled:
        """Ask for new names of several operands, in order."""

    @abstractmethod
    def request_destination(self, operands: Sequence[Operand]) -> str | Cancelled:
        """Ask for the directory to move operands into."""

    @abstractmethod
    def confirm(self, operands: Sequence[Operand]) -> bool:
        """Ask the user to confirm the command on operands."""

    # === plain output ===

    @abstractmethod
    def show_paths(self, operands: Sequence[Operand]) -> None:
        """Print operand paths as a message."""

    @abstractmethod
    def yank(self, text: str) -> None:
        """Put text into the host clipboard register."""


class TreeModel(ABC):
    """File-tree model for one pane.

    Method names follow the host command set: ``open`` (initial render),
    ``cd``, ``root``, ``home``, ``trash``, ``project``, ``up``, ``down``,
    ``select``, ``reverse_selected``, ``toggle``, ``toggle_recursive``,
    ``create_dir``, ``create_file``, ``rename``, ``move``,
    ``open_externally``, ``open_dir_externally``, ``remove``, ``restore``,
    ``remove_permanently``, ``copy``, ``copied_list``, ``paste``, ``yank``.
    """

    @abstractmethod
    def open(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def cd(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def root(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def home(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def trash(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def project(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def up(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def down(self, io: CommandIO) -> CommandResult:
        """Descend into the directory under the cursor, or open the file via
        io.open_file (then return Completed() without lines)."""

    @abstractmethod
    def select(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def reverse_selected(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def toggle(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def toggle_recursive(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def create_dir(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def create_file(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def rename(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def move(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def open_externally(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def open_dir_externally(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def remove(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def restore(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def remove_permanently(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def copy(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def copied_list(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def paste(self, io: CommandIO) -> CommandResult: ...

    @abstractmethod
    def yank(self, io: CommandIO) -> CommandResult: ...


TreeFactory = Callable[[str, NavigationContext], TreeModel]
