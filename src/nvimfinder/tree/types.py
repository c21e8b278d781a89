"""Tree-model data types

- OperandKind / Operand: one target of a command (tagged record)
- Completed / Cancelled / Failed: command outcome sum type
- NavigationContext: session-wide state shared by every pane's tree-model
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class OperandKind(Enum):
    """Classification of an operand, used for prompt phrasing."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "object"

    @property
    def label(self) -> str:
        """Word used in user-facing prompts."""
        return self.value


@dataclass(frozen=True)
class Operand:
    """A single command target.

    Attributes:
        kind: file / directory / other
        name: display name (base name)
        path: full path
        original_path: pre-trash path, set only for entries inside the trash
    """

    kind: OperandKind
    name: str
    path: str
    original_path: str | None = None

    @property
    def restore_path(self) -> str:
        """Path shown when restoring from trash."""
        return self.original_path or self.path


@dataclass(frozen=True)
class Completed:
    """The operation ran to completion.

    ``lines`` is the final content to render, or None when the tree-model
    already rendered (or the command has no visible output).
    """

    lines: list[str] | None = None


@dataclass(frozen=True)
class Cancelled:
    """The user aborted an interactive request; nothing was changed."""


@dataclass(frozen=True)
class Failed:
    """The operation failed inside the tree-model."""

    error: BaseException


CommandResult = Union[Completed, Cancelled, Failed]


@dataclass
class NavigationContext:
    """Cross-pane navigation state.

    One instance per session, shared by reference with every tree-model, so a
    copy in one pane is visible to a paste in another.

    Attributes:
        root: current working root
        project: project root marker, if one was found
        trash: trash location
        clipboard: operands marked by copy, pending paste
    """

    root: str = ""
    project: str | None = None
    trash: str = ""
    clipboard: list[Operand] = field(default_factory=list)

    def set_clipboard(self, operands: list[Operand]) -> None:
        """Replace pending copy operands."""
        self.clipboard = list(operands)

    def clear_clipboard(self) -> None:
        self.clipboard = []
