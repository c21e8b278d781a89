"""User-facing prompt and notice text.

Pure functions keyed on the action and the operand count/kind: exactly one
operand gets the type-specific phrasing ("the file 'a.txt'"), two or more get
the generic batch phrasing.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ..tree.types import Operand


class Action(Enum):
    """Commands that talk to the user."""

    CD = "cd"
    CREATE_DIR = "create_dir"
    CREATE_FILE = "create_file"
    RENAME = "rename"
    MOVE = "move"
    REMOVE = "remove"
    RESTORE = "restore"
    REMOVE_PERMANENTLY = "remove_permanently"


@dataclass(frozen=True)
class Phrases:
    """Text for one action.

    ``single`` is formatted with ``kind`` and ``target``; ``batch`` is used as is.
    """

    single: str
    batch: str
    cancelled: str


_PHRASES: dict[Action, Phrases] = {
    Action.CD: Phrases(
        single="Enter the destination directory",
        batch="Enter the destination directory",
        cancelled="Changing directory has been canceled.",
    ),
    Action.CREATE_DIR: Phrases(
        single="Enter the directory names to create",
        batch="Enter the directory names to create",
        cancelled="Creating directories has been canceled.",
    ),
    Action.CREATE_FILE: Phrases(
        single="Enter the file names to create",
        batch="Enter the file names to create",
        cancelled="Creating files has been canceled.",
    ),
    Action.RENAME: Phrases(
        single="Rename the {kind} '{target}' to",
        batch="Rename the objects to",
        cancelled="Renaming has been canceled.",
    ),
    Action.MOVE: Phrases(
        single="Enter the destination to move the {kind} '{target}'",
        batch="Enter the destination to move the selected files",
        cancelled="Moving has been canceled.",
    ),
    Action.REMOVE: Phrases(
        single="Are you sure you want to remove the {kind} '{target}'?",
        batch="Are you sure you want to remove the selected objects?",
        cancelled="Remove has been canceled.",
    ),
    Action.RESTORE: Phrases(
        single="Are you sure you want to restore the {kind} '{target}'?",
        batch="Are you sure you want to restore the selected objects?",
        cancelled="Restore has been canceled.",
    ),
    Action.REMOVE_PERMANENTLY: Phrases(
        single="Are you sure you want to permanently remove the {kind} '{target}'?",
        batch="Are you sure you want to permanently remove the selected objects?",
        cancelled="Remove permanently has been canceled.",
    ),
}


def _target(action: Action, operand: Operand) -> str:
    # restore names the place the entry goes back to
    if action is Action.RESTORE:
        return operand.restore_path
    return operand.name


def prompt(action: Action, operands: Sequence[Operand] = ()) -> str:
    """Prompt text for an action on operands.

    Examples:
        prompt(Action.REMOVE, [a_txt]) -> "Are you sure you want to remove the file 'a.txt'?"
        prompt(Action.REMOVE, [a_txt, b_txt]) -> "... remove the selected objects?"
    """
    phrases = _PHRASES[action]
    if len(operands) == 1:
        operand = operands[0]
        return phrases.single.format(kind=operand.kind.label, target=_target(action, operand))
    return phrases.batch


def cancel_notice(action: Action) -> str:
    """Message shown once when the user aborts the action."""
    return _PHRASES[action].cancelled


def paths_message(operands: Sequence[Operand]) -> str:
    """Newline-joined operand paths (copied list)."""
    return "\n".join(o.path for o in operands)
