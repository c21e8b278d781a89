"""PaneIO - per-command CommandIO bound to a pane.

A fresh PaneIO is built for every dispatched command. The action decides which
prompt text the confirmation and name requests use.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..adapters.base import Completion
from ..tree.base import CommandIO
from ..tree.types import Cancelled, Operand
from .phrasing import Action, paths_message, prompt

if TYPE_CHECKING:
    from .pane import Pane


class PaneIO(CommandIO):
    """CommandIO implementation backed by a pane and its host."""

    def __init__(self, pane: "Pane", action: Action | None = None):
        self._pane = pane
        self._host = pane.host
        self.action = action

    def cursor(self) -> int:
        return self._pane.cursor()

    def set_cursor(self, row: int) -> None:
        self._pane.set_cursor(row)

    def render(self, lines: Sequence[str]) -> None:
        self._pane.render(lines)

    def open_file(self, path: str) -> None:
        self._pane.open_file(path)

    def request_directory(self) -> str | Cancelled:
        answer = self._host.input_string(prompt(Action.CD), "", Completion.DIR)
        if isinstance(answer, Cancelled):
            return answer
        self._host.set_current_directory(answer)
        return self._host.current_directory()

    def request_names(self) -> list[str] | Cancelled:
        return self._host.input_strings(prompt(self._require_action()), None, Completion.NONE)

    def request_rename(self, operand: Operand) -> str | Cancelled:
        return self._host.input_string(prompt(Action.RENAME, [operand]), operand.name, Completion.NONE)

    def request_renames(self, operands: Sequence[Operand]) -> list[str] | Cancelled:
        names = [o.name for o in operands]
        return self._host.input_strings(prompt(Action.RENAME, operands), names, Completion.NONE)

    def request_destination(self, operands: Sequence[Operand]) -> str | Cancelled:
        return self._host.input_string(prompt(Action.MOVE, operands), "", Completion.DIR)

    def confirm(self, operands: Sequence[Operand]) -> bool:
        return self._host.input_bool(prompt(self._require_action(), operands))

    def show_paths(self, operands: Sequence[Operand]) -> None:
        self._host.echo(paths_message(operands))

    def yank(self, text: str) -> None:
        self._pane.register_yank(text)

    def _require_action(self) -> Action:
        if self.action is None:
            raise ValueError("this request needs a command action")
        return self.action
