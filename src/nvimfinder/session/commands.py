"""Named host commands and their default keys.

Lifecycle commands are handled by the Session itself; every other command is
forwarded to the focused pane's CommandDispatcher method named by ``handler``.
"""

from dataclasses import dataclass

from ..core.ids import lower_hyphens


@dataclass(frozen=True)
class CommandSpec:
    """One host-invocable command.

    Attributes:
        name: CamelCase command name (host function is ``Finder<name>``)
        handler: Session method (lifecycle) or CommandDispatcher method
        keymaps: default buffer-local keys in pane buffers
        lifecycle: handled by the Session rather than a pane
    """

    name: str
    handler: str
    keymaps: tuple[str, ...] = ()
    lifecycle: bool = False

    @property
    def function_name(self) -> str:
        return f"Finder{self.name}"

    @property
    def plug_name(self) -> str:
        return f"<Plug>(finder-{lower_hyphens(self.name)})"


COMMANDS: list[CommandSpec] = [
    CommandSpec("TogglePane", "toggle", lifecycle=True),
    CommandSpec("OpenPane", "open_pane", lifecycle=True),
    CommandSpec("ClosePane", "close_pane", ("q",), lifecycle=True),
    CommandSpec("CloseAllPanes", "close_all", ("Q",), lifecycle=True),
    CommandSpec("GoToRoot", "root", ("\\",)),
    CommandSpec("GoToHome", "home", ("~",)),
    CommandSpec("GoToTrash", "trash", ("$",)),
    CommandSpec("GoToProject", "project", ("^",)),
    CommandSpec("GoToUpper", "up", ("h",)),
    CommandSpec("GoToLowerOrOpen", "down", ("l", "e", "<CR>")),
    CommandSpec("GoTo", "cd", (">",)),
    CommandSpec("Select", "select", ("<Space>",)),
    CommandSpec("ReverseSelected", "reverse_selected", ("*",)),
    CommandSpec("Toggle", "toggle", ("t",)),
    CommandSpec("ToggleRecursively", "toggle_recursive", ("T",)),
    CommandSpec("CreateDir", "create_dir", ("K",)),
    CommandSpec("CreateFile", "create_file", ("N",)),
    CommandSpec("Rename", "rename", ("r",)),
    CommandSpec("Move", "move", ("m",)),
    CommandSpec("OpenExternally", "open_externally", ("x",)),
    CommandSpec("OpenDirExternally", "open_dir_externally", ("X",)),
    CommandSpec("RemovePermanently", "remove_permanently", ("D",)),
    CommandSpec("Remove", "remove", ("d",)),
    CommandSpec("Restore", "restore", ("R",)),
    CommandSpec("ShowCopiedList", "copied_list", ("C",)),
    CommandSpec("Copy", "copy", ("c",)),
    CommandSpec("Paste", "paste", ("p",)),
    CommandSpec("Yank", "yank", ("y",)),
]

_BY_NAME = {spec.name: spec for spec in COMMANDS}


def get_command(name: str) -> CommandSpec:
    """Look up a command by name.

    Raises:
        ValueError: unknown command
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise ValueError(f"Unknown finder command: {name}") from None
