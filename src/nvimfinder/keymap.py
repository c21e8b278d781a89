"""Key-mapping script for pane buffers.

Each command gets a ``<Plug>(finder-<name>)`` mapping that calls its host
function; default keys are bound buffer-locally whenever a buffer of the
pane file type is entered.
"""

from collections.abc import Iterable

from .config import DEFAULT_FILE_TYPE
from .session.commands import COMMANDS, CommandSpec
from .telemetry import get_logger

logger = get_logger(__name__)

AUGROUP = "finder_keymaps"

# Keys that must be spelled out in a mapping lhs
_SPECIAL_KEYS = {
    "\\": "<Bslash>",
    "|": "<Bar>",
}


def _escape_key(key: str) -> str:
    return _SPECIAL_KEYS.get(key, key)


def plug_mappings(commands: Iterable[CommandSpec] = COMMANDS) -> list[str]:
    """``<Plug>`` mappings, one per command."""
    return [
        f"noremap <silent> {spec.plug_name} :<C-u>call {spec.function_name}()<CR>"
        for spec in commands
    ]


def filetype_mappings(
    file_type: str = DEFAULT_FILE_TYPE, commands: Iterable[CommandSpec] = COMMANDS
) -> list[str]:
    """Autocommand group binding default keys in pane buffers."""
    lines = [f"augroup {AUGROUP}", "  autocmd!"]
    for spec in commands:
        for key in spec.keymaps:
            lines.append(
                f"  autocmd FileType {file_type} nmap <buffer> <nowait> {_escape_key(key)} {spec.plug_name}"
            )
    lines.append("augroup END")
    return lines


def build_script(file_type: str = DEFAULT_FILE_TYPE) -> str:
    """Complete keymap script as written by ``nvimfinder keymap``."""
    lines = plug_mappings() + [""] + filetype_mappings(file_type)
    return "\n".join(lines) + "\n"


def install(host, file_type: str = DEFAULT_FILE_TYPE) -> None:
    """Define the mappings in a running host.

    Args:
        host: HostAdapter
        file_type: pane file type the default keys are bound for
    """
    for line in plug_mappings() + filetype_mappings(file_type):
        host.command(line.strip())
    logger.info(f"[Keymap] Installed mappings for filetype {file_type}")
