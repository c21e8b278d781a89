"""Session module - pane registry and host command table"""

from .commands import COMMANDS, CommandSpec, get_command
from .registry import Session

__all__ = [
    "Session",
    "CommandSpec",
    "COMMANDS",
    "get_command",
]
