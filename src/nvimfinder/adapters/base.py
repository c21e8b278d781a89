"""Host Adapter 抽象接口

Defines the editor primitives a finder session consumes:
- surfaces (windows) and their content buffers
- display / content options
- cursor access
- interactive input (prompt, multi-prompt, confirmation) and messages

Design principles:
1. Minimal interface: only what the session layer needs
2. Handles are plain ints; callers re-enumerate instead of caching them
3. Synchronous: every call completes before the next command runs
4. Failures raise HostError; a user abort returns Cancelled()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from ..tree.types import Cancelled


class Side(Enum):
    """Where a new surface is docked."""

    LEFT = "left"
    RIGHT = "right"


class Completion(Enum):
    """Prompt completion mode."""

    NONE = ""
    DIR = "dir"


@dataclass
class WindowInfo:
    """Snapshot of one host surface.

    Attributes:
        window_id: host window handle
        buffer_id: handle of the buffer shown in the window
        buffer_name: full name of that buffer
        file_type: file-type tag of that buffer
    """

    window_id: int
    buffer_id: int
    buffer_name: str
    file_type: str


@dataclass
class BufferInfo:
    """Snapshot of one host content buffer."""

    buffer_id: int
    name: str
    file_type: str


@dataclass
class WindowOptions:
    """Display options applied to a pane surface."""

    foldcolumn: str = "0"
    foldenable: bool = False
    list: bool = False
    spell: bool = False
    winfixwidth: bool = True
    wrap: bool = False

    def items(self) -> list[tuple[str, Any]]:
        return [(f.name, getattr(self, f.name)) for f in fields(self)]


@dataclass
class BufferOptions:
    """Content options applied to a pane buffer.

    Order matters: modifiable is switched off last so the buffer is read-only
    at rest.
    """

    bufhidden: str = "hide"
    buflisted: bool = False
    buftype: str = "nofile"
    readonly: bool = False
    swapfile: bool = False
    modified: bool = False
    modifiable: bool = False

    def items(self) -> list[tuple[str, Any]]:
        return [(f.name, getattr(self, f.name)) for f in fields(self)]


class HostAdapter(ABC):
    """编辑器宿主适配器抽象接口

    Usage:
        adapter = NvimAdapter(nvim)
        for window in adapter.list_windows():
            if window.buffer_name == name:
                adapter.focus_window(window.window_id)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Adapter name (e.g. "nvim")."""

    # === variables / directories ===

    @abstractmethod
    def get_var(self, name: str) -> Any:
        """Read a global variable; None if unset or unreadable."""

    @abstractmethod
    def working_directory(self) -> str:
        """Directory a new pane should be rooted at."""

    @abstractmethod
    def current_directory(self) -> str:
        """Host current working directory."""

    @abstractmethod
    def set_current_directory(self, path: str) -> None:
        """Change the host current working directory."""

    # === enumeration ===

    @abstractmethod
    def list_windows(self) -> list[WindowInfo]:
        """All surfaces, in host enumeration order."""

    @abstractmethod
    def list_buffers(self) -> list[BufferInfo]:
        """All content buffers, in host enumeration order."""

    @abstractmethod
    def is_buffer_focused(self, buffer_id: int) -> bool:
        """Whether buffer_id is shown in the focused surface."""

    # === surfaces ===

    @abstractmethod
    def create_window(self, side: Side, path: str | None = None) -> int:
        """Create a full-height split docked at side.

        Args:
            side: dock side
            path: name to edit in the new window; a loaded buffer already
                holding that name is shown instead of a new one. None for an
                empty unnamed buffer

        Returns:
            New window handle
        """

    @abstractmethod
    def window_buffer(self, window_id: int) -> int:
        """Buffer handle shown in a window."""

    @abstractmethod
    def focus_window(self, window_id: int) -> None: ...

    @abstractmethod
    def close_window(self, window_id: int) -> None: ...

    @abstractmethod
    def open_in_window(self, window_id: int, path: str) -> None:
        """Edit path in an existing window."""

    @abstractmethod
    def set_window_width(self, window_id: int, width: int) -> None: ...

    @abstractmethod
    def set_window_option(self, window_id: int, name: str, value: Any) -> None: ...

    def set_window_options(self, window_id: int, options: WindowOptions) -> None:
        for name, value in options.items():
            self.set_window_option(window_id, name, value)

    # === buffers ===

    @abstractmethod
    def get_buffer_option(self, buffer_id: int, name: str) -> Any: ...

    @abstractmethod
    def set_buffer_option(self, buffer_id: int, name: str, value: Any) -> None: ...

    def set_buffer_options(self, buffer_id: int, options: BufferOptions) -> None:
        for name, value in options.items():
            self.set_buffer_option(buffer_id, name, value)

    @abstractmethod
    def set_file_type(self, buffer_id: int, file_type: str) -> None: ...

    @abstractmethod
    def get_lines(self, buffer_id: int) -> list[str]: ...

    @abstractmethod
    def set_lines(self, buffer_id: int, lines: list[str]) -> None:
        """Replace the whole buffer content."""

    # === cursor (focused surface) ===

    @abstractmethod
    def get_cursor_row(self) -> int:
        """0-based cursor row of the focused surface."""

    @abstractmethod
    def set_cursor_row(self, row: int) -> None:
        """Move the focused surface cursor to a 0-based row, keeping the column."""

    # === interaction ===

    @abstractmethod
    def input_string(
        self, label: str, default: str = "", completion: Completion = Completion.NONE
    ) -> str | Cancelled:
        """Prompt for one string."""

    @abstractmethod
    def input_strings(
        self,
        label: str,
        defaults: list[str] | None = None,
        completion: Completion = Completion.NONE,
    ) -> list[str] | Cancelled:
        """Prompt for several strings; Cancelled() if any prompt is aborted."""

    @abstractmethod
    def input_bool(self, message: str) -> bool:
        """Yes/no confirmation."""

    @abstractmethod
    def echo(self, message: str) -> None:
        """Print a message to the user."""

    @abstractmethod
    def set_register(self, register: str, text: str) -> None: ...

    @abstractmethod
    def command(self, cmd: str) -> None:
        """Execute an Ex command."""
