"""Neovim adapter implementing the HostAdapter interface."""

import os
from typing import Any

from pynvim import Nvim

from ... import config
from ...errors import HostError
from ...telemetry import get_logger
from ...tree.types import Cancelled
from ..base import BufferInfo, Completion, HostAdapter, Side, WindowInfo
from .client import NvimClient

logger = get_logger(__name__)

_SPLIT_COMMANDS = {
    Side.LEFT: "topleft vertical",
    Side.RIGHT: "botright vertical",
}


class NvimAdapter(HostAdapter):
    """Neovim host adapter.

    Wraps NvimClient to provide the HostAdapter primitives.
    """

    def __init__(self, nvim: Nvim):
        """Initialize NvimAdapter.

        Args:
            nvim: Attached pynvim session
        """
        self._client = NvimClient(nvim)

    @property
    def name(self) -> str:
        return "nvim"

    @property
    def client(self) -> NvimClient:
        """Access underlying NvimClient."""
        return self._client

    # === variables / directories ===

    def get_var(self, name: str) -> Any:
        try:
            return self._client.request("get_var", name)
        except HostError:
            return None

    def working_directory(self) -> str:
        """Directory of the focused file, or the cwd for non-file buffers."""
        buffer_id = self._client.current_buffer()
        buftype = self._client.get_option("buftype", {"buf": buffer_id})
        name = self._client.buffer_name(buffer_id)
        if not buftype and name and os.path.isfile(name):
            return os.path.dirname(name)
        return self.current_directory()

    def current_directory(self) -> str:
        return self._client.call("getcwd")

    def set_current_directory(self, path: str) -> None:
        self._client.request("set_current_dir", path)

    # === enumeration ===

    def list_windows(self) -> list[WindowInfo]:
        windows = []
        for window_id in self._client.list_windows():
            buffer_id = self._client.window_buffer(window_id)
            windows.append(
                WindowInfo(
                    window_id=window_id,
                    buffer_id=buffer_id,
                    buffer_name=self._client.buffer_name(buffer_id),
                    file_type=self._client.get_option("filetype", {"buf": buffer_id}),
                )
            )
        return windows

    def list_buffers(self) -> list[BufferInfo]:
        return [
            BufferInfo(
                buffer_id=buffer_id,
                name=self._client.buffer_name(buffer_id),
                file_type=self._client.get_option("filetype", {"buf": buffer_id}),
            )
            for buffer_id in self._client.list_buffers()
        ]

    def is_buffer_focused(self, buffer_id: int) -> bool:
        return self._client.current_buffer() == buffer_id

    # === surfaces ===

    def create_window(self, side: Side, path: str | None = None) -> int:
        split = _SPLIT_COMMANDS[side]
        if path is None:
            self._client.command(f"{split} new")
        else:
            self._client.command(f"{split} split {self._client.fnameescape(path)}")
        window_id = self._client.current_window()
        logger.debug(f"Created {side.value} window {window_id} ({path or 'scratch'})")
        return window_id

    def window_buffer(self, window_id: int) -> int:
        return self._client.window_buffer(window_id)

    def focus_window(self, window_id: int) -> None:
        self._client.request("set_current_win", window_id)

    def close_window(self, window_id: int) -> None:
        self._client.request("win_close", window_id, True)

    def open_in_window(self, window_id: int, path: str) -> None:
        self.focus_window(window_id)
        self._client.command(f"edit {self._client.fnameescape(path)}")

    def set_window_width(self, window_id: int, width: int) -> None:
        self._client.request("win_set_width", window_id, width)

    def set_window_option(self, window_id: int, name: str, value: Any) -> None:
        self._client.set_option(name, value, {"win": window_id})

    # === buffers ===

    def get_buffer_option(self, buffer_id: int, name: str) -> Any:
        return self._client.get_option(name, {"buf": buffer_id})

    def set_buffer_option(self, buffer_id: int, name: str, value: Any) -> None:
        self._client.set_option(name, value, {"buf": buffer_id})

    def set_file_type(self, buffer_id: int, file_type: str) -> None:
        self.set_buffer_option(buffer_id, "filetype", file_type)

    def get_lines(self, buffer_id: int) -> list[str]:
        return self._client.request("buf_get_lines", buffer_id, 0, -1, False)

    def set_lines(self, buffer_id: int, lines: list[str]) -> None:
        self._client.request("buf_set_lines", buffer_id, 0, -1, False, list(lines))

    # === cursor ===

    def get_cursor_row(self) -> int:
        row, _col = self._client.request("win_get_cursor", 0)
        return row - 1

    def set_cursor_row(self, row: int) -> None:
        _row, col = self._client.request("win_get_cursor", 0)
        self._client.request("win_set_cursor", 0, [row + 1, col])

    # === interaction ===

    def _prompt(self, label: str, default: str, completion: Completion) -> str | None:
        """Raw input(); None when the user pressed <Esc>."""
        opts = {
            "prompt": f"{label}: ",
            "default": default,
            "cancelreturn": config.CANCEL_SENTINEL,
        }
        if completion is not Completion.NONE:
            opts["completion"] = completion.value
        answer = self._client.call("input", opts)
        self._client.command("redraw")
        if answer == config.CANCEL_SENTINEL:
            return None
        return answer

    def input_string(
        self, label: str, default: str = "", completion: Completion = Completion.NONE
    ) -> str | Cancelled:
        answer = self._prompt(label, default, completion)
        if not answer:
            return Cancelled()
        return answer

    def input_strings(
        self,
        label: str,
        defaults: list[str] | None = None,
        completion: Completion = Completion.NONE,
    ) -> list[str] | Cancelled:
        values: list[str] = []
        if defaults:
            total = len(defaults)
            for i, default in enumerate(defaults, start=1):
                answer = self.input_string(f"{label} ({i}/{total})", default, completion)
                if isinstance(answer, Cancelled):
                    return answer
                values.append(answer)
            return values

        while True:
            answer = self._prompt(f"{label} ({len(values) + 1})", "", completion)
            if answer is None:
                return Cancelled()
            if not answer:
                break
            values.append(answer)
        # An empty answer ends the list; nothing entered at all is a cancel.
        if not values:
            return Cancelled()
        return values

    def input_bool(self, message: str) -> bool:
        choice = self._client.call("confirm", message, "&Yes\n&No", 2)
        self._client.command("redraw")
        return choice == 1

    def echo(self, message: str) -> None:
        self._client.out_write(f"{message}\n")

    def set_register(self, register: str, text: str) -> None:
        self._client.call("setreg", register, text)

    def command(self, cmd: str) -> None:
        self._client.command(cmd)
