"""Neovim client for msgpack-RPC interaction via pynvim."""

from typing import Any

from pynvim import Nvim
from pynvim.api import NvimError

from ...errors import HostError
from ...telemetry import get_logger

logger = get_logger(__name__)


def _handle(obj: Any) -> int:
    """Window/Buffer ext objects carry their handle; ints pass through."""
    return getattr(obj, "handle", obj)


class NvimClient:
    """Thin wrapper over the Neovim API.

    Every call goes through the ``nvim_*`` API with integer handles so that no
    pynvim Window/Buffer object outlives the request that produced it. Errors
    from Neovim are re-raised as HostError.
    """

    def __init__(self, nvim: Nvim):
        """Initialize NvimClient.

        Args:
            nvim: Attached pynvim session
        """
        self._nvim = nvim

    @property
    def nvim(self) -> Nvim:
        return self._nvim

    def request(self, method: str, *args: Any) -> Any:
        """Call an ``nvim_<method>`` API function.

        Args:
            method: API name without the "nvim_" prefix (e.g. "list_wins")
            *args: API arguments

        Returns:
            API result

        Raises:
            HostError: Neovim rejected the request
        """
        try:
            return getattr(self._nvim.api, method)(*args)
        except NvimError as e:
            logger.warning(f"nvim_{method} failed: {e}")
            raise HostError(f"nvim_{method}: {e}") from e

    def call(self, function: str, *args: Any) -> Any:
        """Call a Vim function (e.g. "input", "getcwd")."""
        try:
            return self._nvim.call(function, *args)
        except NvimError as e:
            logger.warning(f"{function}() failed: {e}")
            raise HostError(f"{function}(): {e}") from e

    def command(self, cmd: str) -> None:
        """Execute an Ex command."""
        try:
            self._nvim.command(cmd)
        except NvimError as e:
            logger.warning(f"command failed: {cmd!r}: {e}")
            raise HostError(f"{cmd}: {e}") from e

    def out_write(self, message: str) -> None:
        try:
            self._nvim.out_write(message)
        except NvimError as e:
            raise HostError(f"out_write: {e}") from e

    # === typed helpers ===

    def list_windows(self) -> list[int]:
        return [_handle(w) for w in self.request("list_wins")]

    def list_buffers(self) -> list[int]:
        return [_handle(b) for b in self.request("list_bufs")]

    def window_buffer(self, window_id: int) -> int:
        return _handle(self.request("win_get_buf", window_id))

    def current_window(self) -> int:
        return _handle(self.request("get_current_win"))

    def current_buffer(self) -> int:
        return _handle(self.request("get_current_buf"))

    def buffer_name(self, buffer_id: int) -> str:
        return self.request("buf_get_name", buffer_id)

    def get_option(self, name: str, scope: dict[str, int]) -> Any:
        return self.request("get_option_value", name, scope)

    def set_option(self, name: str, value: Any, scope: dict[str, int]) -> None:
        self.request("set_option_value", name, value, scope)

    def fnameescape(self, path: str) -> str:
        return self.call("fnameescape", path)
