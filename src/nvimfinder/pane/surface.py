"""SurfaceBinding - pane 的宿主 surface 绑定

One binding per pane. The binding keeps only the surface name; every
operation re-enumerates host windows/buffers by that name, since the host may
reuse or duplicate handles at any time.
"""

from collections.abc import Sequence

from ..adapters.base import BufferOptions, HostAdapter, Side, WindowInfo, WindowOptions
from ..errors import BufferNotFoundError, HostError, HostSurfaceError, RenderError
from ..telemetry import format_pane_log, get_logger

logger = get_logger(__name__)


class SurfaceBinding:
    """Host surface + content buffer of one pane.

    Attributes:
        name: surface name; immutable, used for every lookup
        width: configured display width
        file_type: content-type tag marking pane buffers
    """

    def __init__(self, host: HostAdapter, name: str, width: int, file_type: str):
        self._host = host
        self._name = name
        self.width = width
        self.file_type = file_type

    @property
    def name(self) -> str:
        return self._name

    @classmethod
    def create(
        cls, host: HostAdapter, name: str, width: int, file_type: str
    ) -> "SurfaceBinding":
        """Allocate and configure a left-docked surface.

        The window is opened on the surface name, so a buffer kept hidden by a
        previous pane with the same name is shown again rather than duplicated.

        Raises:
            HostSurfaceError: the host refused any creation/configuration step
        """
        binding = cls(host, name, width, file_type)
        try:
            window_id = host.create_window(Side.LEFT, name)
            host.focus_window(window_id)
            host.set_window_options(window_id, WindowOptions())
            host.set_window_width(window_id, width)

            buffer_id = host.window_buffer(window_id)
            host.set_buffer_options(buffer_id, BufferOptions())
            host.set_file_type(buffer_id, file_type)
        except HostError as e:
            raise HostSurfaceError(f"cannot create surface {name}: {e}") from e

        logger.debug(format_pane_log("Surface", name, f"created window {window_id}"))
        return binding

    def locate(self) -> list[WindowInfo]:
        """All host windows currently showing this binding's buffer.

        Empty when the surface was closed, by us or by the user.
        """
        return [w for w in self._host.list_windows() if w.buffer_name == self._name]

    def buffer(self) -> int:
        """Handle of this binding's buffer, if it is the focused one.

        Raises:
            BufferNotFoundError: no focused buffer has this binding's name
        """
        for info in self._host.list_buffers():
            if info.name != self._name:
                continue
            if self._host.is_buffer_focused(info.buffer_id):
                return info.buffer_id
        raise BufferNotFoundError(self._name)

    def write(self, lines: Sequence[str]) -> None:
        """Replace the whole visible content.

        The buffer is read-only at rest; modifiable is lifted for the write and
        restored afterwards.

        Raises:
            BufferNotFoundError: the pane buffer is not focused
            RenderError: the host write failed
        """
        buffer_id = self.buffer()
        try:
            modifiable = self._host.get_buffer_option(buffer_id, "modifiable")
            self._host.set_buffer_option(buffer_id, "modifiable", True)
            try:
                self._host.set_lines(buffer_id, list(lines))
            finally:
                self._host.set_buffer_option(buffer_id, "modifiable", modifiable)
                self._host.set_buffer_option(buffer_id, "modified", False)
        except HostError as e:
            raise RenderError(f"cannot render {self._name}: {e}") from e

    def cursor_position(self) -> int:
        """0-based cursor row of the focused instance of this surface."""
        self.buffer()
        return self._host.get_cursor_row()

    def set_cursor_position(self, row: int) -> None:
        self.buffer()
        self._host.set_cursor_row(row)

    def reset_width(self) -> None:
        """Re-apply the configured width to every window of this surface."""
        try:
            for window in self.locate():
                self._host.set_window_width(window.window_id, self.width)
        except HostError as e:
            raise HostSurfaceError(f"cannot resize {self._name}: {e}") from e

    def close(self) -> None:
        """Close every window showing this surface."""
        try:
            for window in self.locate():
                self._host.close_window(window.window_id)
        except HostError as e:
            raise HostSurfaceError(f"cannot close {self._name}: {e}") from e
        logger.debug(format_pane_log("Surface", self._name, "closed"))
