"""Pytest 配置

In-memory host and tree-model used across the suite:
- FakeHost: HostAdapter with windows, buffers, focus and scripted prompts
- FakeTree: TreeModel over a flat list of entries, honoring the
  cancel/no-partial-application contract
"""

import os
from collections import deque
from dataclasses import dataclass, field
from typing import Any

import pytest

from nvimfinder.adapters.base import BufferInfo, Completion, HostAdapter, Side, WindowInfo
from nvimfinder.errors import HostError
from nvimfinder.session import Session
from nvimfinder.telemetry import metrics
from nvimfinder.tree.base import CommandIO, TreeModel
from nvimfinder.tree.types import (
    Cancelled,
    Completed,
    Failed,
    NavigationContext,
    Operand,
    OperandKind,
)


@dataclass
class FakeBuffer:
    name: str
    file_type: str = ""
    lines: list[str] = field(default_factory=lambda: [""])
    options: dict[str, Any] = field(default_factory=lambda: {"modifiable": True})


class FakeHost(HostAdapter):
    """In-memory editor.

    Starts with one ordinary window showing an empty buffer. Prompt answers
    are queued in ``answers`` and consumed in order.
    """

    def __init__(self, cwd: str = "/work"):
        self.cwd = cwd
        self.vars: dict[str, Any] = {}
        self.buffers: dict[int, FakeBuffer] = {}
        self.windows: dict[int, int] = {}
        self.window_order: list[int] = []
        self.window_widths: dict[int, int] = {}
        self.window_options: dict[int, dict[str, Any]] = {}
        self.cursors: dict[int, int] = {}
        self.current_window: int | None = None
        self.answers: deque = deque()
        self.prompts: list[tuple[str, str, Any]] = []
        self.messages: list[str] = []
        self.registers: dict[str, str] = {}
        self.commands: list[str] = []
        self.created: list[tuple[Side, str | None]] = []
        self.width_calls: list[tuple[int, int]] = []
        self.fail_on: set[str] = set()
        self._next_id = 1000

        window_id = self._new_window(self._new_buffer(""))
        self.current_window = window_id

    # === test helpers ===

    def _new_buffer(self, name: str, file_type: str = "") -> int:
        self._next_id += 1
        self.buffers[self._next_id] = FakeBuffer(name=name, file_type=file_type)
        return self._next_id

    def _buffer_for(self, path: str) -> int:
        """Loaded buffer named path, else a new one (buffer names are unique)."""
        for buffer_id, buf in self.buffers.items():
            if buf.name == path:
                return buffer_id
        return self._new_buffer(path, "text")

    def _new_window(self, buffer_id: int, side: Side = Side.RIGHT) -> int:
        self._next_id += 1
        window_id = self._next_id
        self.windows[window_id] = buffer_id
        self.window_options[window_id] = {}
        self.cursors[window_id] = 0
        if side is Side.LEFT:
            self.window_order.insert(0, window_id)
        else:
            self.window_order.append(window_id)
        return window_id

    def _check(self, op: str) -> None:
        if op in self.fail_on:
            raise HostError(f"{op} refused")

    def add_window(self, name: str, file_type: str = "text") -> int:
        """Open an ordinary editor window (not focused)."""
        return self._new_window(self._new_buffer(name, file_type))

    def split_window(self, window_id: int) -> int:
        """Show the same buffer in one more window, like :split."""
        return self._new_window(self.windows[window_id])

    def user_close(self, window_id: int) -> None:
        """Close a window behind the session's back."""
        self.close_window(window_id)

    def windows_named(self, name: str) -> list[int]:
        return [w for w in self.window_order if self.buffers[self.windows[w]].name == name]

    def buffers_named(self, name: str) -> list[int]:
        return [b for b, buf in self.buffers.items() if buf.name == name]

    def buffer_lines(self, name: str) -> list[str]:
        for buf in self.buffers.values():
            if buf.name == name:
                return buf.lines
        raise KeyError(name)

    def answer(self, *answers: Any) -> None:
        self.answers.extend(answers)

    # === HostAdapter ===

    @property
    def name(self) -> str:
        return "fake"

    def get_var(self, name: str) -> Any:
        return self.vars.get(name)

    def working_directory(self) -> str:
        return self.cwd

    def current_directory(self) -> str:
        return self.cwd

    def set_current_directory(self, path: str) -> None:
        self._check("set_current_directory")
        self.cwd = os.path.normpath(os.path.join(self.cwd, path))

    def list_windows(self) -> list[WindowInfo]:
        self._check("list_windows")
        return [
            WindowInfo(
                window_id=w,
                buffer_id=self.windows[w],
                buffer_name=self.buffers[self.windows[w]].name,
                file_type=self.buffers[self.windows[w]].file_type,
            )
            for w in self.window_order
        ]

    def list_buffers(self) -> list[BufferInfo]:
        self._check("list_buffers")
        return [BufferInfo(buffer_id=b, name=buf.name, file_type=buf.file_type) for b, buf in self.buffers.items()]

    def is_buffer_focused(self, buffer_id: int) -> bool:
        return self.current_window is not None and self.windows[self.current_window] == buffer_id

    def create_window(self, side: Side, path: str | None = None) -> int:
        self._check("create_window")
        buffer_id = self._buffer_for(path) if path else self._new_buffer("")
        window_id = self._new_window(buffer_id, side)
        self.current_window = window_id
        self.created.append((side, path))
        return window_id

    def window_buffer(self, window_id: int) -> int:
        return self.windows[window_id]

    def focus_window(self, window_id: int) -> None:
        self._check("focus_window")
        if window_id not in self.windows:
            raise HostError(f"invalid window {window_id}")
        self.current_window = window_id

    def close_window(self, window_id: int) -> None:
        self._check("close_window")
        del self.windows[window_id]
        self.window_order.remove(window_id)
        if self.current_window == window_id:
            self.current_window = self.window_order[0] if self.window_order else None

    def open_in_window(self, window_id: int, path: str) -> None:
        self._check("open_in_window")
        self.windows[window_id] = self._buffer_for(path)
        self.current_window = window_id

    def set_window_width(self, window_id: int, width: int) -> None:
        self._check("set_window_width")
        self.window_widths[window_id] = width
        self.width_calls.append((window_id, width))

    def set_window_option(self, window_id: int, name: str, value: Any) -> None:
        self._check("set_window_option")
        self.window_options[window_id][name] = value

    def get_buffer_option(self, buffer_id: int, name: str) -> Any:
        return self.buffers[buffer_id].options.get(name)

    def set_buffer_option(self, buffer_id: int, name: str, value: Any) -> None:
        self._check("set_buffer_option")
        self.buffers[buffer_id].options[name] = value

    def set_file_type(self, buffer_id: int, file_type: str) -> None:
        self.buffers[buffer_id].file_type = file_type

    def get_lines(self, buffer_id: int) -> list[str]:
        return list(self.buffers[buffer_id].lines)

    def set_lines(self, buffer_id: int, lines: list[str]) -> None:
        self._check("set_lines")
        buf = self.buffers[buffer_id]
        if not buf.options.get("modifiable"):
            raise HostError("E21: Cannot make changes, 'modifiable' is off")
        buf.lines = list(lines)

    def get_cursor_row(self) -> int:
        return self.cursors[self.current_window]

    def set_cursor_row(self, row: int) -> None:
        self.cursors[self.current_window] = row

    def input_string(self, label: str, default: str = "", completion: Completion = Completion.NONE):
        self.prompts.append(("string", label, default))
        return self.answers.popleft()

    def input_strings(self, label: str, defaults: list[str] | None = None, completion: Completion = Completion.NONE):
        self.prompts.append(("strings", label, defaults))
        return self.answers.popleft()

    def input_bool(self, message: str) -> bool:
        self.prompts.append(("bool", message, None))
        return self.answers.popleft()

    def echo(self, message: str) -> None:
        self.messages.append(message)

    def set_register(self, register: str, text: str) -> None:
        self.registers[register] = text

    def command(self, cmd: str) -> None:
        self.commands.append(cmd)


def file_operand(directory: str, name: str, kind: OperandKind = OperandKind.FILE, original: str | None = None) -> Operand:
    return Operand(kind=kind, name=name, path=os.path.join(directory, name), original_path=original)


class FakeTree(TreeModel):
    """Flat listing of a directory.

    Row 0 is the directory header; row n is entries[n - 1]. The operands of a
    command are the selected entries, or the entry under the cursor.
    """

    def __init__(self, cwd: str, context: NavigationContext, entries: list[Operand] | None = None):
        self.cwd = cwd
        self.context = context
        if entries is None:
            entries = [
                file_operand(cwd, "a.txt"),
                file_operand(cwd, "b.txt"),
                file_operand(cwd, "docs", OperandKind.DIRECTORY),
            ]
        self.entries = list(entries)
        self.selected: set[str] = set()
        self.calls: list[str] = []
        self.fail_with: BaseException | None = None

    # === helpers ===

    def lines(self) -> list[str]:
        rows = [f"{self.cwd}/"]
        for entry in self.entries:
            mark = "*" if entry.path in self.selected else " "
            suffix = "/" if entry.kind is OperandKind.DIRECTORY else ""
            rows.append(f"{mark} {entry.name}{suffix}")
        return rows

    def at_cursor(self, io: CommandIO) -> Operand | None:
        row = io.cursor()
        if 1 <= row <= len(self.entries):
            return self.entries[row - 1]
        return None

    def operands(self, io: CommandIO) -> list[Operand]:
        selected = [e for e in self.entries if e.path in self.selected]
        if selected:
            return selected
        entry = self.at_cursor(io)
        return [entry] if entry else []

    def _start(self, name: str):
        self.calls.append(name)
        if self.fail_with is not None:
            return Failed(self.fail_with)
        return None

    def _drop(self, operands: list[Operand]) -> None:
        paths = {o.path for o in operands}
        self.entries = [e for e in self.entries if e.path not in paths]
        self.selected -= paths

    # === TreeModel ===

    def open(self, io):
        return self._start("open") or Completed(self.lines())

    def cd(self, io):
        if failed := self._start("cd"):
            return failed
        directory = io.request_directory()
        if isinstance(directory, Cancelled):
            return directory
        self.cwd = directory
        self.entries = []
        return Completed(self.lines())

    def root(self, io):
        if failed := self._start("root"):
            return failed
        self.cwd = "/"
        self.context.root = "/"
        return Completed(self.lines())

    def home(self, io):
        return self._start("home") or Completed(self.lines())

    def trash(self, io):
        return self._start("trash") or Completed(self.lines())

    def project(self, io):
        return self._start("project") or Completed(self.lines())

    def up(self, io):
        return self._start("up") or Completed(self.lines())

    def down(self, io):
        if failed := self._start("down"):
            return failed
        entry = self.at_cursor(io)
        if entry is None:
            return Completed()
        if entry.kind is OperandKind.DIRECTORY:
            self.cwd = entry.path
            self.entries = []
            return Completed(self.lines())
        io.open_file(entry.path)
        return Completed()

    def select(self, io):
        if failed := self._start("select"):
            return failed
        row = io.cursor()
        entry = self.at_cursor(io)
        if entry is not None:
            self.selected ^= {entry.path}
            io.set_cursor(row + 1)
        io.render(self.lines())
        return Completed()

    def reverse_selected(self, io):
        if failed := self._start("reverse_selected"):
            return failed
        self.selected = {e.path for e in self.entries} - self.selected
        return Completed(self.lines())

    def toggle(self, io):
        return self._start("toggle") or Completed(self.lines())

    def toggle_recursive(self, io):
        return self._start("toggle_recursive") or Completed(self.lines())

    def _create(self, name: str, io, kind: OperandKind):
        if failed := self._start(name):
            return failed
        names = io.request_names()
        if isinstance(names, Cancelled):
            return names
        for n in names:
            self.entries.append(file_operand(self.cwd, n, kind))
        return Completed(self.lines())

    def create_dir(self, io):
        return self._create("create_dir", io, OperandKind.DIRECTORY)

    def create_file(self, io):
        return self._create("create_file", io, OperandKind.FILE)

    def rename(self, io):
        if failed := self._start("rename"):
            return failed
        operands = self.operands(io)
        if len(operands) == 1:
            answer = io.request_rename(operands[0])
            names = answer if isinstance(answer, Cancelled) else [answer]
        else:
            names = io.request_renames(operands)
        if isinstance(names, Cancelled):
            return names
        renamed = {o.path: n for o, n in zip(operands, names)}
        self.entries = [
            file_operand(self.cwd, renamed[e.path], e.kind) if e.path in renamed else e
            for e in self.entries
        ]
        self.selected.clear()
        return Completed(self.lines())

    def move(self, io):
        if failed := self._start("move"):
            return failed
        operands = self.operands(io)
        destination = io.request_destination(operands)
        if isinstance(destination, Cancelled):
            return destination
        self._drop(operands)
        return Completed(self.lines())

    def open_externally(self, io):
        return self._start("open_externally") or Completed()

    def open_dir_externally(self, io):
        return self._start("open_dir_externally") or Completed()

    def _confirmed_drop(self, name: str, io):
        if failed := self._start(name):
            return failed
        operands = self.operands(io)
        if not io.confirm(operands):
            return Cancelled()
        self._drop(operands)
        return Completed(self.lines())

    def remove(self, io):
        return self._confirmed_drop("remove", io)

    def restore(self, io):
        return self._confirmed_drop("restore", io)

    def remove_permanently(self, io):
        return self._confirmed_drop("remove_permanently", io)

    def copy(self, io):
        if failed := self._start("copy"):
            return failed
        self.context.set_clipboard(self.operands(io))
        return Completed()

    def copied_list(self, io):
        if failed := self._start("copied_list"):
            return failed
        io.show_paths(self.context.clipboard)
        return Completed()

    def paste(self, io):
        if failed := self._start("paste"):
            return failed
        for operand in self.context.clipboard:
            self.entries.append(file_operand(self.cwd, operand.name, operand.kind))
        return Completed(self.lines())

    def yank(self, io):
        if failed := self._start("yank"):
            return failed
        io.yank("\n".join(o.path for o in self.operands(io)))
        return Completed()


@pytest.fixture(autouse=True)
def reset_metrics():
    """每次测试前重置指标"""
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def trees():
    """Every FakeTree built by tree_factory, in creation order."""
    return []


@pytest.fixture
def tree_factory(trees):
    def factory(cwd, context):
        tree = FakeTree(cwd, context)
        trees.append(tree)
        return tree

    return factory


@pytest.fixture
def session(host, tree_factory):
    return Session(host, tree_factory=tree_factory)


@pytest.fixture
def fake_tree_cls():
    return FakeTree


@pytest.fixture
def operand():
    return file_operand
