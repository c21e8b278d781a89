"""nvimfinder 命令行入口

- keymap PATH: write the key-mapping script to PATH
- commands: print the command table
"""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from . import keymap
from .config import DEFAULT_FILE_TYPE
from .session.commands import COMMANDS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nvimfinder", description="nvim-finder helper commands")
    sub = parser.add_subparsers(dest="action", required=True)

    keymap_parser = sub.add_parser("keymap", help="write the key-mapping script")
    keymap_parser.add_argument("path", type=Path)
    keymap_parser.add_argument("--file-type", default=DEFAULT_FILE_TYPE)

    sub.add_parser("commands", help="list commands and default keys")
    return parser


def commands_table() -> Table:
    table = Table(title="nvim-finder commands")
    table.add_column("Command")
    table.add_column("Function")
    table.add_column("Keys")
    for spec in COMMANDS:
        table.add_row(spec.name, f"{spec.function_name}()", " ".join(spec.keymaps))
    return table


def main(argv: list[str] | None = None) -> int:
    """入口函数"""
    args = build_parser().parse_args(argv)
    console = Console()

    if args.action == "keymap":
        args.path.write_text(keymap.build_script(args.file_type))
        console.print(f"Wrote keymap to {args.path}")
        return 0

    console.print(commands_table())
    return 0


if __name__ == "__main__":
    sys.exit(main())
