import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from indent_io import TAB
from tree_view import STYLE_TREE

ENV_OPEN = "FOLDTREE_OPEN"
ENV_STYLE = "FOLDTREE_STYLE"
ENV_LOG = "FOLDTREE_LOG"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ViewerSettings:
    default_open: bool = False
    style: str = STYLE_TREE
    indent_unit: str = TAB
    log_path: Optional[Path] = None
    print_only: bool = False
    source: Optional[Path] = None


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def build_parser(env: Mapping[str, str] | None = None) -> argparse.ArgumentParser:
    """Build the CLI parser; environment variables supply the defaults."""
    env = os.environ if env is None else env
    log_default = env.get(ENV_LOG) or None
    parser = argparse.ArgumentParser(
        prog="foldtree",
        description="Browse indented text as a collapsible tree",
    )
    parser.add_argument(
        "source",
        nargs="?",
        type=Path,
        default=None,
        help="File to read (default: standard input, or a built-in sample on a terminal)",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        dest="default_open",
        default=env.get(ENV_OPEN, "").strip().lower() in _TRUTHY,
        help="Start with every node expanded",
    )
    parser.add_argument(
        "--format",
        dest="style",
        default=env.get(ENV_STYLE) or STYLE_TREE,
        help="Rendering style: tree or folder (default: tree)",
    )
    parser.add_argument(
        "--spaces",
        type=_positive_int,
        default=None,
        metavar="N",
        help="Treat N spaces as one indent level instead of a tab",
    )
    parser.add_argument(
        "--log",
        type=Path,
        dest="log_path",
        default=Path(log_default) if log_default else None,
        metavar="FILE",
        help="Append navigation diagnostics to FILE",
    )
    parser.add_argument(
        "--print",
        action="store_true",
        dest="print_only",
        help="Print the fully expanded tree and exit",
    )
    return parser


def parse_settings(
    argv: Sequence[str] | None = None, env: Mapping[str, str] | None = None
) -> ViewerSettings:
    args = build_parser(env).parse_args(argv)
    return ViewerSettings(
        default_open=args.default_open,
        style=args.style,
        indent_unit=" " * args.spaces if args.spaces else TAB,
        log_path=args.log_path,
        print_only=args.print_only,
        source=args.source,
    )
