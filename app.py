from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Static
from rich.text import Text

from diagnostics import DiagnosticLog
from indent_io import parse_indented
from navigation import NavEvent, Navigator
from node_models import TreeModel
from settings import ViewerSettings, parse_settings
from tree_view import print_tree

SAMPLE_OUTLINE = """Groceries
\tFruit
\t\tApples
\t\tBananas
\tVegetables
\t\tCarrots
\t\tSpinach
\tDairy
\t\tMilk
\t\tCheese
\t\t\tCheddar
\t\t\tGouda
Hardware
\tScrews
\tLight bulbs
Pharmacy
"""


class OutlineScroll(VerticalScroll, can_focus=False):
    """Scroll container that leaves the arrow keys to the app bindings."""


class FoldTreeApp(App[None]):
    """Textual front end for a ``Navigator`` over an indented outline."""

    TITLE = "foldtree"

    CSS = """
    #outline-scroll {
        width: 1fr;
        height: 1fr;
    }
    #outline {
        width: auto;
    }
    """

    BINDINGS = [
        Binding("q,ctrl+c", "quit", "Quit", priority=True),
        Binding("k,up,ctrl+p", "cursor_up", "Up", show=False),
        Binding("j,down,ctrl+n", "cursor_down", "Down", show=False),
        Binding("h,left", "collapse_cursor", "Collapse"),
        Binding("l,right", "expand_cursor", "Expand"),
        Binding("tab", "toggle_cursor", "Toggle", priority=True),
        Binding("a", "expand_all", "Expand All"),
        Binding("z", "collapse_all", "Collapse All"),
    ]

    def __init__(
        self,
        text: str,
        settings: Optional[ViewerSettings] = None,
        log: Optional[DiagnosticLog] = None,
    ) -> None:
        super().__init__()
        self.settings = settings or ViewerSettings()
        self.log_sink = log or DiagnosticLog(self.settings.log_path)
        forest = parse_indented(
            text,
            default_open=self.settings.default_open,
            unit=self.settings.indent_unit,
        )
        self.model = TreeModel(forest)
        self.navigator = Navigator(self.model, style=self.settings.style, log=self.log_sink)
        self.log_sink.write("start", f"nodes={self.model.count_nodes()} style={self.settings.style}")
        self._outline: Optional[Static] = None
        self._scroller: Optional[OutlineScroll] = None

    def compose(self) -> ComposeResult:
        yield Header()
        with OutlineScroll(id="outline-scroll") as scroller:
            self._scroller = scroller
            outline = Static(id="outline")
            self._outline = outline
            yield outline
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_outline()

    def require_outline(self) -> Static:
        if self._outline is None:
            raise RuntimeError("Outline widget not initialised")
        return self._outline

    def refresh_outline(self) -> None:
        rendered = self.navigator.render()
        self.require_outline().update(Text.from_ansi(rendered))
        self._keep_cursor_visible()
        self.show_status()

    def _keep_cursor_visible(self) -> None:
        scroller = self._scroller
        if scroller is None:
            return
        cursor = self.navigator.cursor
        height = scroller.size.height
        if height <= 0:
            return
        top = int(scroller.scroll_y)
        if cursor < top:
            scroller.scroll_to(y=cursor, animate=False)
        elif cursor >= top + height:
            scroller.scroll_to(y=cursor - height + 1, animate=False)

    def show_status(self, message: str | None = None) -> None:
        count = self.navigator.visible_count()
        position = f"{self.navigator.cursor + 1}/{count}" if count else "empty"
        composed = f"{position} · {self.settings.style}"
        if message:
            composed = f"{composed} · {message}"
        self.sub_title = composed

    def apply_nav_event(self, event: NavEvent) -> None:
        if self.navigator.handle(event):
            self.refresh_outline()
        else:
            self.exit()

    async def action_quit(self) -> None:
        self.apply_nav_event(NavEvent.QUIT)

    def action_cursor_up(self) -> None:
        self.apply_nav_event(NavEvent.UP)

    def action_cursor_down(self) -> None:
        self.apply_nav_event(NavEvent.DOWN)

    def action_collapse_cursor(self) -> None:
        self.apply_nav_event(NavEvent.COLLAPSE)

    def action_expand_cursor(self) -> None:
        self.apply_nav_event(NavEvent.EXPAND)

    def action_toggle_cursor(self) -> None:
        self.apply_nav_event(NavEvent.TOGGLE)

    def action_expand_all(self) -> None:
        self.navigator.expand_all()
        self.refresh_outline()

    def action_collapse_all(self) -> None:
        self.navigator.collapse_all()
        self.refresh_outline()


def read_input(settings: ViewerSettings) -> str:
    """Load the outline text; exits with a message if the source is unreadable."""
    try:
        if settings.source is not None:
            return settings.source.expanduser().read_text(encoding="utf-8")
        if sys.stdin is not None and not sys.stdin.isatty():
            return sys.stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SystemExit(f"foldtree: failed to read input: {exc}") from exc
    return SAMPLE_OUTLINE


def _reattach_terminal() -> None:
    """Point file descriptor 0 back at the terminal after stdin was piped."""
    try:
        tty_fd = os.open("/dev/tty", os.O_RDONLY)
    except OSError as exc:
        raise SystemExit(f"foldtree: no terminal available for interactive mode: {exc}") from exc
    os.dup2(tty_fd, 0)
    os.close(tty_fd)


def main(argv: Sequence[str] | None = None) -> int:
    settings = parse_settings(argv)
    text = read_input(settings)

    if settings.print_only:
        sys.stdout.write(print_tree(text, style=settings.style, unit=settings.indent_unit))
        return 0

    if sys.stdin is not None and not sys.stdin.isatty():
        _reattach_terminal()

    log = DiagnosticLog(settings.log_path)
    log.reset()
    FoldTreeApp(text, settings, log).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
