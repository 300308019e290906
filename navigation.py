from enum import Enum
from typing import List, Optional

from diagnostics import DiagnosticLog
from node_models import Node, TreeModel
from tree_view import STYLE_TREE, render


class NavEvent(Enum):
    UP = "up"
    DOWN = "down"
    COLLAPSE = "collapse"
    EXPAND = "expand"
    TOGGLE = "toggle"
    QUIT = "quit"


class Navigator:
    """Cursor state machine over a ``TreeModel``.

    The cursor is an index into the list produced by the most recent
    render, so every transition ends with a fresh render.
    """

    def __init__(
        self,
        model: TreeModel,
        *,
        style: str = STYLE_TREE,
        color: bool = True,
        log: Optional[DiagnosticLog] = None,
    ) -> None:
        self.model = model
        self.style = style
        self.color = color
        self.log = log or DiagnosticLog()
        self.cursor = 0
        self.finished = False
        self.visible: List[Node] = []
        self.render()

    def render(self) -> str:
        if self.finished:
            return ""
        result = render(self.model.roots, style=self.style, cursor=self.cursor, color=self.color)
        self.visible = result.visible
        return result.text

    def visible_count(self) -> int:
        return len(self.visible)

    def visible_node(self, index: int) -> Optional[Node]:
        if index < 0 or index >= len(self.visible):
            return None
        return self.visible[index]

    @property
    def current(self) -> Optional[Node]:
        return self.visible_node(self.cursor)

    def handle(self, event: NavEvent) -> bool:
        """Apply one event and re-render. Returns False once the loop should stop."""
        if self.finished:
            return False
        if event is NavEvent.QUIT:
            self.finished = True
            self.log.write("quit")
            return False

        handler = {
            NavEvent.UP: self._move_up,
            NavEvent.DOWN: self._move_down,
            NavEvent.COLLAPSE: self._collapse,
            NavEvent.EXPAND: self._expand,
            NavEvent.TOGGLE: self._toggle,
        }[event]
        handler()
        self.render()
        self.log.write(event.value, f"cursor={self.cursor} visible={self.visible_count()}")
        return True

    def expand_all(self) -> None:
        if self.finished:
            return
        selected = self.current
        self.model.open_all()
        self.render()
        if selected is not None:
            self.cursor = self._visible_index(selected, default=self.cursor)
            self.render()
        self.log.write("expand_all", f"visible={self.visible_count()}")

    def collapse_all(self) -> None:
        if self.finished:
            return
        selected = self.current
        while selected is not None and selected.parent is not None:
            selected = selected.parent
        self.model.close_all()
        self.render()
        if selected is not None:
            self.cursor = self._visible_index(selected, default=0)
            self.render()
        self.log.write("collapse_all", f"visible={self.visible_count()}")

    def _move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def _move_down(self) -> None:
        if self.cursor < self.visible_count() - 1:
            self.cursor += 1

    def _collapse(self) -> None:
        node = self.current
        if node is None:
            return
        if node.is_open and node.has_children:
            self.model.set_open(node, False)
            return
        parent = self.model.parent_of(node)
        if parent is None:
            return
        self.log.write("jump", f"parent={parent.text!r} sibling={self.model.sibling_index(node)}")
        # The parent precedes its children, so its row survives the collapse.
        self.cursor = self._visible_index(parent, default=self.cursor)
        self.model.set_open(parent, False)

    def _expand(self) -> None:
        node = self.current
        if node is not None and node.has_children:
            self.model.set_open(node, True)

    def _toggle(self) -> None:
        self.model.toggle(self.current)

    def _visible_index(self, node: Node, default: int) -> int:
        for index, candidate in enumerate(self.visible):
            if candidate is node:
                return index
        return default
