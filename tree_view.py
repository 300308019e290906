"""Flattening and rendering of the collapsible tree.

Rendering and flattening share one walker: every emitted row is also the
visible node the cursor index refers to, so the two can never disagree.
"""

from typing import Callable, Dict, Iterator, List, NamedTuple, Optional, Tuple

from indent_io import TAB, parse_indented
from node_models import Node

GREEN = "\x1b[32m"
BRIGHT_WHITE = "\x1b[97m"
RESET = "\x1b[0m"
NO_STYLE = "No style found"

STYLE_TREE = "tree"
STYLE_FOLDER = "folder"


class RenderResult(NamedTuple):
    text: str
    visible: List[Node]


# (node, is_last_sibling) -> (glyph, prefix added for the node's children)
GlyphFn = Callable[[Node, bool], Tuple[str, str]]


def _tree_glyph(node: Node, is_last: bool) -> Tuple[str, str]:
    if is_last:
        bar = " " if node.has_children else "│"
        return "└──", bar + "   "
    return "├──", "│   "


def _folder_glyph(node: Node, is_last: bool) -> Tuple[str, str]:
    if node.has_children:
        glyph = "▾" if node.is_open else "▸"
    else:
        glyph = " "
    return glyph, "   "


STYLES: Dict[str, GlyphFn] = {
    STYLE_TREE: _tree_glyph,
    STYLE_FOLDER: _folder_glyph,
}


def _is_expanded(node: Node, expand_all: bool) -> bool:
    return node.has_children and (expand_all or node.is_open)


def _push_siblings(stack: List[Tuple[Node, str, bool]], nodes: List[Node], prefix: str) -> None:
    last = len(nodes) - 1
    for index in range(last, -1, -1):
        stack.append((nodes[index], prefix, index == last))


def walk_visible(
    forest: List[Node],
    *,
    expand_all: bool = False,
    glyph_for: Optional[GlyphFn] = None,
) -> Iterator[Tuple[Node, str, bool]]:
    """Yield ``(node, prefix, is_last)`` for every visible node in pre-order.

    Uses an explicit stack, so nesting depth is not bounded by the
    interpreter's recursion limit. ``glyph_for`` supplies the prefix added
    below each expanded node; without it every prefix is empty.
    """
    stack: List[Tuple[Node, str, bool]] = []
    _push_siblings(stack, forest, "")
    while stack:
        node, prefix, is_last = stack.pop()
        yield node, prefix, is_last
        if _is_expanded(node, expand_all):
            child_prefix = (prefix + glyph_for(node, is_last)[1]) if glyph_for else ""
            _push_siblings(stack, node.children, child_prefix)


def flatten(forest: List[Node], *, expand_all: bool = False) -> List[Node]:
    """Pre-order list of visible nodes; a closed node hides its whole subtree."""
    return [node for node, _, _ in walk_visible(forest, expand_all=expand_all)]


def colorize(text: str, highlighted: bool) -> str:
    color = GREEN if highlighted else BRIGHT_WHITE
    return f"{color}{text}{RESET}"


def render(
    forest: List[Node],
    *,
    style: str = STYLE_TREE,
    cursor: int = -1,
    color: bool = True,
    expand_all: bool = False,
) -> RenderResult:
    glyph_for: Optional[GlyphFn] = STYLES.get(style)
    if glyph_for is None:
        return RenderResult(NO_STYLE, [])

    lines: List[str] = []
    visible: List[Node] = []
    for node, prefix, is_last in walk_visible(forest, expand_all=expand_all, glyph_for=glyph_for):
        glyph, _ = glyph_for(node, is_last)
        text = colorize(node.text, len(visible) == cursor) if color else node.text
        count = f" ({len(node.children)})" if node.has_children and not _is_expanded(node, expand_all) else ""
        lines.append(f"{prefix}{glyph} {text}{count}")
        visible.append(node)

    return RenderResult("".join(f"{line}\n" for line in lines), visible)


def print_tree(text: str, *, style: str = STYLE_TREE, unit: str = TAB) -> str:
    """Render ``text`` with every node expanded and no color."""
    forest = parse_indented(text, unit=unit)
    return render(forest, style=style, color=False, expand_all=True).text
