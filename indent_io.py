from typing import List

from node_models import Node

TAB = "\t"


def indent_depth(line: str, unit: str = TAB) -> int:
    """Return how many times ``unit`` repeats at the start of ``line``.

    Only the configured unit counts: a tab-indented outline read with a
    space unit (or the other way round) is treated as unindented text.
    """
    if not unit:
        raise ValueError("indent unit must not be empty")
    depth = 0
    offset = 0
    while line.startswith(unit, offset):
        depth += 1
        offset += len(unit)
    return depth


def split_lines(text: str) -> List[str]:
    """Split on line feeds only, dropping one trailing carriage return per line.

    Other separators that ``str.splitlines`` honours (form feed, U+0085,
    U+2028, ...) stay inside the line text.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_indented(text: str, *, default_open: bool = False, unit: str = TAB) -> List[Node]:
    """Parse indentation-structured text into a forest of ``Node`` objects.

    Nesting is inferred from indent deltas with a stack:
    - deeper than the stack top -> child of the top
    - same depth                -> sibling of the top
    - shallower                 -> pop until an ancestor is shallower, then child of it

    Blank lines are kept as empty-text nodes. Nothing is rejected; empty
    text yields an empty forest.
    """
    if not unit:
        raise ValueError("indent unit must not be empty")

    root = Node(text="", indent=-1)
    stack: List[Node] = [root]

    for line in split_lines(text):
        depth = indent_depth(line, unit)
        node = Node(text=line[depth * len(unit):], indent=depth, is_open=default_open)

        if depth > stack[-1].indent:
            stack[-1].append(node)
        elif depth == stack[-1].indent:
            stack.pop()
            stack[-1].append(node)
        else:
            while depth <= stack[-1].indent:
                stack.pop()
            stack[-1].append(node)
        stack.append(node)

    forest = root.children
    # The synthetic root is dropped; top-level lines become parentless roots.
    for node in forest:
        node.parent = None
    return forest
