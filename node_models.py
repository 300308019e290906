from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass(eq=False)
class Node:
    text: str
    indent: int = 0
    children: List["Node"] = field(default_factory=list)
    # Back-reference only; the parent owns this node through ``children``.
    parent: Optional["Node"] = field(default=None, repr=False)
    is_open: bool = False

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def append(self, child: "Node") -> None:
        if child.indent <= self.indent:
            raise ValueError(
                f"child indent {child.indent} must be greater than parent indent {self.indent}"
            )
        self.children.append(child)
        child.parent = self

    def sibling_index(self) -> Optional[int]:
        """Position of this node among its parent's children, or None for roots."""
        if self.parent is None:
            return None
        for index, sibling in enumerate(self.parent.children):
            if sibling is self:
                return index
        return None

    def walk(self) -> Iterator["Node"]:
        """Pre-order over this subtree, using an explicit stack rather than recursion."""
        stack: List["Node"] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def subtree_size(self) -> int:
        return sum(1 for _ in self.walk())


class TreeModel:
    """Owns the parsed forest and the open/closed flags of its nodes."""

    def __init__(self, roots: List[Node]) -> None:
        self.roots = roots

    def __iter__(self) -> Iterator[Node]:
        for root in self.roots:
            yield from root.walk()

    @staticmethod
    def parent_of(node: Optional[Node]) -> Optional[Node]:
        return node.parent if node is not None else None

    @staticmethod
    def sibling_index(node: Optional[Node]) -> Optional[int]:
        return node.sibling_index() if node is not None else None

    @staticmethod
    def set_open(node: Optional[Node], is_open: bool) -> None:
        if node is None:
            return
        node.is_open = is_open

    @staticmethod
    def toggle(node: Optional[Node]) -> None:
        if node is None:
            return
        node.is_open = not node.is_open

    def open_all(self) -> None:
        for node in self:
            if node.has_children:
                node.is_open = True

    def close_all(self) -> None:
        for node in self:
            node.is_open = False

    def count_nodes(self) -> int:
        return sum(1 for _ in self)
