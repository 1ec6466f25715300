"""A non-binary tree stored in a fixed array of linked nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

MAX_NODES = 20
NIL = 0


@dataclass(frozen=True)
class Node:
    """One slot of the tree: its value and the addresses of its relatives.

    Addresses count from 1; ``NIL`` (0) means "no such relative".
    """

    info: str
    first_son: int = NIL
    next_brother: int = NIL
    parent: int = NIL


class NonBinaryTree:
    """A tree whose nodes live at addresses 1..n, rooted at address 1."""

    def __init__(self, nodes: Iterable[Node]) -> None:
        self.nodes: tuple[Node, ...] = tuple(nodes)
        if len(self.nodes) > MAX_NODES:
            raise ValueError(
                f"a tree holds at most {MAX_NODES} nodes, got {len(self.nodes)}"
            )
        size = len(self.nodes)
        for address, node in enumerate(self.nodes, start=1):
            for link in (node.first_son, node.next_brother, node.parent):
                if not NIL <= link <= size:
                    raise ValueError(
                        f"node {address} links to missing address {link}"
                    )

    def _node(self, address: int) -> Node:
        return self.nodes[address - 1]

    def _info(self, addresses: Iterable[int]) -> list[str]:
        return [self._node(address).info for address in addresses]

    def _children(self, address: int) -> Iterator[int]:
        child = self._node(address).first_son
        while child != NIL:
            yield child
            child = self._node(child).next_brother

    def _pre(self, address: int) -> Iterator[int]:
        yield address
        for child in self._children(address):
            yield from self._pre(child)

    def _in(self, address: int) -> Iterator[int]:
        children = list(self._children(address))
        if children:
            yield from self._in(children[0])
        yield address
        for child in children[1:]:
            yield from self._in(child)

    def _post(self, address: int) -> Iterator[int]:
        for child in self._children(address):
            yield from self._post(child)
        yield address

    def _walk(self) -> Iterator[tuple[int, int]]:
        """Yield (address, first-son descents so far) for each step of a
        threaded pre-order walk that climbs back up through parents."""
        if self.is_empty():
            return
        current, descents, going_down = 1, 0, True
        while current != NIL:
            yield current, descents
            node = self._node(current)
            if node.first_son != NIL and going_down:
                current = node.first_son
                descents += 1
            elif node.next_brother != NIL:
                current = node.next_brother
                going_down = True
            else:
                current = node.parent
                going_down = False

    def is_empty(self) -> bool:
        """Return True when the tree has no root value."""
        return not self.nodes or self.nodes[0].info == ""

    def preorder(self) -> list[str]:
        """Values in pre-order: parent, then each child subtree."""
        return [] if self.is_empty() else self._info(self._pre(1))

    def inorder(self) -> list[str]:
        """Values in in-order: first child subtree, parent, other subtrees."""
        return [] if self.is_empty() else self._info(self._in(1))

    def postorder(self) -> list[str]:
        """Values in post-order: each child subtree, then the parent."""
        return [] if self.is_empty() else self._info(self._post(1))

    def level_order(self) -> list[str]:
        """Values breadth first, children left to right."""
        if self.is_empty():
            return []
        order: list[int] = []
        queue = deque([1])
        while queue:
            current = queue.popleft()
            order.append(current)
            queue.extend(self._children(current))
        return self._info(order)

    def describe(self) -> str:
        """A text listing of every slot with its links."""
        rule = "--------------------------------------\n"
        parts = []
        for i in range(1, self.count_nodes() + 1):
            node = self._node(i)
            parts.append(
                f"--> Index ke-{i}\n"
                f"{rule}"
                f"info array ke-{i}         : {node.info}\n"
                f"first son array ke-{i}    : {node.first_son}\n"
                f"next brother array ke-{i} : {node.next_brother}\n"
                f"parent array ke-{i}       : {node.parent}\n"
                f"{rule}"
            )
        return "".join(parts)

    def search(self, info: str) -> bool:
        """Return True if some node holds *info*."""
        return any(self._node(address).info == info for address, _ in self._walk())

    def __contains__(self, info: object) -> bool:
        return isinstance(info, str) and self.search(info)

    def count_nodes(self) -> int:
        """Number of nodes reachable from the root."""
        return len({address for address, _ in self._walk()})

    def count_leaves(self) -> int:
        """Number of nodes without children."""
        return sum(
            1 for address, _ in self._walk() if self._node(address).first_son == NIL
        )

    def level(self, info: str) -> int:
        """Number of first-son descents taken in a pre-order walk before the
        node holding *info* is reached; the root is level 0."""
        for address, descents in self._walk():
            if self._node(address).info == info:
                return descents
        raise ValueError(f"node {info!r} is not in the tree")

    def depth(self) -> int:
        """Number of first-son descents in a full pre-order walk (0 when empty
        or when the root has no children)."""
        return max((descents for _, descents in self._walk()), default=0)


def create_tree() -> NonBinaryTree:
    """Build the ten-node sample tree, laid out in level order."""
    return NonBinaryTree(
        [
            Node("A", 2, 0, 0),
            Node("B", 4, 3, 1),
            Node("C", 6, 0, 1),
            Node("D", 0, 5, 2),
            Node("E", 9, 0, 2),
            Node("F", 0, 7, 3),
            Node("G", 0, 8, 3),
            Node("H", 0, 0, 3),
            Node("I", 0, 10, 5),
            Node("J", 0, 0, 5),
        ]
    )


def larger(first: str, second: str) -> str:
    """Return the greater of two node values."""
    return first if first > second else second