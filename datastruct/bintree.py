"""Binary tree nodes and trees with height bookkeeping and the classic traversals."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any


class RBColor(Enum):
    """Node colour, used by red-black trees."""

    RED = 0
    BLACK = 1


def stature(node: BinNode | None) -> int:
    """Return the height of node, counting an absent node as -1."""
    return node.height if node is not None else -1


def balance_factor(node: BinNode) -> int:
    """Return the height of the left subtree minus that of the right subtree."""
    return stature(node.lc) - stature(node.rc)


@dataclass(eq=False, repr=False)
class BinNode:
    """A node of a binary tree, linked to its parent and both children."""

    data: Any = None
    parent: BinNode | None = None
    lc: BinNode | None = None
    rc: BinNode | None = None
    height: int = 0
    npl: int = 1
    color: RBColor = RBColor.RED

    def __repr__(self) -> str:
        return f"BinNode({self.data!r}, height={self.height})"

    def size(self) -> int:
        """Count the nodes in the subtree rooted here, this node included."""
        return sum(1 for _ in self._subtree())

    def _subtree(self) -> Iterator[BinNode]:
        stack: list[BinNode] = [self]
        while stack:
            x = stack.pop()
            yield x
            if x.rc is not None:
                stack.append(x.rc)
            if x.lc is not None:
                stack.append(x.lc)

    def insert_as_lc(self, e: Any) -> BinNode:
        """Attach a new node holding e as the left child and return it."""
        self.lc = BinNode(e, self)
        return self.lc

    def insert_as_rc(self, e: Any) -> BinNode:
        """Attach a new node holding e as the right child and return it."""
        self.rc = BinNode(e, self)
        return self.rc

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def is_lchild(self) -> bool:
        """Return True if the node is its parent's left child."""
        return self.parent is not None and self.parent.lc is self

    def is_rchild(self) -> bool:
        """Return True if the node is its parent's right child."""
        return self.parent is not None and self.parent.rc is self

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.lc is None and self.rc is None

    def succ(self) -> BinNode | None:
        """Return the in-order successor of this node, or None if it is the last."""
        if self.rc is not None:
            s = self.rc
            while s.lc is not None:
                s = s.lc
            return s
        s: BinNode | None = self
        while s is not None and s.is_rchild():
            s = s.parent
        return s.parent if s is not None else None

    def trav_pre(self) -> Iterator[Any]:
        """Yield the data of the subtree in pre-order."""
        stack: list[BinNode] = []
        x: BinNode | None = self
        while True:
            while x is not None:
                yield x.data
                if x.rc is not None:
                    stack.append(x.rc)
                x = x.lc
            if not stack:
                return
            x = stack.pop()

    def trav_in(self) -> Iterator[Any]:
        """Yield the data of the subtree in in-order."""
        stack: list[BinNode] = []
        x: BinNode | None = self
        while True:
            while x is not None:
                stack.append(x)
                x = x.lc
            if not stack:
                return
            x = stack.pop()
            yield x.data
            x = x.rc

    def trav_post(self) -> Iterator[Any]:
        """Yield the data of the subtree in post-order."""
        stack: list[tuple[BinNode, bool]] = [(self, False)]
        while stack:
            x, expanded = stack.pop()
            if expanded:
                yield x.data
                continue
            stack.append((x, True))
            if x.rc is not None:
                stack.append((x.rc, False))
            if x.lc is not None:
                stack.append((x.lc, False))

    def trav_level(self) -> Iterator[Any]:
        """Yield the data of the subtree level by level, left to right."""
        queue: deque[BinNode] = deque([self])
        while queue:
            x = queue.popleft()
            yield x.data
            if x.lc is not None:
                queue.append(x.lc)
            if x.rc is not None:
                queue.append(x.rc)


class BinTree:
    """A binary tree that keeps its size and every node's height up to date."""

    def __init__(self) -> None:
        self._size = 0
        self._root: BinNode | None = None

    @property
    def root(self) -> BinNode | None:
        """The root node, or None for an empty tree."""
        return self._root

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True if the tree has no root."""
        return self._root is None

    def update_height(self, x: BinNode) -> int:
        """Recompute the height of x from its children and return it."""
        x.height = 1 + max(stature(x.lc), stature(x.rc))
        return x.height

    def update_height_above(self, x: BinNode | None) -> None:
        """Recompute the heights of x and all of its ancestors."""
        while x is not None:
            self.update_height(x)
            x = x.parent

    def insert_as_root(self, e: Any) -> BinNode:
        """Make a node holding e the root of this empty tree and return it."""
        if self._root is not None:
            raise ValueError("tree already has a root")
        self._size = 1
        self._root = BinNode(e)
        return self._root

    def insert_as_lc(self, x: BinNode, e: Any) -> BinNode:
        """Insert e as the left child of x, which must have none, and return the new node."""
        if x.lc is not None:
            raise ValueError("node already has a left child")
        self._size += 1
        node = x.insert_as_lc(e)
        self.update_height_above(x)
        return node

    def insert_as_rc(self, x: BinNode, e: Any) -> BinNode:
        """Insert e as the right child of x, which must have none, and return the new node."""
        if x.rc is not None:
            raise ValueError("node already has a right child")
        self._size += 1
        node = x.insert_as_rc(e)
        self.update_height_above(x)
        return node


def random_bin_tree(
    tree: BinTree, node: BinNode, h: int, rng: random.Random | None = None
) -> bool:
    """Grow random subtrees below node, at most h levels deep.

    Each branch stops growing with probability 1/h; new nodes hold values in
    [0, h**3). Returns False when h is not positive.
    """
    if h <= 0:
        return False
    if rng is None:
        rng = random.Random()
    if rng.randrange(h) > 0:
        random_bin_tree(tree, tree.insert_as_lc(node, rng.randrange(h * h * h)), h - 1, rng)
    if rng.randrange(h) > 0:
        random_bin_tree(tree, tree.insert_as_rc(node, rng.randrange(h * h * h)), h - 1, rng)
    return True