"""Binary search trees built on the height-tracking binary tree."""

from __future__ import annotations

from typing import Any

from datastruct.bintree import BinNode, BinTree


class BST(BinTree):
    """A binary search tree: smaller keys go left, the rest go right."""

    def __init__(self) -> None:
        super().__init__()
        self._hot: BinNode | None = None

    @property
    def hot(self) -> BinNode | None:
        """Parent of the node reached by the last search, insert or remove (None at the root)."""
        return self._hot

    def search(self, e: Any) -> BinNode | None:
        """Return the node holding e, or None.

        Either way ``hot`` is left at the parent of the position where e is or
        would be; it is None when that position is the root.
        """
        root = self._root
        if root is None or e == root.data:
            self._hot = None
            return root
        self._hot = root
        while True:
            hot = self._hot
            c = hot.lc if e < hot.data else hot.rc
            if c is None or e == c.data:
                return c
            self._hot = c

    def insert(self, e: Any) -> BinNode:
        """Insert e unless it is already present; return the node holding e."""
        x = self.search(e)
        if x is not None:
            return x
        hot = self._hot
        if hot is None:
            x = BinNode(e)
            self._root = x
        else:
            x = BinNode(e, hot)
            if e < hot.data:
                hot.lc = x
            else:
                hot.rc = x
        self._size += 1
        self.update_height_above(x)
        return x

    def remove(self, e: Any) -> bool:
        """Remove the node holding e; return False if there is none."""
        x = self.search(e)
        if x is None:
            return False
        self._remove_at(x)
        self._size -= 1
        self.update_height_above(self._hot)
        return True

    def _replace(self, x: BinNode, succ: BinNode | None) -> None:
        parent = x.parent
        if parent is None:
            self._root = succ
        elif parent.lc is x:
            parent.lc = succ
        else:
            parent.rc = succ

    def _remove_at(self, x: BinNode) -> BinNode | None:
        w = x
        if x.lc is None:
            succ = x.rc
            self._replace(x, succ)
        elif x.rc is None:
            succ = x.lc
            self._replace(x, succ)
        else:
            w = x.succ()  # type: ignore[assignment]
            x.data, w.data = w.data, x.data
            u = w.parent
            succ = w.rc
            if u is x:
                u.rc = succ
            else:
                u.lc = succ  # type: ignore[union-attr]
        self._hot = w.parent
        if succ is not None:
            succ.parent = self._hot
        w.parent = w.lc = w.rc = None
        return succ

    def connect34(
        self,
        a: BinNode,
        b: BinNode,
        c: BinNode,
        t0: BinNode | None,
        t1: BinNode | None,
        t2: BinNode | None,
        t3: BinNode | None,
    ) -> BinNode:
        """Link three nodes and four subtrees as b(a(t0, t1), c(t2, t3)) and return b.

        The link between b and the node above it is left to the caller.
        """
        a.lc = t0
        if t0 is not None:
            t0.parent = a
        a.rc = t1
        if t1 is not None:
            t1.parent = a
        self.update_height(a)
        c.lc = t2
        if t2 is not None:
            t2.parent = c
        c.rc = t3
        if t3 is not None:
            t3.parent = c
        self.update_height(c)
        b.lc = a
        a.parent = b
        b.rc = c
        c.parent = b
        self.update_height(b)
        return b

    def rotate_at(self, v: BinNode | None) -> BinNode:
        """Restructure v, its parent and its grandparent; return the new local root.

        The new root points up to the grandparent's former parent, but that
        parent's child link (or the tree's root) is left for the caller to set.
        """
        if v is None:
            raise ValueError("cannot rotate a null node")
        p = v.parent
        g = p.parent if p is not None else None
        if p is None or g is None:
            raise ValueError("node has no grandparent")
        if p.is_lchild():
            if v.is_lchild():
                p.parent = g.parent
                return self.connect34(v, p, g, v.lc, v.rc, p.rc, g.rc)
            v.parent = g.parent
            return self.connect34(p, v, g, p.lc, v.lc, v.rc, g.rc)
        if v.is_rchild():
            p.parent = g.parent
            return self.connect34(g, p, v, g.lc, p.lc, v.lc, v.rc)
        v.parent = g.parent
        return self.connect34(g, v, p, g.lc, v.lc, v.rc, p.rc)