"""Hierarchies whose nodes are linked blocks holding references to each other.

Every block knows its parent. Multi-way blocks keep a growable list of sons,
k-way blocks keep a fixed number of son slots that may be empty, and binary
blocks keep a left and a right son.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any

from arbor.hierarchy import BinaryHierarchy, Hierarchy


@dataclass(eq=False)
class ExplicitHierarchyBlock:
    """Block of an explicit hierarchy: a value and a link to its parent."""

    data: Any = None
    parent: ExplicitHierarchyBlock | None = field(default=None, repr=False)


@dataclass(eq=False)
class MultiWayExplicitHierarchyBlock(ExplicitHierarchyBlock):
    """Block with any number of sons, kept densely in order."""

    sons: list[MultiWayExplicitHierarchyBlock] = field(default_factory=list, repr=False)


@dataclass(eq=False)
class KWayExplicitHierarchyBlock(ExplicitHierarchyBlock):
    """Block with a fixed number of son slots, each possibly empty."""

    sons: list[KWayExplicitHierarchyBlock | None] = field(default_factory=list, repr=False)


@dataclass(eq=False)
class BinaryExplicitHierarchyBlock(ExplicitHierarchyBlock):
    """Block with a left and a right son."""

    left: BinaryExplicitHierarchyBlock | None = field(default=None, repr=False)
    right: BinaryExplicitHierarchyBlock | None = field(default=None, repr=False)


class ExplicitHierarchy(Hierarchy):
    """Hierarchy made of linked blocks, starting from a root block."""

    def __init__(self) -> None:
        self._root: Any | None = None

    @abstractmethod
    def _new_block(self) -> Any:
        """Create a fresh, unlinked block of the right kind."""

    def _new_empty(self) -> ExplicitHierarchy:
        return type(self)()

    def _same_kind(self, other: object) -> bool:
        return type(other) is type(self)

    def assign(self, other: ExplicitHierarchy) -> ExplicitHierarchy:
        """Replace the contents with a deep structural copy of ``other``."""
        if not self._same_kind(other):
            raise TypeError(
                f"cannot assign {type(other).__name__} to {type(self).__name__}"
            )
        if other is self:
            return self

        def copy_subtree(mine: Any, theirs: Any) -> None:
            mine.data = theirs.data
            remaining = other.degree(theirs)
            order = 0
            while remaining > 0:
                their_son = other.access_son(theirs, order)
                if their_son is not None:
                    copy_subtree(self.emplace_son(mine, order), their_son)
                    remaining -= 1
                order += 1

        self.clear()
        other_root = other.access_root()
        if other_root is not None:
            copy_subtree(self.emplace_root(), other_root)
        return self

    def copy(self) -> ExplicitHierarchy:
        """Return a deep structural copy of this hierarchy."""
        return self._new_empty().assign(self)

    def clear(self) -> None:
        """Remove all nodes, detaching them from each other."""
        for node in list(self._nodes_post_order(self._root)):
            node.parent = None
        self._root = None

    def __len__(self) -> int:
        return self.node_count(self._root) if self._root is not None else 0

    def is_empty(self) -> bool:
        return self._root is None

    def equals(self, other: object) -> bool:
        """Return whether ``other`` has the same shape and the same data."""
        if not self._same_kind(other):
            return False
        assert isinstance(other, ExplicitHierarchy)

        def compare(mine: Any | None, theirs: Any | None) -> bool:
            if mine is None and theirs is None:
                return True
            if mine is None or theirs is None:
                return False
            if self.degree(mine) != other.degree(theirs):
                return False
            if not (mine.data == theirs.data):
                return False
            remaining = self.degree(mine)
            order = 0
            while remaining > 0:
                my_son = self.access_son(mine, order)
                their_son = other.access_son(theirs, order)
                if my_son is not None:
                    remaining -= 1
                if not compare(my_son, their_son):
                    return False
                order += 1
            return True

        return compare(self._root, other.access_root())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExplicitHierarchy):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def access_root(self) -> Any | None:
        return self._root

    def access_parent(self, node: Any) -> Any | None:
        return node.parent

    def emplace_root(self) -> Any:
        """Create a new root block, replacing any previous root, and return it."""
        self._root = self._new_block()
        return self._root

    def change_root(self, new_root: Any | None) -> None:
        if new_root is not None:
            new_root.parent = None
        self._root = new_root


def _detach_subtree(hierarchy: Hierarchy, node: Any | None) -> None:
    if node is not None:
        node.parent = None


class MultiWayExplicitHierarchy(ExplicitHierarchy):
    """Explicit hierarchy whose nodes may have any number of sons."""

    def _new_block(self) -> MultiWayExplicitHierarchyBlock:
        return MultiWayExplicitHierarchyBlock()

    def degree(self, node: MultiWayExplicitHierarchyBlock) -> int:
        return len(node.sons)

    def access_son(
        self, node: MultiWayExplicitHierarchyBlock, son_order: int
    ) -> MultiWayExplicitHierarchyBlock | None:
        if 0 <= son_order < len(node.sons):
            return node.sons[son_order]
        return None

    def emplace_son(
        self, parent: MultiWayExplicitHierarchyBlock, son_order: int
    ) -> MultiWayExplicitHierarchyBlock:
        """Insert a new son at ``son_order``, shifting later sons to the right."""
        if not 0 <= son_order <= len(parent.sons):
            raise IndexError(f"son order {son_order} out of range")
        son = self._new_block()
        parent.sons.insert(son_order, son)
        son.parent = parent
        return son

    def change_son(
        self,
        parent: MultiWayExplicitHierarchyBlock,
        son_order: int,
        new_son: MultiWayExplicitHierarchyBlock | None,
    ) -> None:
        if not 0 <= son_order < len(parent.sons):
            raise IndexError(f"son order {son_order} out of range")
        old_son = parent.sons[son_order]
        parent.sons[son_order] = new_son
        if old_son is not None:
            old_son.parent = None
        if new_son is not None:
            new_son.parent = parent

    def remove_son(self, parent: MultiWayExplicitHierarchyBlock, son_order: int) -> None:
        """Remove the son at ``son_order`` with its subtree; later sons shift left."""
        if not 0 <= son_order < len(parent.sons):
            raise IndexError(f"son order {son_order} out of range")
        removed = parent.sons.pop(son_order)
        _detach_subtree(self, removed)


class KWayExplicitHierarchy(ExplicitHierarchy):
    """Explicit hierarchy whose nodes have exactly ``k`` son slots."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        super().__init__()
        self.k = k

    def _new_block(self) -> KWayExplicitHierarchyBlock:
        return KWayExplicitHierarchyBlock(sons=[None] * self.k)

    def _new_empty(self) -> KWayExplicitHierarchy:
        return type(self)(self.k)

    def _same_kind(self, other: object) -> bool:
        return type(other) is type(self) and other.k == self.k  # type: ignore[attr-defined]

    def _check_order(self, son_order: int) -> None:
        if not 0 <= son_order < self.k:
            raise IndexError(f"son order {son_order} out of range")

    def degree(self, node: KWayExplicitHierarchyBlock) -> int:
        return sum(1 for son in node.sons if son is not None)

    def access_son(
        self, node: KWayExplicitHierarchyBlock, son_order: int
    ) -> KWayExplicitHierarchyBlock | None:
        if 0 <= son_order < len(node.sons):
            return node.sons[son_order]
        return None

    def emplace_son(
        self, parent: KWayExplicitHierarchyBlock, son_order: int
    ) -> KWayExplicitHierarchyBlock:
        """Put a new son into slot ``son_order``, replacing what was there."""
        self._check_order(son_order)
        son = self._new_block()
        parent.sons[son_order] = son
        son.parent = parent
        return son

    def change_son(
        self,
        parent: KWayExplicitHierarchyBlock,
        son_order: int,
        new_son: KWayExplicitHierarchyBlock | None,
    ) -> None:
        self._check_order(son_order)
        old_son = parent.sons[son_order]
        parent.sons[son_order] = new_son
        if old_son is not None:
            old_son.parent = None
        if new_son is not None:
            new_son.parent = parent

    def remove_son(self, parent: KWayExplicitHierarchyBlock, son_order: int) -> None:
        """Empty slot ``son_order``, dropping the subtree that was there."""
        self._check_order(son_order)
        removed = parent.sons[son_order]
        parent.sons[son_order] = None
        _detach_subtree(self, removed)


class BinaryExplicitHierarchy(BinaryHierarchy, ExplicitHierarchy):
    """Explicit hierarchy whose nodes have a left and a right son."""

    def _new_block(self) -> BinaryExplicitHierarchyBlock:
        return BinaryExplicitHierarchyBlock()

    def degree(self, node: BinaryExplicitHierarchyBlock) -> int:
        return (node.left is not None) + (node.right is not None)

    def access_son(
        self, node: BinaryExplicitHierarchyBlock, son_order: int
    ) -> BinaryExplicitHierarchyBlock | None:
        if son_order == self.LEFT_SON_INDEX:
            return node.left
        if son_order == self.RIGHT_SON_INDEX:
            return node.right
        return None

    def emplace_son(
        self, parent: BinaryExplicitHierarchyBlock, son_order: int
    ) -> BinaryExplicitHierarchyBlock:
        """Create the left son for order 0, the right son for any other order."""
        son = self._new_block()
        if son_order == self.LEFT_SON_INDEX:
            parent.left = son
        else:
            parent.right = son
        son.parent = parent
        return son

    def change_son(
        self,
        parent: BinaryExplicitHierarchyBlock,
        son_order: int,
        new_son: BinaryExplicitHierarchyBlock | None,
    ) -> None:
        if son_order == self.LEFT_SON_INDEX:
            old_son, parent.left = parent.left, new_son
        else:
            old_son, parent.right = parent.right, new_son
        if old_son is not None:
            old_son.parent = None
        if new_son is not None:
            new_son.parent = parent

    def remove_son(self, parent: BinaryExplicitHierarchyBlock, son_order: int) -> None:
        if son_order == self.LEFT_SON_INDEX:
            removed, parent.left = parent.left, None
        else:
            removed, parent.right = parent.right, None
        _detach_subtree(self, removed)