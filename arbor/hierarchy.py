"""Abstract hierarchies (trees) of blocks with traversals.

A hierarchy is built from blocks that carry their value in a ``data``
attribute. Concrete hierarchies decide how blocks are stored and linked;
this module supplies everything that can be derived from the primitive
operations: levels, node counts, son queries and the four traversal orders.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Iterator
from typing import Any


class Hierarchy(ABC):
    """Base class for hierarchies whose nodes are addressed by son order."""

    # ----- primitive operations supplied by concrete hierarchies -----

    @abstractmethod
    def degree(self, node: Any) -> int:
        """Return the number of sons that ``node`` actually has."""

    @abstractmethod
    def access_root(self) -> Any | None:
        """Return the root block, or ``None`` if the hierarchy is empty."""

    @abstractmethod
    def access_parent(self, node: Any) -> Any | None:
        """Return the parent of ``node``, or ``None`` for the root."""

    @abstractmethod
    def access_son(self, node: Any, son_order: int) -> Any | None:
        """Return the son of ``node`` at ``son_order``, or ``None``."""

    @abstractmethod
    def emplace_root(self) -> Any:
        """Create a new root block and return it."""

    @abstractmethod
    def change_root(self, new_root: Any | None) -> None:
        """Replace the root with ``new_root``."""

    @abstractmethod
    def emplace_son(self, parent: Any, son_order: int) -> Any:
        """Create a new son of ``parent`` at ``son_order`` and return it."""

    @abstractmethod
    def change_son(self, parent: Any, son_order: int, new_son: Any | None) -> None:
        """Put ``new_son`` at ``son_order`` of ``parent``."""

    @abstractmethod
    def remove_son(self, parent: Any, son_order: int) -> None:
        """Remove the subtree rooted at the son of ``parent`` at ``son_order``."""

    # ----- derived queries -----

    def level(self, node: Any) -> int:
        """Return the depth of ``node``; the root is at level 0."""
        result = 0
        parent = self.access_parent(node)
        while parent is not None:
            result += 1
            parent = self.access_parent(parent)
        return result

    def node_count(self, node: Any = None) -> int:
        """Count nodes of the subtree rooted at ``node`` (the root by default)."""
        start = self.access_root() if node is None else node
        return sum(1 for _ in self._nodes_pre_order(start))

    def is_root(self, node: Any) -> bool:
        return self.access_parent(node) is None

    def is_nth_son(self, node: Any, son_order: int) -> bool:
        parent = self.access_parent(node)
        return parent is not None and self.access_son(parent, son_order) is node

    def is_leaf(self, node: Any) -> bool:
        return self.degree(node) == 0

    def has_nth_son(self, node: Any, son_order: int) -> bool:
        return self.access_son(node, son_order) is not None

    def sons(self, node: Any) -> Iterator[Any]:
        """Yield the existing sons of ``node`` in order, skipping empty slots."""
        remaining = self.degree(node)
        order = 0
        while remaining > 0:
            son = self.access_son(node, order)
            if son is not None:
                remaining -= 1
                yield son
            order += 1

    # ----- traversals over blocks -----

    def _nodes_pre_order(self, node: Any | None) -> Iterator[Any]:
        if node is None:
            return
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(list(self.sons(current))))

    def _nodes_post_order(self, node: Any | None) -> Iterator[Any]:
        if node is None:
            return
        stack = [(node, self.sons(node))]
        while stack:
            current, pending = stack[-1]
            son = next(pending, None)
            if son is None:
                stack.pop()
                yield current
            else:
                stack.append((son, self.sons(son)))

    def _nodes_level_order(self, node: Any | None) -> Iterator[Any]:
        if node is None:
            return
        queue = deque([node])
        while queue:
            current = queue.popleft()
            yield current
            queue.extend(self.sons(current))

    def process_pre_order(self, node: Any | None, operation: Callable[[Any], None]) -> None:
        """Call ``operation`` on every block below ``node``, parents first."""
        for current in self._nodes_pre_order(node):
            operation(current)

    def process_post_order(self, node: Any | None, operation: Callable[[Any], None]) -> None:
        """Call ``operation`` on every block below ``node``, sons first."""
        for current in self._nodes_post_order(node):
            operation(current)

    def process_level_order(self, node: Any | None, operation: Callable[[Any], None]) -> None:
        """Call ``operation`` on every block below ``node``, level by level."""
        for current in self._nodes_level_order(node):
            operation(current)

    # ----- iteration over data -----

    def iter_pre_order(self) -> Iterator[Any]:
        """Yield the data of all blocks in pre-order."""
        for node in self._nodes_pre_order(self.access_root()):
            yield node.data

    def iter_post_order(self) -> Iterator[Any]:
        """Yield the data of all blocks in post-order."""
        for node in self._nodes_post_order(self.access_root()):
            yield node.data

    def __iter__(self) -> Iterator[Any]:
        return self.iter_pre_order()


class BinaryHierarchy(Hierarchy):
    """Hierarchy in which every node has a left and a right son slot."""

    LEFT_SON_INDEX = 0
    RIGHT_SON_INDEX = 1

    def access_left_son(self, node: Any) -> Any | None:
        return self.access_son(node, self.LEFT_SON_INDEX)

    def access_right_son(self, node: Any) -> Any | None:
        return self.access_son(node, self.RIGHT_SON_INDEX)

    def is_left_son(self, node: Any) -> bool:
        return self.is_nth_son(node, self.LEFT_SON_INDEX)

    def is_right_son(self, node: Any) -> bool:
        return self.is_nth_son(node, self.RIGHT_SON_INDEX)

    def has_left_son(self, node: Any) -> bool:
        return self.has_nth_son(node, self.LEFT_SON_INDEX)

    def has_right_son(self, node: Any) -> bool:
        return self.has_nth_son(node, self.RIGHT_SON_INDEX)

    def insert_left_son(self, parent: Any) -> Any:
        return self.emplace_son(parent, self.LEFT_SON_INDEX)

    def insert_right_son(self, parent: Any) -> Any:
        return self.emplace_son(parent, self.RIGHT_SON_INDEX)

    def change_left_son(self, parent: Any, new_son: Any | None) -> None:
        self.change_son(parent, self.LEFT_SON_INDEX, new_son)

    def change_right_son(self, parent: Any, new_son: Any | None) -> None:
        self.change_son(parent, self.RIGHT_SON_INDEX, new_son)

    def remove_left_son(self, parent: Any) -> None:
        self.remove_son(parent, self.LEFT_SON_INDEX)

    def remove_right_son(self, parent: Any) -> None:
        self.remove_son(parent, self.RIGHT_SON_INDEX)

    def _nodes_in_order(self, node: Any | None) -> Iterator[Any]:
        stack: list[Any] = []
        current = node
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = self.access_left_son(current)
            current = stack.pop()
            yield current
            current = self.access_right_son(current)

    def process_in_order(self, node: Any | None, operation: Callable[[Any], None]) -> None:
        """Call ``operation`` on every block: left subtree, node, right subtree."""
        for current in self._nodes_in_order(node):
            operation(current)

    def iter_in_order(self) -> Iterator[Any]:
        """Yield the data of all blocks in in-order."""
        for node in self._nodes_in_order(self.access_root()):
            yield node.data

    def __iter__(self) -> Iterator[Any]:
        return self.iter_in_order()