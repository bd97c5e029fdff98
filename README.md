# arbor

Tree structures with a shared, abstract hierarchy interface.

`arbor.hierarchy` defines the abstract classes `Hierarchy` and
`BinaryHierarchy`. They build on a small set of primitive operations
(`degree`, `access_root`, `access_parent`, `access_son`, `emplace_root`,
`change_root`, `emplace_son`, `change_son`, `remove_son`) and derive the rest
from them:

- queries: `level`, `node_count`, `is_root`, `is_nth_son`, `is_leaf`,
  `has_nth_son`, and `sons(node)`, which yields the existing sons in order;
- traversals that call a function on each block: `process_pre_order`,
  `process_post_order`, `process_level_order`, and for binary trees
  `process_in_order`;
- iteration over the stored values: `iter_pre_order`, `iter_post_order`, and
  for binary trees `iter_in_order`. Iterating a hierarchy directly gives
  pre-order; iterating a binary hierarchy gives in-order.

`BinaryHierarchy` adds left/right shortcuts such as `access_left_son`,
`insert_right_son`, `is_left_son`, `change_left_son` and `remove_right_son`.

`arbor.explicit_hierarchy` provides trees whose nodes are linked block objects.
Each block has a `data` attribute for its value and a `parent` link:

- `MultiWayExplicitHierarchy` — any number of ordered sons per node;
  `emplace_son` inserts at a position and shifts later sons along,
  `remove_son` shifts them back. Positions outside the son list raise
  `IndexError`.
- `KWayExplicitHierarchy(k)` — exactly `k` son slots per node, each of which
  may be empty; `emplace_son` fills a slot and `remove_son` empties it.
  Slot numbers outside `0..k-1` raise `IndexError`, and `k` below 1 raises
  `ValueError`.
- `BinaryExplicitHierarchy` — a left son (order 0) and a right son (any other
  order).

## Installation

```
pip install .
```

## Example

```python
from arbor.explicit_hierarchy import BinaryExplicitHierarchy

tree = BinaryExplicitHierarchy()
root = tree.emplace_root()
root.data = 10
five = tree.insert_left_son(root)
five.data = 5
fifteen = tree.insert_right_son(root)
fifteen.data = 15
tree.insert_left_son(five).data = 2
tree.insert_right_son(five).data = 7
tree.insert_right_son(fifteen).data = 20

print(list(tree))                   # in order: [2, 5, 7, 10, 15, 20]
print(list(tree.iter_pre_order()))  # [10, 5, 2, 7, 15, 20]
print(list(tree.iter_post_order())) # [2, 7, 5, 20, 15, 10]

levels = []
tree.process_level_order(tree.access_root(), lambda node: levels.append(node.data))
print(levels)                       # [10, 5, 15, 2, 7, 20]

print(len(tree), tree.level(five), tree.is_left_son(five))  # 6 1 True
```

A multi-way tree works the same way, with son positions chosen explicitly:

```python
from arbor.explicit_hierarchy import MultiWayExplicitHierarchy

tree = MultiWayExplicitHierarchy()
root = tree.emplace_root()
root.data = 0
one = tree.emplace_son(root, 0)
one.data = 1
tree.emplace_son(root, 1).data = 2
tree.emplace_son(one, 0).data = 3

print(list(tree))  # pre-order: [0, 1, 3, 2]
```

## Copying, comparing and clearing

- `copy()` returns a deep structural copy; `assign(other)` replaces a tree's
  contents with a deep copy of `other`. Assigning from a tree of a different
  kind (or a k-way tree with a different `k`) raises `TypeError`.
- `==` and `equals(other)` compare shape and stored values; trees of
  different kinds are never equal. Trees are not hashable.
- `clear()` empties a tree; `is_empty()` and `len()` report its state.

## Scope

All trees here keep their nodes as linked objects. There is no array-backed
tree in the package.

## Running the tests

```
pip install .[test]
pytest
```