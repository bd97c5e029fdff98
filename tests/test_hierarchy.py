import pytest

from arbor.hierarchy import BinaryHierarchy, Hierarchy


class _Block:
    def __init__(self, sons):
        self.data = None
        self.parent = None
        self.sons = sons


def _release(hierarchy, son):
    hierarchy.process_post_order(son, lambda b: None)


class _MultiWay(Hierarchy):
    def __init__(self):
        self.root = None

    def degree(self, node):
        return len(node.sons)

    def access_root(self):
        return self.root

    def access_parent(self, node):
        return node.parent

    def access_son(self, node, son_order):
        return node.sons[son_order] if 0 <= son_order < len(node.sons) else None

    def emplace_root(self):
        self.root = _Block([])
        return self.root

    def change_root(self, new_root):
        if new_root is not None:
            new_root.parent = None
        self.root = new_root

    def emplace_son(self, parent, son_order):
        son = _Block([])
        son.parent = parent
        parent.sons.insert(son_order, son)
        return son

    def change_son(self, parent, son_order, new_son):
        old = parent.sons[son_order]
        parent.sons[son_order] = new_son
        if old is not None:
            old.parent = None
        if new_son is not None:
            new_son.parent = parent

    def remove_son(self, parent, son_order):
        _release(self, parent.sons[son_order])
        del parent.sons[son_order]


class _Slots(Hierarchy):
    def __init__(self, k):
        self.k = k
        self.root = None

    def degree(self, node):
        return sum(1 for s in node.sons if s is not None)

    def access_root(self):
        return self.root

    def access_parent(self, node):
        return node.parent

    def access_son(self, node, son_order):
        return node.sons[son_order] if 0 <= son_order < self.k else None

    def emplace_root(self):
        self.root = _Block([None] * self.k)
        return self.root

    def change_root(self, new_root):
        if new_root is not None:
            new_root.parent = None
        self.root = new_root

    def emplace_son(self, parent, son_order):
        son = _Block([None] * self.k)
        son.parent = parent
        parent.sons[son_order] = son
        return son

    def change_son(self, parent, son_order, new_son):
        old = parent.sons[son_order]
        parent.sons[son_order] = new_son
        if old is not None:
            old.parent = None
        if new_son is not None:
            new_son.parent = parent

    def remove_son(self, parent, son_order):
        _release(self, parent.sons[son_order])
        parent.sons[son_order] = None


class _Binary(BinaryHierarchy, _Slots):
    def __init__(self):
        _Slots.__init__(self, 2)


def make_mweh():
    h = _MultiWay()
    root = h.emplace_root()
    one = h.emplace_son(root, 0)
    two = h.emplace_son(root, 1)
    root.data, one.data, two.data = 0, 1, 2
    h.emplace_son(one, 0).data = 3
    h.emplace_son(one, 1).data = 4
    h.emplace_son(one, 2).data = 5
    h.emplace_son(two, 0).data = 6
    return h, [0, 1, 3, 4, 5, 2, 6], [3, 4, 5, 1, 6, 2, 0], [0, 1, 2, 3, 4, 5, 6]


def make_kweh():
    h = _Slots(3)
    root = h.emplace_root()
    one = h.emplace_son(root, 0)
    two = h.emplace_son(root, 2)
    root.data, one.data, two.data = 0, 1, 2
    h.emplace_son(one, 0).data = 3
    h.emplace_son(one, 2).data = 4
    h.emplace_son(two, 1).data = 5
    return h, [0, 1, 3, 4, 2, 5], [3, 4, 1, 5, 2, 0], [0, 1, 2, 3, 4, 5]


def make_bih():
    h = _Binary()
    root = h.emplace_root()
    five = BinaryHierarchy.insert_left_son(h, root)
    fifteen = BinaryHierarchy.insert_right_son(h, root)
    root.data, five.data, fifteen.data = 10, 5, 15
    BinaryHierarchy.insert_left_son(h, five).data = 2
    BinaryHierarchy.insert_right_son(h, five).data = 7
    BinaryHierarchy.insert_left_son(h, fifteen).data = 12
    return (h, [10, 5, 2, 7, 15, 12], [2, 7, 5, 12, 15, 10],
            [10, 5, 15, 2, 7, 12], [2, 5, 7, 10, 12, 15])


def make_beh():
    h = _Binary()
    root = h.emplace_root()
    five = BinaryHierarchy.insert_left_son(h, root)
    fifteen = BinaryHierarchy.insert_right_son(h, root)
    two = BinaryHierarchy.insert_left_son(h, five)
    seven = BinaryHierarchy.insert_right_son(h, five)
    twenty = BinaryHierarchy.insert_right_son(h, fifteen)
    root.data, five.data, fifteen.data = 10, 5, 15
    two.data, seven.data, twenty.data = 2, 7, 20
    return (h, [10, 5, 2, 7, 15, 20], [2, 7, 5, 20, 15, 10],
            [10, 5, 15, 2, 7, 20], [2, 5, 7, 10, 15, 20])


ALL = [make_kweh, make_mweh, make_bih]
BINARY = [make_bih, make_beh]


@pytest.mark.parametrize("make", ALL)
def test_process_pre_order(make):
    h, pre, *_ = make()
    out = []
    Hierarchy.process_pre_order(h, h.access_root(), lambda node: out.append(node.data))
    assert out == pre


@pytest.mark.parametrize("make", ALL)
def test_process_post_order(make):
    h, _, post, *_ = make()
    out = []
    Hierarchy.process_post_order(h, h.access_root(), lambda node: out.append(node.data))
    assert out == post


@pytest.mark.parametrize("make", ALL)
def test_process_level_order(make):
    h, _, _, level, *_ = make()
    out = []
    Hierarchy.process_level_order(h, h.access_root(), lambda node: out.append(node.data))
    assert out == level


@pytest.mark.parametrize("make", ALL)
def test_pre_order_iterator(make):
    h, pre, *_ = make()
    assert list(Hierarchy.iter_pre_order(h)) == pre
    assert Hierarchy.node_count(h) == len(pre)


@pytest.mark.parametrize("make", ALL)
def test_post_order_iterator(make):
    h, _, post, *_ = make()
    assert list(Hierarchy.iter_post_order(h)) == post


@pytest.mark.parametrize("make", BINARY)
def test_process_in_order(make):
    h, *_, inorder = make()
    out = []
    BinaryHierarchy.process_in_order(h, h.access_root(), lambda node: out.append(node.data))
    assert out == inorder


@pytest.mark.parametrize("make", BINARY)
def test_in_order_iterator(make):
    h, *_, inorder = make()
    assert list(BinaryHierarchy.iter_in_order(h)) == inorder
    assert list(BinaryHierarchy.__iter__(h)) == inorder


def test_default_iteration_is_pre_order_for_general_hierarchy():
    h, pre, *_ = make_mweh()
    assert list(Hierarchy.__iter__(h)) == pre


def test_empty_hierarchy_traversals():
    h = _MultiWay()
    assert list(Hierarchy.iter_pre_order(h)) == []
    assert list(Hierarchy.iter_post_order(h)) == []
    assert Hierarchy.node_count(h) == 0
    out = []
    Hierarchy.process_level_order(h, h.access_root(), lambda node: out.append(node.data))
    assert out == []


def test_empty_binary_in_order():
    h = _Binary()
    assert list(BinaryHierarchy.iter_in_order(h)) == []
    out = []
    BinaryHierarchy.process_in_order(h, h.access_root(), lambda node: out.append(node.data))
    assert out == []


def test_level_and_root_and_leaf():
    h, *_ = make_mweh()
    root = h.access_root()
    one = h.access_son(root, 0)
    five = h.access_son(one, 2)
    assert Hierarchy.level(h, root) == 0
    assert Hierarchy.level(h, one) == 1
    assert Hierarchy.level(h, five) == 2
    assert Hierarchy.is_root(h, root)
    assert not Hierarchy.is_root(h, one)
    assert Hierarchy.is_leaf(h, five)
    assert not Hierarchy.is_leaf(h, one)


def test_node_count_of_subtree():
    h, *_ = make_mweh()
    one = h.access_son(h.access_root(), 0)
    assert Hierarchy.node_count(h, one) == 4


def test_nth_son_queries_with_gaps():
    h, *_ = make_kweh()
    root = h.access_root()
    two = h.access_son(root, 2)
    assert Hierarchy.has_nth_son(h, root, 0)
    assert not Hierarchy.has_nth_son(h, root, 1)
    assert Hierarchy.is_nth_son(h, two, 2)
    assert not Hierarchy.is_nth_son(h, two, 0)
    assert not Hierarchy.is_nth_son(h, root, 0)


def test_sons_skip_empty_slots():
    h, *_ = make_kweh()
    root = h.access_root()
    assert [s.data for s in Hierarchy.sons(h, root)] == [1, 2]
    assert [s.data for s in Hierarchy.sons(h, h.access_son(root, 2))] == [5]


def test_binary_son_queries():
    h, *_ = make_beh()
    root = h.access_root()
    five = BinaryHierarchy.access_left_son(h, root)
    fifteen = BinaryHierarchy.access_right_son(h, root)
    assert (five.data, fifteen.data) == (5, 15)
    assert BinaryHierarchy.is_left_son(h, five)
    assert not BinaryHierarchy.is_right_son(h, five)
    assert BinaryHierarchy.is_right_son(h, fifteen)
    assert not BinaryHierarchy.has_left_son(h, fifteen)
    assert BinaryHierarchy.has_right_son(h, fifteen)


def test_binary_remove_and_change_son():
    h, *_ = make_beh()
    root = h.access_root()
    five = BinaryHierarchy.access_left_son(h, root)
    BinaryHierarchy.remove_left_son(h, five)
    assert list(BinaryHierarchy.iter_in_order(h)) == [5, 7, 10, 15, 20]
    fifteen = BinaryHierarchy.access_right_son(h, root)
    BinaryHierarchy.change_right_son(h, root, None)
    assert fifteen.parent is None
    assert list(Hierarchy.iter_pre_order(h)) == [10, 5, 7]
    BinaryHierarchy.change_left_son(h, root, fifteen)
    assert BinaryHierarchy.is_left_son(h, fifteen)
    assert list(BinaryHierarchy.iter_in_order(h)) == [15, 20, 10]


def test_binary_remove_right_son():
    h, *_ = make_bih()
    root = h.access_root()
    BinaryHierarchy.remove_right_son(h, root)
    out = []
    Hierarchy.process_level_order(h, h.access_root(), lambda node: out.append(node.data))
    assert out == [10, 5, 2, 7]
    assert Hierarchy.node_count(h) == 4


def test_multiway_remove_son_shifts_sons():
    h, *_ = make_mweh()
    one = h.access_son(h.access_root(), 0)
    h.remove_son(one, 1)
    assert list(Hierarchy.iter_pre_order(h)) == [0, 1, 3, 5, 2, 6]
    assert h.degree(one) == 2


def test_hierarchy_is_abstract():
    with pytest.raises(TypeError):
        Hierarchy()