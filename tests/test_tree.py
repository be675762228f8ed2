import random

import pytest

from dscatalog.structures.tree import (
    Traversal,
    TraversalOrder,
    TreeNode,
    delete,
    from_values,
    inorder,
    insert,
    min_value,
    postorder,
    preorder,
    search,
    traversal,
)


def _shape(node):
    """Nested tuples describing structure and values, for identity checks."""
    if node is None:
        return None
    return (node.value, _shape(node.left), _shape(node.right))


@pytest.fixture
def sample_tree():
    return from_values([50, 30, 70, 20, 40])


def test_insert_into_empty_tree():
    root = insert(None, 5)
    assert isinstance(root, TreeNode)
    assert root.value == 5
    assert root.left is None and root.right is None


def test_insert_places_values(sample_tree):
    assert sample_tree.value == 50
    assert sample_tree.left.value == 30
    assert sample_tree.right.value == 70
    assert sample_tree.left.left.value == 20
    assert sample_tree.left.right.value == 40


def test_insert_returns_same_root(sample_tree):
    assert insert(sample_tree, 60) is sample_tree
    assert sample_tree.right.left.value == 60


def test_duplicate_insert_is_noop(sample_tree):
    before = _shape(sample_tree)
    assert insert(sample_tree, 40) is sample_tree
    assert _shape(sample_tree) == before


def test_traversal_orders(sample_tree):
    assert inorder(sample_tree) == [20, 30, 40, 50, 70]
    assert preorder(sample_tree) == [50, 30, 20, 40, 70]
    assert postorder(sample_tree) == [20, 40, 30, 70, 50]


def test_traversal_accepts_strings(sample_tree):
    assert list(traversal(sample_tree, "preorder")) == [50, 30, 20, 40, 70]
    assert list(traversal(sample_tree, TraversalOrder.POSTORDER)) == [20, 40, 30, 70, 50]
    assert list(traversal(sample_tree)) == [20, 30, 40, 50, 70]


def test_traversal_is_restartable(sample_tree):
    walk = traversal(sample_tree, TraversalOrder.INORDER)
    assert list(walk) == list(walk) == [20, 30, 40, 50, 70]


def test_traversal_is_lazy(sample_tree):
    it = iter(Traversal(sample_tree, "inorder"))
    assert next(it) == 20
    assert next(it) == 30


def test_traversal_of_empty_tree():
    for order in TraversalOrder:
        assert list(traversal(None, order)) == []


def test_unknown_traversal_order(sample_tree):
    with pytest.raises(ValueError):
        traversal(sample_tree, "levelorder")


def test_inorder_is_sorted_for_random_inserts():
    rng = random.Random(1234)
    values = [rng.randint(-500, 500) for _ in range(300)]
    root = from_values(values)
    assert inorder(root) == sorted(set(values))


def test_search(sample_tree):
    found = search(sample_tree, 30)
    assert found is sample_tree.left
    assert inorder(found) == [20, 30, 40]
    assert search(sample_tree, 50) is sample_tree
    assert search(sample_tree, 45) is None
    assert search(None, 1) is None


def test_min_value(sample_tree):
    assert min_value(sample_tree) == 20
    assert min_value(sample_tree.right) == 70


class TestDelete:
    def test_delete_from_empty_tree(self):
        assert delete(None, 1) is None

    def test_delete_leaf(self, sample_tree):
        root = delete(sample_tree, 20)
        assert root is sample_tree
        assert sample_tree.left.left is None
        assert inorder(root) == [30, 40, 50, 70]

    def test_delete_node_with_right_child_only(self):
        root = from_values([50, 30, 35])
        root = delete(root, 30)
        assert root.left.value == 35
        assert inorder(root) == [35, 50]

    def test_delete_node_with_left_child_only(self):
        root = from_values([50, 30, 20])
        root = delete(root, 30)
        assert root.left.value == 20
        assert inorder(root) == [20, 50]

    def test_delete_two_children_uses_successor(self, sample_tree):
        root = delete(sample_tree, 30)
        assert root.left.value == 40
        assert root.left.right is None
        assert inorder(root) == [20, 40, 50, 70]

    def test_delete_two_children_deep_successor(self):
        root = from_values([50, 30, 80, 70, 90, 60, 65])
        root = delete(root, 50)
        assert root.value == 60
        assert root.right.left.left.value == 65
        assert inorder(root) == [30, 60, 65, 70, 80, 90]

    def test_delete_root_with_single_child(self):
        root = from_values([10, 20, 30])
        new_root = delete(root, 10)
        assert new_root.value == 20
        assert inorder(new_root) == [20, 30]

    def test_delete_only_node(self):
        assert delete(TreeNode(1), 1) is None

    def test_delete_missing_value_leaves_tree_identical(self, sample_tree):
        before = _shape(sample_tree)
        assert delete(sample_tree, 45) is sample_tree
        assert _shape(sample_tree) == before

    def test_delete_everything(self):
        values = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]
        root = from_values(values)
        for i, value in enumerate(values):
            root = delete(root, value)
            assert inorder(root) == sorted(values[i + 1:])
        assert root is None


def test_skewed_tree_has_no_recursion_limit():
    n = 2000
    root = from_values(range(n))
    assert inorder(root) == list(range(n))
    assert preorder(root) == list(range(n))
    assert postorder(root) == list(range(n - 1, -1, -1))
    assert search(root, n - 1).value == n - 1
    for value in range(n):
        root = delete(root, value)
    assert root is None


def test_tree_scenario():
    root = None
    for value in (50, 30, 70, 20, 40):
        root = insert(root, value)
    assert list(traversal(root, "inorder")) == [20, 30, 40, 50, 70]
    root = delete(root, 30)
    assert list(traversal(root, "inorder")) == [20, 40, 50, 70]
