import pytest

from dsakit.trees import (
    DuplicateKeyError,
    TreeNode,
    delete,
    in_order,
    in_order_predecessor,
    insert,
    is_bst,
    iterative_search,
    post_order,
    pre_order,
    search,
)

BST_VALUES = [9, 4, 11, 2, 7, 15, 5, 8, 14]


def build_bst():
    p = TreeNode(9)
    p2 = TreeNode(4)
    p3 = TreeNode(11)
    p4 = TreeNode(2)
    p5 = TreeNode(7)
    p6 = TreeNode(15)
    p7 = TreeNode(5)
    p8 = TreeNode(8)
    p9 = TreeNode(14)
    p.left, p.right = p2, p3
    p2.left, p2.right = p4, p5
    p3.right = p6
    p5.left, p5.right = p7, p8
    p6.left = p9
    return p


def build_small():
    p = TreeNode(4)
    p1 = TreeNode(1)
    p.left, p.right = p1, TreeNode(6)
    p1.left, p1.right = TreeNode(5), TreeNode(2)
    return p


def test_in_order_of_bst_is_sorted():
    assert in_order(build_bst()) == sorted(BST_VALUES)


def test_pre_order_small_tree():
    assert pre_order(build_small()) == [4, 1, 5, 2, 6]


def test_post_order_small_tree():
    assert post_order(build_small()) == [5, 2, 1, 6, 4]


def test_traversal_root_positions():
    root = build_small()
    assert pre_order(root)[0] == root.data
    assert post_order(root)[-1] == root.data
    assert sorted(in_order(root)) == sorted(pre_order(root))


def test_empty_traversals():
    assert in_order(None) == []
    assert pre_order(None) == []
    assert post_order(None) == []


def test_is_bst():
    assert is_bst(build_bst()) is True
    assert is_bst(build_small()) is False
    assert is_bst(None) is True


def test_is_bst_rejects_duplicates():
    root = TreeNode(3, TreeNode(3))
    assert is_bst(root) is False


def test_is_bst_repeated_calls_are_independent():
    assert is_bst(build_bst()) is True
    assert is_bst(build_bst()) is True


@pytest.mark.parametrize("key", BST_VALUES)
def test_search_finds_every_key(key):
    root = build_bst()
    assert search(root, key).data == key
    assert iterative_search(root, key).data == key


@pytest.mark.parametrize("key", [0, 3, 10, 100])
def test_search_missing(key):
    root = build_bst()
    assert search(root, key) is None
    assert iterative_search(root, key) is None


def test_insert_places_leaf():
    root = build_bst()
    assert insert(root, 10) is root
    assert root.right.left.data == 10
    assert in_order(root) == sorted(BST_VALUES + [10])


def test_insert_duplicate_raises():
    root = build_bst()
    with pytest.raises(DuplicateKeyError):
        insert(root, 7)
    assert in_order(root) == sorted(BST_VALUES)


def test_insert_builds_tree_from_empty():
    root = None
    for value in BST_VALUES:
        root = insert(root, value)
    assert root.data == BST_VALUES[0]
    assert in_order(root) == sorted(BST_VALUES)
    assert is_bst(root)


def test_in_order_predecessor():
    root = build_bst()
    assert in_order_predecessor(root).data == max(v for v in BST_VALUES if v < 9)


def test_in_order_predecessor_without_left_raises():
    with pytest.raises(ValueError):
        in_order_predecessor(TreeNode(1))


def test_delete_leaf():
    root = delete(build_bst(), 8)
    assert in_order(root) == sorted(v for v in BST_VALUES if v != 8)


@pytest.mark.parametrize("value", BST_VALUES)
def test_delete_any_value_keeps_bst(value):
    root = delete(build_bst(), value)
    assert in_order(root) == sorted(v for v in BST_VALUES if v != value)
    assert is_bst(root)


def test_delete_root_uses_predecessor():
    root = build_bst()
    expected = in_order_predecessor(root).data
    root = delete(root, 9)
    assert root.data == expected


def test_delete_missing_value_leaves_tree():
    root = delete(build_bst(), 3)
    assert in_order(root) == sorted(BST_VALUES)


def test_delete_everything():
    root = build_bst()
    for value in BST_VALUES:
        root = delete(root, value)
    assert root is None