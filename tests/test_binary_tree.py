import pytest

from dsakit.binary_tree import BinaryTree


def sample_tree():
    return BinaryTree(
        0,
        BinaryTree(1, BinaryTree(11)),
        BinaryTree(2, BinaryTree(21, BinaryTree(211), BinaryTree(212)), BinaryTree(22)),
    )


def search_tree(values):
    tree = BinaryTree()
    for value in values:
        tree.insert(value)
    return tree


def test_empty_tree():
    tree = BinaryTree()
    assert tree.is_empty()
    assert len(tree) == 0
    assert tree.height() == 0
    assert list(tree.in_order()) == []


def test_constructor_size_and_height():
    tree = sample_tree()
    assert len(tree) == 8
    assert tree.height() == 4
    assert not tree.is_empty()


def test_pre_order_of_sample():
    assert list(sample_tree().pre_order()) == [0, 1, 11, 2, 21, 211, 212, 22]


def test_traversals_agree_on_contents():
    tree = sample_tree()
    pre = list(tree.pre_order())
    assert sorted(tree.in_order()) == sorted(pre)
    assert sorted(tree.post_order()) == sorted(pre)
    assert list(tree.post_order())[-1] == pre[0]


def test_constructor_copies_subtrees():
    left = BinaryTree(1)
    tree = BinaryTree(0, left)
    left.insert(5)
    assert len(tree) == 2
    assert 5 not in tree


def test_constructor_rejects_too_many_arguments():
    with pytest.raises(TypeError):
        BinaryTree(1, BinaryTree(), BinaryTree(), BinaryTree())


def test_constructor_rejects_non_tree_subtree():
    with pytest.raises(TypeError):
        BinaryTree(1, 2)


def test_contains_searches_whole_tree():
    tree = sample_tree()
    assert 212 in tree
    assert 22 in tree
    assert 3 not in tree


def test_insert_keeps_in_order_sorted():
    values = [5, 3, 8, 1, 4, 7, 9, 3]
    tree = search_tree(values)
    assert list(tree.in_order()) == sorted(values)
    assert len(tree) == len(values)


def test_height_of_degenerate_tree():
    tree = search_tree([1, 2, 3, 4, 5])
    assert tree.height() == 5


def test_remove_leaf_and_inner_nodes():
    values = [5, 3, 8, 1, 4, 7, 9]
    tree = search_tree(values)
    for key in (1, 3, 5):
        assert tree.remove(key)
        assert key not in tree
    assert list(tree.in_order()) == sorted(set(values) - {1, 3, 5})
    assert len(tree) == len(values) - 3


def test_remove_missing_key():
    tree = search_tree([2, 1, 3])
    assert tree.remove(10) is False
    assert len(tree) == 3


def test_remove_from_empty():
    tree = BinaryTree()
    assert tree.remove(1) is False
    assert len(tree) == 0


def test_remove_only_node_empties_tree():
    tree = search_tree([4])
    assert tree.remove(4)
    assert tree.is_empty()


def test_map_replaces_values():
    tree = sample_tree()
    before = list(tree.pre_order())
    tree.map(lambda x: x + 1000)
    assert list(tree.pre_order()) == [x + 1000 for x in before]


def test_trim_removes_leaves():
    tree = sample_tree()
    tree.trim()
    assert list(tree.pre_order()) == [0, 1, 2, 21]
    assert len(tree) == 4


def test_trim_single_node_empties_tree():
    tree = BinaryTree(7)
    tree.trim()
    assert tree.is_empty()
    assert len(tree) == 0


def test_bloom_grows_leaves():
    tree = BinaryTree(1, BinaryTree(2), BinaryTree(3))
    tree.bloom()
    assert len(tree) == 7
    assert tree.height() == 3
    assert list(tree.pre_order()).count(2) == 3


def test_bloom_then_trim_restores():
    tree = sample_tree()
    before = list(tree.pre_order())
    tree.bloom()
    tree.trim()
    assert list(tree.pre_order()) == before
    assert len(tree) == len(before)


def test_copy_is_independent():
    tree = search_tree([2, 1, 3])
    clone = tree.copy()
    clone.insert(4)
    clone.remove(1)
    assert list(tree.in_order()) == [1, 2, 3]
    assert list(clone.in_order()) == [2, 3, 4]