import pytest

from purgatory.binarytree import (
    Codec,
    TreeNode,
    average_of_levels,
    build_tree,
    level_order,
    right_side_view,
)


def test_build_tree_shape():
    root = build_tree([1, 2, 3, None, 5])
    assert root == TreeNode(1, TreeNode(2, None, TreeNode(5)), TreeNode(3))


def test_build_tree_empty():
    assert build_tree([]) is None


def test_average_of_levels_basic():
    assert average_of_levels(build_tree([3, 9, 20, None, None, 15, 7])) == [3, 14.5, 11]


def test_average_of_levels_empty():
    assert average_of_levels(build_tree([])) == []


def test_right_side_view_basic():
    assert right_side_view(build_tree([1, 2, 3, None, 5, None, 4])) == [1, 3, 4]


def test_right_side_view_empty():
    assert right_side_view(build_tree([])) == []


def test_level_order_basic():
    assert level_order(build_tree([3, 9, 20, None, None, 15, 7])) == [[3], [9, 20], [15, 7]]


def test_level_order_empty():
    assert level_order(build_tree([])) == []


def test_serialize_basic():
    tree = build_tree([1, 2, 3, None, None, 4, 5])
    assert Codec().serialize(tree) == "1,2,null,null,3,4,null,null,5,null,null,"


def test_serialize_empty():
    assert Codec().serialize(build_tree([])) == "null,"


@pytest.mark.parametrize(
    "values",
    [[1, 2, 3, None, None, 4, 5], [], [-7], [5, 4, None, 3, None, 2]],
)
def test_round_trip(values):
    codec = Codec()
    tree = build_tree(values)
    assert codec.deserialize(codec.serialize(tree)) == tree


def test_deserialize_tolerates_spaces():
    tree = Codec().deserialize(" 1 , null , 2 ,null,null,")
    assert level_order(tree) == [[1], [2]]


def test_deserialize_rejects_garbage():
    with pytest.raises(ValueError):
        Codec().deserialize("x,null,null,")