"""
Module 02 - Breadth-First Layout Unit Tests
Tests for arraymerkle/merkle/layout.py
"""
import pytest

from arraymerkle.merkle.layout import (
    first_child_index,
    index,
    layer_offset,
    log2_floor,
    nodes_in_tree,
    parent_index,
    second_child_index,
    sibling_offset,
)


class TestLog2Floor:
    """Tests for log2_floor()."""

    @pytest.mark.parametrize(
        "x, expected",
        [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2), (5, 2), (6, 2), (7, 2), (8, 3), (2**40, 40)],
    )
    def test_known_values(self, x, expected):
        assert log2_floor(x) == expected


class TestNodesInTree:
    """Tests for nodes_in_tree()."""

    def test_small_depths(self):
        assert nodes_in_tree(0) == 0
        assert nodes_in_tree(1) == 1
        assert nodes_in_tree(2) == 3
        assert nodes_in_tree(3) == 7

    def test_depth_20(self):
        assert nodes_in_tree(20) == 1_048_575


class TestIndex:
    """Tests for index() and its inverse layer_offset()."""

    def test_first_three_layers(self):
        assert index(0, 0) == 0
        assert index(1, 0) == 1
        assert index(1, 1) == 2
        assert index(2, 0) == 3
        assert index(2, 1) == 4
        assert index(2, 2) == 5
        assert index(2, 3) == 6

    def test_layer_offset_inverts_index(self):
        """layer_offset(index(l, o)) == (l, o) for every node of a depth-6 tree."""
        for layer in range(6):
            for offset in range(1 << layer):
                assert layer_offset(index(layer, offset)) == (layer, offset)

    def test_layer_offset_of_root(self):
        assert layer_offset(0) == (0, 0)


class TestParentIndex:
    """Tests for parent_index()."""

    def test_known_values(self):
        assert parent_index(1, 0) == 0
        assert parent_index(1, 1) == 0
        assert parent_index(2, 0) == 1
        assert parent_index(2, 1) == 1
        assert parent_index(2, 2) == 2
        assert parent_index(2, 3) == 2
        assert parent_index(3, 0) == 3
        assert parent_index(3, 1) == 3
        assert parent_index(3, 2) == 4
        assert parent_index(3, 3) == 4


class TestChildIndex:
    """Tests for first_child_index() and second_child_index()."""

    def test_first_child(self):
        assert first_child_index(0, 0) == 1
        assert first_child_index(1, 0) == 3
        assert first_child_index(1, 1) == 5
        assert first_child_index(2, 0) == 7
        assert first_child_index(2, 1) == 9

    def test_second_child(self):
        assert second_child_index(0, 0) == 2
        assert second_child_index(1, 0) == 4
        assert second_child_index(1, 1) == 6
        assert second_child_index(2, 0) == 8
        assert second_child_index(2, 1) == 10

    def test_children_point_back_to_parent(self):
        for layer in range(5):
            for offset in range(1 << layer):
                parent = index(layer, offset)
                left_layer, left_offset = layer_offset(first_child_index(layer, offset))
                right_layer, right_offset = layer_offset(second_child_index(layer, offset))
                assert parent_index(left_layer, left_offset) == parent
                assert parent_index(right_layer, right_offset) == parent


class TestSiblingOffset:
    """Tests for sibling_offset()."""

    def test_pairs(self):
        assert sibling_offset(0) == 1
        assert sibling_offset(1) == 0
        assert sibling_offset(6) == 7
        assert sibling_offset(7) == 6
