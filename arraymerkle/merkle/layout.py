"""
Module 02 - Breadth-First Layout
Index arithmetic for a complete binary tree stored in a flat list.

Nodes are addressed by (layer, offset): layer 0 is the root, layer
depth-1 holds the leaves, and offset is the zero-based position within
the layer. The flat index of (layer, offset) is (2**layer - 1) + offset,
so a node's children sit at 2*i + 1 and 2*i + 2 and no parent/child
references are stored anywhere.
"""
from __future__ import annotations


def nodes_in_tree(depth: int) -> int:
    """Number of nodes in a complete tree with `depth` layers: 2**depth - 1."""
    return (1 << depth) - 1


def index(layer: int, offset: int) -> int:
    """Flat index of the node at (layer, offset)."""
    return nodes_in_tree(layer) + offset


def parent_index(layer: int, offset: int) -> int:
    """Flat index of the parent of (layer, offset). Undefined for the root."""
    return index(layer - 1, offset // 2)


def first_child_index(layer: int, offset: int) -> int:
    """Flat index of the left child of (layer, offset)."""
    return index(layer + 1, offset * 2)


def second_child_index(layer: int, offset: int) -> int:
    """Flat index of the right child of (layer, offset)."""
    return index(layer + 1, offset * 2 + 1)


def sibling_offset(offset: int) -> int:
    """Offset of the other child sharing this node's parent."""
    return offset ^ 1


def log2_floor(x: int) -> int:
    """
    Floor of log2(x) for non-negative integers.

    Returns 0 for x == 0 so that layer_offset(0) resolves to the root.
    """
    if x <= 0:
        return 0
    return x.bit_length() - 1


def layer_offset(node_index: int) -> tuple[int, int]:
    """
    Inverse of index(): return (layer, offset) for a flat index.

    Example:
        >>> layer_offset(5)
        (2, 2)
    """
    layer = log2_floor(node_index + 1)
    return layer, node_index - nodes_in_tree(layer)


__all__ = [
    "nodes_in_tree",
    "index",
    "parent_index",
    "first_child_index",
    "second_child_index",
    "sibling_offset",
    "log2_floor",
    "layer_offset",
]
