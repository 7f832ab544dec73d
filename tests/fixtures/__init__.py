"""
Test fixtures package for arraymerkle tests.

Provides factory functions and reference vectors:
- trees.py: patterned trees, distinct leaves, known roots and proofs

Usage:
    from fixtures import make_pattern_tree, PATTERN_DEPTH5_ROOT

    def test_something():
        tree = make_pattern_tree(depth=5)
        assert tree.root_hash() == PATTERN_DEPTH5_ROOT
"""

from .trees import (
    PATTERN_DEPTH5_PROOF_3,
    PATTERN_DEPTH5_ROOT,
    UNIFORM_AB_DEPTH20_ROOT,
    make_leaf,
    make_pattern_tree,
)

__all__ = [
    "PATTERN_DEPTH5_PROOF_3",
    "PATTERN_DEPTH5_ROOT",
    "UNIFORM_AB_DEPTH20_ROOT",
    "make_leaf",
    "make_pattern_tree",
]
