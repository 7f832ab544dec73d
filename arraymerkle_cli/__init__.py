"""
arraymerkle CLI

Command-line interface for fixed-depth Merkle trees.

Usage:
    python -m arraymerkle_cli demo
    python -m arraymerkle_cli root --depth 20 --initial abab...ab
    python -m arraymerkle_cli prove --depth 5 --pattern --offset 3 --out proof.json
    python -m arraymerkle_cli verify proof.json --root <hex>
    python -m arraymerkle_cli bench
"""

__version__ = "0.1.0"
