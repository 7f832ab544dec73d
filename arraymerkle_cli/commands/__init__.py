"""
CLI command modules.
"""

from arraymerkle_cli.commands import bench, demo, tree, verify

__all__ = ["bench", "demo", "tree", "verify"]
