"""
Runtime Configuration Module

Provides configuration loading and management for the Merkle tree engine.
"""

from .runtime import (
    BenchConfig,
    RuntimeConfig,
    TreeConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "BenchConfig",
    "RuntimeConfig",
    "TreeConfig",
    "get_default_config",
    "set_default_config",
]
