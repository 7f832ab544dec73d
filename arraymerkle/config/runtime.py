"""
Runtime Configuration

Central configuration for tree construction defaults, proof verification
policy and the benchmark harness.
"""

from __future__ import annotations

import copy
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from arraymerkle.crypto.hashing import DEFAULT_HASH_ALGORITHM, get_pair_hasher

load_dotenv()


ENV_PREFIX = "ARRAYMERKLE_"


@dataclass
class TreeConfig:
    """Defaults applied when trees and verifiers are built from config."""
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    max_depth: int = 32
    strict_proof_length: bool = False

    def __post_init__(self):
        # Fail at load time rather than on first tree construction
        get_pair_hasher(self.hash_algorithm)


@dataclass
class BenchConfig:
    """Configuration for the benchmark harness."""
    depths: list[int] = field(default_factory=lambda: [5, 10, 20])
    iterations: int = 20
    fill_depth: int = 20


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables (and a .env file)
    - JSON file
    - Programmatic construction
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    bench: BenchConfig = field(default_factory=BenchConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - ARRAYMERKLE_HASH_ALGORITHM: Hash algorithm name
        - ARRAYMERKLE_MAX_DEPTH: Largest accepted tree depth
        - ARRAYMERKLE_STRICT_PROOFS: Reject mismatched-length proofs (true/false)
        - ARRAYMERKLE_BENCH_ITERATIONS: Timed repetitions per benchmark
        - ARRAYMERKLE_BENCH_DEPTHS: Comma-separated construction depths
        - ARRAYMERKLE_BENCH_FILL_DEPTH: Depth of the filled benchmark tree
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM"):
            overrides.setdefault("tree", {})["hash_algorithm"] = os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM")
        if os.getenv(f"{ENV_PREFIX}MAX_DEPTH"):
            overrides.setdefault("tree", {})["max_depth"] = int(os.getenv(f"{ENV_PREFIX}MAX_DEPTH"))
        if os.getenv(f"{ENV_PREFIX}STRICT_PROOFS"):
            overrides.setdefault("tree", {})["strict_proof_length"] = (
                os.getenv(f"{ENV_PREFIX}STRICT_PROOFS", "false").lower() == "true"
            )

        if os.getenv(f"{ENV_PREFIX}BENCH_ITERATIONS"):
            overrides.setdefault("bench", {})["iterations"] = int(os.getenv(f"{ENV_PREFIX}BENCH_ITERATIONS"))
        if os.getenv(f"{ENV_PREFIX}BENCH_DEPTHS"):
            overrides.setdefault("bench", {})["depths"] = [
                int(d) for d in os.getenv(f"{ENV_PREFIX}BENCH_DEPTHS").split(",") if d.strip()
            ]
        if os.getenv(f"{ENV_PREFIX}BENCH_FILL_DEPTH"):
            overrides.setdefault("bench", {})["fill_depth"] = int(os.getenv(f"{ENV_PREFIX}BENCH_FILL_DEPTH"))

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_json(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        tree_data = data.get("tree", {})
        bench_data = data.get("bench", {})

        tree = TreeConfig(**tree_data) if tree_data else TreeConfig()
        bench = BenchConfig(**bench_data) if bench_data else BenchConfig()

        return cls(
            tree=tree,
            bench=bench,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "tree" in overrides:
            for key, value in overrides["tree"].items():
                setattr(new_config.tree, key, value)
            get_pair_hasher(new_config.tree.hash_algorithm)

        if "bench" in overrides:
            for key, value in overrides["bench"].items():
                setattr(new_config.bench, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "tree": {
                "hash_algorithm": self.tree.hash_algorithm,
                "max_depth": self.tree.max_depth,
                "strict_proof_length": self.tree.strict_proof_length,
            },
            "bench": {
                "depths": list(self.bench.depths),
                "iterations": self.bench.iterations,
                "fill_depth": self.bench.fill_depth,
            },
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: RuntimeConfig | None) -> None:
    """Set (or with None, reset) the default runtime configuration."""
    global _default_config
    _default_config = config
