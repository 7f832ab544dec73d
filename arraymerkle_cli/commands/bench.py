"""
CLI Bench Command

Times the public tree operations:
- construction at each configured depth (default 5, 10, 20)
- set() on a filled tree
- create_proof() on a filled tree
- verify_proof() on a proof from a filled tree

The filled tree has depth `fill_depth` (default 20) with leaf i set to
(i * 0x11) repeated; building it calls set() once per leaf, so it takes
a while at depth 20.

Usage:
    arraymerkle bench [--depths 5 10 20] [--iterations N] [--fill-depth D] [--json]
"""

from __future__ import annotations

import json
import logging
import time
from argparse import Namespace
from dataclasses import asdict, dataclass
from typing import Any, Callable

from arraymerkle.config.runtime import BenchConfig
from arraymerkle.crypto.hashing import DEFAULT_HASH_ALGORITHM, repeat_byte
from arraymerkle.merkle import MerkleTree, verify_proof


logger = logging.getLogger(__name__)


EXIT_SUCCESS = 0


@dataclass
class BenchResult:
    """Timing of one benchmarked operation."""
    name: str
    iterations: int
    total_s: float
    mean_us: float
    min_us: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def time_call(name: str, fn: Callable[[], Any], iterations: int) -> BenchResult:
    """Call `fn` `iterations` times and record wall-clock timings."""
    samples: list[float] = []
    for _ in range(iterations):
        start = time.perf_counter()
        fn()
        samples.append(time.perf_counter() - start)
    total = sum(samples)
    return BenchResult(
        name=name,
        iterations=iterations,
        total_s=total,
        mean_us=total / iterations * 1e6,
        min_us=min(samples) * 1e6,
    )


def build_filled_tree(depth: int, hash_algorithm: str = DEFAULT_HASH_ALGORITHM) -> MerkleTree:
    tree = MerkleTree(depth, bytes(32), hash_algorithm=hash_algorithm)
    for i in range(tree.num_leaves()):
        tree.set(i, repeat_byte(i * 0x11))
    return tree


def run_benchmarks(
    bench: BenchConfig,
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> list[BenchResult]:
    """Run every benchmark and return results in execution order."""
    results: list[BenchResult] = []
    iterations = max(1, bench.iterations)
    zero = bytes(32)

    for depth in bench.depths:
        logger.info(f"Timing construction at depth {depth}")
        results.append(time_call(
            f"initialization_{depth}",
            lambda depth=depth: MerkleTree(depth, zero, hash_algorithm=hash_algorithm),
            iterations,
        ))

    logger.info(f"Filling depth-{bench.fill_depth} tree for set/proof benchmarks")
    start = time.perf_counter()
    filled = build_filled_tree(bench.fill_depth, hash_algorithm)
    logger.info(f"Filled {filled.num_leaves()} leaves in {time.perf_counter() - start:.2f}s")

    # Offset 5 as in the demo, clamped for very shallow trees
    offset = min(5, filled.num_leaves() - 1)
    updated = repeat_byte(0x11)
    results.append(time_call("set", lambda: filled.set(offset, updated), iterations))

    # set() above changed the leaf; restore the pattern before proving it
    leaf = repeat_byte(offset * 0x11)
    filled.set(offset, leaf)
    results.append(time_call("create_proof", lambda: filled.create_proof(offset), iterations))

    proof = filled.create_proof(offset)
    results.append(time_call(
        "verify_proof",
        lambda: verify_proof(leaf, proof, hash_algorithm),
        iterations,
    ))

    return results


def bench_cmd(args: Namespace) -> int:
    """Execute the bench command."""
    cli_config = getattr(args, "cli_config", None)
    bench = BenchConfig(**asdict(cli_config.runtime.bench)) if cli_config else BenchConfig()
    if args.depths:
        bench.depths = list(args.depths)
    if args.iterations is not None:
        bench.iterations = args.iterations
    if args.fill_depth is not None:
        bench.fill_depth = args.fill_depth

    algorithm = args.algorithm or (
        cli_config.runtime.tree.hash_algorithm if cli_config else DEFAULT_HASH_ALGORITHM
    )

    results = run_benchmarks(bench, algorithm)

    if args.json:
        print(json.dumps({
            "hash_algorithm": algorithm,
            "results": [r.to_dict() for r in results],
        }, indent=2))
    else:
        print(f"{'benchmark':<22} {'iters':>6} {'mean (us)':>14} {'min (us)':>14}")
        for r in results:
            print(f"{r.name:<22} {r.iterations:>6} {r.mean_us:>14.2f} {r.min_us:>14.2f}")

    return EXIT_SUCCESS
