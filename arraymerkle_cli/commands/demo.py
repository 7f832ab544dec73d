"""
CLI Demo Command

Smoke test of the public contract:
construct -> fill every leaf -> create one proof -> verify it against the root.

Leaf i is set to the byte (i * 0x11) repeated 32 times; with the defaults
(depth 5, zero initial leaves, SHA3-256) the resulting root is
57054e43fa56333fd51343b09460d48b9204999c376624f52480c5593b91eff4.

Usage:
    arraymerkle demo [--depth 5] [--offset 5] [--json]
"""

from __future__ import annotations

import hmac
import json
import logging
from argparse import Namespace
from dataclasses import asdict, dataclass

from arraymerkle.crypto.hashing import DEFAULT_HASH_ALGORITHM, repeat_byte, to_hex
from arraymerkle.merkle import MerkleTree, verify_proof


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_VERIFICATION_FAILED = 2

DEMO_DEPTH = 5
DEMO_OFFSET = 5


@dataclass
class DemoSummary:
    """Outcome of a demo run."""
    depth: int
    offset: int
    hash_algorithm: str
    root: str
    computed_root: str
    proof_length: int

    @property
    def ok(self) -> bool:
        return self.root == self.computed_root

    def to_dict(self) -> dict:
        d = asdict(self)
        d["ok"] = self.ok
        return d


def run_demo(
    depth: int = DEMO_DEPTH,
    offset: int = DEMO_OFFSET,
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> DemoSummary:
    tree = MerkleTree(depth, bytes(32), hash_algorithm=hash_algorithm)
    for i in range(tree.num_leaves()):
        tree.set(i, repeat_byte(i * 0x11))

    leaf = repeat_byte(offset * 0x11)
    root = tree.root_hash()
    proof = tree.create_proof(offset)
    computed = verify_proof(leaf, proof, hash_algorithm)

    if not hmac.compare_digest(computed, root):
        logger.error(f"Demo proof for leaf {offset} did not reproduce the root")

    return DemoSummary(
        depth=depth,
        offset=offset,
        hash_algorithm=hash_algorithm,
        root=to_hex(root),
        computed_root=to_hex(computed),
        proof_length=len(proof),
    )


def demo_cmd(args: Namespace) -> int:
    """Execute the demo command."""
    cli_config = getattr(args, "cli_config", None)
    algorithm = args.algorithm or (
        cli_config.runtime.tree.hash_algorithm if cli_config else DEFAULT_HASH_ALGORITHM
    )

    summary = run_demo(depth=args.depth, offset=args.offset, hash_algorithm=algorithm)

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        status = "OK" if summary.ok else "MISMATCH"
        print(f"depth:         {summary.depth} ({1 << (summary.depth - 1)} leaves)")
        print(f"algorithm:     {summary.hash_algorithm}")
        print(f"root:          {summary.root}")
        print(f"proof leaf:    {summary.offset} ({summary.proof_length} steps)")
        print(f"computed root: {summary.computed_root}")
        print(f"result:        {status}")

    return EXIT_SUCCESS if summary.ok else EXIT_VERIFICATION_FAILED
