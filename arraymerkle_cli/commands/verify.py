"""
CLI Verify Command

Verify an inclusion proof document against a trusted root, offline.
No tree is needed: the leaf value and proof recompute a root which is
compared with the root given on the command line.

Usage:
    arraymerkle verify proof.json --root HEX [--leaf HEX] [--strict] [--json]
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from arraymerkle.crypto.hashing import digest_from_hex, to_hex
from arraymerkle.merkle import MerkleVerifier
from arraymerkle.schemas.errors import ConfigurationException
from arraymerkle.schemas.proof import InclusionProof


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class VerifySummary:
    """Summary of proof verification for CLI output."""
    proof_path: str = ""
    hash_algorithm: str = ""
    depth: int = 0
    offset: int = 0
    strict: bool = False
    expected_root: str = ""
    computed_root: str = ""

    @property
    def ok(self) -> bool:
        return self.expected_root == self.computed_root

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["ok"] = self.ok
        return d


def load_proof(path: Path) -> InclusionProof:
    """Load and validate an InclusionProof JSON document."""
    if not path.exists():
        raise FileNotFoundError(f"Proof file not found: {path}")
    return InclusionProof.model_validate_json(path.read_text())


def verify_cmd(args: Namespace) -> int:
    """Execute the verify command."""
    proof_path = Path(args.proof_path)
    document = load_proof(proof_path)

    cli_config = getattr(args, "cli_config", None)
    strict = args.strict or bool(cli_config and cli_config.runtime.tree.strict_proof_length)

    leaf = digest_from_hex(args.leaf) if args.leaf else document.leaf_bytes
    if leaf is None:
        raise ConfigurationException(
            "No leaf value: pass --leaf or use a proof document that embeds one",
            parameter="leaf",
        )

    if args.root:
        root = digest_from_hex(args.root)
    else:
        root = document.root_bytes
        if root is None:
            raise ConfigurationException(
                "No root: pass --root or use a proof document that embeds one",
                parameter="root",
            )
        logger.warning("No --root given; checking against the root embedded in the proof document")

    verifier = MerkleVerifier(
        hash_algorithm=document.hash_algorithm,
        strict=strict,
        depth=document.depth,
    )
    computed = verifier.compute_root(leaf, document.to_pairs())

    summary = VerifySummary(
        proof_path=str(proof_path),
        hash_algorithm=document.hash_algorithm,
        depth=document.depth,
        offset=document.offset,
        strict=strict,
        expected_root=to_hex(root),
        computed_root=to_hex(computed),
    )

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(f"proof:         {summary.proof_path} (leaf {summary.offset}, depth {summary.depth})")
        print(f"expected root: {summary.expected_root}")
        print(f"computed root: {summary.computed_root}")
        print(f"result:        {'VERIFIED' if summary.ok else 'FAILED'}")

    return EXIT_SUCCESS if summary.ok else EXIT_VERIFICATION_FAILED
