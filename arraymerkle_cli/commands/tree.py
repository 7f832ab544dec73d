"""
CLI Tree Commands

Build a tree from command-line arguments and print its root or a proof.

Usage:
    arraymerkle root --depth 20 --initial abab...ab
    arraymerkle root --depth 5 --pattern
    arraymerkle prove --depth 5 --pattern --offset 3 [--out proof.json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from arraymerkle.config.runtime import RuntimeConfig
from arraymerkle.crypto.hashing import digest_from_hex, repeat_byte, to_hex
from arraymerkle.merkle import MerkleProver, MerkleTree
from arraymerkle.schemas.errors import ConfigurationException


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def parse_assignment(text: str) -> tuple[int, bytes]:
    """
    Parse an OFFSET=HEX leaf assignment.

    Raises:
        ConfigurationException: If the text is not OFFSET=HEX
        DigestFormatException: If HEX is not a 32-byte digest
    """
    offset_text, sep, value_text = text.partition("=")
    if not sep:
        raise ConfigurationException(
            f"Leaf assignment must look like OFFSET=HEX, got {text!r}",
            parameter="set",
        )
    try:
        offset = int(offset_text, 0)
    except ValueError:
        raise ConfigurationException(
            f"Leaf offset must be an integer, got {offset_text!r}",
            parameter="set",
        ) from None
    return offset, digest_from_hex(value_text)


def build_tree(args: Namespace, runtime: RuntimeConfig) -> MerkleTree:
    """
    Construct a tree from --depth/--initial/--algorithm, then apply
    --pattern (leaf i = i * 0x11 repeated) and --set assignments in order.
    """
    initial = digest_from_hex(args.initial) if args.initial else bytes(32)
    algorithm = args.algorithm or runtime.tree.hash_algorithm

    tree = MerkleTree(
        args.depth,
        initial,
        hash_algorithm=algorithm,
        max_depth=runtime.tree.max_depth,
    )

    if getattr(args, "pattern", False):
        logger.info(f"Filling {tree.num_leaves()} leaves with the i*0x11 pattern")
        for i in range(tree.num_leaves()):
            tree.set(i, repeat_byte(i * 0x11))

    for assignment in getattr(args, "set", None) or []:
        offset, value = parse_assignment(assignment)
        tree.set(offset, value)

    return tree


def _wants_json(args: Namespace) -> bool:
    if getattr(args, "json", False):
        return True
    cli_config = getattr(args, "cli_config", None)
    return cli_config is not None and cli_config.default_output_format == "json"


def _runtime(args: Namespace) -> RuntimeConfig:
    cli_config = getattr(args, "cli_config", None)
    return cli_config.runtime if cli_config is not None else RuntimeConfig()


def root_cmd(args: Namespace) -> int:
    """Execute the root command."""
    tree = build_tree(args, _runtime(args))

    if _wants_json(args):
        print(json.dumps({
            "depth": tree.depth,
            "hash_algorithm": tree.hash_algorithm,
            "num_leaves": tree.num_leaves(),
            "root": to_hex(tree.root_hash()),
        }, indent=2))
    else:
        print(tree.root_hash().hex())

    return EXIT_SUCCESS


def prove_cmd(args: Namespace) -> int:
    """Execute the prove command."""
    tree = build_tree(args, _runtime(args))
    document = MerkleProver.prove_document(tree, args.offset)
    payload = document.model_dump_json(indent=2)

    if args.out:
        out_path = Path(args.out)
        out_path.write_text(payload + "\n")
        logger.info(f"Wrote proof for leaf {args.offset} to {out_path}")
        if not _wants_json(args):
            print(f"Proof written to {out_path} ({len(document.steps)} steps)", file=sys.stderr)
    else:
        print(payload)

    return EXIT_SUCCESS
