"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    arraymerkle demo [--depth N] [--offset K] [--json]
    arraymerkle bench [--depths 5 10 20] [--iterations N] [--fill-depth D] [--json]
    arraymerkle root --depth N [--initial HEX] [--pattern] [--set OFFSET=HEX ...]
    arraymerkle prove --depth N --offset K [--initial HEX] [--pattern] [--out PATH]
    arraymerkle verify <proof_path> [--root HEX] [--leaf HEX] [--strict] [--json]
    arraymerkle config --init | --show

Environment Variables:
    ARRAYMERKLE_LOG_LEVEL        Log level (default: INFO)
    ARRAYMERKLE_LOG_FILE         Also log to this file
    ARRAYMERKLE_OUTPUT_FORMAT    human or json
    ARRAYMERKLE_HASH_ALGORITHM   sha3_256 (default), sha256, blake2s
    ARRAYMERKLE_STRICT_PROOFS    Reject proofs whose length does not match the depth
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from arraymerkle import __version__
from arraymerkle.crypto.hashing import SUPPORTED_HASH_ALGORITHMS
from arraymerkle.schemas.errors import MerkleTreeException
from arraymerkle_cli.commands import bench, demo, tree, verify
from arraymerkle_cli.config import get_default_config_template, load_config


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def _add_tree_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--depth", "-d",
        type=int,
        required=True,
        help="Tree depth (layers including root and leaves)",
    )
    parser.add_argument(
        "--initial",
        type=str,
        default=None,
        help="Initial value of every leaf as 32-byte hex (default: all zero)",
    )
    parser.add_argument(
        "--pattern",
        action="store_true",
        default=False,
        help="Set leaf i to the byte i*0x11 repeated 32 times",
    )
    parser.add_argument(
        "--set",
        action="append",
        metavar="OFFSET=HEX",
        default=None,
        help="Set one leaf after construction (repeatable, applied in order)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        choices=SUPPORTED_HASH_ALGORITHMS,
        default=None,
        help="Hash algorithm (default: from config, sha3_256)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="arraymerkle",
        description="Fixed-depth Merkle tree CLI - build trees, create and verify inclusion proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./arraymerkle.json or ~/.config/arraymerkle/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- demo command ---
    demo_parser = subparsers.add_parser(
        "demo",
        help="Build a patterned tree and round-trip one proof",
        description="Construct, fill every leaf, prove one leaf and verify it against the root.",
    )
    demo_parser.add_argument("--depth", "-d", type=int, default=demo.DEMO_DEPTH, help="Tree depth (default: 5)")
    demo_parser.add_argument("--offset", type=int, default=demo.DEMO_OFFSET, help="Leaf to prove (default: 5)")
    demo_parser.add_argument(
        "--algorithm",
        type=str,
        choices=SUPPORTED_HASH_ALGORITHMS,
        default=None,
        help="Hash algorithm (default: from config, sha3_256)",
    )
    demo_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    demo_parser.set_defaults(func=demo.demo_cmd)

    # --- bench command ---
    bench_parser = subparsers.add_parser(
        "bench",
        help="Time construction, set, create_proof and verify_proof",
        description="Run the benchmark harness with the configured depths.",
    )
    bench_parser.add_argument(
        "--depths",
        type=int,
        nargs="+",
        default=None,
        help="Construction depths to time (default: from config, 5 10 20)",
    )
    bench_parser.add_argument("--iterations", "-n", type=int, default=None, help="Repetitions per benchmark")
    bench_parser.add_argument("--fill-depth", type=int, default=None, help="Depth of the filled tree")
    bench_parser.add_argument(
        "--algorithm",
        type=str,
        choices=SUPPORTED_HASH_ALGORITHMS,
        default=None,
        help="Hash algorithm (default: from config, sha3_256)",
    )
    bench_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    bench_parser.set_defaults(func=bench.bench_cmd)

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Print the root digest of a tree",
        description="Construct a tree, apply leaf assignments and print its root.",
    )
    _add_tree_arguments(root_parser)
    root_parser.set_defaults(func=tree.root_cmd)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Create an inclusion proof document",
        description="Construct a tree, apply leaf assignments and emit a JSON proof for one leaf.",
    )
    _add_tree_arguments(prove_parser)
    prove_parser.add_argument("--offset", type=int, required=True, help="Leaf to prove")
    prove_parser.add_argument("--out", "-o", type=str, default=None, help="Write the proof to this file")
    prove_parser.set_defaults(func=tree.prove_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify an inclusion proof document",
        description="Recompute the root from a leaf and proof and compare it with a trusted root.",
    )
    verify_parser.add_argument("proof_path", type=str, help="Path to proof JSON document")
    verify_parser.add_argument("--root", type=str, default=None, help="Trusted root as hex")
    verify_parser.add_argument("--leaf", type=str, default=None, help="Candidate leaf value as hex")
    verify_parser.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Reject proofs whose length does not match the document depth",
    )
    verify_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="arraymerkle.json",
        help="Path for config file (default: arraymerkle.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (ARRAYMERKLE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        config = args.cli_config
        config_dict = {
            "log_level": config.log_level,
            "log_file": config.log_file,
            "default_output_format": config.default_output_format,
            **config.runtime.to_dict(),
        }
        print(json.dumps(config_dict, indent=2))
        return EXIT_SUCCESS

    print("Usage: arraymerkle config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except MerkleTreeException as e:
        if getattr(args, "json", False):
            print(e.to_error_model().model_dump_json(indent=2))
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
