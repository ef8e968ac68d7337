#!/usr/bin/env python3
"""Inspect and validate EVM module parameters.

Prints the default parameter set, or the one in a genesis file, and checks
it with the same validation every node runs before accepting it.

Usage:
    python show_params.py
    python show_params.py --genesis genesis.json --format json
    python show_params.py --write-default genesis.json
"""

import argparse
import logging
import sys
from pathlib import Path

from src.genesis import default_genesis, genesis_from_json, genesis_to_json
from src.params import params_hash, params_to_json, params_to_yaml, validate_params

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show and validate EVM module parameters"
    )
    parser.add_argument(
        "--genesis",
        type=str,
        default=None,
        help="Path to a genesis JSON file with a 'params' section",
    )
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml)",
    )
    parser.add_argument(
        "--write-default",
        type=str,
        default=None,
        metavar="PATH",
        help="Write the default genesis params to PATH and exit",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.write_default:
        out_path = Path(args.write_default)
        out_path.write_text(genesis_to_json(default_genesis()) + "\n")
        print(f"Default genesis params written to {out_path}")
        return 0

    if args.genesis:
        genesis_path = Path(args.genesis)
        if not genesis_path.exists():
            print(f"Error: genesis file not found: {genesis_path}", file=sys.stderr)
            return 1
        try:
            state = genesis_from_json(genesis_path.read_text())
        except Exception:
            log.exception("Could not parse %s", genesis_path)
            return 1
        params = state.params
    else:
        params = default_genesis().params

    if args.format == "json":
        print(params_to_json(params))
    else:
        print(params_to_yaml(params), end="")
    print(f"Params hash: {params_hash(params)}")

    try:
        validate_params(params)
    except ValueError as exc:
        print(f"INVALID: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    print("Params are valid.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
