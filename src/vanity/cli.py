"""Command-line interface for CREATE2 address prediction and vanity salt search."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Optional

from eth_utils import to_checksum_address

from vanity.config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PROGRESS_INTERVAL,
    SearchConfig,
)
from vanity.core.create2 import (
    compute_create2_address_with_code_hash,
    compute_create_address,
)
from vanity.core.crypto import keccak256
from vanity.core.errors import SearchExhausted, VanityError
from vanity.core.types import normalize_prefix, to_address, to_hash32, to_hex
from vanity.deploy.encoding import build_init_code
from vanity.search.salts import generate_salt
from vanity.search.searcher import search_vanity_salt


logger = logging.getLogger("vanity")


def _add_code_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--init-code-hash", help="keccak256 of the init code (hex)")
    group.add_argument("--init-code", help="Full init code: bytecode ++ constructor args (hex)")


def _init_code_hash(args: argparse.Namespace) -> bytes:
    if args.init_code_hash is not None:
        return to_hash32(args.init_code_hash)
    return keccak256(build_init_code(args.init_code))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vanity",
        description="CREATE2 address prediction and vanity salt search",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    derive = sub.add_parser("derive", help="Predict a CREATE2 address")
    derive.add_argument("--deployer", required=True, help="Factory address")
    derive.add_argument("--salt", required=True, help="32-byte salt (hex)")
    _add_code_args(derive)

    salt = sub.add_parser("salt", help="Print the salt for a counter value")
    salt.add_argument("--index", type=int, required=True, help="Counter value")

    search = sub.add_parser("search", help="Search a salt for a vanity prefix")
    search.add_argument("--deployer", required=True, help="Factory address")
    search.add_argument("--prefix", required=True, help="Wanted hex prefix (0x optional)")
    _add_code_args(search)
    search.add_argument(
        "--max-iterations",
        type=int,
        default=DEFAULT_MAX_ITERATIONS,
        help=f"Salts to try (default: {DEFAULT_MAX_ITERATIONS:,})",
    )
    search.add_argument("--start", type=int, default=0, help="First counter value (default: 0)")
    search.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes; more than 1 enables parallel search (default: 1)",
    )
    search.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Counters per parallel task (default: {DEFAULT_CHUNK_SIZE:,})",
    )
    search.add_argument(
        "--progress-interval",
        type=int,
        default=DEFAULT_PROGRESS_INTERVAL,
        help=f"Report progress every N salts (default: {DEFAULT_PROGRESS_INTERVAL:,})",
    )

    create = sub.add_parser("create-address", help="Predict a plain CREATE address")
    create.add_argument("--deployer", required=True, help="Sender address")
    create.add_argument("--nonce", type=int, required=True, help="Sender nonce")

    return parser


def cmd_derive(args: argparse.Namespace) -> None:
    address = compute_create2_address_with_code_hash(
        to_address(args.deployer), to_hash32(args.salt), _init_code_hash(args)
    )
    print(to_checksum_address(address))


def cmd_salt(args: argparse.Namespace) -> None:
    print(to_hex(generate_salt(args.index)))


def cmd_search(args: argparse.Namespace) -> None:
    config = SearchConfig(
        max_iterations=args.max_iterations,
        progress_interval=args.progress_interval,
        start=args.start,
        workers=args.workers,
        chunk_size=args.chunk_size,
    ).validate()
    prefix = normalize_prefix(args.prefix)

    logger.info("Mining for vanity address starting with 0x%s...", prefix)
    logger.info("Expected attempts: ~%s", f"{16 ** len(prefix):,}")
    started = time.monotonic()
    result = search_vanity_salt(
        args.deployer,
        _init_code_hash(args),
        prefix,
        config,
        progress=lambda checked: logger.info("  Checked %s salts...", f"{checked:,}"),
    )
    if result is None:
        raise SearchExhausted(prefix, config.max_iterations)

    logger.info("Found after %.1fs", time.monotonic() - started)
    print(f"salt:    {result.salt_hex}")
    print(f"address: {result.checksum_address}")
    print(f"index:   {result.index}")


def cmd_create_address(args: argparse.Namespace) -> None:
    print(to_checksum_address(compute_create_address(to_address(args.deployer), args.nonce)))


COMMANDS = {
    "derive": cmd_derive,
    "salt": cmd_salt,
    "search": cmd_search,
    "create-address": cmd_create_address,
}


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        COMMANDS[args.command](args)
    except VanityError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
