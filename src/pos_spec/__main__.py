"""
Proof-of-stake chain simulator CLI entry point.

Builds a chain with a genesis block, registers validators, then runs a
number of rounds. Each round selects a leader in proportion to stake,
credits it the block reward, and has it produce the next block.

Usage::

    python -m pos_spec
    python -m pos_spec --rounds 10 --seed 7 --stake 60 --stake 40
    python -m pos_spec --genesis genesis.yaml --json

Options:
    --genesis    Path to genesis YAML file (overrides --stake and --seed)
    --rounds     Number of blocks to produce (default: 4)
    --stake      Starting stake of a validator (repeatable, default: 60 and 40)
    --seed       Seed for the random source (default: OS entropy)
    --json       Print the chain as JSON instead of text
    --metrics    Print Prometheus metrics after the run
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from pos_spec.subspecs.genesis import GenesisConfig
from pos_spec.subspecs.metrics import generate_metrics
from pos_spec.subspecs.network import PoSNetwork
from pos_spec.types import PoSError

DEFAULT_STAKES = [60, 40]
"""Validator stakes used when neither --stake nor --genesis is given."""

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """
    Compact log formatter for simulator runs.

    Lines look like ``12:00:01.250 [WRN] pos_spec.subspecs.network | message``.
    With color on, the level tag is colored, and so is the message of
    warnings and errors, so penalties stand out among the round reports.
    """

    RESET = "\x1b[0m"
    DIM = "\x1b[2m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    BOLD_RED = "\x1b[1;31m"

    LEVEL_STYLES: dict[int, tuple[str, str]] = {
        logging.DEBUG: ("DBG", DIM),
        logging.INFO: ("INF", GREEN),
        logging.WARNING: ("WRN", YELLOW),
        logging.ERROR: ("ERR", RED),
        logging.CRITICAL: ("CRT", BOLD_RED),
    }

    def __init__(self, use_color: bool | None = None) -> None:
        super().__init__(datefmt="%H:%M:%S")
        self.use_color = sys.stderr.isatty() if use_color is None else use_color

    def format(self, record: logging.LogRecord) -> str:
        tag, color = self.LEVEL_STYLES.get(record.levelno, (record.levelname[:3], ""))
        stamp = f"{self.formatTime(record, self.datefmt)}.{int(record.msecs):03d}"

        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        if not self.use_color:
            return f"{stamp} [{tag}] {record.name} | {message}"
        if record.levelno >= logging.WARNING:
            message = f"{color}{message}{self.RESET}"
        return f"{self.DIM}{stamp}{self.RESET} {color}[{tag}]{self.RESET} {record.name} | {message}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """
    Send log records to stderr through a `ColoredFormatter`.

    Calling this again replaces the handler installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColoredFormatter(use_color=False if no_color else None))

    root = logging.getLogger()
    for old in [h for h in root.handlers if isinstance(h.formatter, ColoredFormatter)]:
        root.removeHandler(old)
    root.setLevel(level)
    root.addHandler(handler)


def build_network(
    genesis_path: Path | None,
    stakes: list[int] | None,
    seed: int | None,
) -> PoSNetwork:
    """
    Create the network from a genesis file, or from command line stakes.

    Args:
        genesis_path: Optional path to a genesis YAML file.
        stakes: Starting stakes when no genesis file is given.
        seed: Random seed when no genesis file is given.
    """
    if genesis_path is not None:
        logger.info("Loading genesis from %s", genesis_path)
        genesis = GenesisConfig.from_yaml_file(genesis_path)
    else:
        genesis = GenesisConfig(
            validator_stakes=stakes or DEFAULT_STAKES,
            seed=seed,
        )
    return genesis.create_network()


def run_rounds(network: PoSNetwork, rounds: int) -> None:
    """
    Produce `rounds` blocks: select, reward, then generate.

    Stops at the first error.

    Raises:
        PoSError: From leader selection or block admission.
    """
    for round_number in range(rounds):
        winner = network.select_leader()
        network.reward(winner)
        network.generate_new_block(winner)

        logger.info("Round %d", round_number)
        for validator in network.validators:
            logger.info("\tAddress: %s - Stake: %d", validator.address, validator.stake)


def print_chain(network: PoSNetwork, as_json: bool) -> None:
    """Write the chain to stdout."""
    if as_json:
        print(json.dumps([block.to_json() for block in network.blocks], indent=2))
    else:
        print(network.describe())


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = argparse.ArgumentParser(
        description="Proof-of-stake chain simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--genesis",
        type=Path,
        default=None,
        help="Path to genesis YAML file",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=4,
        help="Number of blocks to produce (default: 4)",
    )
    parser.add_argument(
        "--stake",
        type=int,
        action="append",
        default=None,
        dest="stakes",
        help="Starting stake of a validator (can be repeated, default: 60 and 40)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random source (default: OS entropy)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the chain as JSON",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Print Prometheus metrics after the run",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    args = parser.parse_args(argv)
    if args.rounds < 0:
        parser.error("--rounds must not be negative")

    setup_logging(args.verbose, args.no_color)

    try:
        network = build_network(args.genesis, args.stakes, args.seed)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        logger.error("Cannot load genesis: %s", e)
        return 1

    try:
        run_rounds(network, args.rounds)
    except PoSError as e:
        logger.error("%s", e)
        return 1
    finally:
        network.record_metrics()

    print_chain(network, args.json)
    if args.metrics:
        sys.stdout.write(generate_metrics().decode())
    return 0


if __name__ == "__main__":
    sys.exit(main())
