"""Command-line interface for Distant Start.

Reads a snapshot file, rebalances the human starting positions and
prints (optionally writes) the result.
"""

# Distant Start
# Copyright (C) 2025  Distant Start developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import logging
import sys
from typing import List, Optional

from distantstart.compatibility.snapshot import load_snapshot, save_snapshot
from distantstart.constants import SEPARATOR_LINE
from distantstart.controllers.start_balancer import StartBalancer
from distantstart.exceptions import (
    DistantStartException,
    FileLoadException,
    InvalidConfigurationException,
)
from distantstart.models.config import BalancerConfig
from distantstart.models.result import BalanceResult
from distantstart.utils import set_log_level, setup_logger
from distantstart.utils.validation import validate_participants

logger = setup_logger(__name__)


def positive_cap(value: str) -> int:
    """Parse a participant or human cap (integer, at least 2).

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer >= 2
    """
    try:
        cap = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid cap '{value}'. Must be an integer")
    if cap < 2:
        raise argparse.ArgumentTypeError(f"Cap must be at least 2, got {cap}")
    return cap


def load_configuration(config_file: Optional[str]) -> Optional[dict]:
    """Load configuration from JSON file.

    Args:
        config_file: Path to configuration file

    Returns:
        Configuration dictionary or None

    Raises:
        FileLoadException: If the file cannot be read
    """
    if not config_file:
        return None

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Cannot read configuration {config_file}: {e}") from e

    logger.info("Loaded configuration from %s", config_file)
    return config


def build_config(args: argparse.Namespace) -> BalancerConfig:
    """Merge the optional config file with command-line overrides."""
    data = load_configuration(args.config)
    if data is None:
        data = {}
    elif not isinstance(data, dict):
        raise InvalidConfigurationException(
            f"Configuration file {args.config} must contain a JSON object"
        )
    if args.max_participants is not None:
        data["max_participants"] = args.max_participants
    if args.max_humans is not None:
        data["max_humans"] = args.max_humans
    if args.dry_run:
        data["dry_run"] = True
    return BalancerConfig.from_dict(data)


def format_result(result: BalanceResult) -> str:
    """Render a balance result as plain text."""
    lines = [SEPARATOR_LINE, f"Outcome: {result.outcome}", result.message]
    lines.append(f"Participants: {result.human_count} human, {result.ai_count} AI")

    if result.winning_combination is not None:
        positions = ", ".join(str(p.position_id) for p in result.winning_combination)
        lines.append(f"Most distant starting positions: {positions}")

    for participant in result.already_placed:
        lines.append(f"Already placed: {participant.name} @ {participant.position_id}")

    for instruction in result.instructions:
        lines.append(
            f"Swap: {instruction.human.name} <-> {instruction.other.name} "
            f"({result.initial_positions[instruction.human.id]} <-> "
            f"{result.initial_positions[instruction.other.id]})"
        )
    lines.append(SEPARATOR_LINE)
    return "\n".join(lines)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="distant-start",
        description="Move human participants onto the most distant starting positions",
    )
    parser.add_argument("snapshot", help="Snapshot file (JSON)")
    parser.add_argument("--output", help="Write the rebalanced snapshot to this file")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Plan swaps without applying them",
    )
    parser.add_argument(
        "--max-participants",
        type=positive_cap,
        default=None,
        help="Largest supported participant count (default: 12)",
    )
    parser.add_argument(
        "--max-humans",
        type=positive_cap,
        default=None,
        help="Largest supported human count (default: no limit)",
    )
    parser.add_argument("--config", help="Configuration file (JSON)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of text",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log decisions (-v for info, -vv for debug)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose >= 2:
        set_log_level(logging.DEBUG)
    elif args.verbose == 1:
        set_log_level(logging.INFO)

    try:
        config = build_config(args)
        participants, oracle, map_spec = load_snapshot(args.snapshot)
    except (FileLoadException, InvalidConfigurationException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    validation = validate_participants(participants)
    if validation and len(participants) <= config.max_participants:
        validation = validate_participants(participants, oracle)
    if not validation:
        print(f"Error: invalid snapshot: {validation.error_message}", file=sys.stderr)
        return 1

    try:
        result = StartBalancer(oracle, config).balance(participants)
        if args.output:
            save_snapshot(args.output, participants, map_spec)
    except DistantStartException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
