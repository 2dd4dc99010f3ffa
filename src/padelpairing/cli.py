#!/usr/bin/env python3
"""
Command line interface for generating padel session schedules.

Usage:
    padel-schedule --players 30 --seed 7
    padel-schedule --roster names.txt --start-time 18:00 --format csv --output evening.csv
"""

# Padel Pairing
# Copyright (C) 2025  Padel Pairing developers
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
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence

from padelpairing.constants import APP_NAME, SUPPORTED_ROSTER_SIZES
from padelpairing.controllers.session import (
    check_roster,
    generate_schedule,
    preset_config,
)
from padelpairing.exceptions import (
    ConfigurationException,
    ExportException,
    GenerationExhaustedException,
    InvalidConfigurationException,
)
from padelpairing.export import export_schedule_csv, schedule_to_csv
from padelpairing.models.session import Schedule, SessionConfig
from padelpairing.utils import set_log_level, setup_logger
from padelpairing.utils.print import format_schedule
from padelpairing.validation import summarize_fairness

logger = setup_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_EXHAUSTED = 3
EXIT_INTERRUPTED = 130


def positive_int(value: str) -> int:
    """argparse type for integers of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"Value must be at least 1, got {number}")
    return number


def load_roster(path: Path) -> List[str]:
    """Read one player name per line, skipping blank lines.

    Names are kept exactly as written apart from surrounding whitespace.
    """
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def numbered_roster(count: int) -> List[str]:
    return [f"Player {i}" for i in range(1, count + 1)]


def load_config(path: Path) -> SessionConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigurationException(f"Invalid JSON in {path}: {e}") from e
    return SessionConfig.from_dict(data)


def build_config(args: argparse.Namespace, roster: Sequence[str]) -> SessionConfig:
    """Preset (or JSON) configuration with command line overrides applied."""
    if args.config:
        config = load_config(Path(args.config))
    else:
        config = preset_config(len(roster))

    overrides = {
        "start_time": args.start_time,
        "slot_minutes": args.slot_minutes,
        "max_attempts": args.max_attempts,
        "max_restarts": args.max_restarts,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
    if args.no_emergency_pairing:
        config = replace(config, emergency_from_slot=None)
    return config


def render(schedule: Schedule, output_format: str) -> str:
    if output_format == "csv":
        return schedule_to_csv(schedule)
    if output_format == "json":
        data = schedule.to_dict()
        data["fairness"] = summarize_fairness(schedule).to_dict()
        return json.dumps(data, indent=2) + "\n"
    return format_schedule(schedule, summarize_fairness(schedule))


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="padel-schedule",
        description=f"{APP_NAME}: generate a fair doubles schedule for a session",
    )

    roster_group = parser.add_mutually_exclusive_group(required=True)
    roster_group.add_argument(
        "--roster", help="Text file with one player name per line"
    )
    roster_group.add_argument(
        "--players",
        type=positive_int,
        help="Generate a numbered roster of this size "
        f"(presets: {', '.join(str(s) for s in SUPPORTED_ROSTER_SIZES)})",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument(
        "--config", help="Session configuration JSON file (overrides the preset)"
    )
    parser.add_argument(
        "--start-time", help="Clock time of the first slot, e.g. 18:00"
    )
    parser.add_argument(
        "--slot-minutes", type=positive_int, help="Length of a slot in minutes"
    )
    parser.add_argument(
        "--max-attempts", type=positive_int, help="Attempt budget per slot"
    )
    parser.add_argument(
        "--max-restarts",
        type=int,
        help="Full-schedule restarts allowed when a slot cannot be built",
    )
    parser.add_argument(
        "--no-emergency-pairing",
        action="store_true",
        help="Score every slot, also those the preset pairs at random",
    )

    parser.add_argument(
        "--format",
        choices=["text", "csv", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument("--output", help="Write to this file instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser


def run(args: argparse.Namespace) -> int:
    if args.roster:
        roster = load_roster(Path(args.roster))
    else:
        roster = numbered_roster(args.players)
    check_roster(roster)
    config = build_config(args, roster)

    schedule = generate_schedule(roster, config, seed=args.seed)

    if args.output and args.format == "csv":
        export_schedule_csv(schedule, args.output)
        return EXIT_OK

    text = render(schedule, args.format)
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        logger.info(f"Schedule written to {args.output}")
    else:
        sys.stdout.write(text)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        return run(args)
    except ConfigurationException as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR
    except GenerationExhaustedException as e:
        logger.error(f"Could not generate schedule: {e}")
        return EXIT_EXHAUSTED
    except ExportException as e:
        logger.error(str(e))
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Generation interrupted by user")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.error("Schedule generation failed: %s", e, exc_info=True)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
