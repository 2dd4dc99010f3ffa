"""Example script demonstrating schedule generation for a padel evening.

This script shows how to use the scheduler both programmatically and via
the command-line interface.
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

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from padelpairing.controllers.session import generate_schedule, preset_config
from padelpairing.export import export_schedule_csv
from padelpairing.models.session import SessionConfig
from padelpairing.utils.print import format_schedule
from padelpairing.validation import summarize_fairness


def example_preset_session():
    """Example: Scheduling a 12-player evening from its preset."""

    print("\n" + "=" * 70)
    print("EXAMPLE 1: Preset Session")
    print("=" * 70 + "\n")

    roster = [
        "Ana", "Ben", "Cleo", "Dan", "Eva", "Finn",
        "Gus", "Hana", "Ivo", "Jo", "Kai", "Lena",
    ]  # fmt: skip
    config = preset_config(len(roster), start_time="18:00")

    schedule = generate_schedule(roster, config, seed=42)
    print(format_schedule(schedule, summarize_fairness(schedule)))

    output = export_schedule_csv(schedule, Path("padel_schedule"))
    print(f"CSV written to {output}")


def example_custom_session():
    """Example: A 16-player session on three courts."""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: Custom Session")
    print("=" * 70 + "\n")

    roster = [f"Player {i}" for i in range(1, 17)]
    config = SessionConfig(
        total_players=16,
        slot_count=8,
        courts_per_slot=3,
        matches_per_player=6,
        rests_per_player=2,
        slot_minutes=15,
    )

    schedule = generate_schedule(roster, config, seed=7)
    summary = summarize_fairness(schedule)
    print(f"Generated {len(schedule)} slots")
    print(f"Repeated partnerships: {summary.repeated_partnerships}")
    print(f"Longest playing streak: {summary.longest_playing_streak}")


def example_cli_usage():
    """Example: Command line usage."""

    print("\n" + "=" * 70)
    print("EXAMPLE 3: Command Line Usage")
    print("=" * 70 + "\n")

    print("Numbered roster from a preset:")
    print("  padel-schedule --players 30 --seed 7\n")
    print("Named roster with clock times, exported as CSV:")
    print(
        "  padel-schedule --roster names.txt --start-time 18:00"
        " --format csv --output evening.csv\n"
    )
    print("Custom quotas from a JSON configuration:")
    print("  padel-schedule --players 16 --config session.json --format json")


def main():
    """Run all examples."""
    example_cli_usage()
    example_preset_session()
    example_custom_session()


if __name__ == "__main__":
    main()
