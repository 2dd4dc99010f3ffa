"""CSV export of a finished schedule: one row per slot, one column per court."""

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

import csv
import io
from pathlib import Path
from typing import List, Union

from padelpairing.constants import (
    CSV_COURT_HEADER,
    CSV_PERIOD_HEADER,
    CSV_RESTING_HEADER,
    RESTING_SEPARATOR,
    TEAM_SEPARATOR,
    VERSUS_LABEL,
)
from padelpairing.exceptions import ScheduleExportException
from padelpairing.models.session import Match, Schedule
from padelpairing.utils import setup_logger

logger = setup_logger(__name__)


def format_match_cell(match: Match) -> str:
    """``"A + B\\nVS\\nC + D"``"""
    return "\n".join(
        [
            TEAM_SEPARATOR.join(match.team1),
            VERSUS_LABEL,
            TEAM_SEPARATOR.join(match.team2),
        ]
    )


def schedule_rows(schedule: Schedule) -> List[List[str]]:
    """Header plus one row per slot; courts missing from a slot stay empty."""
    courts = schedule.courts_per_slot
    rows = [
        [CSV_PERIOD_HEADER]
        + [CSV_COURT_HEADER.format(court=c) for c in range(1, courts + 1)]
        + [CSV_RESTING_HEADER]
    ]
    for slot in schedule.slots:
        by_court = {m.court: m for m in slot.matches}
        row = [slot.period]
        for court in range(1, courts + 1):
            match = by_court.get(court)
            row.append(format_match_cell(match) if match else "")
        row.append(RESTING_SEPARATOR.join(slot.resting_players))
        rows.append(row)
    return rows


def write_schedule_csv(schedule: Schedule, stream) -> None:
    """Write the schedule to an open text stream, quoting every field."""
    writer = csv.writer(stream, quoting=csv.QUOTE_ALL)
    writer.writerows(schedule_rows(schedule))


def schedule_to_csv(schedule: Schedule) -> str:
    buffer = io.StringIO()
    write_schedule_csv(schedule, buffer)
    return buffer.getvalue()


def export_schedule_csv(schedule: Schedule, path: Union[str, Path]) -> Path:
    """Write the schedule to a CSV file.

    Args:
        schedule: Finished schedule
        path: Destination file; a ``.csv`` suffix is added when missing

    Returns:
        The path written

    Raises:
        ScheduleExportException: If the file cannot be written
    """
    target = Path(path)
    if target.suffix.lower() != ".csv":
        target = target.with_suffix(".csv")
        logger.warning(f"Writing CSV to {target} instead of {path}")
    try:
        with open(target, "w", encoding="utf-8", newline="") as f:
            write_schedule_csv(schedule, f)
    except OSError as e:
        raise ScheduleExportException(f"Could not write {target}: {e}") from e
    logger.info(f"Schedule exported to {target}")
    return target
