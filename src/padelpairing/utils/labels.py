"""Human readable period labels for schedule slots."""

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

from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from padelpairing.constants import DEFAULT_SLOT_MINUTES, TIME_LABEL_FORMAT
from padelpairing.exceptions import InvalidConfigurationException


def parse_start_time(value: str) -> datetime:
    """Parse a session start time such as ``"18:00"`` or ``"6:30 PM"``.

    Raises:
        InvalidConfigurationException: If the value is not a time of day
    """
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as e:
        raise InvalidConfigurationException(
            f"Invalid start time '{value}': {e}"
        ) from e


def minute_range_label(
    slot_index: int, slot_minutes: int = DEFAULT_SLOT_MINUTES
) -> str:
    """Relative label, e.g. ``"1-20 minutes"`` for the first 20-minute slot."""
    first = slot_index * slot_minutes + 1
    last = (slot_index + 1) * slot_minutes
    return f"{first}-{last} minutes"


def time_range_label(
    slot_index: int, start_time: str, slot_minutes: int = DEFAULT_SLOT_MINUTES
) -> str:
    """Clock label, e.g. ``"18:20 - 18:40"`` for the second slot from 18:00."""
    start = parse_start_time(start_time)
    slot_start = start + relativedelta(minutes=slot_index * slot_minutes)
    slot_end = slot_start + relativedelta(minutes=slot_minutes)
    return (
        f"{slot_start.strftime(TIME_LABEL_FORMAT)} - "
        f"{slot_end.strftime(TIME_LABEL_FORMAT)}"
    )


def period_label(
    slot_index: int,
    slot_minutes: int = DEFAULT_SLOT_MINUTES,
    start_time: Optional[str] = None,
) -> str:
    """Label a slot by clock time when a start time is configured."""
    if start_time:
        return time_range_label(slot_index, start_time, slot_minutes)
    return minute_range_label(slot_index, slot_minutes)
