"""Exceptions for use in Padel Pairing"""

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

from typing import Iterable, List, Optional


# ========== Base Application Exception ==========


class PadelPairingException(Exception):
    """Base exception for all Padel Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(PadelPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when session configuration data is inconsistent."""

    pass


class UnsupportedRosterSizeException(ConfigurationException):
    """Raised when no session configuration exists for the roster size."""

    def __init__(self, roster_size: int, supported: Iterable[int] = ()):
        self.roster_size = roster_size
        self.supported = sorted(supported)
        message = f"Unsupported roster size: {roster_size} players"
        if self.supported:
            message += f" (supported: {', '.join(str(s) for s in self.supported)})"
        super().__init__(message)


class DuplicatePlayerException(ConfigurationException):
    """Raised when the roster contains the same player name more than once."""

    def __init__(self, duplicates: Iterable[str]):
        self.duplicates: List[str] = list(duplicates)
        super().__init__(f"Duplicate player names: {', '.join(self.duplicates)}")


# ========== Scheduling Exceptions ==========


class SchedulingException(PadelPairingException):
    """Base exception for schedule generation errors."""

    pass


class GenerationExhaustedException(SchedulingException):
    """Raised when a slot could not be built within the attempt budget.

    Attributes
    ----------
    slot_index : int
        0-based index of the slot that could not be built.
    attempts : int
        Number of attempts spent on that slot.
    restarts : int
        Number of full-schedule restarts performed before giving up.
    """

    def __init__(self, slot_index: int, attempts: int, restarts: int = 0):
        self.slot_index = slot_index
        self.attempts = attempts
        self.restarts = restarts
        super().__init__(
            f"Failed to generate time slot {slot_index + 1} after {attempts} attempts"
            f" ({restarts} restarts)"
        )


class GenerationCancelledException(SchedulingException):
    """Raised when generation is cancelled between slot attempts."""

    def __init__(self, slot_index: Optional[int] = None):
        self.slot_index = slot_index
        if slot_index is None:
            super().__init__("Schedule generation cancelled")
        else:
            super().__init__(
                f"Schedule generation cancelled while building slot {slot_index + 1}"
            )


# ========== Validation Exceptions ==========


class ValidationException(PadelPairingException):
    """Base exception for validation errors."""

    pass


class ScheduleInvariantViolation(ValidationException):
    """Raised when a generated schedule breaks a hard invariant.

    This always indicates a defect in the scheduling engine.
    """

    def __init__(self, violations: Iterable[str]):
        self.violations: List[str] = list(violations)
        preview = "; ".join(self.violations[:5])
        if len(self.violations) > 5:
            preview += f"; ... ({len(self.violations) - 5} more)"
        super().__init__(f"Schedule invariant violated: {preview}")


# ========== Export Exceptions ==========


class ExportException(PadelPairingException):
    """Base exception for export errors."""

    pass


class ScheduleExportException(ExportException):
    """Raised when a schedule file cannot be written."""

    pass
