from __future__ import annotations

from typing import Optional

from .enums import SkipReason


class DomainError(Exception):
    """Base exception for business rule violations."""


class ConfigurationError(DomainError):
    """Raised when the environment is not set up correctly. Aborts the run."""


class MalformedPeriodLabel(ConfigurationError):
    """Raised when a period label does not follow '<Month> 1 - <Month> 15' / '<Month> 16 - <Month> <day>'."""


class NoPriorMonth(ConfigurationError):
    """Raised when no previous month exists to copy a period board from."""


class TemplateNotFound(ConfigurationError):
    """Raised when the previous period's board is missing."""


class PeriodBoardNotFound(ConfigurationError):
    """Raised when a back-filled day's period board does not exist; past boards are never created."""


class MissingColumn(ConfigurationError):
    """Raised when a board lacks one of the required attendance columns."""


class MissingMapping(DomainError):
    """Raised when a user cannot be placed on the board (no group, no record)."""

    def __init__(self, message: str, *, reason: Optional[SkipReason] = None):
        super().__init__(message)
        self.reason = reason


class TransportError(DomainError):
    """Raised for any I/O failure talking to the tracking provider or the board store."""
