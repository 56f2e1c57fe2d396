"""
Domain-specific exception hierarchy for the office hours application.
"""


class OfficeHoursError(Exception):
    """Base class for all application-level errors."""


class ParseError(OfficeHoursError, ValueError):
    """Raised when a day symbol, time-of-day or interval cannot be parsed."""


class InvalidIntervalError(ParseError):
    """Raised when a weekly interval ends before it starts."""


class DuplicateLecturerError(OfficeHoursError):
    """Raised when a lecturer with the same name is already stored."""


class StorageError(OfficeHoursError):
    """Raised when lecturer data cannot be loaded or saved."""
