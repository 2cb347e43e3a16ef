from __future__ import annotations


class JeopardyError(Exception):
    """Base class for failures that abort a start sequence."""


class InsufficientPoolError(JeopardyError):
    """The candidate pool is empty or smaller than the requested category count."""


class DataFetchError(JeopardyError):
    """The remote service failed or returned data we cannot use."""


class InconsistentBoardError(JeopardyError):
    """Assembled categories cannot form a rectangular board."""
