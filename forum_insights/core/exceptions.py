"""
Exceptions raised by the Forum Insights core.
"""
from typing import Optional


class ForumInsightsError(Exception):
    """Base class for all insights errors."""


class DataAccessFailure(ForumInsightsError):
    """
    A read of topics, comments or likes could not complete.

    Raised by the repository and propagated unchanged through the service so
    that a snapshot is either complete or not produced at all.
    """

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        message = f"Data access failed during {operation}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
