"""Exception classes for the hospital dashboards.

Not-found and duplicate-key outcomes are plain ``False`` returns from the
stores; only invalid states and rejected forms are raised.
"""

from typing import List


class HospitalError(Exception):
    """Base exception for all project errors."""


class InvalidStateError(HospitalError):
    """Raised when an operation needs a state the application is not in.

    Examples:
        - Building a dashboard with no authenticated user
        - Navigating dashboard sections while logged out
    """


class UnknownSectionError(HospitalError):
    """Raised when a dashboard is asked to show a section it does not have."""

    def __init__(self, section: str, available: List[str]):
        self.section = section
        self.available = available
        super().__init__(f"Unknown section '{section}'. Available: {', '.join(available)}")


class ValidationFailedError(HospitalError):
    """Raised by callers that turn a list of validation messages into an error."""

    def __init__(self, messages: List[str]):
        self.messages = messages
        super().__init__("; ".join(messages))
