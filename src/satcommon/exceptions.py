"""
Custom exception classes for DIMACS parsing.

This module defines the exceptions raised while turning DIMACS text into
formulas, so callers can tell malformed input apart from I/O failures
(which propagate as the standard ``OSError`` family).
"""


class SATBaseException(Exception):
    """Base exception class for all satcommon related exceptions."""

    def __init__(self, message: str | None = None):
        self.message = message
        super().__init__(message)


class DimacsParseError(SATBaseException, ValueError):
    """
    Raised when a numeric token in DIMACS input cannot be used.

    This covers text that does not fit the integer range of the field it
    occupies (header counts, clause weights, literals) as well as negative
    weights.

    Attributes:
        line_number: 1-based number of the offending line, if known
        line: The offending line, stripped of surrounding whitespace
        token: The token that could not be converted
    """

    def __init__(
        self,
        message: str = "Malformed numeric token",
        line_number: int | None = None,
        line: str | None = None,
        token: str | None = None,
    ):
        self.line_number = line_number
        self.line = line
        self.token = token
        super().__init__(message)

    def __str__(self) -> str:
        details = []
        if self.token is not None:
            details.append(f"token={self.token!r}")
        if self.line_number is not None:
            details.append(f"line={self.line_number}")

        detail_str = ", ".join(details)
        return f"{self.message} ({detail_str})" if details else self.message
