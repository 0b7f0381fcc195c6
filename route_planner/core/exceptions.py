"""Custom exception hierarchy for the route planner domain."""

from __future__ import annotations


class RoutePlannerError(RuntimeError):
    """Base class for failures raised by the route planner."""

    def __init__(self, message: str, *, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}

    def as_dict(self) -> dict:
        """Return a serializable representation."""
        payload = {"message": str(self)}
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidCoordinateError(RoutePlannerError):
    """Raised when a coordinate is non-numeric or outside the valid ranges."""


class ParseError(RoutePlannerError):
    """Raised when a line of location CSV text cannot be parsed.

    ``reason`` holds the bare cause, e.g. ``"invalid coordinate values"``.
    """

    def __init__(self, reason: str, *, line_number: int | None = None, content: str | None = None):
        message = f"Failed to parse CSV: {reason}"
        details: dict = {}
        if line_number is not None:
            message = f"{message} (line {line_number})"
            details["line"] = line_number
        if content is not None:
            details["content"] = content
        super().__init__(message, details=details)
        self.reason = reason
        self.line_number = line_number
