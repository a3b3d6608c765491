"""Custom exception hierarchy for roomcost."""

from __future__ import annotations


class RoomCostError(Exception):
    """Base exception for all roomcost errors."""


class MalformedRecordError(RoomCostError):
    """Raised when an input record has the wrong field count or a bad number."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class UnknownNameError(RoomCostError, KeyError):
    """Raised when a room or covering name was never registered."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"Unknown {kind} '{name}'")
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class DuplicateNameError(RoomCostError):
    """Raised when a room or covering name is registered twice."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"Duplicate {kind} '{name}'")
        self.kind = kind
        self.name = name


class InvalidGeometryError(RoomCostError, ValueError):
    """Raised when a dimension, price or per-unit area is out of range."""
