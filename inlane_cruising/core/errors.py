"""Exceptions raised for caller contract violations."""


class InlaneCruisingError(Exception):
    """Base class for errors raised by the in-lane cruising core."""
    pass


class InvalidManeuverType(InlaneCruisingError, ValueError):
    """Raised when a maneuver plan contains a maneuver this core cannot follow."""

    def __init__(self, maneuver_type, index: int):
        self.maneuver_type = maneuver_type
        self.index = index
        super().__init__(
            f"In-lane cruising does not support maneuver type {maneuver_type} "
            f"(maneuver {index})"
        )
