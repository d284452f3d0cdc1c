"""Input error taxonomy.

Each kind is terminal for the whole run and maps to exactly one
user-facing sentence. A rover lost mid-movement is NOT an error.
"""

from __future__ import annotations


class RoverInputError(ValueError):
    """Base class for every failure while reading map and rover input.

    Attributes:
        code: Stable machine-readable identifier (used in ``ServiceError``).
        user_message: The sentence shown to the user.
    """

    code = "INPUT_ERROR"
    user_message = "The input could not be read. Please try again"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.user_message)
        self.detail = detail


class BadGridSizeError(RoverInputError):
    code = "BAD_GRID_SIZE"
    user_message = "Could not parse the map size. Please try again"


class RoverParseError(RoverInputError):
    """A rover line that could not be turned into a descriptor."""


class InvalidRoverDetailsError(RoverParseError):
    code = "INVALID_ROVER_DETAILS"
    user_message = "Could not parse the rover details. Please try again"


class OutOfBoundsRoverError(RoverParseError):
    code = "OUT_OF_BOUNDS_ROVER"
    user_message = "The specified rover is out of bounds of the given map. Please try again"


class NoRoversError(RoverInputError):
    code = "NO_ROVERS"
    user_message = "No rover data was entered. Please try again"


class NoInputError(RoverInputError):
    code = "NO_INPUT"
    user_message = "No map or rover data was entered. Please try again"
