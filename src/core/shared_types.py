"""
Type definitions used across layers
"""

from enum import StrEnum

# --- NOTE The domain layer (src/chess) has its own Enum versions, which also cover the empty square.
# --- Use the same names here as that reads clearly and let the imports show which versions are used in what part of the code


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    CHECKMATE = "checkmate"


class Phase(StrEnum):
    CONTINUE = "continue"
    CHECK = "check"
    CHECKMATE = "checkmate"


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
