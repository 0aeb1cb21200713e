"""
Custom errors shared across layers.

Rejected moves are reported as values (see MoveOutcome in src/chess/game.py).
The errors below signal misuse of the engine: bad requests or states the engine never reaches during normal play.
"""


class GameError(Exception):
    """Base class for everything the chess engine raises on purpose"""


class GameStateError(GameError):
    """The game (or board) is in a state that does not allow the requested operation"""


class MissingKingError(GameStateError):
    """No king of the requested color on the board. Cannot happen when starting from the initial position."""


class OutOfBoundsError(GameError, IndexError):
    """A square outside of the 8x8 grid was handed to the board"""


class InvalidRequestError(GameError):
    """Request from the presentation layer could not be interpreted"""
