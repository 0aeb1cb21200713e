"""Requests and Response models exchanged with the presentation layer"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Phase, Status

SquareName = str
FILES = "abcdefgh"
RANKS = "12345678"


def _is_algebraic_notation(value: str) -> bool:
    if len(value) != 2:
        return False

    file_character = value[0]
    rank_character = value[1]
    return file_character in FILES and rank_character in RANKS


def _validate_square_name(value: str) -> str:
    if not _is_algebraic_notation(value):
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a valid square name."
        )
    return value


# --- REQUEST MODELS ---
class SelectSquareRequest(BaseModel):
    """A single click on a square"""

    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


class MoveRequest(BaseModel):
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    """Everything the presentation layer needs to draw the board and the status line"""

    board: list[list[str]]  # 8 rows of unicode glyphs, "" for empty squares
    board_fen: str
    color_to_move: Color
    selected_square: Optional[SquareName]
    status: Status
    phase: Phase
    winner: Optional[Color]
    status_text: str


class MoveResponse(BaseModel):
    accepted: bool
    phase: Optional[Phase]
    game: GameResponse
