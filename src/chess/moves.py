"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define a legality predicate for each piece type.

The predicates only look at geometry and obstruction.
Whether a move leaves your own king attacked is not checked here (see Board.is_checkmate for the only place it matters).
"""

from dataclasses import dataclass
from typing import Callable, Protocol, Self

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Piece: ...


# Pawns of each color start on a fixed row and only ever move in one direction along the columns
PAWN_START_ROWS: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PAWN_DIRECTIONS: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Universal Chess Interface:
        ---
        ---
        One of the standard chess notations for moves

        examples:
        * "e2e4": move the piece that was on e2 to e4
        * "g8f6": (knight) jumps from g8 to f6
        """
        from_sq = Square.from_algebraic(uci[:2])
        to_sq = Square.from_algebraic(uci[2:4])
        return cls(from_sq, to_sq)

    def to_uci(self) -> str:
        """Convert into UCI notation"""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


@dataclass(frozen=True)
class AcceptedMove:
    """
    Snapshot of the pieces involved, taken before the board gets updated.
    Holds everything needed to reverse the move exactly.
    """

    move: Move
    moving_piece: Piece
    captured_piece: Piece

    @classmethod
    def from_move_and_board(cls, move: Move, board: Board) -> Self:
        return cls(
            move=move,
            moving_piece=board.piece(move.from_square),
            captured_piece=board.piece(move.to_square),
        )


# --- PATH & GEOMETRY ---
def is_aligned(from_square: Square, to_square: Square) -> bool:
    """Same row, same column, or on a diagonal"""
    d_row = to_square.row - from_square.row
    d_col = to_square.col - from_square.col
    return d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)


def squares_between(from_square: Square, to_square: Square) -> list[Square]:
    """
    Find the squares strictly in between the two squares specified (both endpoints excluded).

    Only defined for squares on the same row, column or diagonal.
    """
    if not is_aligned(from_square, to_square):
        raise ValueError(
            f"squares_between requires both squares to lie on a line or diagonal. \n from: {from_square}\n to:{to_square}"
        )

    d_row = _sign(to_square.row - from_square.row)
    d_col = _sign(to_square.col - from_square.col)
    squares_found: list[Square] = []
    row = from_square.row + d_row
    col = from_square.col + d_col
    while (row, col) != (to_square.row, to_square.col):
        squares_found.append(Square(row, col))
        row += d_row
        col += d_col
    return squares_found


def is_path_clear(from_square: Square, to_square: Square, board: Board) -> bool:
    """Walk along the line of sight and stop at the first occupied square"""
    for square in squares_between(from_square, to_square):
        if board.piece(square):
            return False
    return True


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# --- MOVEMENT RULES ---
def is_valid_pawn_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """
    A pawn:
    - moves by a single square forward onto an empty square.
    - It can move by two in their first move (so when on their starting row), if both squares are empty
    - takes diagonally: one row and one column away, onto an occupied square
    """
    color = board.piece(from_square).color
    direction = PAWN_DIRECTIONS[color]
    d_row = to_square.row - from_square.row
    d_col = to_square.col - from_square.col
    target = board.piece(to_square)

    if d_col == 0 and not target:
        if d_row == direction:
            return True
        intermediate = Square(from_square.row + direction, from_square.col)
        return (
            from_square.row == PAWN_START_ROWS[color]
            and d_row == 2 * direction
            and not board.piece(intermediate)
        )

    # NOTE: the capture is not restricted to the forward direction.
    if abs(d_col) == 1 and abs(d_row) == 1 and target:
        return True
    return False


def is_valid_knight_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """Knights jump such that (|delta_row|, |delta_col|) is (1, 2) or (2, 1). Nothing in between matters."""
    d_row = abs(to_square.row - from_square.row)
    d_col = abs(to_square.col - from_square.col)
    return (d_row, d_col) in [(1, 2), (2, 1)]


def is_valid_bishop_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    d_row = abs(to_square.row - from_square.row)
    d_col = abs(to_square.col - from_square.col)
    return d_row == d_col != 0 and is_path_clear(from_square, to_square, board)


def is_valid_rook_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """Rooks move either horizontally or vertically"""
    same_row = from_square.row == to_square.row
    same_col = from_square.col == to_square.col
    if same_row == same_col:
        # either both (not moving at all) or neither (not on a straight line)
        return False
    return is_path_clear(from_square, to_square, board)


def is_valid_queen_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return is_valid_rook_move(from_square, to_square, board) or is_valid_bishop_move(
        from_square, to_square, board
    )


def is_valid_king_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """
    The king can move by a single square at the time.
    """
    d_row = abs(to_square.row - from_square.row)
    d_col = abs(to_square.col - from_square.col)
    return d_row <= 1 and d_col <= 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
IsValidMoveFn = Callable[[Square, Square, Board], bool]
MOVEMENT_RULES: dict[PieceType, IsValidMoveFn] = {
    PieceType.PAWN: is_valid_pawn_move,
    PieceType.KNIGHT: is_valid_knight_move,
    PieceType.BISHOP: is_valid_bishop_move,
    PieceType.ROOK: is_valid_rook_move,
    PieceType.QUEEN: is_valid_queen_move,
    PieceType.KING: is_valid_king_move,
}


def is_valid_move(move: Move, board: Board) -> bool:
    """
    Move legality for the piece standing on the starting square.
    ----

    1. An empty starting square has nothing to move.
    2. Never capture a piece of your own color (whatever the piece type).
    3. Otherwise the piece type's rule decides.

    NOTE: 'own color' is the color of the moving piece, so the same predicate answers "could this enemy piece reach my king?"
    """
    moving_piece = board.piece(move.from_square)
    if not moving_piece:
        return False

    target_piece = board.piece(move.to_square)
    if target_piece.color == moving_piece.color:
        return False

    movement_rule = MOVEMENT_RULES[moving_piece.type]
    return movement_rule(move.from_square, move.to_square, board)
