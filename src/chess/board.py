"""The Game board implements all rules that effect the `position` (in chess: the configuration of pieces on the board)"""

import logging
from dataclasses import dataclass
from typing import Self

from src.chess.moves import AcceptedMove, Move, is_valid_move
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square, all_squares
from src.core.exceptions import GameStateError, MissingKingError, OutOfBoundsError

logger = logging.getLogger(__name__)

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


@dataclass
class Board:
    position: dict[Square, Piece]

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using a given FEN string.

        That is, we supply the first part of the FEN string that denotes the board position
        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on row 0 (the 8th rank), starting with rook on a8, knight on b8, etc.
        * black pawns cover row 1 entirely
        * rows 2 through 5 have 8 consecutive empty squares
        * row 6 are the white pawns (capital letters)
        * row 7 are the white pieces.
        """
        fen_by_rows = fen_str.split("/")
        if len(fen_by_rows) != BOARD_DIMENSIONS[0]:
            raise GameStateError(
                f"Board placement needs {BOARD_DIMENSIONS[0]} rows, got {len(fen_by_rows)}: {fen_str!r}"
            )

        position: dict[Square, Piece] = {}
        # FEN string is read from the top row (row 0) to the bottom row ...
        for row, fen_one_row in enumerate(fen_by_rows):
            # ... and the first character is the a-file, so columns read in normal direction as well
            col = 0
            for character in fen_one_row:
                if character.isalpha():
                    # simple case: a letter directly denotes the piece that should be created
                    position[Square(row, col)] = Piece.from_fen(character)
                    col += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    for _ in range(int(character)):
                        position[Square(row, col)] = Piece.empty()
                        col += 1
            if col != BOARD_DIMENSIONS[1]:
                raise GameStateError(
                    f"Row {row} of {fen_str!r} describes {col} squares instead of {BOARD_DIMENSIONS[1]}"
                )
        return cls(position)

    @classmethod
    def initial_position(cls) -> Self:
        """The standard starting layout"""
        return cls.from_fen(STARTING_POSITION_FEN)

    def to_fen(self) -> str:
        """Rows are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_fen(self, row: int) -> str:
        """FEN string of a single row"""
        fen_characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            piece = self.piece(Square(row, col))

            if piece:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    # --- CELL ACCESS ---
    def piece(self, square: Square) -> Piece:
        self._assert_within_bounds(square)
        return self.position[square]

    def place_piece(self, piece: Piece, square: Square) -> None:
        """Put a piece on a square. Whatever was standing there is gone."""
        self._assert_within_bounds(square)
        self.position[square] = piece

    def remove_piece(self, square: Square) -> None:
        self.place_piece(Piece.empty(), square)

    def _assert_within_bounds(self, square: Square) -> None:
        if not square.is_within_bounds():
            raise OutOfBoundsError(f"Square {square} is not on the board.")

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Square]:
        """Squares holding the given piece, in row-major order"""
        wanted = Piece(piece_type, color)
        return [square for square in all_squares() if self.piece(square) == wanted]

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square for square in all_squares() if self.piece(square).color == color
        ]

    # --- MOVING ---
    def move_piece(self, move: Move) -> AcceptedMove:
        """
        Update the position on the board. No legality checks: the captured piece (if any) is simply overwritten.
        Returns a snapshot that can be handed to `undo_move()`.
        """
        accepted_move = AcceptedMove.from_move_and_board(move, self)
        self.place_piece(accepted_move.moving_piece, move.to_square)
        self.remove_piece(move.from_square)
        return accepted_move

    def undo_move(self, accepted_move: AcceptedMove) -> None:
        """Exact inverse of `move_piece()`: the moving piece goes back, and so does whatever it captured."""
        move = accepted_move.move
        self.place_piece(accepted_move.moving_piece, move.from_square)
        self.place_piece(accepted_move.captured_piece, move.to_square)

    # --- CHECK DETECTION ---
    def find_king(self, color: Color) -> Square:
        """
        Row-major scan, first match wins.
        With a single king per color (always the case from the starting position) the order does not matter.
        """
        kings = self.locate_pieces(PieceType.KING, color)
        if not kings:
            raise MissingKingError(f"No {color.name.lower()} king on the board.")
        return kings[0]

    def is_under_attack(self, square: Square, by_color: Color) -> bool:
        """Could any piece of `by_color` move onto the square? (The movement rules used in reverse)"""
        return any(
            is_valid_move(Move(attacker_square, square), self)
            for attacker_square in self.locate_color(by_color)
        )

    def is_check(self, color: Color) -> bool:
        """Is the king of the given color attacked by any of the opponent's pieces?"""
        king_square = self.find_king(color)
        return self.is_under_attack(king_square, color.opponent())

    # --- CHECKMATE DETECTION ---
    def generate_candidate_moves(self, color: Color) -> list[Move]:
        """
        Every (from, to) pair the movement rules allow for the pieces of the given color.
        Ordered by starting square, then target square (both row-major).

        NOTE: these may still leave your own king under attack.
        """
        candidate_moves: list[Move] = []
        for from_square in self.locate_color(color):
            for to_square in all_squares():
                move = Move(from_square, to_square)
                if is_valid_move(move, self):
                    candidate_moves.append(move)
        return candidate_moves

    def is_checkmate(self, color: Color) -> bool:
        """
        Checkmate: in check, and none of your moves gets you out of it.
        ----

        plan:
        1. Not in check? Then it is not checkmate.
        2. For every candidate move: make it on this board, see if the king is still attacked, take the move back.
        3. Stop at the first move that escapes.
        """
        if not self.is_check(color):
            return False

        for move in self.generate_candidate_moves(color):
            if not self._is_check_after(move, color):
                logger.debug(
                    "%s escapes check with %s", color.name.lower(), move.to_uci()
                )
                return False
        return True

    def _is_check_after(self, move: Move, color: Color) -> bool:
        """Speculative trial: the board is always restored before returning."""
        accepted_move = self.move_piece(move)
        try:
            return self.is_check(color)
        finally:
            self.undo_move(accepted_move)
