"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of the board game -->
passes this information to the service layer, which can then pass it onwards to the presentation layer.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.chess.board import Board
from src.chess.moves import AcceptedMove, Move, is_valid_move
from src.chess.pieces import Color, PieceType
from src.chess.square import Square
from src.core.models import GameModel

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = auto()
    CHECKMATE = auto()


class Phase(Enum):
    """What the position looks like for the side to move, right after a move was made"""

    CONTINUE = auto()
    CHECK = auto()
    CHECKMATE = auto()


@dataclass(frozen=True)
class MoveOutcome:
    """Result of a move attempt. A rejected move has no phase: nothing changed."""

    accepted: bool
    phase: Optional[Phase] = None

    @classmethod
    def rejected(cls) -> Self:
        return cls(accepted=False)

    @classmethod
    def accepted_with(cls, phase: Phase) -> Self:
        return cls(accepted=True, phase=phase)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    color_to_move: Color
    selected_square: Optional[Square]
    status: Status

    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, white to move."""
        return cls(
            board=Board.initial_position(),
            color_to_move=Color.WHITE,
            selected_square=None,
            status=Status.IN_PROGRESS,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            board_fen=self.board.to_fen(),
            color_to_move=self.color_to_move.name.lower(),
            selected_square=(
                self.selected_square.to_algebraic() if self.selected_square else None
            ),
            status=self.status.name.lower().replace("_", " "),
        )

    @property
    def current_side_to_move(self) -> Color:
        return self.color_to_move

    @property
    def is_game_over(self) -> bool:
        """Once checkmate is reached, no more moves are accepted."""
        return self.status == Status.CHECKMATE

    @property
    def winner(self) -> Optional[Color]:
        """
        Given we know it is checkmate, the player who is to move just got mated and the opponent must be the winner
        """
        if self.status != Status.CHECKMATE:
            return None
        return self.color_to_move.opponent()

    @property
    def phase(self) -> Phase:
        """Phase of the current position, as seen by the side to move"""
        if self.status == Status.CHECKMATE:
            return Phase.CHECKMATE
        if self.board.is_check(self.color_to_move):
            return Phase.CHECK
        return Phase.CONTINUE

    def click(self, square: Square) -> Optional[MoveOutcome]:
        """
        A square on the board got clicked.
        ----

        * Nothing selected yet: select the square if it holds one of your pieces (otherwise ignore the click).
        * Something selected: try to move the selected piece to the clicked square.

        Returns the outcome if the click was a move attempt, None otherwise.
        """
        if self.is_game_over:
            return None

        if self.selected_square is None:
            self.select_square(square)
            return None

        return self.attempt_move(self.selected_square, square)

    def select_square(self, square: Square) -> bool:
        """Only a square holding one of your own pieces is a valid selection."""
        if self.is_game_over or not self._is_own_piece(square):
            logger.debug("ignoring selection of %s", square.to_algebraic())
            return False

        self.selected_square = square
        logger.debug(
            "%s selected %s", self.color_to_move.name.lower(), square.to_algebraic()
        )
        return True

    def attempt_move(self, from_square: Square, to_square: Square) -> MoveOutcome:
        """
        Attempt to make a move
        -----

        1. clear the selection (whether or not the move goes through, the player must select again)
        2. reject when the game is over, the piece is not yours, or the movement rules do not allow it
        3. update the board
        4. hand the turn to the opponent
        5. update game status (if needed) and report the phase the opponent is in

        NOTE: a move that leaves your own king under attack is not rejected here.
        """
        self._clear_selection()
        move = Move(from_square, to_square)

        if self.is_game_over:
            logger.warning("game is over, rejecting %s", move.to_uci())
            return MoveOutcome.rejected()

        if not self._is_own_piece(from_square) or not is_valid_move(move, self.board):
            logger.warning(
                "%s attempted an illegal move: %s",
                self.color_to_move.name.lower(),
                move.to_uci(),
            )
            return MoveOutcome.rejected()

        accepted_move = self._update_board(move)
        self._update_color_to_move()
        phase = self._update_game_status(accepted_move)
        return MoveOutcome.accepted_with(phase)

    # -- PRIVATE HELPERS ---
    def _is_own_piece(self, square: Square) -> bool:
        return self.board.piece(square).color == self.color_to_move

    def _clear_selection(self) -> None:
        self.selected_square = None

    def _update_board(self, move: Move) -> AcceptedMove:
        accepted_move = self.board.move_piece(move)
        logger.info("%s played %s", self.color_to_move.name.lower(), move.to_uci())
        return accepted_move

    def _update_color_to_move(self) -> None:
        self.color_to_move = self.color_to_move.opponent()

    def _update_game_status(self, accepted_move: AcceptedMove) -> Phase:
        """Performs checks to see if game has ended and changes status accordingly.

        NOTE the color to move has already been updated. At this point the turn player is the opponent of the player that just moved.
        Capturing the king (possible after a move that exposed it) ends the game on the spot: there is no king left to look up.
        """
        if accepted_move.captured_piece.type == PieceType.KING:
            self._change_status(Status.CHECKMATE)
            logger.info(
                "%s king captured, %s wins",
                self.color_to_move.name.lower(),
                self.color_to_move.opponent().name.lower(),
            )
            return Phase.CHECKMATE

        if self.board.is_checkmate(self.color_to_move):
            self._change_status(Status.CHECKMATE)
            logger.info("checkmate, %s wins", self.color_to_move.opponent().name.lower())
            return Phase.CHECKMATE

        if self.board.is_check(self.color_to_move):
            logger.info("%s is in check", self.color_to_move.name.lower())
            return Phase.CHECK

        return Phase.CONTINUE

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
