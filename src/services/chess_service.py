"""Orchestration of communication from the presentation layer to business logic (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import (
    GameResponse,
    MoveRequest,
    MoveResponse,
    SelectSquareRequest,
)
from src.chess.game import Game
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.shared_types import Color, Phase, Status

logger = logging.getLogger(__name__)


class ChessService:
    """Owns the one game being played and translates requests into calls on the domain layer."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else Game.new_game()

    # -- Presentation layer logic ---
    def new_game(self) -> GameResponse:
        """Throw away the current game and start over from the initial position."""
        self.game = Game.new_game()
        logger.info("new game started")
        return self._create_game_response()

    def get_game_state(self) -> GameResponse:
        """Retrieve current game state. Called after every click to redraw the board and the status line."""
        return self._create_game_response()

    def click_square(self, request: SelectSquareRequest) -> GameResponse:
        """Forward a click: either selects a piece or completes a move started by a previous click."""
        self.game.click(Square.from_algebraic(request.square))
        return self._create_game_response()

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt."""
        outcome = self.game.attempt_move(
            Square.from_algebraic(request.from_square),
            Square.from_algebraic(request.to_square),
        )
        return MoveResponse(
            accepted=outcome.accepted,
            phase=Phase[outcome.phase.name] if outcome.phase else None,
            game=self._create_game_response(),
        )

    # -- Internal helpers --
    def _create_game_response(self) -> GameResponse:
        model = self.game.to_model()
        color_to_move = Color(model.color_to_move)
        phase = Phase[self.game.phase.name]
        winner = Color(self.game.winner.name.lower()) if self.game.winner else None
        return GameResponse(
            board=self._render_board(),
            board_fen=model.board_fen,
            color_to_move=color_to_move,
            selected_square=model.selected_square,
            status=Status(model.status),
            phase=phase,
            winner=winner,
            status_text=status_text(phase, color_to_move, winner),
        )

    def _render_board(self) -> list[list[str]]:
        return [
            [
                self.game.board.piece(Square(row, col)).to_symbol()
                for col in range(BOARD_DIMENSIONS[1])
            ]
            for row in range(BOARD_DIMENSIONS[0])
        ]


def status_text(phase: Phase, color_to_move: Color, winner: Optional[Color]) -> str:
    """The line of text shown underneath the board"""
    if phase == Phase.CHECKMATE and winner is not None:
        return f"Checkmate! {winner} wins!"
    if phase == Phase.CHECK:
        return f"Check! {color_to_move}'s turn."
    return f"{color_to_move}'s turn"
