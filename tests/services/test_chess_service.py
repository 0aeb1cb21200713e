"""Unit tests for src/services/chess_service.py"""

import pytest

from src.chess.game import Color as DomainColor
from src.chess.game import Game
from src.chess.game import Status as DomainStatus
from src.core.shared_types import Color, Phase, Status
from src.services.chess_service import (
    ChessService,
    GameResponse,
    MoveRequest,
    MoveResponse,
    SelectSquareRequest,
    status_text,
)

FOOLS_MATE = [("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")]


@pytest.fixture
def service() -> ChessService:
    return ChessService()


# --- SERVICE - GAME STATE ----
def test_initial_game_state(service: ChessService) -> None:
    response = service.get_game_state()
    assert isinstance(response, GameResponse)
    assert response.color_to_move == Color.WHITE
    assert response.status == Status.IN_PROGRESS
    assert response.phase == Phase.CONTINUE
    assert response.winner is None
    assert response.selected_square is None
    assert response.status_text == "white's turn"


def test_rendered_board(service: ChessService) -> None:
    board = service.get_game_state().board
    assert len(board) == 8
    assert all(len(row) == 8 for row in board)
    assert board[0] == ["♜", "♞", "♝", "♛", "♚", "♝", "♞", "♜"]
    assert board[1] == ["♟"] * 8
    assert board[4] == [""] * 8
    assert board[6] == ["♙"] * 8
    assert board[7] == ["♖", "♘", "♗", "♕", "♔", "♗", "♘", "♖"]


# --- SERVICE - MOVES ----
def test_make_move(service: ChessService) -> None:
    response = service.make_move(MoveRequest(from_square="e2", to_square="e4"))
    assert isinstance(response, MoveResponse)
    assert response.accepted
    assert response.phase == Phase.CONTINUE
    assert response.game.color_to_move == Color.BLACK
    assert response.game.status_text == "black's turn"


def test_make_illegal_move(service: ChessService) -> None:
    response = service.make_move(MoveRequest(from_square="e2", to_square="e5"))
    assert not response.accepted
    assert response.phase is None
    assert response.game.color_to_move == Color.WHITE
    assert response.game.board == service.new_game().board


def test_check_status_text(service: ChessService) -> None:
    for from_square, to_square in [("e2", "e4"), ("f7", "f6")]:
        service.make_move(MoveRequest(from_square=from_square, to_square=to_square))
    response = service.make_move(MoveRequest(from_square="d1", to_square="h5"))
    assert response.phase == Phase.CHECK
    assert response.game.status_text == "Check! black's turn."


def test_checkmate(service: ChessService) -> None:
    for from_square, to_square in FOOLS_MATE:
        response = service.make_move(
            MoveRequest(from_square=from_square, to_square=to_square)
        )
    assert response.phase == Phase.CHECKMATE
    assert response.game.status == Status.CHECKMATE
    assert response.game.winner == Color.BLACK
    assert response.game.status_text == "Checkmate! black wins!"

    # game is frozen
    frozen = service.make_move(MoveRequest(from_square="a2", to_square="a3"))
    assert not frozen.accepted


def test_king_capture_ends_the_game(board_with_pieces) -> None:
    """A move that exposes the king is accepted, the capture that follows is the end of the game"""
    board = board_with_pieces({"e1": "K", "e2": "R", "e8": "r", "a8": "k"})
    service = ChessService(
        Game(
            board=board,
            color_to_move=DomainColor.WHITE,
            selected_square=None,
            status=DomainStatus.IN_PROGRESS,
        )
    )
    assert service.make_move(MoveRequest(from_square="e2", to_square="h2")).accepted

    response = service.make_move(MoveRequest(from_square="e8", to_square="e1"))
    assert response.accepted
    assert response.phase == Phase.CHECKMATE
    assert response.game.status == Status.CHECKMATE
    assert response.game.winner == Color.BLACK
    assert response.game.status_text == "Checkmate! black wins!"
    assert response.game.board[7][4] == "♜"

    state = service.get_game_state()
    assert state.phase == Phase.CHECKMATE
    assert state.color_to_move == Color.WHITE


def test_new_game_resets(service: ChessService) -> None:
    service.make_move(MoveRequest(from_square="e2", to_square="e4"))
    response = service.new_game()
    assert response.color_to_move == Color.WHITE
    assert response.board_fen == Game.new_game().board.to_fen()


# --- SERVICE - CLICKS ----
def test_click_square_selects_and_moves(service: ChessService) -> None:
    response = service.click_square(SelectSquareRequest(square="b1"))
    assert response.selected_square == "b1"
    assert response.color_to_move == Color.WHITE

    response = service.click_square(SelectSquareRequest(square="c3"))
    assert response.selected_square is None
    assert response.color_to_move == Color.BLACK
    assert response.board[5][2] == "♘"


# --- STATUS TEXT ----
@pytest.mark.parametrize(
    "phase, color_to_move, winner, expected",
    [
        (Phase.CONTINUE, Color.WHITE, None, "white's turn"),
        (Phase.CONTINUE, Color.BLACK, None, "black's turn"),
        (Phase.CHECK, Color.WHITE, None, "Check! white's turn."),
        (Phase.CHECKMATE, Color.BLACK, Color.WHITE, "Checkmate! white wins!"),
    ],
)
def test_status_text(
    phase: Phase, color_to_move: Color, winner: Color | None, expected: str
) -> None:
    assert status_text(phase, color_to_move, winner) == expected
