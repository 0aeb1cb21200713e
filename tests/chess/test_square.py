"""Unit tests for /src/chess/square.py"""

from string import ascii_lowercase

import pytest

from src.chess.square import BOARD_DIMENSIONS, Square, all_squares


@pytest.mark.parametrize(
    "row, col, notation",
    [
        (row, col, f"{ascii_lowercase[col]}{8 - row}")
        for row in range(8)
        for col in range(8)
    ],
)
def test_creating_from_algebraic(row: int, col: int, notation: str) -> None:
    """Simply checks if the notation for 'a8' indeed maps to row 0, column 0, etc."""
    square = Square.from_algebraic(notation)
    assert square.row == row
    assert square.col == col


@pytest.mark.parametrize(
    "row, col, notation",
    [
        (row, col, f"{ascii_lowercase[col]}{8 - row}")
        for row in range(8)
        for col in range(8)
    ],
)
def test_to_algebraic_notation(row: int, col: int, notation: str) -> None:
    """Test the reverse, so the square on row 7 and column 0 should be denoted as a1"""
    square = Square(row, col)
    assert square.to_algebraic() == notation


def test_corner_squares() -> None:
    """Row 0 is the black back rank, row 7 the white back rank"""
    assert Square.from_algebraic("a8") == Square(0, 0)
    assert Square.from_algebraic("h8") == Square(0, 7)
    assert Square.from_algebraic("a1") == Square(7, 0)
    assert Square.from_algebraic("h1") == Square(7, 7)


def test_square_within_bounds() -> None:
    """happy case: squares within the dimensions of the board"""
    for row in range(BOARD_DIMENSIONS[0]):
        for col in range(BOARD_DIMENSIONS[1]):
            square = Square(row, col)
            assert square.is_within_bounds()


def test_square_out_of_bounds() -> None:
    square = Square(BOARD_DIMENSIONS[0], BOARD_DIMENSIONS[1])
    assert not square.is_within_bounds()

    square = Square(-1, 0)
    assert not square.is_within_bounds()

    square = Square(0, 8)
    assert not square.is_within_bounds()


def test_all_squares_row_major() -> None:
    squares = all_squares()
    assert len(squares) == 64
    assert squares[0] == Square(0, 0)
    assert squares[1] == Square(0, 1)
    assert squares[8] == Square(1, 0)
    assert squares[-1] == Square(7, 7)
