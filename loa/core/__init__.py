"""Rules of Lines of Action: pieces, moves and the board."""

from .errors import InvariantError, MalformedInputError
from .state import BOARD_SIZE, DIRECTIONS, Direction, Move, Piece, in_bounds, parse_square, square_name
from .rules import INITIAL_PIECES, initial_grid, line_count, pieces_contiguous
from .board import Board

__all__ = [
    "BOARD_SIZE",
    "DIRECTIONS",
    "INITIAL_PIECES",
    "Board",
    "Direction",
    "InvariantError",
    "MalformedInputError",
    "Move",
    "Piece",
    "in_bounds",
    "initial_grid",
    "line_count",
    "parse_square",
    "pieces_contiguous",
    "square_name",
]
