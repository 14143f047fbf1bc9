from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .errors import InvariantError
from .rules import (
    GridArray,
    grid_from,
    initial_grid,
    line_count,
    occupied_positions,
    path_blocked,
    pieces_contiguous,
)
from .state import BOARD_SIZE, DIRECTIONS, Direction, Move, Piece, in_bounds, parse_square

_INITIAL_GRID = initial_grid()


class Board:
    """State of a game of Lines of Action.

    Squares are addressed as (col, row), both 1..8; ``get(col, row)`` reads
    ``contents[row - 1][col - 1]`` of the layout the board was built from, so
    row 1 comes first in ``contents``.
    """

    def __init__(
        self,
        contents: Optional[Sequence[Sequence[int]]] = None,
        turn: Piece = Piece.BLACK,
    ) -> None:
        self._moves: List[Move] = []
        self._winner: Optional[Piece] = None
        self._winner_known = False
        if contents is None:
            self.clear()
        else:
            self.initialize(contents, turn)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def initialize(self, contents: Sequence[Sequence[int]], turn: Piece) -> None:
        self._grid: GridArray = grid_from(contents)
        self._turn = Piece(turn)
        self._moves.clear()
        self._invalidate()

    def clear(self) -> None:
        self._grid = _INITIAL_GRID.copy()
        self._turn = Piece.BLACK
        self._moves.clear()
        self._invalidate()

    def copy_from(self, board: "Board") -> None:
        if board is self:
            return
        self._grid = board._grid.copy()
        self._turn = board._turn
        self._moves = list(board._moves)
        self._winner = board._winner
        self._winner_known = board._winner_known

    def copy(self) -> "Board":
        board = Board.__new__(Board)
        board.copy_from(self)
        return board

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def turn(self) -> Piece:
        return self._turn

    @property
    def grid(self) -> GridArray:
        """Read-only view of the grid, indexed [row - 1, col - 1]."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def history(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def moves_made(self) -> int:
        return len(self._moves)

    def get(self, col: int, row: int) -> Piece:
        return Piece(int(self._grid[row - 1, col - 1]))

    def get_square(self, square: str) -> Piece:
        return self.get(*parse_square(square))

    def count(self, side: Piece) -> int:
        return int(np.count_nonzero(self._grid == int(side)))

    def set(self, col: int, row: int, piece: Piece, next_turn: Optional[Piece] = None) -> None:
        """Put piece on (col, row); make next_turn the side to move if given."""
        if not in_bounds(col, row):
            raise InvariantError(f"Square ({col}, {row}) is off the board.")
        self._grid[row - 1, col - 1] = int(piece)
        if next_turn is not None:
            self._turn = Piece(next_turn)
        self._invalidate()

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def is_legal(self, move: Optional[Move]) -> bool:
        if move is None:
            return False
        if move.moved != self._turn:
            return False
        if not (in_bounds(move.col0, move.row0) and in_bounds(move.col1, move.row1)):
            return False
        # Reject moves built against a different position.
        if self.get(move.col0, move.row0) != move.moved:
            return False
        if self.get(move.col1, move.row1) != move.replaced:
            return False

        delta_c = move.col1 - move.col0
        delta_r = move.row1 - move.row0
        if delta_c == 0 and delta_r == 0:
            return False
        if delta_c != 0 and delta_r != 0 and abs(delta_c) != abs(delta_r):
            return False
        direction = Direction.between(move.col0, move.row0, move.col1, move.row1)
        if move.direction != direction or move.length != max(abs(delta_c), abs(delta_r)):
            return False

        if move.length != line_count(self._grid, move.col0, move.row0, direction):
            return False
        return not path_blocked(self._grid, move)

    def legal_moves(self) -> Iterator[Move]:
        """Legal moves for the side to move, squares row by row then DIRECTIONS."""
        for col, row in occupied_positions(self._grid, self._turn):
            for direction in DIRECTIONS:
                length = line_count(self._grid, col, row, direction)
                move = Move.along(self, col, row, length, direction)
                # The length is the line count, so only the path needs checking.
                if move is not None and not path_blocked(self._grid, move):
                    yield move

    def __iter__(self) -> Iterator[Move]:
        return self.legal_moves()

    def has_legal_move(self) -> bool:
        return next(self.legal_moves(), None) is not None

    def make_move(self, move: Move) -> None:
        if not self.is_legal(move):
            raise InvariantError(f"Illegal move {move} for {self._turn.full_name}.")
        self._grid[move.row1 - 1, move.col1 - 1] = int(move.moved)
        self._grid[move.row0 - 1, move.col0 - 1] = int(Piece.EMPTY)
        self._turn = self._turn.opposite()
        self._moves.append(move)
        self._invalidate()

    def retract(self) -> Move:
        """Undo the most recent move and return it."""
        if not self._moves:
            raise InvariantError("No move to retract.")
        move = self._moves.pop()
        self._grid[move.row1 - 1, move.col1 - 1] = int(move.replaced)
        self._grid[move.row0 - 1, move.col0 - 1] = int(move.moved)
        self._turn = self._turn.opposite()
        self._invalidate()
        return move

    # ------------------------------------------------------------------
    # End of game
    # ------------------------------------------------------------------
    def pieces_contiguous(self, side: Piece) -> bool:
        return pieces_contiguous(self._grid, side)

    def game_over(self) -> bool:
        if not self._winner_known:
            self._winner = self._find_winner()
            self._winner_known = True
        return self._winner is not None

    @property
    def winner(self) -> Optional[Piece]:
        self.game_over()
        return self._winner

    def _find_winner(self) -> Optional[Piece]:
        # The side that just moved wins ties.
        for side in (self._turn.opposite(), self._turn):
            if self.pieces_contiguous(side):
                return side
        return None

    def _invalidate(self) -> None:
        self._winner = None
        self._winner_known = False

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise InvariantError(f"Cannot compare Board with {type(other).__name__}.")
        return self._turn == other._turn and np.array_equal(self._grid, other._grid)

    def __hash__(self) -> int:
        return hash((self._grid.tobytes(), int(self._turn)))

    def __str__(self) -> str:
        lines = ["==="]
        for row in range(BOARD_SIZE, 0, -1):
            cells = " ".join(self.get(col, row).abbrev for col in range(1, BOARD_SIZE + 1))
            lines.append(f"    {cells}")
        lines.append(f"Next move: {self._turn.full_name}")
        lines.append("===")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(turn={self._turn.name}, moves_made={self.moves_made})\n{self}"
