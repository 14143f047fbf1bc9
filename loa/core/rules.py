from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .state import BOARD_SIZE, DIRECTIONS, Direction, Move, Piece

GridArray = NDArray[np.int8]
Position = Tuple[int, int]

_E, _B, _W = Piece.EMPTY, Piece.BLACK, Piece.WHITE

# Plain ints and tuples for the hot loops.
_OPPONENT = {int(_B): int(_W), int(_W): int(_B)}
_STEPS: Tuple[Tuple[int, int], ...] = tuple(direction.value for direction in DIRECTIONS)

# Row 1 first: INITIAL_PIECES[row - 1][col - 1].
INITIAL_PIECES: Tuple[Tuple[Piece, ...], ...] = (
    (_E, _B, _B, _B, _B, _B, _B, _E),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_E, _B, _B, _B, _B, _B, _B, _E),
)


def grid_from(contents: Sequence[Sequence[int]]) -> GridArray:
    grid = np.array(contents, dtype=np.int8)
    if grid.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f"Board contents must be {BOARD_SIZE}x{BOARD_SIZE}, got {grid.shape}.")
    if not np.isin(grid, [int(piece) for piece in Piece]).all():
        raise ValueError("Board contents contain unknown piece values.")
    return grid


def initial_grid() -> GridArray:
    return grid_from(INITIAL_PIECES)


def board_line(grid: GridArray, col: int, row: int, direction: Direction) -> GridArray:
    """The whole row, column or diagonal through (col, row) along direction."""
    dc, dr = direction.value
    r, c = row - 1, col - 1
    if dc == 0 and dr == 0:
        raise ValueError("NOWHERE does not define a line.")
    if dr == 0:
        return grid[r, :]
    if dc == 0:
        return grid[:, c]
    if dc == dr:
        return grid.diagonal(c - r)
    # Anti-diagonal: col + row is constant.
    return np.fliplr(grid).diagonal(BOARD_SIZE - 1 - c - r)


def line_count(grid: GridArray, col: int, row: int, direction: Direction) -> int:
    """Number of pieces on the whole line through (col, row) along direction."""
    return int(np.count_nonzero(board_line(grid, col, row, direction)))


def path_blocked(grid: GridArray, move: Move) -> bool:
    """True if an enemy piece lies between the ends, or a friend on the destination."""
    mover = int(move.moved)
    if grid[move.row1 - 1, move.col1 - 1] == mover:
        return True
    enemy = _OPPONENT.get(mover)
    dc, dr = move.direction.value
    return any(
        grid[move.row0 - 1 + dr * step, move.col0 - 1 + dc * step] == enemy
        for step in range(1, move.length)
    )


def occupied_positions(grid: GridArray, side: Piece) -> List[Position]:
    """(col, row) of every piece of side, row-major from (1, 1)."""
    rows, cols = np.nonzero(grid == int(side))
    return [(int(c) + 1, int(r) + 1) for r, c in zip(rows, cols)]


def pieces_contiguous(grid: GridArray, side: Piece) -> bool:
    pieces = set(occupied_positions(grid, side))
    if not pieces:
        return True
    start = next(iter(pieces))
    stack = [start]
    seen = {start}
    while stack:
        col, row = stack.pop()
        for dc, dr in _STEPS:
            neighbour = (col + dc, row + dr)
            if neighbour in pieces and neighbour not in seen:
                seen.add(neighbour)
                stack.append(neighbour)
    return len(seen) == len(pieces)
