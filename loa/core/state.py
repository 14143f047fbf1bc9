from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Optional, Tuple

from .errors import InvariantError, MalformedInputError

if TYPE_CHECKING:
    from .board import Board

BOARD_SIZE = 8

SQUARE_PATTERN = re.compile(r"^[a-h][1-8]$")
MOVE_PATTERN = re.compile(r"^([a-h][1-8])-([a-h][1-8])$")


class Piece(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opposite(self) -> "Piece":
        if self == Piece.BLACK:
            return Piece.WHITE
        if self == Piece.WHITE:
            return Piece.BLACK
        return Piece.EMPTY

    @property
    def index(self) -> int:
        if self == Piece.EMPTY:
            raise InvariantError("EMPTY has no side index.")
        return int(self) - 1

    @property
    def abbrev(self) -> str:
        return _ABBREVIATIONS[self]

    @property
    def full_name(self) -> str:
        return self.name.lower()

    @staticmethod
    def parse(text: str) -> "Piece":
        """Piece named by an abbreviation (b, w, -) or a full name."""
        key = text.strip().lower()
        for piece in Piece:
            if key in (piece.abbrev, piece.full_name):
                return piece
        raise MalformedInputError(f"unknown piece: {text}")

    @staticmethod
    def parse_side(text: str) -> "Piece":
        key = text.strip().lower()
        if key == "black":
            return Piece.BLACK
        if key == "white":
            return Piece.WHITE
        raise MalformedInputError(f"unknown player: {text}")


_ABBREVIATIONS = {Piece.EMPTY: "-", Piece.BLACK: "b", Piece.WHITE: "w"}


class Direction(Enum):
    N = (0, 1)
    NE = (1, 1)
    E = (1, 0)
    SE = (1, -1)
    S = (0, -1)
    SW = (-1, -1)
    W = (-1, 0)
    NW = (-1, 1)
    NOWHERE = (0, 0)

    @property
    def dc(self) -> int:
        return self.value[0]

    @property
    def dr(self) -> int:
        return self.value[1]

    def reverse(self) -> "Direction":
        return Direction((-self.dc, -self.dr))

    @staticmethod
    def between(col0: int, row0: int, col1: int, row1: int) -> "Direction":
        return Direction((_sign(col1 - col0), _sign(row1 - row0)))


# Fixed move generation order; search tie-breaks depend on it.
DIRECTIONS: Tuple[Direction, ...] = (
    Direction.N,
    Direction.NE,
    Direction.E,
    Direction.SE,
    Direction.S,
    Direction.SW,
    Direction.W,
    Direction.NW,
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def in_bounds(col: int, row: int) -> bool:
    return 1 <= col <= BOARD_SIZE and 1 <= row <= BOARD_SIZE


def parse_square(text: str) -> Tuple[int, int]:
    """Return (col, row) for a designator such as ``d4``."""
    if not isinstance(text, str) or not SQUARE_PATTERN.match(text):
        raise MalformedInputError(f"bad square designator: {text!r}")
    return ord(text[0]) - ord("a") + 1, ord(text[1]) - ord("0")


def square_name(col: int, row: int) -> str:
    if not in_bounds(col, row):
        raise MalformedInputError(f"square ({col}, {row}) is off the board")
    return f"{chr(ord('a') + col - 1)}{row}"


@dataclass
class Move:
    col0: int
    row0: int
    col1: int
    row1: int
    direction: Direction
    length: int
    moved: Piece
    replaced: Piece = Piece.EMPTY
    # Annotation written by the search; not part of the move's identity.
    value: int = field(default=0, compare=False)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.col0, self.row0, self.col1, self.row1)

    @property
    def origin(self) -> Tuple[int, int]:
        return (self.col0, self.row0)

    @property
    def destination(self) -> Tuple[int, int]:
        return (self.col1, self.row1)

    @property
    def is_capture(self) -> bool:
        return self.replaced != Piece.EMPTY

    def __str__(self) -> str:
        return f"{square_name(self.col0, self.row0)}-{square_name(self.col1, self.row1)}"

    @staticmethod
    def create(board: "Board", col0: int, row0: int, col1: int, row1: int) -> Optional["Move"]:
        if not (in_bounds(col0, row0) and in_bounds(col1, row1)):
            return None
        return Move(
            col0,
            row0,
            col1,
            row1,
            direction=Direction.between(col0, row0, col1, row1),
            length=max(abs(col1 - col0), abs(row1 - row0)),
            moved=board.get(col0, row0),
            replaced=board.get(col1, row1),
        )

    @staticmethod
    def along(board: "Board", col: int, row: int, length: int, direction: Direction) -> Optional["Move"]:
        return Move.create(board, col, row, col + direction.dc * length, row + direction.dr * length)

    @staticmethod
    def parse(text: str, board: "Board") -> "Move":
        match = MOVE_PATTERN.match(text.strip())
        if match is None:
            raise MalformedInputError(f"invalid move: {text}")
        col0, row0 = parse_square(match.group(1))
        col1, row1 = parse_square(match.group(2))
        move = Move.create(board, col0, row0, col1, row1)
        if move is None:
            raise MalformedInputError(f"invalid move: {text}")
        return move
