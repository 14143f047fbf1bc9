import pytest

from loa.core import (
    DIRECTIONS,
    Board,
    Direction,
    InvariantError,
    MalformedInputError,
    Move,
    Piece,
    parse_square,
    square_name,
)


def test_parse_square_corners() -> None:
    assert parse_square("a1") == (1, 1)
    assert parse_square("h8") == (8, 8)
    assert parse_square("d6") == (4, 6)
    assert square_name(4, 6) == "d6"


@pytest.mark.parametrize("text", ["", "a", "a10", "i1", "a9", "a0", "A1", "1a", " a1"])
def test_parse_square_rejects_bad_designators(text: str) -> None:
    with pytest.raises(MalformedInputError):
        parse_square(text)


def test_piece_opposite_and_index() -> None:
    assert Piece.BLACK.opposite() == Piece.WHITE
    assert Piece.WHITE.opposite() == Piece.BLACK
    assert Piece.EMPTY.opposite() == Piece.EMPTY
    assert Piece.BLACK.index == 0
    assert Piece.WHITE.index == 1
    with pytest.raises(InvariantError):
        Piece.EMPTY.index


def test_piece_parse() -> None:
    assert Piece.parse("b") == Piece.BLACK
    assert Piece.parse("White") == Piece.WHITE
    assert Piece.parse("-") == Piece.EMPTY
    assert Piece.parse_side("black") == Piece.BLACK
    with pytest.raises(MalformedInputError):
        Piece.parse("x")
    with pytest.raises(MalformedInputError):
        Piece.parse_side("b")


def test_direction_order_and_reverse() -> None:
    assert [d.name for d in DIRECTIONS] == ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
    assert Direction.NE.reverse() == Direction.SW
    assert Direction.between(2, 1, 5, 4) == Direction.NE
    assert Direction.between(3, 3, 3, 3) == Direction.NOWHERE


def test_move_parse_from_text() -> None:
    board = Board()
    move = Move.parse("b1-b3", board)

    assert move.origin == (2, 1)
    assert move.destination == (2, 3)
    assert move.direction == Direction.N
    assert move.length == 2
    assert move.moved == Piece.BLACK
    assert move.replaced == Piece.EMPTY
    assert not move.is_capture
    assert str(move) == "b1-b3"


@pytest.mark.parametrize("text", ["b1b3", "b1-b", "z1-b3", "b1-b9", "b1 - b3", ""])
def test_move_parse_rejects_malformed_text(text: str) -> None:
    with pytest.raises(MalformedInputError):
        Move.parse(text, Board())


def test_move_create_off_board_is_none() -> None:
    board = Board()
    assert Move.create(board, 1, 1, 0, 1) is None
    assert Move.along(board, 7, 1, 6, Direction.E) is None


def test_move_value_is_not_part_of_identity() -> None:
    board = Board()
    first = Move.parse("b1-b3", board)
    second = Move.parse("b1-b3", board)
    first.value = 10

    assert first == second
    assert hash(first) == hash(second)
