from __future__ import annotations

from typing import Optional, Protocol

import numpy as np

from loa.core import Board, Move, Piece
from loa.search import NegamaxSearch, SearchConfig, SearchResult


class BoardSource(Protocol):
    """Anything that exposes the live game board."""

    @property
    def board(self) -> Board:
        ...


class MoveSource(BoardSource, Protocol):
    def get_move(self) -> Optional[Move]:
        """Block until a parsed, legal move is available.

        Returns None instead when the session state changes (for example the
        game is stopped) before a move arrives.
        """
        ...


class Player(Protocol):
    side: Piece

    def make_move(self) -> Optional[Move]:
        ...


class HumanPlayer:
    """Takes its moves from a MoveSource, usually a Game reading text commands."""

    def __init__(self, side: Piece, source: MoveSource) -> None:
        self.side = side
        self.source = source

    def make_move(self) -> Optional[Move]:
        return self.source.get_move()

    def __repr__(self) -> str:
        return f"HumanPlayer({self.side.full_name})"


class MachinePlayer:
    def __init__(
        self,
        side: Piece,
        source: BoardSource,
        config: Optional[SearchConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.side = side
        self.source = source
        self.search = NegamaxSearch(config, rng=rng)
        self.last_result: Optional[SearchResult] = None

    @property
    def config(self) -> SearchConfig:
        return self.search.config

    def make_move(self) -> Optional[Move]:
        self.last_result = self.search.search(self.source.board)
        return self.last_result.move

    def __repr__(self) -> str:
        return f"MachinePlayer({self.side.full_name}, depth={self.config.depth})"
