from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional

import numpy as np

from loa.core import Board, Move, Piece

logger = logging.getLogger(__name__)

WIN_VALUE = 1_000_000
NEUTRAL_VALUE = 0
INF = 10 * WIN_VALUE


@dataclass
class SearchConfig:
    depth: int = 2

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {self.depth}.")


@dataclass
class SearchResult:
    move: Optional[Move]
    value: int
    nodes: int
    candidates: int = 0


@contextmanager
def applied(board: Board, move: Move) -> Iterator[Board]:
    """Make move on board for the duration of the block, retracting on exit."""
    board.make_move(move)
    try:
        yield board
    finally:
        board.retract()


class NegamaxSearch:
    """Fixed-depth negamax with alpha-beta cutoffs.

    A node at depth 0 only looks one move ahead for immediate wins and
    losses; every other position scores NEUTRAL_VALUE. Wins found closer to
    the root score higher. The caller's board is never touched: the search
    runs make/retract pairs on a private copy.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or SearchConfig()
        self.rng = rng or np.random.default_rng()
        self.nodes = 0

    # ------------------------------------------------------------------
    def search(self, board: Board) -> SearchResult:
        self.nodes = 0
        root = board.copy()
        depth = self.config.depth

        best_value = -INF
        best_moves: List[Move] = []
        for move in list(root.legal_moves()):
            # Searching one below the best keeps equal values exact.
            value = self._score(root, move, depth, best_value - 1, INF, ply=1)
            move.value = value
            if value > best_value:
                best_value = value
                best_moves = [move]
            elif value == best_value:
                best_moves.append(move)

        if not best_moves:
            logger.debug("No legal move for %s.", root.turn.full_name)
            return SearchResult(move=None, value=NEUTRAL_VALUE, nodes=self.nodes)

        chosen = best_moves[int(self.rng.integers(len(best_moves)))]
        logger.debug(
            "depth=%d nodes=%d value=%d move=%s candidates=%d",
            depth,
            self.nodes,
            best_value,
            chosen,
            len(best_moves),
        )
        return SearchResult(
            move=chosen,
            value=best_value,
            nodes=self.nodes,
            candidates=len(best_moves),
        )

    # ------------------------------------------------------------------
    def _score(self, board: Board, move: Move, depth: int, alpha: int, beta: int, ply: int) -> int:
        """Value of move to the side making it."""
        self.nodes += 1
        with applied(board, move):
            if board.game_over():
                return self._outcome(board.winner, move.moved, ply)
            if depth == 0:
                return NEUTRAL_VALUE
            return -self._negamax(board, depth - 1, -beta, -alpha, ply + 1)

    def _negamax(self, board: Board, depth: int, alpha: int, beta: int, ply: int) -> int:
        best = -INF
        for move in list(board.legal_moves()):
            value = self._score(board, move, depth, max(alpha, best), beta, ply)
            move.value = value
            if value > best:
                best = value
            if best >= beta:
                break
        if best == -INF:
            return NEUTRAL_VALUE
        return best

    @staticmethod
    def _outcome(winner: Optional[Piece], mover: Piece, ply: int) -> int:
        if winner == mover:
            return WIN_VALUE - ply
        return -(WIN_VALUE - ply)
