from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from loa.core import Board, Piece
from loa.players import BoardSource, Player

logger = logging.getLogger(__name__)

PlayerFactory = Callable[[Piece, BoardSource], Player]


@dataclass
class MatchTable:
    """Board holder handed to the players of an unattended match."""

    board: Board


@dataclass
class MatchResult:
    winner: Optional[Piece]
    moves: int
    board: Board


@dataclass
class EvaluationResult:
    games_played: int
    black_wins: int
    white_wins: int
    draws: int
    average_length: float

    def winrate_black(self) -> float:
        return self.black_wins / max(1, self.games_played)

    def winrate_white(self) -> float:
        return self.white_wins / max(1, self.games_played)


def play_match(
    black_factory: PlayerFactory,
    white_factory: PlayerFactory,
    *,
    board: Optional[Board] = None,
    max_moves: int = 200,
) -> MatchResult:
    """Play one game without input; a game still open after max_moves is a draw."""
    table = MatchTable(board.copy() if board is not None else Board())
    players = {
        Piece.BLACK: black_factory(Piece.BLACK, table),
        Piece.WHITE: white_factory(Piece.WHITE, table),
    }

    moves = 0
    while moves < max_moves and not table.board.game_over():
        move = players[table.board.turn].make_move()
        if move is None:
            logger.debug("%s has no legal move, ending match.", table.board.turn.full_name)
            break
        table.board.make_move(move)
        moves += 1

    return MatchResult(winner=table.board.winner, moves=moves, board=table.board)


def evaluate_players(
    black_factory: PlayerFactory,
    white_factory: PlayerFactory,
    *,
    episodes: int,
    max_moves: int = 200,
    board: Optional[Board] = None,
) -> EvaluationResult:
    black_wins = 0
    white_wins = 0
    draws = 0
    total_moves = 0

    for episode in range(episodes):
        result = play_match(black_factory, white_factory, board=board, max_moves=max_moves)
        total_moves += result.moves
        if result.winner == Piece.BLACK:
            black_wins += 1
        elif result.winner == Piece.WHITE:
            white_wins += 1
        else:
            draws += 1
        logger.debug(
            "episode %d: winner=%s moves=%d",
            episode,
            result.winner.full_name if result.winner is not None else "none",
            result.moves,
        )

    return EvaluationResult(
        games_played=episodes,
        black_wins=black_wins,
        white_wins=white_wins,
        draws=draws,
        average_length=total_moves / max(1, episodes),
    )
