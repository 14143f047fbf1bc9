"""Lines of Action rules engine and automated player."""

from . import core, search, players, game, evaluation
from .core import (
    BOARD_SIZE,
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
from .search import NegamaxSearch, SearchConfig, SearchResult
from .players import HumanPlayer, MachinePlayer, Player
from .config import GameConfig, load_config
from .game import Game
from .evaluation import EvaluationResult, MatchResult, evaluate_players, play_match

__all__ = [
    "core",
    "search",
    "players",
    "game",
    "evaluation",
    "BOARD_SIZE",
    "DIRECTIONS",
    "Board",
    "Direction",
    "InvariantError",
    "MalformedInputError",
    "Move",
    "Piece",
    "parse_square",
    "square_name",
    "NegamaxSearch",
    "SearchConfig",
    "SearchResult",
    "HumanPlayer",
    "MachinePlayer",
    "Player",
    "GameConfig",
    "load_config",
    "Game",
    "EvaluationResult",
    "MatchResult",
    "evaluate_players",
    "play_match",
]
