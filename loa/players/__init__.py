"""Sources of moves for each side."""

from .players import BoardSource, HumanPlayer, MachinePlayer, MoveSource, Player

__all__ = ["BoardSource", "HumanPlayer", "MachinePlayer", "MoveSource", "Player"]
