"""Unattended matches between players."""

from .match import EvaluationResult, MatchResult, MatchTable, evaluate_players, play_match

__all__ = ["EvaluationResult", "MatchResult", "MatchTable", "evaluate_players", "play_match"]
