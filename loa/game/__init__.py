"""Text-command game control."""

from .controller import HELP_TEXT, Game, reseed

__all__ = ["HELP_TEXT", "Game", "reseed"]
