from __future__ import annotations


class MalformedInputError(ValueError):
    """Text that does not describe a square, move, piece or number."""


class InvariantError(RuntimeError):
    """A caller broke a documented precondition of the engine."""
