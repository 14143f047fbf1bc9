from __future__ import annotations

import logging
import re
import sys
from typing import List, Optional, TextIO

import numpy as np

from loa.config import GameConfig
from loa.core import Board, MalformedInputError, Move, Piece, parse_square
from loa.players import HumanPlayer, MachinePlayer, Player

logger = logging.getLogger(__name__)

COMMAND_PATTERN = re.compile(r"(#|\S+)\s*(\S*)\s*(\S*).*")

HELP_TEXT = """\
Commands:
  start              start playing from the current position
  clear              stop and reset to the initial position
  manual <side>      let <side> (black or white) be played from input
  auto <side>        let <side> be played by the machine
  seed <n>           reseed the random source
  set <sq> <piece>   put <piece> (b, w or -) on <sq>; the other side moves next
  dump               print the board
  help               print this message
  quit               leave
  <c0r0>-<c1r1>      a move, e.g. b1-b3"""


def reseed(rng: np.random.Generator, seed: int) -> None:
    """Restart rng in place so every holder sees the new sequence."""
    rng.bit_generator.state = np.random.default_rng(seed).bit_generator.state


class Game:
    """One session of Lines of Action driven by text commands."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        input_stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.config = config or GameConfig()
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output if output is not None else sys.stdout
        self.rng = np.random.default_rng(self.config.seed)
        self._board = Board()
        self._playing = False
        self._quit = False
        self._players: List[Player] = [
            self._make_player(side, self.config.player_kind(side))
            for side in (Piece.BLACK, Piece.WHITE)
        ]

    @property
    def board(self) -> Board:
        return self._board

    @property
    def playing(self) -> bool:
        return self._playing

    def player(self, side: Piece) -> Player:
        return self._players[side.index]

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def play(self) -> None:
        """Run commands and turns until quit or end of input."""
        while not self._quit:
            if not self._playing:
                self.get_move()
                continue
            if self._board.game_over():
                self._announce_winner()
                self._playing = False
                continue
            player = self.player(self._board.turn)
            move = player.make_move()
            if move is not None:
                self._apply(player, move)
            elif self._playing and not self._quit:
                self._error(f"no legal move for {self._board.turn.full_name}")
                self._playing = False

    def get_move(self) -> Optional[Move]:
        """Read lines until a legal move arrives or the playing state changes."""
        playing0 = self._playing
        while self._playing == playing0 and not self._quit:
            line = self._read_line()
            if line is None:
                self.quit()
                break
            if self.process_command(line):
                continue
            try:
                move = Move.parse(line, self._board)
            except MalformedInputError:
                self._error(f"invalid move: {line}")
                continue
            if not self._playing:
                self._error("game not started")
            elif not self._board.is_legal(move):
                self._error(f"illegal move: {line}")
            else:
                return move
        return None

    def _apply(self, player: Player, move: Move) -> None:
        self._board.make_move(move)
        if isinstance(player, MachinePlayer):
            self._say(f"{player.side.full_name.capitalize()}::{move}")
        logger.debug("%s played %s", player.side.full_name, move)
        if self._board.game_over():
            self._announce_winner()
            self._playing = False

    def _announce_winner(self) -> None:
        winner = self._board.winner
        logger.info("Game over after %d moves, %s wins.", self._board.moves_made, winner.full_name)
        self._say(f"{winner.full_name.capitalize()} wins.")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def process_command(self, line: str) -> bool:
        """Carry out line if it is a command other than a move; report whether it was."""
        if not line:
            return True
        match = COMMAND_PATTERN.match(line)
        if match is None:
            return False
        name, arg1, arg2 = match.group(1).lower(), match.group(2), match.group(3)
        handlers = {
            "#": lambda: None,
            "start": self.start,
            "clear": self.clear,
            "manual": lambda: self._set_player(arg1, "manual"),
            "auto": lambda: self._set_player(arg1, "auto"),
            "seed": lambda: self._seed(arg1),
            "set": lambda: self._set_square(arg1.lower(), arg2.lower()),
            "dump": self.dump,
            "help": self.help,
            "quit": self.quit,
        }
        handler = handlers.get(name)
        if handler is None:
            return False
        logger.debug("command: %s", line)
        handler()
        return True

    def start(self) -> None:
        self._playing = True

    def clear(self) -> None:
        self._board.clear()
        self._playing = False

    def quit(self) -> None:
        self._quit = True

    def dump(self) -> None:
        self._say(str(self._board))

    def help(self) -> None:
        self._say(HELP_TEXT)

    def _set_player(self, name: str, kind: str) -> None:
        try:
            side = Piece.parse_side(name)
        except MalformedInputError:
            self._error(f"unknown player: {name}")
            return
        self._playing = False
        self._players[side.index] = self._make_player(side, kind)

    def _seed(self, text: str) -> None:
        try:
            seed = int(text)
        except ValueError:
            self._error(f"invalid number: {text}")
            return
        reseed(self.rng, seed)

    def _set_square(self, square: str, name: str) -> None:
        try:
            col, row = parse_square(square)
            piece = Piece.parse(name)
        except MalformedInputError as exc:
            self._error(str(exc))
            return
        # An emptied square leaves the side to move alone.
        next_turn = piece.opposite() if piece != Piece.EMPTY else None
        self._board.set(col, row, piece, next_turn)
        self._playing = False

    def _make_player(self, side: Piece, kind: str) -> Player:
        if kind == "auto":
            return MachinePlayer(side, self, self.config.search, rng=self.rng)
        return HumanPlayer(side, self)

    # ------------------------------------------------------------------
    # I/O
    # ------------------------------------------------------------------
    def _read_line(self) -> Optional[str]:
        if self.config.prompt:
            self._output.write("> ")
            self._output.flush()
        line = self._input.readline()
        if not line:
            return None
        return line.strip()

    def _say(self, text: str) -> None:
        print(text, file=self._output)

    def _error(self, message: str) -> None:
        print(f"error: {message}", file=self._output)
