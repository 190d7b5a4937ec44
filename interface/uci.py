import logging
import sys

import chess

from laddermate.config import CONFIG
from laddermate.core.difficulty import Difficulty, UnknownDifficultyError
from laddermate.core.search import SearchEngine
from laddermate.core.utils import setup_logging

_log = logging.getLogger(__name__)


class UCI:
    """Minimal UCI front end. Clock parameters of `go` are ignored; the
    configured difficulty alone decides how deep the engine looks."""

    def __init__(self, out=None):
        self.engine = SearchEngine()
        self.board = chess.Board()
        self.difficulty = Difficulty.parse(CONFIG.search.difficulty)
        self.out = out or sys.stdout

    def _send(self, line: str):
        print(line, file=self.out, flush=True)

    def run(self, stream=None):
        stream = stream or sys.stdin
        for raw in stream:
            if not self.handle(raw):
                break

    def handle(self, command: str) -> bool:
        """Process one command line. Returns False on 'quit'."""
        tokens = command.split()
        if not tokens:
            return True
        cmd, args = tokens[0], tokens[1:]
        if cmd == "uci":
            self._send(f"id name {CONFIG.ui.engine_name}")
            self._send(f"id author {CONFIG.ui.engine_author}")
            choices = " ".join(f"var {d.label}" for d in Difficulty)
            self._send(f"option name Difficulty type combo default {self.difficulty.label} {choices}")
            self._send("uciok")
        elif cmd == "isready":
            self._send("readyok")
        elif cmd == "ucinewgame":
            self.board.reset()
        elif cmd == "position":
            self._parse_position(args)
        elif cmd == "setoption":
            self._parse_setoption(args)
        elif cmd == "go":
            self._parse_go(args)
        elif cmd == "quit":
            return False
        else:
            _log.debug("ignoring unknown command %r", command.strip())
        return True

    def _parse_position(self, tokens):
        if not tokens:
            return
        if tokens[0] == "startpos":
            board = chess.Board()
            rest = tokens[1:]
        elif tokens[0] == "fen":
            if "moves" in tokens:
                idx = tokens.index("moves")
                fen, rest = " ".join(tokens[1:idx]), tokens[idx:]
            else:
                fen, rest = " ".join(tokens[1:]), []
            try:
                board = chess.Board(fen)
            except ValueError:
                _log.warning("invalid FEN in position command: %s", fen)
                return
        else:
            return

        if rest and rest[0] == "moves":
            for uci_move in rest[1:]:
                try:
                    move = chess.Move.from_uci(uci_move)
                except ValueError:
                    _log.warning("malformed move %s in position command", uci_move)
                    break
                if move not in board.legal_moves:
                    _log.warning("illegal move %s in position command", uci_move)
                    break
                board.push(move)
        self.board = board

    def _parse_setoption(self, tokens):
        if "name" not in tokens:
            return
        name_idx = tokens.index("name") + 1
        value_idx = tokens.index("value") if "value" in tokens else len(tokens)
        name = " ".join(tokens[name_idx:value_idx]).lower()
        value = " ".join(tokens[value_idx + 1:])
        if name == "difficulty":
            try:
                self.difficulty = Difficulty.parse(value)
            except UnknownDifficultyError as e:
                _log.warning("%s", e)
        else:
            _log.debug("ignoring unsupported option %r", name)

    def _parse_go(self, tokens):
        move = self.engine.select_move(self.board, self.difficulty)
        self._send(f"bestmove {move.uci() if move else '0000'}")


def main():
    setup_logging(CONFIG.log_level)
    UCI().run()


if __name__ == "__main__":
    main()
