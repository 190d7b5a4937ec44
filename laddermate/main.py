import logging
from typing import Optional, Union

import chess

from laddermate.config import CONFIG
from laddermate.core.board import ChessBoard
from laddermate.core.difficulty import Difficulty
from laddermate.core.search import SearchEngine
from laddermate.core.evaluator import MaterialEvaluator

_log = logging.getLogger(__name__)

MODES = ("ai", "local")


class Engine:
    """One game: a board, a search engine and the settings it plays with.

    In "ai" mode the engine owns `engine_color` and answers human moves; in
    "local" mode two people share the board and the engine only moves when
    asked.
    """

    def __init__(self, difficulty: Union[Difficulty, str, None] = None,
                 mode: Optional[str] = None, engine_color: Optional[str] = None,
                 fen: Optional[str] = None, search: Optional[SearchEngine] = None):
        self.board = ChessBoard(fen)
        self.search = search or SearchEngine(MaterialEvaluator())
        self.difficulty = Difficulty.parse(
            difficulty if difficulty is not None else CONFIG.search.difficulty)
        self.mode = self._parse_mode(mode or CONFIG.ui.mode)
        self.engine_color = self._parse_color(engine_color or CONFIG.ui.engine_color)

    @staticmethod
    def _parse_mode(mode: str) -> str:
        mode = mode.lower()
        if mode not in MODES:
            raise ValueError(f"Unknown mode {mode!r}; expected one of {', '.join(MODES)}")
        return mode

    @staticmethod
    def _parse_color(color: str) -> chess.Color:
        color = color.lower()
        if color not in ("white", "black"):
            raise ValueError(f"Unknown color {color!r}; expected 'white' or 'black'")
        return chess.WHITE if color == "white" else chess.BLACK

    def set_difficulty(self, difficulty: Union[Difficulty, str]):
        self.difficulty = Difficulty.parse(difficulty)

    def set_mode(self, mode: str):
        self.mode = self._parse_mode(mode)

    def engine_to_move(self) -> bool:
        return (self.mode == "ai" and not self.board.is_game_over()
                and self.board.board.turn == self.engine_color)

    def get_best_move(self, difficulty: Union[Difficulty, str, None] = None) -> Optional[str]:
        """Engine's choice for the current position in UCI, without playing it."""
        move = self.search.select_move(
            self.board.board, difficulty if difficulty is not None else self.difficulty)
        return move.uci() if move else None

    def play_engine_move(self) -> Optional[str]:
        """Let the engine pick and commit a move. Returns it in UCI, or None."""
        move = self.search.select_move(self.board.board, self.difficulty)
        if move is None:
            return None
        self.board.push(move)
        _log.info("engine (%s) plays %s", self.difficulty.label, move.uci())
        return move.uci()

    def make_move(self, move_uci: str) -> bool:
        return self.board.make_move(move_uci)

    def undo(self) -> int:
        """Take back the last move, or the last full turn against the engine.

        Returns the number of plies removed.
        """
        removed = 0
        if self.board.undo_move():
            removed += 1
        if (self.mode == "ai" and removed and self.board.board.turn == self.engine_color
                and self.board.undo_move()):
            removed += 1
        return removed

    def reset(self, fen: Optional[str] = None):
        if fen:
            self.board.set_fen(fen)
        else:
            self.board.reset()
