import chess
import logging
import random
import threading
import time
from typing import Optional, Callable, Union

from laddermate.config import CONFIG
from laddermate.core.difficulty import Difficulty
from laddermate.core.evaluator import MaterialEvaluator
from laddermate.core.utils import log_search_info

_log = logging.getLogger(__name__)

INF = 1000000
MATE_SCORE = 900000


class SearchIntegrityError(RuntimeError):
    """The board was not restored to its pre-search state."""


class SearchEngine:
    """Fixed-depth negamax with alpha-beta pruning over a material evaluator.

    The board handed to `select_move` is searched in place with push/pop and
    is back in its original state when the call returns.
    """

    def __init__(self, evaluator: Optional[MaterialEvaluator] = None,
                 rng: Optional[random.Random] = None):
        self.evaluator = evaluator or MaterialEvaluator()
        self.rng = rng or random.Random(CONFIG.search.random_seed)
        self.nodes = 0
        self.evaluations = 0
        self.best_score: Optional[int] = None
        self._thread: Optional[threading.Thread] = None
        self._error: Optional[BaseException] = None

    def select_move(self, board: chess.Board,
                    difficulty: Union[Difficulty, str]) -> Optional[chess.Move]:
        difficulty = Difficulty.parse(difficulty)
        self.nodes = 0
        self.evaluations = 0
        self.best_score = None

        moves = list(board.legal_moves)
        if not moves:
            return None

        if difficulty.depth is None:
            return moves[self.rng.randrange(len(moves))]

        depth = difficulty.depth
        fen_before = board.fen()
        stack_before = len(board.move_stack)
        start_time = time.time()

        best_move = None
        best_score = -INF
        alpha, beta = -INF, INF
        for move in moves:
            board.push(move)
            score = -self._negamax(board, depth - 1, -beta, -alpha, 1)
            board.pop()
            # strict comparison: the earliest move keeps ties
            if score > best_score:
                best_score = score
                best_move = move
            if best_score > alpha:
                alpha = best_score

        if len(board.move_stack) != stack_before or board.fen() != fen_before:
            raise SearchIntegrityError(
                f"board changed during search: {fen_before} -> {board.fen()}"
            )

        self.best_score = best_score
        log_search_info(difficulty, depth, best_move, best_score, self.nodes,
                        self.evaluations, time.time() - start_time, MATE_SCORE)
        return best_move

    def _negamax(self, board: chess.Board, depth: int, alpha: int, beta: int, ply: int) -> int:
        self.nodes += 1
        if depth == 0:
            self.evaluations += 1
            return self.evaluator.evaluate_relative(board)

        moves = list(board.legal_moves)
        if not moves:
            if board.is_check():
                return -MATE_SCORE + ply
            return 0

        best_score = -INF
        for move in moves:
            board.push(move)
            score = -self._negamax(board, depth - 1, -beta, -alpha, ply + 1)
            board.pop()

            if score > best_score:
                best_score = score
            if score > alpha:
                alpha = score
            if alpha >= beta:
                break

        return best_score

    def start_search(self, board: chess.Board, difficulty: Union[Difficulty, str],
                     callback: Optional[Callable[[Optional[chess.Move]], None]] = None):
        """Run `select_move` on a copy of `board` in a background thread.

        There is no way to stop a running search; `wait` blocks until it ends
        and re-raises anything the search raised. The callback is not called
        for a failed search.
        """
        if self._thread and self._thread.is_alive():
            raise RuntimeError("a search is already running")
        difficulty = Difficulty.parse(difficulty)
        search_board = board.copy()
        self._error = None

        def worker():
            try:
                move = self.select_move(search_board, difficulty)
            except Exception as e:
                _log.error("background search failed: %s", e)
                self._error = e
                return
            if callback:
                callback(move)

        self._thread = threading.Thread(target=worker, daemon=True)
        self._thread.start()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Join the background search; True when no search is running afterwards.

        Raises the exception of a background search that failed.
        """
        if self._thread:
            self._thread.join(timeout)
            if self._thread.is_alive():
                return False
        if self._error is not None:
            error, self._error = self._error, None
            raise error
        return True
