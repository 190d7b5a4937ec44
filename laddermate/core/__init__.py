"""Core engine components: board wrapper, difficulty ladder, evaluator and search."""

from .board import ChessBoard, GameStatus
from .difficulty import Difficulty, UnknownDifficultyError
from .evaluator import MaterialEvaluator
from .search import SearchEngine, SearchIntegrityError
