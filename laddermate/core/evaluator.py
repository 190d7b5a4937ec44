import chess
from typing import Dict, Optional
from laddermate.config import CONFIG

PIECE_NAMES = {
    "PAWN": chess.PAWN,
    "KNIGHT": chess.KNIGHT,
    "BISHOP": chess.BISHOP,
    "ROOK": chess.ROOK,
    "QUEEN": chess.QUEEN,
    "KING": chess.KING,
}


class MaterialEvaluator:
    """Material count over the board, positive when White is ahead.

    The score ignores whose turn it is; `evaluate_relative` is the variant
    the negamax search uses at its leaves.
    """

    def __init__(self, piece_values: Optional[Dict[str, int]] = None):
        table = piece_values if piece_values is not None else CONFIG.eval.piece_values
        self.values = {}
        for name, value in table.items():
            key = name.upper()
            if key not in PIECE_NAMES:
                raise ValueError(f"Unknown piece name in value table: {name!r}")
            self.values[PIECE_NAMES[key]] = int(value)
        missing = set(PIECE_NAMES.values()) - set(self.values)
        if missing:
            names = sorted(chess.piece_name(pt) for pt in missing)
            raise ValueError(f"Value table is missing: {', '.join(names)}")

    def evaluate(self, board: chess.Board) -> int:
        score = 0
        for piece in board.piece_map().values():
            value = self.values[piece.piece_type]
            score += value if piece.color == chess.WHITE else -value
        return score

    def evaluate_relative(self, board: chess.Board) -> int:
        score = self.evaluate(board)
        return score if board.turn == chess.WHITE else -score
