"""Board wrapper over python-chess providing move history and game status."""

from enum import Enum
from typing import List, Optional

import chess


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW = "draw"


class ChessBoard:
    def __init__(self, fen: str = None):
        """Initialize from FEN or the standard starting position."""
        self.board = chess.Board(fen) if fen else chess.Board()
        self.move_history: List[str] = []

    def reset(self):
        """Reset to the initial position."""
        self.board.reset()
        self.move_history.clear()

    def set_fen(self, fen: str):
        """Set board state from a FEN string; raises ValueError if invalid."""
        self.board.set_fen(fen)
        self.move_history.clear()

    def get_fen(self) -> str:
        """Return the current FEN."""
        return self.board.fen()

    def parse_move(self, move_str: str) -> Optional[chess.Move]:
        """Turn a UCI string into a legal move, or None.

        A pawn move onto the last rank without a promotion piece promotes
        to a queen.
        """
        try:
            move = chess.Move.from_uci(move_str.strip())
        except ValueError:
            return None
        if move.promotion is None:
            piece = self.board.piece_at(move.from_square)
            if (piece and piece.piece_type == chess.PAWN
                    and chess.square_rank(move.to_square) in (0, 7)):
                move = chess.Move(move.from_square, move.to_square, promotion=chess.QUEEN)
        if move in self.board.legal_moves:
            return move
        return None

    def make_move(self, move_str: str) -> bool:
        """Push a UCI move (e.g. 'e2e4'). Returns True if legal."""
        move = self.parse_move(move_str)
        if move is None:
            return False
        self.push(move)
        return True

    def push(self, move: chess.Move):
        """Commit an already validated move, recording it in SAN."""
        self.move_history.append(self.board.san(move))
        self.board.push(move)

    def undo_move(self) -> bool:
        """Pop the last move. Returns False when there is nothing to undo."""
        if not self.move_history:
            return False
        self.board.pop()
        self.move_history.pop()
        return True

    def get_legal_moves(self):
        """Return legal moves as UCI strings."""
        return [m.uci() for m in self.board.legal_moves]

    def is_game_over(self):
        """Check if the game has ended."""
        return self.board.is_game_over()

    def status(self) -> GameStatus:
        if self.board.is_checkmate():
            return GameStatus.CHECKMATE
        if self.board.is_stalemate():
            return GameStatus.STALEMATE
        if self.board.is_game_over():
            return GameStatus.DRAW
        if self.board.is_check():
            return GameStatus.CHECK
        return GameStatus.IN_PROGRESS

    def winner(self) -> Optional[str]:
        """'white' or 'black' after a checkmate, otherwise None."""
        if not self.board.is_checkmate():
            return None
        return "black" if self.board.turn == chess.WHITE else "white"

    def turn(self) -> str:
        return "white" if self.board.turn == chess.WHITE else "black"
