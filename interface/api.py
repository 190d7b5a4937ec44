"""FastAPI REST interface for the engine."""

import logging
import random
import threading

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, field_validator
from typing import Optional

from laddermate import __version__
from laddermate.config import CONFIG
from laddermate.core.difficulty import Difficulty
from laddermate.core.search import SearchEngine
from laddermate.main import Engine, MODES

_log = logging.getLogger(__name__)

app = FastAPI(title=CONFIG.ui.engine_name, version=__version__)

# Shared game session; every handler holds the lock while touching it.
game = Engine()
_game_lock = threading.Lock()


def _check_difficulty(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    return Difficulty.parse(v).label


class FenRequest(BaseModel):
    fen: str


class MoveRequest(BaseModel):
    move: str  # UCI format e.g. "e2e4"; "e7e8" promotes to a queen


class SearchRequest(BaseModel):
    difficulty: Optional[str] = None

    @field_validator("difficulty")
    @classmethod
    def known_difficulty(cls, v: Optional[str]) -> Optional[str]:
        return _check_difficulty(v)


class DifficultyRequest(BaseModel):
    difficulty: str

    @field_validator("difficulty")
    @classmethod
    def known_difficulty(cls, v: str) -> str:
        return _check_difficulty(v)


class ModeRequest(BaseModel):
    mode: str

    @field_validator("mode")
    @classmethod
    def known_mode(cls, v: str) -> str:
        v = v.lower()
        if v not in MODES:
            raise ValueError(f"mode must be one of {', '.join(MODES)}")
        return v


def _snapshot():
    b = game.board
    return {
        "fen": b.get_fen(),
        "turn": b.turn(),
        "legal_moves": b.get_legal_moves(),
        "status": b.status().value,
        "is_game_over": b.is_game_over(),
        "result": b.board.result() if b.is_game_over() else None,
        "winner": b.winner(),
        "history": list(b.move_history),
        "difficulty": game.difficulty.label,
        "mode": game.mode,
    }


@app.get("/board")
def get_board():
    with _game_lock:
        return _snapshot()


@app.post("/position")
def set_position(req: FenRequest):
    with _game_lock:
        try:
            game.reset(req.fen)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid FEN: {e}")
        return {"fen": game.board.get_fen()}


@app.post("/move")
def make_move(req: MoveRequest):
    with _game_lock:
        if game.board.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        if not game.make_move(req.move):
            _log.warning("rejected move %r at %s", req.move, game.board.get_fen())
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.move}")
        played = game.board.board.peek().uci()
        reply = game.play_engine_move() if game.engine_to_move() else None
        return {"move": played, "reply": reply, **_snapshot()}


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _game_lock:
        if game.board.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        difficulty = Difficulty.parse(
            req.difficulty if req.difficulty is not None else game.difficulty)
        search_board = game.board.board.copy()
        seed = game.search.rng.getrandbits(64)

    # statistics, best_score and the Beginner draw are per request
    searcher = SearchEngine(game.search.evaluator, rng=random.Random(seed))
    best = searcher.select_move(search_board, difficulty)
    return {
        "best_move": best.uci() if best else None,
        "score": searcher.best_score,
        "difficulty": difficulty.label,
        "fen": search_board.fen(),
    }


@app.post("/difficulty")
def set_difficulty(req: DifficultyRequest):
    with _game_lock:
        game.set_difficulty(req.difficulty)
        return {"difficulty": game.difficulty.label}


@app.post("/mode")
def set_mode(req: ModeRequest):
    with _game_lock:
        game.set_mode(req.mode)
        return {"mode": game.mode}


@app.post("/undo")
def undo_move():
    with _game_lock:
        removed = game.undo()
        return {"undone": removed, **_snapshot()}


@app.post("/reset")
def reset_board():
    with _game_lock:
        game.reset()
        return {"fen": game.board.get_fen()}


def run():
    uvicorn.run(app, host="127.0.0.1", port=CONFIG.ui.api_port, log_level=CONFIG.log_level.lower())
