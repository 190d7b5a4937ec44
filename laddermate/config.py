# laddermate/config.py
from dataclasses import dataclass, field
from typing import Dict, Optional
import os
import tomllib

# Material table (symbolic units, not centipawns)
PIECE_VALUES = {
    "PAWN": 10,
    "KNIGHT": 30,
    "BISHOP": 30,
    "ROOK": 50,
    "QUEEN": 90,
    "KING": 900,
}

@dataclass
class SearchConfig:
    difficulty: str = "Easy"
    random_seed: Optional[int] = None  # None means OS entropy for Beginner picks

@dataclass
class EvalConfig:
    piece_values: Dict[str, int] = field(default_factory=lambda: PIECE_VALUES.copy())

@dataclass
class UIConfig:
    engine_name: str = "LadderMate"
    engine_author: str = "LadderMate developers"
    api_port: int = 8000
    mode: str = "ai"           # "ai" or "local" (two players on one board)
    engine_color: str = "black"

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "ui"):
            if section in raw:
                target = getattr(cfg, section)
                for k, v in raw[section].items():
                    if hasattr(target, k):
                        setattr(target, k, v)
        if "piece_values" in raw.get("eval", {}):
            # partial tables only override the pieces they name
            merged = PIECE_VALUES.copy()
            merged.update({k.upper(): v for k, v in raw["eval"]["piece_values"].items()})
            cfg.eval.piece_values = merged
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("LADDERMATE_CONFIG_TOML", "config.toml"))
# allow env override of the default difficulty; validated where it is parsed
override_difficulty = os.environ.get("LADDERMATE_DIFFICULTY")
if override_difficulty:
    CONFIG.search.difficulty = override_difficulty
