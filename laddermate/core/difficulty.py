"""Difficulty ladder and its mapping to search depth."""

from enum import IntEnum
from typing import Optional, Union


class UnknownDifficultyError(ValueError):
    """Raised when a difficulty name or value is not on the ladder."""


class Difficulty(IntEnum):
    BEGINNER = 0
    EASY = 1
    HARD = 2
    MASTER = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def depth(self) -> Optional[int]:
        """Search depth in plies, or None when no search is performed."""
        return SEARCH_DEPTHS[self]

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        """Accept a Difficulty or its name in any case ("hard", "Master")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise UnknownDifficultyError(
            f"Unknown difficulty {value!r}; expected one of "
            + ", ".join(d.label for d in cls)
        )


SEARCH_DEPTHS = {
    Difficulty.BEGINNER: None,
    Difficulty.EASY: 1,
    Difficulty.HARD: 2,
    Difficulty.MASTER: 3,
}
