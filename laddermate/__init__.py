"""LadderMate: a small chess engine with a Beginner/Easy/Hard/Master ladder."""

__version__ = "1.0.0"
