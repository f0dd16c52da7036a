"""Core cellular automata logic."""

from .board import Board
from .game import CellState, GameOfLife, classify, classify_all, next_generation
from .patterns import Pattern, PatternId, UnknownPatternError, get_pattern, list_patterns, seed

__all__ = [
    "Board",
    "CellState",
    "GameOfLife",
    "classify",
    "classify_all",
    "next_generation",
    "Pattern",
    "PatternId",
    "UnknownPatternError",
    "get_pattern",
    "list_patterns",
    "seed",
]
