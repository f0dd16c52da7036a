"""Windowed Conway's Game of Life on a fixed-size board."""

__version__ = "0.1.0"

from .config import DisplayConfig, DEFAULT_CONFIG
from .core.board import Board
from .core.game import CellState, GameOfLife, next_generation
from .core.patterns import Pattern, PatternId, UnknownPatternError, seed

__all__ = [
    "DisplayConfig",
    "DEFAULT_CONFIG",
    "Board",
    "CellState",
    "GameOfLife",
    "next_generation",
    "Pattern",
    "PatternId",
    "UnknownPatternError",
    "seed",
]
