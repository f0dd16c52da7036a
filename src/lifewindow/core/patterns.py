"""Built-in Game of Life patterns and board seeding."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple, Union

from ..config import DEFAULT_CONFIG
from .board import Board, decode_glyph


class UnknownPatternError(ValueError):
    """Raised when seeding with a pattern that isn't in the catalog."""


class PatternId(str, Enum):
    """Identifiers of the built-in patterns."""

    GLIDER = "glider"
    BLINKER = "blinker"
    TOAD = "toad"
    BEACON = "beacon"
    LWSS = "lwss"
    PULSAR = "pulsar"
    R_PENTOMINO = "r_pentomino"
    GOSPER_GLIDER_GUN = "gosper_glider_gun"


@dataclass(frozen=True)
class Pattern:
    """An immutable arrangement of living cells placed at a fixed origin.

    Attributes:
        pattern_id: Catalog identifier
        cells: (row, col) offsets of living cells relative to origin
        description: Optional description
        origin: (row, col) position of the pattern on the board
    """

    pattern_id: PatternId
    cells: Tuple[Tuple[int, int], ...]
    description: str = ""
    origin: Tuple[int, int] = (0, 0)

    def __post_init__(self) -> None:
        # Accept any sequence of pairs; store tuples only
        object.__setattr__(self, "cells", tuple(tuple(cell) for cell in self.cells))
        object.__setattr__(self, "origin", tuple(self.origin))

    @classmethod
    def from_glyph(
        cls,
        pattern_id: PatternId,
        rows: Sequence[str],
        description: str = "",
        origin: Tuple[int, int] = (0, 0),
    ) -> "Pattern":
        """Create a pattern from glyph rows where '#' is alive."""
        return cls(pattern_id, decode_glyph(rows), description, origin)

    @property
    def name(self) -> str:
        return self.pattern_id.value

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (height, width)
        """
        if not self.cells:
            return (0, 0)

        rows, cols = zip(*self.cells)
        return (max(rows) - min(rows) + 1, max(cols) - min(cols) + 1)

    def to_board(self, height: int, width: int) -> Board:
        """Create a board of the given size holding only this pattern."""
        return Board.from_cells(height, width, self.cells, self.origin)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells at {self.origin})"


_CATALOG: Dict[PatternId, Pattern] = {
    p.pattern_id: p
    for p in [
        Pattern(
            PatternId.GLIDER,
            [(0, 2), (1, 3), (2, 1), (2, 2), (2, 3)],
            "Smallest spaceship, period-4",
            origin=(2, 2),
        ),
        Pattern.from_glyph(PatternId.BLINKER, ["###"], "Period-2 oscillator", origin=(14, 34)),
        Pattern.from_glyph(
            PatternId.TOAD,
            [
                ".###",
                "###.",
            ],
            "Period-2 oscillator",
            origin=(14, 33),
        ),
        Pattern.from_glyph(
            PatternId.BEACON,
            [
                "##..",
                "##..",
                "..##",
                "..##",
            ],
            "Period-2 oscillator",
            origin=(13, 33),
        ),
        Pattern.from_glyph(
            PatternId.LWSS,
            [
                ".#..#",
                "#....",
                "#...#",
                "####.",
            ],
            "Lightweight spaceship, travels left",
            origin=(13, 60),
        ),
        Pattern.from_glyph(
            PatternId.PULSAR,
            [
                "..###...###..",
                ".............",
                "#....#.#....#",
                "#....#.#....#",
                "#....#.#....#",
                "..###...###..",
                ".............",
                "..###...###..",
                "#....#.#....#",
                "#....#.#....#",
                "#....#.#....#",
                ".............",
                "..###...###..",
            ],
            "Period-3 oscillator",
            origin=(8, 28),
        ),
        Pattern.from_glyph(
            PatternId.R_PENTOMINO,
            [
                ".##",
                "##.",
                ".#.",
            ],
            "Methuselah that stabilizes after 1103 generations",
            origin=(13, 34),
        ),
        Pattern.from_glyph(
            PatternId.GOSPER_GLIDER_GUN,
            [
                "........................#...........",
                "......................#.#...........",
                "............##......##............##",
                "...........#...#....##............##",
                "##........#.....#...##..............",
                "##........#...#.##....#.#...........",
                "..........#.....#.......#...........",
                "...........#...#....................",
                "............##......................",
            ],
            "Emits a glider every 30 generations",
            origin=(1, 1),
        ),
    ]
}


def resolve_pattern_id(pattern: Union[PatternId, str]) -> PatternId:
    """Turn a PatternId or its name into a catalog identifier.

    Names are matched case-insensitively, with '-' and ' ' treated as '_'.

    Raises:
        UnknownPatternError: If no such pattern exists
    """
    if isinstance(pattern, PatternId):
        if pattern in _CATALOG:
            return pattern
    elif isinstance(pattern, str):
        key = pattern.strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return PatternId(key)
        except ValueError:
            pass

    raise UnknownPatternError(f"Undefined pattern: {pattern!r} (available: {', '.join(list_patterns())})")


def get_pattern(pattern: Union[PatternId, str]) -> Pattern:
    """Look up a pattern in the catalog.

    Raises:
        UnknownPatternError: If no such pattern exists
    """
    return _CATALOG[resolve_pattern_id(pattern)]


def list_patterns() -> List[str]:
    """Get the names of all built-in patterns."""
    return [pattern_id.value for pattern_id in _CATALOG]


def seed(
    pattern: Union[PatternId, str],
    height: int = DEFAULT_CONFIG.board_height,
    width: int = DEFAULT_CONFIG.board_width,
) -> Board:
    """Create a board holding the given pattern at its built-in origin.

    Args:
        pattern: Pattern identifier or name
        height: Board rows
        width: Board columns

    Returns:
        New Board with only the pattern's cells alive

    Raises:
        UnknownPatternError: If the pattern isn't in the catalog
    """
    return get_pattern(pattern).to_board(height, width)
