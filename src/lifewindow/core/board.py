"""Fixed-size board for the Game of Life."""

from typing import Iterable, List, Optional, Sequence, Tuple
import numpy as np
import torch
import torch.nn.functional as F


_NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


class Board:
    """A fixed-dimension grid of live/dead cells.

    Cells are addressed as (row, column). Edges are bounded: positions
    outside the board are never counted as neighbours.
    """

    def __init__(self, height: int, width: int) -> None:
        """Create an all-dead board.

        Args:
            height: Number of rows
            width: Number of columns

        Raises:
            ValueError: If either dimension is not positive
        """
        if height <= 0 or width <= 0:
            raise ValueError(f"Board dimensions must be positive, got {height}x{width}")

        self._cells = np.zeros((height, width), dtype=bool)

    @classmethod
    def from_cells(
        cls, height: int, width: int, cells: Iterable[Tuple[int, int]], origin: Tuple[int, int] = (0, 0)
    ) -> "Board":
        """Create a board with the given cells alive.

        Args:
            height: Number of rows
            width: Number of columns
            cells: (row, col) coordinates of living cells
            origin: (row, col) offset added to every coordinate

        Returns:
            New Board; cells landing outside it are skipped
        """
        board = cls(height, width)
        origin_row, origin_col = origin
        for row, col in cells:
            r, c = row + origin_row, col + origin_col
            if board.in_bounds(r, c):
                board._cells[r, c] = True
        return board

    @classmethod
    def from_glyph(
        cls, height: int, width: int, rows: Sequence[str], origin: Tuple[int, int] = (0, 0)
    ) -> "Board":
        """Create a board from a block of glyph rows.

        '#' marks a living cell; any other character is dead.

        Args:
            height: Number of rows
            width: Number of columns
            rows: Glyph rows, top to bottom
            origin: (row, col) of the glyph's top-left corner on the board

        Returns:
            New Board
        """
        return cls.from_cells(height, width, decode_glyph(rows), origin)

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._cells.shape[0]

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._cells.shape[1]

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array, shape (height, width)."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> Tuple[int, int]:
        """Get board dimensions as (height, width)."""
        return (self.height, self.width)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
        return bool(self._cells[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Only meant for seeding; transitions always produce a new board.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
        self._cells[row, col] = alive

    def live_cells(self) -> List[Tuple[int, int]]:
        """Get (row, col) coordinates of living cells in row-major order."""
        rows, cols = np.nonzero(self._cells)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def get_neighbors(self, row: int, col: int) -> int:
        """Count living neighbours of a single cell.

        Returns:
            Number of living neighbours (0-8)
        """
        count = 0
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue

                r, c = row + dr, col + dc
                if self.in_bounds(r, c) and self._cells[r, c]:
                    count += 1

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbours for every cell using a 3x3 convolution.

        Zero padding keeps the edges bounded.

        Returns:
            Integer array of shape (height, width) with counts 0-8
        """
        source = torch.from_numpy(self._cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(source, _NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].numpy().round().astype(np.int8)

    def with_cells(self, cells: np.ndarray) -> "Board":
        """Create a board of the same size holding the given cell array.

        Raises:
            ValueError: If the array shape doesn't match
        """
        arr = np.asarray(cells, dtype=bool)
        if arr.shape != self.shape:
            raise ValueError(f"Data shape {arr.shape} doesn't match board {self.shape}")

        board = Board(self.height, self.width)
        board._cells[:] = arr
        return board

    def copy(self) -> "Board":
        return self.with_cells(self._cells)

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col) or None if no living cells
        """
        rows, cols = np.nonzero(self._cells)
        if len(rows) == 0:
            return None

        return (int(rows.min()), int(cols.min()), int(rows.max()), int(cols.max()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '#' and dead as '.'."""
        return "\n".join("".join("#" if alive else "." for alive in row) for row in self._cells)


def decode_glyph(rows: Sequence[str]) -> List[Tuple[int, int]]:
    """Decode glyph rows into (row, col) offsets of living cells."""
    cells = []
    for r, line in enumerate(rows):
        for c, glyph in enumerate(line):
            if glyph == "#":
                cells.append((r, c))
    return cells
