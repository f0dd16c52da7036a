"""Conway's Game of Life transition rule and simulation session."""

from enum import IntEnum
from typing import Deque, Dict, Optional
from collections import deque
import numpy as np

from .board import Board


class CellState(IntEnum):
    """Outcome of one transition step for a single cell."""

    UNCHANGED = 0
    REPRODUCTION = 1
    UNDERPOPULATION = 2
    OVERPOPULATION = 3


def classify(alive: bool, neighbors: int) -> CellState:
    """Classify a single cell given its state and live neighbour count.

    Args:
        alive: Whether the cell is currently alive
        neighbors: Number of living neighbours (0-8)

    Returns:
        The cell's outcome for this step
    """
    if alive:
        if neighbors <= 1:
            return CellState.UNDERPOPULATION
        if neighbors >= 4:
            return CellState.OVERPOPULATION
        return CellState.UNCHANGED

    if neighbors == 3:
        return CellState.REPRODUCTION
    return CellState.UNCHANGED


def classify_all(board: Board) -> np.ndarray:
    """Classify every cell of a board at once.

    Returns:
        Array of CellState values with the board's shape
    """
    neighbor_counts = board.count_all_neighbors()
    cells = board.cells

    states = np.full(board.shape, CellState.UNCHANGED, dtype=np.int8)
    states[cells & (neighbor_counts <= 1)] = CellState.UNDERPOPULATION
    states[cells & (neighbor_counts >= 4)] = CellState.OVERPOPULATION
    states[~cells & (neighbor_counts == 3)] = CellState.REPRODUCTION
    return states


def next_generation(board: Board) -> Board:
    """Compute the next generation of a board.

    Only the given board is read; the result is a new Board of the same size.
    """
    return _apply_states(board, classify_all(board))


def _apply_states(board: Board, states: np.ndarray) -> Board:
    alive = (board.cells & (states == CellState.UNCHANGED)) | (states == CellState.REPRODUCTION)
    return board.with_cells(alive)


class GameOfLife:
    """Simulation session owning the current board.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, board: Board) -> None:
        """Initialize the game with a board.

        Args:
            board: Starting board
        """
        self._board = board
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._last_transition: Dict[CellState, int] = {state: 0 for state in CellState}

        self._population_history.append(self.population)

    @property
    def board(self) -> Board:
        """Current board."""
        return self._board

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._board.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def last_transition(self) -> Dict[CellState, int]:
        """Number of cells in each outcome during the most recent step."""
        return dict(self._last_transition)

    def step(self) -> None:
        """Advance the simulation by one generation."""
        states = classify_all(self._board)
        self._last_transition = {state: int(np.count_nonzero(states == state)) for state in CellState}
        self._board = _apply_states(self._board, states)
        self._generation += 1
        self._population_history.append(self.population)

    def reset(self, board: Optional[Board] = None) -> None:
        """Reset the simulation.

        Args:
            board: New starting board; an empty board of the same size if omitted
        """
        self._board = board if board is not None else Board(self._board.height, self._board.width)
        self._generation = 0
        self._population_history.clear()
        self._last_transition = {state: 0 for state in CellState}
        self._population_history.append(self.population)

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        bbox = self._board.get_bounding_box()

        return {
            "generation": self._generation,
            "population": self.population,
            "population_history": list(self._population_history),
            "board_size": self._board.shape,
            "population_density": self.population / (self._board.height * self._board.width),
            "births": self._last_transition[CellState.REPRODUCTION],
            "deaths": (
                self._last_transition[CellState.UNDERPOPULATION] + self._last_transition[CellState.OVERPOPULATION]
            ),
            "bounding_box": bbox,
        }
