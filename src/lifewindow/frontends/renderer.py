"""Board rendering onto any surface that can fill rectangles."""

from typing import Protocol

from ..config import DisplayConfig
from ..core.board import Board


class Surface(Protocol):
    """Anything the renderer can draw on."""

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None: ...


class BoardRenderer:
    """Draws the background, grid lines and living cells of a board."""

    def __init__(self, surface: Surface, config: DisplayConfig) -> None:
        self.surface = surface
        self.config = config

    def draw(self, board: Board) -> None:
        """Draw a full frame for the given board.

        Raises:
            ValueError: If the board doesn't match the configured dimensions
        """
        cfg = self.config
        if board.shape != (cfg.board_height, cfg.board_width):
            raise ValueError(
                f"Board size {board.height}x{board.width} doesn't match "
                f"display {cfg.board_height}x{cfg.board_width}"
            )

        width, height = cfg.window_size()
        self.surface.fill_rect(0, 0, width, height, cfg.color_background)

        # Horizontal grid lines
        for i in range(cfg.board_height + 1):
            self.surface.fill_rect(0, cfg.pitch * i, width, cfg.grid_line_width, cfg.color_grid)

        # Vertical grid lines
        for j in range(cfg.board_width + 1):
            self.surface.fill_rect(cfg.pitch * j, 0, cfg.grid_line_width, height, cfg.color_grid)

        for row, col in board.live_cells():
            x, y = self.cell_origin(row, col)
            self.surface.fill_rect(x, y, cfg.cell_size, cfg.cell_size, cfg.color_cell)

    def cell_origin(self, row: int, col: int) -> tuple:
        """Get the (x, y) pixel position of a cell's top-left corner."""
        cfg = self.config
        return (cfg.pitch * col + cfg.grid_line_width, cfg.pitch * row + cfg.grid_line_width)
