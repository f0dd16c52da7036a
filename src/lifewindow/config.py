"""Display geometry, colours and timing for the windowed Game of Life."""

from dataclasses import dataclass
from typing import Tuple


def color_to_hex(value: int) -> str:
    """Convert a packed 0xRRGGBB colour into a Tk colour string.

    Args:
        value: Packed colour, upper byte ignored

    Returns:
        Colour string of the form '#rrggbb'
    """
    return f"#{value & 0xFFFFFF:06x}"


@dataclass(frozen=True)
class DisplayConfig:
    """Configuration shared by the renderer and the window."""

    title: str = "game of life"
    board_height: int = 30
    board_width: int = 70
    cell_size: int = 10
    grid_line_width: int = 2
    color_background: int = 0x00DCDCDC
    color_grid: int = 0x00FFFFFF
    color_cell: int = 0x00000000
    tick_interval: float = 0.1

    @property
    def pitch(self) -> int:
        """Distance in pixels between the start of two neighbouring cells."""
        return self.cell_size + self.grid_line_width

    @property
    def window_width(self) -> int:
        return self.board_width * self.cell_size + (self.board_width + 1) * self.grid_line_width

    @property
    def window_height(self) -> int:
        return self.board_height * self.cell_size + (self.board_height + 1) * self.grid_line_width

    def window_size(self) -> Tuple[int, int]:
        """Get window dimensions as (width, height) in pixels."""
        return (self.window_width, self.window_height)


DEFAULT_CONFIG = DisplayConfig()
