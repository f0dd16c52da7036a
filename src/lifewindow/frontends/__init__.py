"""Window frontend for the Game of Life."""

from .renderer import BoardRenderer
from .tkinter_window import TkinterWindow, WindowError, WindowEvent
from .app import LifeApp

__all__ = ["BoardRenderer", "TkinterWindow", "WindowError", "WindowEvent", "LifeApp"]
