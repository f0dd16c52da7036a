"""Tkinter window used as the drawing surface and event source."""

import tkinter as tk
from collections import deque
from enum import Enum
from typing import Deque, Optional

from ..config import DisplayConfig, color_to_hex


class WindowError(RuntimeError):
    """Raised when the window can't be created."""


class WindowEvent(Enum):
    """Input events reported by the window."""

    QUIT = "quit"
    KEY = "key"


class TkinterWindow:
    """A fixed-size window with a canvas that is drawn one frame at a time.

    Rectangles filled since the last present() make up the next frame;
    present() discards the previous frame and flushes the canvas to screen.
    Window-manager close and the Escape key are reported as QUIT events.
    """

    def __init__(self, config: DisplayConfig, master: Optional[tk.Tk] = None) -> None:
        """Create the window.

        Args:
            config: Display configuration providing title and size
            master: Existing root window to draw in (a new one is created if omitted)

        Raises:
            WindowError: If Tk can't create the window
        """
        width, height = config.window_size()
        try:
            self.master = master if master is not None else tk.Tk()
        except tk.TclError as e:
            raise WindowError(f"Failed to create window: {e}") from e

        try:
            self.master.title(config.title)
            self.master.resizable(False, False)

            self.canvas = tk.Canvas(
                self.master,
                width=width,
                height=height,
                highlightthickness=0,
                borderwidth=0,
                bg=color_to_hex(config.color_background),
            )
            self.canvas.pack()
        except tk.TclError as e:
            if master is None:
                self.master.destroy()
            raise WindowError(f"Failed to create window: {e}") from e

        self.width = width
        self.height = height
        self._frame = 0
        self._events: Deque[WindowEvent] = deque()
        self._signal = tk.IntVar(self.master, value=0)
        self._closed = False

        self.master.protocol("WM_DELETE_WINDOW", lambda: self._push(WindowEvent.QUIT))
        self.master.bind("<Key>", self._on_key)

    def _push(self, event: WindowEvent) -> None:
        self._events.append(event)
        self._signal.set(self._signal.get() + 1)

    def _on_key(self, event: tk.Event) -> None:
        if event.keysym == "Escape":
            self._push(WindowEvent.QUIT)
        else:
            self._push(WindowEvent.KEY)

    def _frame_tag(self, frame: int) -> str:
        return f"frame{frame}"

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill a rectangle of the pending frame with a packed 0xRRGGBB colour."""
        self.canvas.create_rectangle(
            x,
            y,
            x + width,
            y + height,
            fill=color_to_hex(color),
            width=0,
            tags=(self._frame_tag(self._frame),),
        )

    def present(self) -> None:
        """Show the pending frame."""
        self.canvas.delete(self._frame_tag(self._frame - 1))
        self._frame += 1
        self.master.update_idletasks()
        self.master.update()

    def poll_event(self) -> Optional[WindowEvent]:
        """Get the next queued event without blocking.

        Returns:
            The event, or None when the queue is empty
        """
        if not self._events:
            self.master.update()
        return self._events.popleft() if self._events else None

    def wait_event(self) -> WindowEvent:
        """Block until an event is available and return it."""
        while not self._events:
            self.master.wait_variable(self._signal)
        return self._events.popleft()

    def close(self) -> None:
        """Destroy the window."""
        if self._closed:
            return
        self._closed = True
        try:
            self.master.destroy()
        except tk.TclError:
            # Already destroyed by Tk
            pass
