"""Run loop and command-line entry point for the windowed Game of Life."""

import argparse
import sys
import time
from typing import Callable, Optional, Protocol

from ..config import DEFAULT_CONFIG, DisplayConfig
from ..core.game import GameOfLife
from ..core.patterns import PatternId, UnknownPatternError, get_pattern, list_patterns, seed
from .renderer import BoardRenderer
from .tkinter_window import TkinterWindow, WindowError, WindowEvent


class Window(Protocol):
    """Window operations the run loop relies on."""

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None: ...

    def present(self) -> None: ...

    def poll_event(self) -> Optional[WindowEvent]: ...

    def wait_event(self) -> WindowEvent: ...


class LifeApp:
    """Ties a game session to a window: draw, present, evolve, wait, poll."""

    def __init__(
        self,
        window: Window,
        game: GameOfLife,
        config: DisplayConfig = DEFAULT_CONFIG,
        sleep: Optional[Callable[[float], None]] = None,
        verbose: bool = False,
    ) -> None:
        """Initialize the app.

        Args:
            window: Drawing surface and event source
            game: Session holding the board to show
            config: Display configuration
            sleep: Function used to wait between ticks (time.sleep if omitted)
            verbose: Print per-tick progress
        """
        self.window = window
        self.game = game
        self.config = config
        self.renderer = BoardRenderer(window, config)
        self.sleep = sleep or time.sleep
        self.verbose = verbose
        self.running = False

    def draw(self) -> None:
        """Render the current board and present it."""
        self.renderer.draw(self.game.board)
        self.window.present()

    def drain_events(self) -> bool:
        """Consume all queued events.

        Returns:
            False if a quit event was seen, True otherwise
        """
        keep_running = True
        while True:
            event = self.window.poll_event()
            if event is None:
                break
            if event is WindowEvent.QUIT:
                keep_running = False
        return keep_running

    def tick(self) -> bool:
        """Run one frame: draw, evolve, wait, then check for quit.

        Returns:
            Whether the loop should continue
        """
        self.draw()
        self.game.step()

        if self.verbose:
            print(f"Generation {self.game.generation}: population {self.game.population}")

        self.sleep(self.config.tick_interval)
        return self.drain_events()

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Run the timed simulation until the window is closed.

        Args:
            max_ticks: Stop after this many ticks even without a quit event

        Returns:
            Number of ticks run
        """
        ticks = 0
        self.running = True
        while self.running:
            if max_ticks is not None and ticks >= max_ticks:
                break
            ticks += 1
            if not self.tick():
                print("Quit")
                self.running = False

        self.running = False
        return ticks

    def run_static(self) -> None:
        """Draw the board once and block until the window is closed."""
        self.draw()
        while self.window.wait_event() is not WindowEvent.QUIT:
            pass
        print("Quit")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Show Conway's Game of Life in a window",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Animate the default glider
  lifewindow

  # Animate the Gosper glider gun
  lifewindow --pattern gosper_glider_gun

  # Show the pulsar without evolving it
  lifewindow --pattern pulsar --static
        """,
    )

    parser.add_argument(
        "--pattern",
        default=PatternId.GLIDER.value,
        help=f"Pattern to seed the board with (default: {PatternId.GLIDER.value})",
    )

    parser.add_argument(
        "--static",
        action="store_true",
        help="Draw the seeded board once without evolving it",
    )

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress information")

    return parser


def print_patterns() -> None:
    """Print the built-in patterns with their sizes."""
    print("Available patterns:")
    for name in list_patterns():
        pattern = get_pattern(name)
        height, width = pattern.get_size()
        print(f"  {name}: {width}x{height}, {len(pattern.cells)} cells")
        if pattern.description:
            print(f"    {pattern.description}")


def main(argv: Optional[list] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.list_patterns:
        print_patterns()
        return 0

    config = DEFAULT_CONFIG
    window = None
    try:
        board = seed(args.pattern, config.board_height, config.board_width)
        if args.verbose:
            print(f"Seeded {config.board_height}x{config.board_width} board with '{args.pattern}'")
            print(f"Opening {config.window_width}x{config.window_height} window")

        window = TkinterWindow(config)
        app = LifeApp(window, GameOfLife(board), config, verbose=args.verbose)

        if args.static:
            app.run_static()
        else:
            app.run()
        return 0

    except (UnknownPatternError, WindowError) as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    finally:
        if window is not None:
            window.close()


if __name__ == "__main__":
    sys.exit(main())
