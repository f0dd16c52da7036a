#!/usr/bin/env python3
"""
Example usage of the lifewindow package without opening a window.
"""

from lifewindow import GameOfLife, seed


def main():
    """Step a glider and print each generation to the terminal."""
    game = GameOfLife(seed("glider", 10, 10))

    print("Initial state:")
    print(game.board)
    print(f"Population: {game.population}")
    print()

    for _ in range(8):
        game.step()
        print(f"Generation {game.generation}:")
        print(game.board)
        print(f"Population: {game.population}")
        print()

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
