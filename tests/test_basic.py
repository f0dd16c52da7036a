"""Basic tests for the lifewindow package."""

from lifewindow import Board, GameOfLife, PatternId, next_generation, seed


def test_board_creation():
    """Test basic board creation and cell operations."""
    board = Board(10, 10)
    assert board.height == 10
    assert board.width == 10
    assert board.get_cell(0, 0) is False

    board.set_cell(5, 5, True)
    assert board.get_cell(5, 5) is True


def test_game_creation():
    """Test basic game creation."""
    game = GameOfLife(seed(PatternId.GLIDER))
    assert game.population == 5
    assert game.generation == 0


def test_glider_keeps_moving():
    """Test that the glider keeps its five cells while travelling."""
    board = seed("glider")
    for _ in range(20):
        board = next_generation(board)
        assert board.population == 5

    assert board.live_cells() == [(7, 9), (8, 10), (9, 8), (9, 9), (9, 10)]
