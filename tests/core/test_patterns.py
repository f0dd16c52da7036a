"""Tests for the pattern catalog and seeding."""

import dataclasses

import pytest

from lifewindow.core.board import Board
from lifewindow.core.game import next_generation
from lifewindow.core.patterns import (
    Pattern,
    PatternId,
    UnknownPatternError,
    get_pattern,
    list_patterns,
    resolve_pattern_id,
    seed,
)


def evolve(board: Board, steps: int) -> Board:
    for _ in range(steps):
        board = next_generation(board)
    return board


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        pattern = Pattern(PatternId.BLINKER, [(0, 0), (0, 1), (0, 2)], "Period-2 oscillator", origin=(3, 4))

        assert pattern.name == "blinker"
        assert pattern.cells == ((0, 0), (0, 1), (0, 2))
        assert pattern.description == "Period-2 oscillator"
        assert pattern.origin == (3, 4)

    def test_from_glyph(self):
        """Test decoding a glyph block."""
        pattern = Pattern.from_glyph(PatternId.GLIDER, [".#.", "..#", "###"])
        assert pattern.cells == ((0, 1), (1, 2), (2, 0), (2, 1), (2, 2))

    def test_get_size(self):
        """Test pattern size calculation."""
        assert Pattern(PatternId.GLIDER, []).get_size() == (0, 0)
        assert get_pattern(PatternId.GLIDER).get_size() == (3, 3)
        assert get_pattern(PatternId.GOSPER_GLIDER_GUN).get_size() == (9, 36)

    def test_pattern_is_frozen(self):
        """Test that pattern attributes can't be reassigned."""
        pattern = Pattern(PatternId.BLINKER, [(0, 0), (0, 1), (0, 2)], origin=(1, 2))

        with pytest.raises(dataclasses.FrozenInstanceError):
            pattern.origin = (5, 5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            pattern.cells = ()
        with pytest.raises(dataclasses.FrozenInstanceError):
            pattern.description = "changed"

    def test_catalog_pattern_cannot_be_moved(self):
        """Test that the shared catalog entries keep seeding the same board."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_pattern("glider").origin = (20, 20)

        assert seed("glider").live_cells() == [(2, 4), (3, 5), (4, 3), (4, 4), (4, 5)]

    def test_to_board_uses_origin(self):
        """Test that the built-in origin is applied."""
        pattern = Pattern(PatternId.BLINKER, [(0, 0), (0, 1), (0, 2)], origin=(1, 2))
        assert pattern.to_board(4, 6).live_cells() == [(1, 2), (1, 3), (1, 4)]


class TestCatalog:
    """Test the built-in patterns."""

    def test_list_patterns(self):
        """Test that every identifier is in the catalog."""
        assert list_patterns() == [pattern_id.value for pattern_id in PatternId]

    def test_resolve_names(self):
        """Test resolving identifiers and names."""
        assert resolve_pattern_id(PatternId.PULSAR) is PatternId.PULSAR
        assert resolve_pattern_id("glider") is PatternId.GLIDER
        assert resolve_pattern_id("GLIDER") is PatternId.GLIDER
        assert resolve_pattern_id("R-pentomino") is PatternId.R_PENTOMINO
        assert resolve_pattern_id("gosper glider gun") is PatternId.GOSPER_GLIDER_GUN

    @pytest.mark.parametrize("name", list_patterns())
    def test_patterns_fit_default_board(self, name):
        """Test that every pattern lands fully on the default board."""
        board = seed(name)
        assert board.shape == (30, 70)
        assert board.population == len(get_pattern(name).cells)

    def test_glider_cells(self):
        """Test the glider's position on the board."""
        assert seed(PatternId.GLIDER).live_cells() == [(2, 4), (3, 5), (4, 3), (4, 4), (4, 5)]

    def test_glider_on_small_board(self):
        """Test seeding a board of a different size."""
        board = seed("glider", 6, 6)
        assert board.shape == (6, 6)
        assert board.population == 5

    @pytest.mark.parametrize("name", ["blinker", "toad", "beacon"])
    def test_period_two_oscillators(self, name):
        """Test period-2 oscillators."""
        board = seed(name)
        assert evolve(board, 1) != board
        assert evolve(board, 2) == board

    def test_pulsar_period_three(self):
        """Test pulsar oscillator (period 3)."""
        board = seed("pulsar")
        assert board.population == 48
        assert evolve(board, 1) != board
        assert evolve(board, 3) == board

    def test_lwss_moves_two_columns(self):
        """Test the lightweight spaceship travels horizontally at c/2."""
        board = seed("lwss")
        start = board.live_cells()
        end = evolve(board, 4).live_cells()

        left = [(r, c - 2) for r, c in start]
        right = [(r, c + 2) for r, c in start]
        assert end in (left, right)

    def test_gosper_glider_gun(self):
        """Test the glider gun's size and placement."""
        board = seed("gosper_glider_gun")
        assert board.population == 36
        assert board.get_bounding_box() == (1, 1, 9, 36)


class TestSeedErrors:
    """Test seeding with unknown patterns."""

    def test_unknown_name(self):
        """Test that an unknown name fails instead of seeding nothing."""
        with pytest.raises(UnknownPatternError, match="spaceship"):
            seed("spaceship")

    def test_unknown_pattern_is_value_error(self):
        """Test that callers can catch it as a ValueError."""
        with pytest.raises(ValueError):
            get_pattern("nothing")

    def test_wrong_type(self):
        """Test that non-string identifiers are rejected."""
        with pytest.raises(UnknownPatternError):
            seed(42)
