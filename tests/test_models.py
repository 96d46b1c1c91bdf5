"""Tests for models.py."""

import pytest

from models import (
    Cell,
    CellType,
    CrosswordError,
    Direction,
    Grid,
    NumberedClue,
    PlacedWord,
    Puzzle,
    SolutionCell,
    WordEntry,
)


class TestEnums:
    def test_cell_type_values(self):
        assert CellType.BLACK.value == "BLACK"
        assert CellType.WHITE.value == "WHITE"

    def test_direction_other(self):
        assert Direction.ACROSS.other is Direction.DOWN
        assert Direction.DOWN.other is Direction.ACROSS


class TestWordEntry:
    def test_creation(self):
        entry = WordEntry(word="CAT", clue="Feline pet", category="Animals")
        assert entry.word == "CAT"
        assert entry.category == "Animals"

    def test_frozen(self):
        entry = WordEntry("CAT", "Feline pet")
        with pytest.raises(AttributeError):
            entry.word = "DOG"


class TestPlacedWord:
    def test_defaults(self):
        placed = PlacedWord(word="ABC", clue="test")
        assert (placed.row, placed.col) == (0, 0)
        assert placed.direction == Direction.ACROSS
        assert placed.number == 0

    def test_cells_across(self):
        placed = PlacedWord("CAT", "test", row=2, col=3, direction=Direction.ACROSS)
        assert placed.cells() == [(2, 3), (2, 4), (2, 5)]

    def test_cells_down(self):
        placed = PlacedWord("CAT", "test", row=2, col=3, direction=Direction.DOWN)
        assert placed.cells() == [(2, 3), (3, 3), (4, 3)]

    def test_frozen(self):
        placed = PlacedWord("CAT", "test")
        with pytest.raises(AttributeError):
            placed.number = 3


class TestCell:
    def test_defaults(self):
        cell = Cell()
        assert cell.is_black
        assert cell.letter == ""
        assert cell.number is None
        assert cell.across_clue is None and cell.down_clue is None
        assert cell.is_solution_cell is False
        assert cell.user_input == ""
        assert (cell.revealed, cell.checked, cell.is_correct) == (False, False, None)

    def test_mutable(self):
        cell = Cell()
        cell.cell_type = CellType.WHITE
        cell.letter = "A"
        assert not cell.is_black


class TestGrid:
    def test_create(self):
        grid = Grid.create(5)
        assert grid.size == 5
        assert len(grid.cells) == 5
        assert len(grid.cells[0]) == 5

    def test_cells_are_independent(self):
        grid = Grid.create(3)
        grid.cells[0][0].cell_type = CellType.WHITE
        assert grid.cells[0][1].cell_type == CellType.BLACK

    def test_letter_cells_row_major(self):
        grid = Grid.create(3)
        for r, c in [(2, 0), (0, 2), (1, 1)]:
            grid.cells[r][c].cell_type = CellType.WHITE
        assert grid.letter_cells() == [(0, 2), (1, 1), (2, 0)]


class TestPuzzle:
    def test_frozen(self):
        puzzle = Puzzle(
            grid=Grid.create(3),
            placed_words=(),
            solution_word="A",
            solution_cells=(SolutionCell(0, 0, 0),),
        )
        assert puzzle.patched_cells == ()
        with pytest.raises(AttributeError):
            puzzle.solution_word = "B"


class TestNumberedClue:
    def test_creation(self):
        clue = NumberedClue(number=5, clue_text="A clue", answer="WORD", direction=Direction.DOWN)
        assert clue.number == 5
        assert clue.answer == "WORD"


class TestCrosswordError:
    def test_is_exception(self):
        with pytest.raises(CrosswordError, match="test error"):
            raise CrosswordError("test error")
