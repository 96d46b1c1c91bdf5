"""Tests for solution_overlay.py."""

import random

from models import Direction, PlacedWord, SolutionCell
from grid_builder import build_grid, number_clues
from solution_overlay import assign_solution_cells


def _layout(words):
    placed = number_clues([
        PlacedWord(word=w, clue=f"Clue for {w}", row=r, col=c, direction=d)
        for w, r, c, d in words
    ])
    return placed, build_grid(placed, 5)


def _cat_cow_ten_wan():
    # C A T
    # O . E
    # W A N
    return _layout([
        ("CAT", 0, 0, Direction.ACROSS),
        ("COW", 0, 0, Direction.DOWN),
        ("TEN", 0, 2, Direction.DOWN),
        ("WAN", 2, 0, Direction.ACROSS),
    ])


class TestAssignSolutionCells:
    def test_one_letter_per_word(self):
        placed, grid = _layout([
            ("CAT", 0, 0, Direction.ACROSS),
            ("CAR", 0, 0, Direction.DOWN),
        ])
        cells, patched = assign_solution_cells(grid, placed, "TR", random.Random(0))
        assert cells == [SolutionCell(0, 2, 0), SolutionCell(2, 0, 1)]
        assert patched == []

    def test_cells_spell_solution_word(self):
        placed, grid = _cat_cow_ten_wan()
        cells, _ = assign_solution_cells(grid, placed, "NOW", random.Random(1))
        assert len(cells) == 3
        for sc in cells:
            assert grid.cells[sc.row][sc.col].letter == "NOW"[sc.index]
        assert [sc.index for sc in cells] == [0, 1, 2]

    def test_cells_are_distinct(self):
        placed, grid = _cat_cow_ten_wan()
        cells, _ = assign_solution_cells(grid, placed, "AA", random.Random(2))
        assert {(sc.row, sc.col) for sc in cells} == {(0, 1), (2, 1)}

    def test_marks_grid_cells(self):
        placed, grid = _cat_cow_ten_wan()
        cells, _ = assign_solution_cells(grid, placed, "NOW", random.Random(3))
        for sc in cells:
            cell = grid.cells[sc.row][sc.col]
            assert cell.is_solution_cell
            assert cell.solution_index == sc.index
        marked = sum(
            1 for row in grid.cells for cell in row if cell.is_solution_cell
        )
        assert marked == 3

    def test_crossing_cell_uses_both_words(self):
        placed, grid = _cat_cow_ten_wan()
        # N sits on TEN and WAN; the only fair A is then (0,1) in CAT
        cells, patched = assign_solution_cells(grid, placed, "NA", random.Random(4))
        assert cells[0] == SolutionCell(2, 2, 0)
        assert cells[1] == SolutionCell(0, 1, 1)
        assert patched == []

    def test_falls_back_to_used_word(self):
        placed, grid = _layout([("CAT", 0, 0, Direction.ACROSS)])
        cells, patched = assign_solution_cells(grid, placed, "AT", random.Random(5))
        assert cells == [SolutionCell(0, 1, 0), SolutionCell(0, 2, 1)]
        assert patched == []

    def test_overwrites_letter_as_last_resort(self):
        placed, grid = _cat_cow_ten_wan()
        cells, patched = assign_solution_cells(grid, placed, "X", random.Random(6))
        assert cells == [SolutionCell(0, 0, 0)]
        assert patched == [(0, 0)]
        assert grid.cells[0][0].letter == "X"
        # The rest of CAT and COW is unchanged, as are the placed words
        assert grid.cells[0][1].letter == "A"
        assert grid.cells[0][2].letter == "T"
        assert grid.cells[1][0].letter == "O"
        assert placed[0].word == "CAT"

    def test_overwrite_skips_claimed_cells(self):
        placed, grid = _layout([("CAT", 0, 0, Direction.ACROSS)])
        cells, patched = assign_solution_cells(grid, placed, "CXY", random.Random(7))
        assert [(sc.row, sc.col) for sc in cells] == [(0, 0), (0, 1), (0, 2)]
        assert patched == [(0, 1), (0, 2)]
        assert "".join(grid.cells[0][c].letter for c in range(3)) == "CXY"

    def test_deterministic_for_seed(self):
        results = []
        for _ in range(2):
            placed, grid = _cat_cow_ten_wan()
            results.append(assign_solution_cells(grid, placed, "ACE", random.Random(99)))
        assert results[0] == results[1]
