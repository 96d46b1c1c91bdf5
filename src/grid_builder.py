"""Number placed words, build the output cell Grid, build clue lists."""

from __future__ import annotations

from dataclasses import replace

from models import CellType, Direction, Grid, NumberedClue, PlacedWord


def number_clues(placed: list[PlacedWord]) -> list[PlacedWord]:
    """Sort by start cell (row-major) and number each distinct start cell from 1.

    Words sharing a start cell share a number.  The sort is stable, so an
    across/down pair starting together keeps its placement order.
    """
    numbers: dict[tuple[int, int], int] = {}
    numbered: list[PlacedWord] = []

    for pw in sorted(placed, key=lambda p: (p.row, p.col)):
        key = (pw.row, pw.col)
        if key not in numbers:
            numbers[key] = len(numbers) + 1
        numbered.append(replace(pw, number=numbers[key]))

    return numbered


def build_grid(placed: list[PlacedWord], grid_size: int) -> Grid:
    """Create a Grid, write letters and clue references from each numbered word."""
    grid = Grid.create(grid_size)

    for pw in placed:
        for i, (r, c) in enumerate(pw.cells()):
            letter = pw.word[i]
            cell = grid.cells[r][c]
            if cell.letter and cell.letter != letter:
                raise ValueError(
                    f"Letter conflict at ({r},{c}): existing '{cell.letter}' vs '{letter}'"
                )
            cell.cell_type = CellType.WHITE
            cell.letter = letter
            if pw.direction == Direction.ACROSS:
                cell.across_clue = pw.number
            else:
                cell.down_clue = pw.number

        start = grid.cells[pw.row][pw.col]
        # A cell can start both an across and a down word; show the smaller number
        if start.number is None or pw.number < start.number:
            start.number = pw.number

    return grid


def build_clue_lists(
    placed: list[PlacedWord],
) -> tuple[list[NumberedClue], list[NumberedClue]]:
    """Return across and down clue lists, each sorted by number."""
    across: list[NumberedClue] = []
    down: list[NumberedClue] = []

    for pw in placed:
        clue = NumberedClue(
            number=pw.number,
            clue_text=pw.clue,
            answer=pw.word,
            direction=pw.direction,
        )
        if pw.direction == Direction.ACROSS:
            across.append(clue)
        else:
            down.append(clue)

    across.sort(key=lambda c: c.number)
    down.sort(key=lambda c: c.number)
    return across, down


def cell_to_words(placed: list[PlacedWord]) -> dict[tuple[int, int], list[int]]:
    """Map each letter cell to the indices of the placed words covering it."""
    mapping: dict[tuple[int, int], list[int]] = {}
    for wi, pw in enumerate(placed):
        for cell in pw.cells():
            mapping.setdefault(cell, []).append(wi)
    return mapping
