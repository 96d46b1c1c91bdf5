"""Mark one grid cell per solution-word letter, at most one per crossword word when possible."""

from __future__ import annotations

import random

from grid_builder import cell_to_words
from models import Grid, PlacedWord, SolutionCell


def assign_solution_cells(
    grid: Grid,
    placed: list[PlacedWord],
    solution_word: str,
    rng: random.Random,
) -> tuple[list[SolutionCell], list[tuple[int, int]]]:
    """Choose a cell for each solution letter, in order, and mark it on *grid*.

    Each letter tries three tiers:

    1. a matching, unclaimed cell none of whose words has given a letter yet;
    2. any matching, unclaimed cell;
    3. the first unclaimed letter cell, whose letter is overwritten.

    Returns the solution cells and the positions patched by tier 3.
    """
    owners = cell_to_words(placed)
    letter_cells = grid.letter_cells()

    solution_cells: list[SolutionCell] = []
    patched: list[tuple[int, int]] = []
    used_cells: set[tuple[int, int]] = set()
    used_words: set[int] = set()

    for index, letter in enumerate(solution_word):
        matching = [
            pos for pos in letter_cells
            if pos not in used_cells and grid.cells[pos[0]][pos[1]].letter == letter
        ]
        fair = [
            pos for pos in matching
            if not any(wi in used_words for wi in owners.get(pos, []))
        ]

        if fair or matching:
            chosen = rng.choice(fair or matching)
            used_words.update(owners.get(chosen, []))
        else:
            chosen = next((pos for pos in letter_cells if pos not in used_cells), None)
            if chosen is None:
                continue
            grid.cells[chosen[0]][chosen[1]].letter = letter
            patched.append(chosen)

        used_cells.add(chosen)

        cell = grid.cells[chosen[0]][chosen[1]]
        cell.is_solution_cell = True
        cell.solution_index = index
        solution_cells.append(SolutionCell(row=chosen[0], col=chosen[1], index=index))

    return solution_cells, patched
