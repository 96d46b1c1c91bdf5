"""Generate a complete solution-word crossword.

Pipeline: pick a solution word, run the greedy placement attempts, number
the clues, build the cell grid, then overlay the solution word.
"""

from __future__ import annotations

import random
import sys
from typing import Sequence

from grid_builder import build_grid, number_clues
from grid_placer import ATTEMPTS, GRID_SIZE, MAX_WORDS, place_words
from models import Puzzle, WordEntry
from solution_overlay import assign_solution_cells
from word_pool import SOLUTION_WORDS, WORD_POOL

MAX_REGENERATIONS = 5


def generate_puzzle(
    word_pool: Sequence[WordEntry] | None = None,
    solution_words: Sequence[str] | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
    grid_size: int = GRID_SIZE,
    attempts: int = ATTEMPTS,
    max_words: int = MAX_WORDS,
    strict_solution: bool = False,
    max_regenerations: int = MAX_REGENERATIONS,
) -> Puzzle:
    """Build a fresh puzzle; callable with no arguments.

    With *strict_solution*, a run that had to overwrite a grid letter to carry
    the solution word is thrown away and regenerated, up to
    *max_regenerations* extra times.  The last run is returned regardless.
    """
    if rng is None:
        rng = random.Random(seed)
    pool = list(word_pool) if word_pool is not None else list(WORD_POOL)
    solutions = list(solution_words) if solution_words else list(SOLUTION_WORDS)

    puzzle = _generate_once(pool, solutions, rng, grid_size, attempts, max_words)
    if not strict_solution:
        return puzzle

    for _ in range(max_regenerations):
        if not puzzle.patched_cells:
            return puzzle
        puzzle = _generate_once(pool, solutions, rng, grid_size, attempts, max_words)

    if puzzle.patched_cells:
        print(
            f"Warning: solution word '{puzzle.solution_word}' needed "
            f"{len(puzzle.patched_cells)} patched letter(s) after "
            f"{max_regenerations} regenerations",
            file=sys.stderr,
        )
    return puzzle


def _generate_once(
    pool: list[WordEntry],
    solutions: list[str],
    rng: random.Random,
    grid_size: int,
    attempts: int,
    max_words: int,
) -> Puzzle:
    solution_word = rng.choice(solutions)

    placed, _ = place_words(
        pool, grid_size=grid_size, rng=rng, attempts=attempts, max_words=max_words,
    )
    placed = number_clues(placed)

    grid = build_grid(placed, grid_size)
    solution_cells, patched = assign_solution_cells(grid, placed, solution_word, rng)

    return Puzzle(
        grid=grid,
        placed_words=tuple(placed),
        solution_word=solution_word,
        solution_cells=tuple(solution_cells),
        patched_cells=tuple(patched),
    )
