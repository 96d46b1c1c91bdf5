"""Crossword word placement: legality checks + greedy best-score fill with restarts."""

from __future__ import annotations

import random
from collections import namedtuple
from typing import Optional

from models import Direction, PlacedWord, WordEntry

GRID_SIZE = 15
ATTEMPTS = 8
MAX_WORDS = 28
INTERSECTION_SCORE = 10
CENTRALITY_WEIGHT = 0.5

Placement = namedtuple("Placement", ["row", "col", "direction", "score"])
WorkingGrid = list[list[Optional[str]]]
Occupancy = dict[tuple[int, int], set[Direction]]


def place_words(
    pool: list[WordEntry],
    grid_size: int = GRID_SIZE,
    rng: random.Random | None = None,
    attempts: int = ATTEMPTS,
    max_words: int = MAX_WORDS,
) -> tuple[list[PlacedWord], WorkingGrid]:
    """Run *attempts* independent greedy passes, return the one placing most words.

    Ties keep the earlier attempt.  Never fails: the best layout may be sparse.
    """
    rng = rng or random.Random()

    best_placed: list[PlacedWord] = []
    best_working: WorkingGrid = _empty_grid(grid_size)

    for _ in range(attempts):
        placed, working = _single_attempt(pool, grid_size, rng, max_words)
        if len(placed) > len(best_placed):
            best_placed = placed
            best_working = [row[:] for row in working]

    return best_placed, best_working


# ── Core placement algorithm ─────────────────────────────────────────

def _single_attempt(
    pool: list[WordEntry],
    grid_size: int,
    rng: random.Random,
    max_words: int,
) -> tuple[list[PlacedWord], WorkingGrid]:
    """Shuffle the pool, seed the centre row, then place each word at its best spot."""
    working = _empty_grid(grid_size)
    placed: list[PlacedWord] = []

    shuffled = list(pool)
    rng.shuffle(shuffled)
    shuffled = [e for e in shuffled if len(e.word) <= grid_size]
    if not shuffled:
        return placed, working

    # Seed: first word across, centred
    first = shuffled[0]
    start_row = grid_size // 2
    start_col = (grid_size - len(first.word)) // 2
    _place_on_grid(first.word, start_row, start_col, Direction.ACROSS, working)
    placed.append(PlacedWord(
        word=first.word, clue=first.clue,
        row=start_row, col=start_col, direction=Direction.ACROSS,
    ))

    for entry in shuffled[1:]:
        if len(placed) >= max_words:
            break
        occupancy = build_occupancy(placed)
        best = find_best_placement(working, entry.word, placed, occupancy, grid_size)
        if best is None or best.score <= 0:
            continue
        _place_on_grid(entry.word, best.row, best.col, best.direction, working)
        placed.append(PlacedWord(
            word=entry.word, clue=entry.clue,
            row=best.row, col=best.col, direction=best.direction,
        ))

    return placed, working


def build_occupancy(placed: list[PlacedWord]) -> Occupancy:
    """Map each occupied cell to the directions of the words running through it."""
    occupancy: Occupancy = {}
    for pw in placed:
        for cell in pw.cells():
            occupancy.setdefault(cell, set()).add(pw.direction)
    return occupancy


# ── Candidate search & scoring ───────────────────────────────────────

def find_best_placement(
    working: WorkingGrid,
    word: str,
    placed: list[PlacedWord],
    occupancy: Occupancy,
    grid_size: int = GRID_SIZE,
) -> Placement | None:
    """Scan across-then-down, row, col; return the first highest-scoring legal spot."""
    best: Placement | None = None
    length = len(word)

    for direction in (Direction.ACROSS, Direction.DOWN):
        max_row = grid_size if direction == Direction.ACROSS else grid_size - length + 1
        max_col = grid_size - length + 1 if direction == Direction.ACROSS else grid_size

        for r in range(max_row):
            for c in range(max_col):
                if not can_place(working, word, r, c, direction, placed, occupancy, grid_size):
                    continue
                score = score_placement(working, word, r, c, direction, grid_size)
                if best is None or score > best.score:
                    best = Placement(r, c, direction, score)

    return best


def score_placement(
    working: WorkingGrid,
    word: str,
    row: int,
    col: int,
    direction: Direction,
    grid_size: int = GRID_SIZE,
) -> float:
    """+10 per shared letter, minus half the Manhattan distance of the word's midpoint from centre."""
    dr = 1 if direction == Direction.DOWN else 0
    dc = 1 if direction == Direction.ACROSS else 0

    score = 0.0
    for i, letter in enumerate(word):
        if working[row + dr * i][col + dc * i] == letter:
            score += INTERSECTION_SCORE

    center = grid_size // 2
    mid_r = row + dr * len(word) / 2
    mid_c = col + dc * len(word) / 2
    score -= (abs(mid_r - center) + abs(mid_c - center)) * CENTRALITY_WEIGHT
    return score


# ── Validation ────────────────────────────────────────────────────────

def can_place(
    working: WorkingGrid,
    word: str,
    row: int,
    col: int,
    direction: Direction,
    placed: list[PlacedWord],
    occupancy: Occupancy,
    grid_size: int = GRID_SIZE,
) -> bool:
    """Check bounds, end caps, real crossings and side adjacency.

    Every word after the first must cross at least one placed word.
    """
    length = len(word)
    dr = 1 if direction == Direction.DOWN else 0
    dc = 1 if direction == Direction.ACROSS else 0

    if row < 0 or col < 0:
        return False
    if row + dr * (length - 1) >= grid_size or col + dc * (length - 1) >= grid_size:
        return False

    # Cell before start must be empty/edge
    br, bc = row - dr, col - dc
    if br >= 0 and bc >= 0 and working[br][bc] is not None:
        return False

    # Cell after end must be empty/edge
    ar, ac = row + dr * length, col + dc * length
    if ar < grid_size and ac < grid_size and working[ar][ac] is not None:
        return False

    # Perpendicular offsets
    pr = 1 if direction == Direction.ACROSS else 0
    pc = 1 if direction == Direction.DOWN else 0

    intersections = 0
    for i, letter in enumerate(word):
        r = row + dr * i
        c = col + dc * i
        existing = working[r][c]

        if existing is not None:
            if existing != letter:
                return False
            directions = occupancy.get((r, c), set())
            if direction in directions:
                return False
            if direction.other not in directions:
                return False
            intersections += 1
        else:
            if 0 <= r - pr and 0 <= c - pc and working[r - pr][c - pc] is not None:
                return False
            if r + pr < grid_size and c + pc < grid_size and working[r + pr][c + pc] is not None:
                return False

    if placed and intersections == 0:
        return False

    return True


# ── Grid manipulation ─────────────────────────────────────────────────

def _empty_grid(grid_size: int) -> WorkingGrid:
    return [[None] * grid_size for _ in range(grid_size)]


def _place_on_grid(
    word: str, row: int, col: int, direction: Direction, working: WorkingGrid,
) -> None:
    dr = 1 if direction == Direction.DOWN else 0
    dc = 1 if direction == Direction.ACROSS else 0
    for i, letter in enumerate(word):
        working[row + dr * i][col + dc * i] = letter
