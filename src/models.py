"""Data models for the solution-word crossword generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CellType(Enum):
    BLACK = "BLACK"
    WHITE = "WHITE"


class Direction(Enum):
    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def other(self) -> Direction:
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


@dataclass(frozen=True)
class WordEntry:
    """A word from the pool with its clue and theme category."""

    word: str  # uppercase, alpha-only
    clue: str
    category: str = ""


@dataclass(frozen=True)
class PlacedWord:
    """A word placed on the grid. ``number`` is 0 until clues are numbered."""

    word: str
    clue: str
    row: int = 0
    col: int = 0
    direction: Direction = Direction.ACROSS
    number: int = 0

    def cells(self) -> list[tuple[int, int]]:
        dr = 1 if self.direction == Direction.DOWN else 0
        dc = 1 if self.direction == Direction.ACROSS else 0
        return [(self.row + dr * i, self.col + dc * i) for i in range(len(self.word))]


@dataclass
class Cell:
    """A single cell in the output grid.

    The generator fills everything up to ``solution_index``; the solving
    fields below it start neutral and belong to whoever tracks the player.
    """

    cell_type: CellType = CellType.BLACK
    letter: str = ""
    number: int | None = None
    across_clue: int | None = None
    down_clue: int | None = None
    is_solution_cell: bool = False
    solution_index: int | None = None
    user_input: str = ""
    revealed: bool = False
    checked: bool = False
    is_correct: bool | None = None

    @property
    def is_black(self) -> bool:
        return self.cell_type == CellType.BLACK


@dataclass
class Grid:
    """An NxN crossword grid of Cell objects."""

    size: int
    cells: list[list[Cell]] = field(default_factory=list)

    @classmethod
    def create(cls, size: int) -> Grid:
        """Create a grid of all-BLACK cells."""
        cells = [[Cell() for _ in range(size)] for _ in range(size)]
        return cls(size=size, cells=cells)

    def letter_cells(self) -> list[tuple[int, int]]:
        """Row-major positions of every non-black cell."""
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if not self.cells[r][c].is_black
        ]


@dataclass(frozen=True)
class SolutionCell:
    """Grid position holding letter ``index`` of the solution word."""

    row: int
    col: int
    index: int


@dataclass(frozen=True)
class Puzzle:
    """Complete generator output.

    ``patched_cells`` lists cells whose letter had to be overwritten to carry
    a solution letter; empty for a clean puzzle.
    """

    grid: Grid
    placed_words: tuple[PlacedWord, ...]
    solution_word: str
    solution_cells: tuple[SolutionCell, ...]
    patched_cells: tuple[tuple[int, int], ...] = ()


@dataclass(frozen=True)
class NumberedClue:
    """A clue with its grid-assigned display number."""

    number: int
    clue_text: str
    answer: str
    direction: Direction


class CrosswordError(Exception):
    """Fatal error while reading inputs or driving a puzzle."""
