"""Track a player's answers against a generated Puzzle.

The session works on its own copy of the puzzle grid, so the Puzzle returned
by the generator is never touched.
"""

from __future__ import annotations

import copy

from models import Cell, CrosswordError, Direction, Grid, PlacedWord, Puzzle

MAX_LETTER_HINTS = 3
MAX_WORD_HINTS = 1


class SolvingSession:
    """Mutable solving state: user input, checks, reveals and hint budgets."""

    def __init__(
        self,
        puzzle: Puzzle,
        max_letter_hints: int = MAX_LETTER_HINTS,
        max_word_hints: int = MAX_WORD_HINTS,
    ) -> None:
        self.puzzle = puzzle
        self.grid: Grid = copy.deepcopy(puzzle.grid)
        self.max_letter_hints = max_letter_hints
        self.max_word_hints = max_word_hints
        self.letter_hints_used = 0
        self.word_hints_used = 0
        self.revealed_all = False

    # ── Input ────────────────────────────────────────────────────────

    def cell(self, row: int, col: int) -> Cell:
        return self.grid.cells[row][col]

    def enter_letter(self, row: int, col: int, letter: str) -> None:
        if len(letter) != 1 or not letter.isalpha():
            raise CrosswordError(f"Invalid input {letter!r}: expected a single letter")
        cell = self.cell(row, col)
        if cell.is_black:
            return
        cell.user_input = letter.upper()
        _reset_check(cell)

    def delete_letter(self, row: int, col: int) -> None:
        cell = self.cell(row, col)
        if cell.is_black:
            return
        cell.user_input = ""
        _reset_check(cell)

    # ── Checking ─────────────────────────────────────────────────────

    def check_puzzle(self) -> None:
        """Mark every filled letter cell as checked, recording correctness."""
        for cell in self._letter_cells():
            if cell.user_input:
                cell.checked = True
                cell.is_correct = cell.user_input == cell.letter

    def clear_puzzle(self) -> None:
        """Clear every cell the player filled; revealed cells stay."""
        for cell in self._letter_cells():
            if not cell.revealed:
                cell.user_input = ""
                _reset_check(cell)

    def clear_errors(self) -> None:
        for cell in self._letter_cells():
            if cell.checked and cell.is_correct is False:
                cell.user_input = ""
                _reset_check(cell)

    def is_complete(self) -> bool:
        return all(
            cell.user_input and cell.user_input == cell.letter
            for cell in self._letter_cells()
        )

    def progress(self) -> int:
        """Percentage of letter cells holding any input."""
        cells = self._letter_cells()
        if not cells:
            return 0
        filled = sum(1 for cell in cells if cell.user_input)
        return round(filled / len(cells) * 100)

    # ── Hints ────────────────────────────────────────────────────────

    def reveal_cell(self, row: int, col: int) -> bool:
        """Reveal one cell, spending a letter hint. Returns False if nothing was spent."""
        if self.letter_hints_used >= self.max_letter_hints:
            return False
        cell = self.cell(row, col)
        if cell.is_black or cell.revealed or cell.user_input == cell.letter:
            return False
        _reveal(cell)
        self.letter_hints_used += 1
        return True

    def reveal_word(self, word: PlacedWord) -> bool:
        """Reveal every cell of *word*, spending a word hint."""
        if self.word_hints_used >= self.max_word_hints:
            return False
        for r, c in self.word_cells(word):
            _reveal(self.cell(r, c))
        self.word_hints_used += 1
        return True

    def reveal_all(self) -> None:
        for cell in self._letter_cells():
            _reveal(cell)
        self.revealed_all = True

    # ── Solution word ────────────────────────────────────────────────

    def solution_letters(self) -> list[str]:
        """Player's letters at the solution cells, in solution order; '_' when empty."""
        return [
            self.cell(sc.row, sc.col).user_input or "_"
            for sc in self.puzzle.solution_cells
        ]

    def check_solution_word(self, guess: str) -> bool:
        return guess.strip().upper() == self.puzzle.solution_word

    # ── Navigation helpers ───────────────────────────────────────────

    def word_at(self, row: int, col: int, direction: Direction) -> PlacedWord | None:
        """Word through (row, col) in *direction*, else the one in the other direction."""
        cell = self.cell(row, col)
        if cell.is_black:
            return None
        for d in (direction, direction.other):
            number = cell.across_clue if d == Direction.ACROSS else cell.down_clue
            if number is None:
                continue
            for pw in self.puzzle.placed_words:
                if pw.number == number and pw.direction == d:
                    return pw
        return None

    @staticmethod
    def word_cells(word: PlacedWord) -> list[tuple[int, int]]:
        return word.cells()

    def _letter_cells(self) -> list[Cell]:
        return [self.grid.cells[r][c] for r, c in self.grid.letter_cells()]


def _reset_check(cell: Cell) -> None:
    cell.checked = False
    cell.is_correct = None


def _reveal(cell: Cell) -> None:
    cell.user_input = cell.letter
    cell.revealed = True
    cell.checked = True
    cell.is_correct = True
