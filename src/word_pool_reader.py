"""Read and validate a custom word pool from an XLSX workbook.

Sheet layout: one header row, then ``word | clue | category`` rows.  An
optional sheet named ``Solutions`` lists candidate solution words in column A.
"""

from __future__ import annotations

import sys
from pathlib import Path

import openpyxl

from models import CrosswordError, WordEntry

SOLUTIONS_SHEET = "Solutions"


def read_word_pool(path: str | Path, grid_size: int = 15) -> list[WordEntry]:
    """Open *path*, skip the header, parse rows, validate and return word entries."""
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    ws = wb.worksheets[0]

    header_row = _detect_header_row(ws)
    entries: list[WordEntry] = []

    for row in ws.iter_rows(min_row=header_row + 1, values_only=True):
        if not row or row[0] is None:
            continue
        word = _normalize_word(str(row[0]))
        if not word:
            continue
        clue = str(row[1]) if len(row) > 1 and row[1] else ""
        category = str(row[2]) if len(row) > 2 and row[2] else ""
        entries.append(WordEntry(word=word, clue=clue, category=category))

    wb.close()
    return _validate_and_filter(entries, grid_size)


def read_solution_words(path: str | Path) -> list[str]:
    """Return the solution words from the ``Solutions`` sheet, or [] if absent."""
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    if SOLUTIONS_SHEET not in wb.sheetnames:
        wb.close()
        return []

    words: list[str] = []
    for row in wb[SOLUTIONS_SHEET].iter_rows(min_col=1, max_col=1, values_only=True):
        if row[0] is None:
            continue
        word = _normalize_word(str(row[0]))
        if not word or word in words:
            continue
        words.append(word)

    wb.close()
    # First row of the sheet may be a "Solution" header
    if words and words[0] in ("SOLUTION", "SOLUTIONS", "SOLUTIONWORD"):
        words = words[1:]
    return words


def _detect_header_row(sheet) -> int:
    """Return the 1-based row index of the header row.

    The header is the first row whose column A holds a label such as
    ``word``; without one the data is assumed to start on row 1 and 0 is
    returned.
    """
    for row in sheet.iter_rows(min_row=1, max_row=20, max_col=1, values_only=False):
        cell = row[0]
        if cell.value is None:
            continue
        if str(cell.value).strip().lower() in ("word", "words", "answer"):
            return cell.row
        return 0
    return 0


def _normalize_word(raw: str) -> str:
    """Uppercase, strip everything except A-Z."""
    return "".join(c for c in raw.upper() if "A" <= c <= "Z")


def _validate_and_filter(
    entries: list[WordEntry], grid_size: int
) -> list[WordEntry]:
    """Keep words of length 3..grid_size, deduplicate, error if none remain."""
    seen_words: set[str] = set()
    result: list[WordEntry] = []

    for entry in entries:
        if len(entry.word) < 3:
            print(
                f"Warning: skipping '{entry.word}' (too short, <3 letters)",
                file=sys.stderr,
            )
            continue
        if len(entry.word) > grid_size:
            print(
                f"Warning: skipping '{entry.word}' (too long for {grid_size}x{grid_size} grid)",
                file=sys.stderr,
            )
            continue
        if entry.word in seen_words:
            print(
                f"Warning: duplicate word '{entry.word}', skipping",
                file=sys.stderr,
            )
            continue
        seen_words.add(entry.word)
        result.append(entry)

    if not result:
        raise CrosswordError("No valid word entries after filtering")

    return result
