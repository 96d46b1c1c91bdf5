#!/usr/bin/env python3
"""CLI entry point for solution-word crossword generation.

Builds a 15x15 crossword from the built-in themed word pool (or an XLSX pool
given with --words) and writes PDF, clue XLSX, puzzle SVG and answer SVG
into an ``output`` folder next to the output path.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from grid_builder import build_clue_lists
from grid_placer import ATTEMPTS, GRID_SIZE, MAX_WORDS
from models import CrosswordError, Puzzle, WordEntry
from puzzle_generator import generate_puzzle
from word_pool import get_word_pool


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a themed crossword with a hidden solution word."
    )
    p.add_argument(
        "output",
        nargs="?",
        default="crossword.pdf",
        help="Output PDF path (default: crossword.pdf)",
    )
    p.add_argument("--words", default=None,
                   help="XLSX word pool (word | clue | category); default: built-in pool")
    p.add_argument("--title", default="CROSSWORD",
                   help='Title text (default: "CROSSWORD")')
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (default: random)")
    p.add_argument("--attempts", type=int, default=ATTEMPTS,
                   help=f"Placement attempts (default: {ATTEMPTS})")
    p.add_argument("--max-words", type=int, default=MAX_WORDS,
                   help=f"Maximum words placed per attempt (default: {MAX_WORDS})")
    p.add_argument("--strict-solution", action="store_true",
                   help="Regenerate instead of overwriting a grid letter for the solution word")
    p.add_argument("--quiet", action="store_true",
                   help="Suppress progress output")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    seed = args.seed if args.seed is not None else random.randint(0, 2**31)
    t0 = time.time()

    try:
        _run(args, seed, t0)
    except CrosswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run(args, seed: int, t0: float) -> None:
    log = _progress(args.quiet)

    pool, solution_words = _load_inputs(args.words)
    log(f"Generating {GRID_SIZE}x{GRID_SIZE} crossword from {len(pool)} words (seed={seed})...")

    puzzle = generate_puzzle(
        word_pool=pool,
        solution_words=solution_words,
        seed=seed,
        attempts=args.attempts,
        max_words=args.max_words,
        strict_solution=args.strict_solution,
    )

    placed_words = {pw.word for pw in puzzle.placed_words}
    unplaced = [e for e in pool if e.word not in placed_words]

    for path in _output_all(puzzle, args.title, args.output, unplaced):
        log(f"Output: {path}")

    if puzzle.patched_cells:
        cells = ", ".join(f"({r + 1},{c + 1})" for r, c in puzzle.patched_cells)
        print(f"Warning: solution letters forced at {cells}", file=sys.stderr)

    elapsed = time.time() - t0
    white_cells = len(puzzle.grid.letter_cells())
    density = white_cells / (puzzle.grid.size ** 2) * 100
    log(
        f"Placed {len(puzzle.placed_words)}/{len(pool)} words, "
        f"solution word {puzzle.solution_word}, "
        f"grid density {density:.0f}%, "
        f"time {elapsed:.1f}s"
    )


def _load_inputs(words_path: str | None) -> tuple[list[WordEntry], list[str] | None]:
    if words_path is None:
        return get_word_pool(), None

    from word_pool_reader import read_solution_words, read_word_pool

    pool = read_word_pool(words_path, GRID_SIZE)
    return pool, read_solution_words(words_path) or None


def _output_all(
    puzzle: Puzzle,
    title: str,
    output_path: str,
    unplaced: list[WordEntry] | None = None,
) -> list[str]:
    """Generate all output files in an 'output' folder: PDF, XLSX, puzzle SVG, answer SVG."""
    from pdf_renderer import render_pdf
    from svg_renderer import render_answer_svg, render_puzzle_svg
    from xlsx_writer import write_clues_xlsx

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(exist_ok=True)

    pdf_path = str(out_dir / f"{stem}.pdf")
    xlsx_path = str(out_dir / f"{stem}_clues.xlsx")
    puzzle_svg_path = str(out_dir / f"{stem}_puzzle.svg")
    answer_svg_path = str(out_dir / f"{stem}_answer.svg")

    across, down = build_clue_lists(list(puzzle.placed_words))

    render_pdf(puzzle.grid, across, down, title, pdf_path, solution_word=puzzle.solution_word)
    write_clues_xlsx(
        across, down, xlsx_path,
        solution_word=puzzle.solution_word,
        solution_cells=puzzle.solution_cells,
        unplaced=unplaced,
    )
    render_puzzle_svg(puzzle.grid, puzzle_svg_path)
    render_answer_svg(puzzle.grid, answer_svg_path)

    return [pdf_path, xlsx_path, puzzle_svg_path, answer_svg_path]


def _progress(quiet: bool):
    def log(message: str) -> None:
        if not quiet:
            print(message, file=sys.stderr)
    return log


if __name__ == "__main__":
    main()
