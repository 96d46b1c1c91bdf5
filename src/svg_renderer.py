"""Render the crossword grid as standalone SVG.

Solution cells are tinted and carry a small circled badge whose
``data-index`` is the 1-based position of their letter in the solution word.
"""

from __future__ import annotations

from models import Cell, Grid

SOLUTION_FILL = "#fff4d6"
BADGE_STROKE = "#b45309"
FONT_FAMILY = "Helvetica, Arial, sans-serif"


def grid_to_svg(
    grid: Grid,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> str:
    """Return the SVG document for *grid* as a string."""
    if cell_size is None:
        cell_size = _default_cell_size(grid.size)
    side = cell_size * grid.size

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{side}" height="{side}" '
        f'viewBox="0 0 {side} {side}">',
    ]
    for r, row in enumerate(grid.cells):
        for c, cell in enumerate(row):
            lines.extend(_cell_elements(cell, c * cell_size, r * cell_size, cell_size, show_answers))
    lines.append(
        f'  <rect x="0" y="0" width="{side}" height="{side}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>'
    )
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def render_svg(
    grid: Grid,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the crossword grid to an SVG file."""
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(grid_to_svg(grid, show_answers=show_answers, cell_size=cell_size))


def render_puzzle_svg(grid: Grid, output_path: str) -> None:
    render_svg(grid, output_path, show_answers=False)


def render_answer_svg(grid: Grid, output_path: str) -> None:
    render_svg(grid, output_path, show_answers=True)


def _cell_elements(
    cell: Cell, x: float, y: float, size: float, show_answers: bool
) -> list[str]:
    if cell.is_black:
        return [f'  <rect x="{x}" y="{y}" width="{size}" height="{size}" fill="black"/>']

    fill = SOLUTION_FILL if cell.is_solution_cell else "white"
    out = [
        f'  <rect x="{x}" y="{y}" width="{size}" height="{size}" '
        f'fill="{fill}" stroke="black" stroke-width="0.5"/>'
    ]

    if cell.number is not None:
        font = round(size / 3, 1)
        out.append(
            f'  <text x="{x + 1.5}" y="{y + font + 1}" font-family="{FONT_FAMILY}" '
            f'font-weight="bold" font-size="{font}">{cell.number}</text>'
        )

    if cell.is_solution_cell and cell.solution_index is not None:
        radius = size * 0.16
        out.append(
            f'  <circle class="solution-badge" data-index="{cell.solution_index + 1}" '
            f'cx="{x + size - radius - 1}" cy="{y + size - radius - 1}" r="{radius}" '
            f'fill="none" stroke="{BADGE_STROKE}" stroke-width="0.6"/>'
        )

    if show_answers and cell.letter:
        out.append(
            f'  <text x="{x + size * 0.55}" y="{y + size * 0.58}" text-anchor="middle" '
            f'dominant-baseline="central" font-family="{FONT_FAMILY}" '
            f'font-size="{size * 0.45}">{cell.letter}</text>'
        )
    return out


def _default_cell_size(grid_size: int) -> float:
    # Keep the whole grid around 360px wide
    if grid_size <= 15:
        return 24.0
    return round(360 / grid_size, 1)
