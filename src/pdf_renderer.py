"""Render a solution-word crossword to PDF using ReportLab.

Page 1: title banner, grid, a strip of numbered boxes for the solution word,
then all clues (across + down) in balanced columns.
Page 2: answer key with the filled grid and the solution word spelled out.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph

from models import Grid, NumberedClue

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
SECTION_HEADER_H = 14.0
SOLUTION_COLOR = (0.98, 0.92, 0.78)


@dataclass
class LayoutParams:
    """All computed layout measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN
    usable_h: float = PAGE_H - 2 * MARGIN

    # Grid
    grid_size: int = 15
    cell_size: float = 24.0
    grid_dim: float = 0.0
    grid_x: float = 0.0
    grid_y: float = 0.0  # top of grid in page coords

    # Title banner
    banner_h: float = 28.0
    banner_y: float = 0.0

    # Solution strip
    solution_len: int = 0
    solution_box: float = 18.0
    solution_y: float = 0.0  # top of strip

    # Fonts
    clue_font_size: float = 9.0
    clue_leading: float = 10.5
    space_after: float = 1.5
    number_font_size: float = 6.0

    # Clue zone (all clues below the solution strip)
    clue_zone_y: float = 0.0
    clue_cols: int = 3
    clue_gutter: float = 12.0
    clue_col_w: float = 0.0

    title: str = "CROSSWORD"


def render_pdf(
    grid: Grid,
    across: list[NumberedClue],
    down: list[NumberedClue],
    title: str,
    output_path: str,
    solution_word: str = "",
) -> None:
    """Compute layout, adaptive fit, draw page 1 (puzzle) + page 2 (answer key)."""
    from reportlab.pdfgen.canvas import Canvas

    layout = _compute_layout(grid.size, across, down, title, len(solution_word))
    layout = _adaptive_fit(across, down, layout)

    c = Canvas(output_path, pagesize=letter)

    _draw_title_banner(c, layout)
    _draw_grid(c, grid, layout, show_answers=False)
    _draw_solution_strip(c, layout, "")
    _draw_clue_zone(c, across, down, layout)
    c.showPage()

    _draw_answer_key_page(c, grid, layout, solution_word)
    c.showPage()

    c.save()


def _compute_layout(
    grid_size: int,
    across: list[NumberedClue],
    down: list[NumberedClue],
    title: str,
    solution_len: int = 0,
) -> LayoutParams:
    """Calculate all positions and sizes."""
    lp = LayoutParams(grid_size=grid_size, title=title, solution_len=solution_len)

    if grid_size <= 13:
        lp.cell_size = 24.0
        lp.number_font_size = 8.5
    elif grid_size <= 15:
        lp.cell_size = 24.0
        lp.number_font_size = 8.0
    else:
        lp.cell_size = 19.0
        lp.number_font_size = 6.5

    lp.clue_cols = 3 if len(across) + len(down) < 40 else 4

    _recompute_positions(lp)
    return lp


def _recompute_positions(lp: LayoutParams) -> None:
    """(Re)calculate derived positions from current params."""
    lp.grid_dim = lp.cell_size * lp.grid_size
    lp.banner_y = lp.page_h - lp.margin - lp.banner_h

    lp.grid_x = (lp.page_w - lp.grid_dim) / 2
    lp.grid_y = lp.banner_y - 8

    grid_bottom_y = lp.grid_y - lp.grid_dim
    lp.solution_y = grid_bottom_y - 10
    strip_h = lp.solution_box + 10 if lp.solution_len else 0
    lp.clue_zone_y = grid_bottom_y - 12 - strip_h

    total_gutter = lp.clue_gutter * (lp.clue_cols - 1)
    lp.clue_col_w = (lp.usable_w - total_gutter) / lp.clue_cols


def _adaptive_fit(
    across: list[NumberedClue],
    down: list[NumberedClue],
    layout: LayoutParams,
) -> LayoutParams:
    """Step through adjustments until all content fits on page 1."""
    for _ in range(12):
        if _content_fits(across, down, layout):
            return layout

        if layout.clue_font_size > 6.0:
            layout.clue_font_size -= 0.5
            layout.clue_leading = layout.clue_font_size + 1.5
            continue

        if layout.space_after > 0.5:
            layout.space_after = 0.5
            continue

        if layout.clue_cols < 5:
            layout.clue_cols += 1
            _recompute_positions(layout)
            continue

        if layout.cell_size > 16:
            layout.cell_size -= 1
            _recompute_positions(layout)
            continue

        break

    return layout


def _content_fits(
    across: list[NumberedClue],
    down: list[NumberedClue],
    layout: LayoutParams,
) -> bool:
    """Check if all clue columns fit between the solution strip and the bottom margin."""
    columns = _distribute_columns(across, down, layout)
    tallest = max((sum(h for _, _, h in col) for col in columns), default=0.0)
    return tallest <= layout.clue_zone_y - layout.margin


def _distribute_columns(
    across: list[NumberedClue],
    down: list[NumberedClue],
    layout: LayoutParams,
) -> list[list[tuple[str, str, float]]]:
    """Flow headers and clues into balanced columns of (kind, content, height)."""
    style = _clue_style(layout)

    items: list[tuple[str, str, float]] = []
    for label, clues in (("ACROSS", across), ("DOWN", down)):
        items.append(("header", label, SECTION_HEADER_H + 4))
        for clue in clues:
            markup = _clue_markup(clue)
            _, h = Paragraph(markup, style).wrap(layout.clue_col_w, 10000)
            items.append(("clue", markup, h + style.spaceAfter))

    target_per_col = sum(h for _, _, h in items) / layout.clue_cols
    columns: list[list[tuple[str, str, float]]] = [[] for _ in range(layout.clue_cols)]
    heights = [0.0] * layout.clue_cols
    col_idx = 0

    for item in items:
        h = item[2]
        if (col_idx < layout.clue_cols - 1
                and heights[col_idx] > 0
                and heights[col_idx] + h > target_per_col * 1.05):
            # Don't leave a header stranded at the bottom of a column
            stray = None
            if columns[col_idx] and columns[col_idx][-1][0] == "header":
                stray = columns[col_idx].pop()
                heights[col_idx] -= stray[2]
            col_idx += 1
            if stray is not None:
                columns[col_idx].append(stray)
                heights[col_idx] += stray[2]
        columns[col_idx].append(item)
        heights[col_idx] += h

    return columns


def _clue_style(layout: LayoutParams) -> ParagraphStyle:
    return ParagraphStyle(
        "ClueStyle",
        fontName="Helvetica",
        fontSize=layout.clue_font_size,
        leading=layout.clue_leading,
        spaceAfter=layout.space_after,
    )


def _clue_markup(clue: NumberedClue) -> str:
    """Format clue as ``<b>N.</b> text (len)`` with XML escaping."""
    return f"<b>{clue.number}.</b> {escape(clue.clue_text)} ({len(clue.answer)})"


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, layout: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    x = layout.margin
    y = layout.banner_y
    w = layout.usable_w
    h = layout.banner_h

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    c.drawString(x + (w - text_w) / 2, y + (h - 16) / 2 + 2, layout.title)


def _draw_grid(c, grid: Grid, layout: LayoutParams, show_answers: bool) -> None:
    """Draw black/white cells, numbers, solution badges and optional letters."""
    x0 = layout.grid_x
    y0 = layout.grid_y
    cs = layout.cell_size
    size = grid.size

    for r in range(size):
        for col in range(size):
            cell = grid.cells[r][col]
            cx = x0 + col * cs
            cy = y0 - (r + 1) * cs

            if cell.is_black:
                c.setFillColorRGB(0, 0, 0)
                c.rect(cx, cy, cs, cs, fill=1, stroke=0)
                continue

            if cell.is_solution_cell:
                c.setFillColorRGB(*SOLUTION_COLOR)
            else:
                c.setFillColorRGB(1, 1, 1)
            c.setStrokeColorRGB(0, 0, 0)
            c.setLineWidth(0.5)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

            c.setFillColorRGB(0, 0, 0)
            if cell.number is not None:
                c.setFont("Helvetica-Bold", layout.number_font_size)
                c.drawString(cx + 1.5, cy + cs - layout.number_font_size - 1, str(cell.number))

            if cell.is_solution_cell and cell.solution_index is not None:
                badge = str(cell.solution_index + 1)
                font_size = layout.number_font_size * 0.85
                c.setFont("Helvetica", font_size)
                c.drawRightString(cx + cs - 1.5, cy + 1.5, badge)

            if show_answers and cell.letter:
                font_size = cs * 0.45
                c.setFont("Helvetica", font_size)
                lw = stringWidth(cell.letter, "Helvetica", font_size)
                c.drawString(cx + cs * 0.55 - lw / 2, cy + cs * 0.42 - font_size / 2, cell.letter)

    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(x0, y0 - size * cs, size * cs, size * cs, fill=0, stroke=1)


def _draw_solution_strip(c, layout: LayoutParams, solution_word: str) -> None:
    """Numbered boxes for the solution word, filled in when *solution_word* is given."""
    n = layout.solution_len
    if not n:
        return
    box = layout.solution_box
    x0 = (layout.page_w - n * box) / 2
    y = layout.solution_y - box

    for i in range(n):
        x = x0 + i * box
        c.setFillColorRGB(*SOLUTION_COLOR)
        c.setStrokeColorRGB(0, 0, 0)
        c.setLineWidth(0.75)
        c.rect(x, y, box, box, fill=1, stroke=1)

        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica", 5.5)
        c.drawString(x + 1.5, y + box - 6.5, str(i + 1))
        if solution_word:
            c.setFont("Helvetica-Bold", box * 0.55)
            lw = stringWidth(solution_word[i], "Helvetica-Bold", box * 0.55)
            c.drawString(x + (box - lw) / 2, y + box * 0.22, solution_word[i])


def _draw_clue_zone(
    c,
    across: list[NumberedClue],
    down: list[NumberedClue],
    layout: LayoutParams,
) -> None:
    style = _clue_style(layout)
    columns = _distribute_columns(across, down, layout)

    for i, col_items in enumerate(columns):
        col_x = layout.margin + i * (layout.clue_col_w + layout.clue_gutter)
        current_y = layout.clue_zone_y

        for kind, content, h in col_items:
            if kind == "header":
                _draw_section_header(c, content, col_x, current_y, layout.clue_col_w)
            else:
                p = Paragraph(content, style)
                p.wrap(layout.clue_col_w, 10000)
                p.drawOn(c, col_x, current_y - h)
            current_y -= h


def _draw_section_header(c, text: str, x: float, y: float, width: float) -> float:
    """Black rect + white bold text. Returns y at bottom of header."""
    h = SECTION_HEADER_H
    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y - h, width, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 9)
    c.drawString(x + 4, y - h + 3.5, text)

    return y - h


def _draw_answer_key_page(c, grid: Grid, layout: LayoutParams, solution_word: str) -> None:
    """Banner, filled grid and the spelled-out solution word."""
    ak_layout = LayoutParams(
        grid_size=layout.grid_size,
        cell_size=layout.cell_size,
        number_font_size=layout.number_font_size,
        solution_len=len(solution_word),
        title="ANSWER KEY",
    )
    _recompute_positions(ak_layout)
    ak_layout.grid_y = ak_layout.banner_y - 20
    ak_layout.solution_y = ak_layout.grid_y - ak_layout.grid_dim - 14

    _draw_title_banner(c, ak_layout)
    _draw_grid(c, grid, ak_layout, show_answers=True)
    _draw_solution_strip(c, ak_layout, solution_word)
