"""Write a generated puzzle's clues and solution word to an XLSX file."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Font

from models import NumberedClue, SolutionCell, WordEntry


def write_clues_xlsx(
    across: list[NumberedClue],
    down: list[NumberedClue],
    output_path: str,
    solution_word: str = "",
    solution_cells: tuple[SolutionCell, ...] | list[SolutionCell] = (),
    unplaced: list[WordEntry] | None = None,
) -> None:
    """Write across and down clues to an Excel workbook.

    Sheet ``Clues``: '1. Clue text' in column A, answer in column B.
    Sheet ``Solution``: the solution word and the 1-based grid position of
    each of its letters, written only when a solution word is given.
    Sheet ``Not placed``: pool words that didn't fit, when any.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Clues"

    header_font = Font(bold=True, size=12)
    row = 1

    for label, clues in (("ACROSS", across), ("DOWN", down)):
        ws.cell(row=row, column=1, value=label).font = header_font
        row += 1
        for clue in clues:
            ws.cell(row=row, column=1, value=f"{clue.number}. {clue.clue_text}")
            ws.cell(row=row, column=2, value=clue.answer)
            row += 1
        # Blank separator
        row += 1

    ws.column_dimensions["A"].width = 60
    ws.column_dimensions["B"].width = 15

    if solution_word:
        ws_sol = wb.create_sheet(title="Solution")
        ws_sol.cell(row=1, column=1, value="Solution word").font = header_font
        ws_sol.cell(row=1, column=2, value=solution_word)
        for i, heading in enumerate(("#", "Letter", "Row", "Column"), start=1):
            ws_sol.cell(row=3, column=i, value=heading).font = header_font
        for r, sc in enumerate(solution_cells, start=4):
            ws_sol.cell(row=r, column=1, value=sc.index + 1)
            ws_sol.cell(row=r, column=2, value=solution_word[sc.index])
            ws_sol.cell(row=r, column=3, value=sc.row + 1)
            ws_sol.cell(row=r, column=4, value=sc.col + 1)
        ws_sol.column_dimensions["A"].width = 16

    if unplaced:
        ws2 = wb.create_sheet(title="Not placed")
        for i, heading in enumerate(("Word", "Clue", "Category"), start=1):
            ws2.cell(row=1, column=i, value=heading).font = header_font
        for r, entry in enumerate(unplaced, start=2):
            ws2.cell(row=r, column=1, value=entry.word)
            ws2.cell(row=r, column=2, value=entry.clue)
            ws2.cell(row=r, column=3, value=entry.category)
        ws2.column_dimensions["B"].width = 60

    wb.save(output_path)
