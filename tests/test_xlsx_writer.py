"""Tests for xlsx_writer.py."""

import os
import tempfile

import openpyxl
import pytest

from models import Direction, NumberedClue, SolutionCell, WordEntry
from xlsx_writer import write_clues_xlsx


def _sample_clues():
    across = [
        NumberedClue(1, "Feline pet", "CAT", Direction.ACROSS),
        NumberedClue(5, "Man's best friend", "DOG", Direction.ACROSS),
    ]
    down = [
        NumberedClue(1, "Automobile", "CAR", Direction.DOWN),
        NumberedClue(3, "Large body of water", "OCEAN", Direction.DOWN),
    ]
    return across, down


@pytest.fixture
def xlsx_path():
    with tempfile.NamedTemporaryFile(suffix=".xlsx", delete=False) as f:
        path = f.name
    yield path
    os.unlink(path)


class TestWriteCluesXlsx:
    def test_creates_valid_xlsx(self, xlsx_path):
        across, down = _sample_clues()
        write_clues_xlsx(across, down, xlsx_path)
        wb = openpyxl.load_workbook(xlsx_path)
        assert wb.sheetnames == ["Clues"]

    def test_across_section(self, xlsx_path):
        across, down = _sample_clues()
        write_clues_xlsx(across, down, xlsx_path)
        ws = openpyxl.load_workbook(xlsx_path).active
        assert ws.cell(row=1, column=1).value == "ACROSS"
        assert ws.cell(row=2, column=1).value == "1. Feline pet"
        assert ws.cell(row=2, column=2).value == "CAT"
        assert ws.cell(row=3, column=1).value == "5. Man's best friend"

    def test_down_section(self, xlsx_path):
        across, down = _sample_clues()
        write_clues_xlsx(across, down, xlsx_path)
        ws = openpyxl.load_workbook(xlsx_path).active
        # Row 4 is the blank separator
        assert ws.cell(row=4, column=1).value is None
        assert ws.cell(row=5, column=1).value == "DOWN"
        assert ws.cell(row=6, column=1).value == "1. Automobile"
        assert ws.cell(row=7, column=2).value == "OCEAN"

    def test_bold_headers(self, xlsx_path):
        across, down = _sample_clues()
        write_clues_xlsx(across, down, xlsx_path)
        ws = openpyxl.load_workbook(xlsx_path).active
        assert ws.cell(row=1, column=1).font.bold is True
        assert ws.cell(row=5, column=1).font.bold is True

    def test_empty_clues(self, xlsx_path):
        write_clues_xlsx([], [], xlsx_path)
        ws = openpyxl.load_workbook(xlsx_path).active
        assert ws.cell(row=1, column=1).value == "ACROSS"
        assert ws.cell(row=3, column=1).value == "DOWN"

    def test_solution_sheet(self, xlsx_path):
        across, down = _sample_clues()
        cells = [SolutionCell(0, 1, 0), SolutionCell(4, 2, 1), SolutionCell(2, 3, 2)]
        write_clues_xlsx(across, down, xlsx_path, solution_word="ACE", solution_cells=cells)
        ws = openpyxl.load_workbook(xlsx_path)["Solution"]
        assert ws.cell(row=1, column=2).value == "ACE"
        assert ws.cell(row=3, column=2).value == "Letter"
        assert [ws.cell(row=r, column=2).value for r in range(4, 7)] == ["A", "C", "E"]
        assert ws.cell(row=5, column=3).value == 5
        assert ws.cell(row=5, column=4).value == 3

    def test_unplaced_sheet(self, xlsx_path):
        across, down = _sample_clues()
        unplaced = [
            WordEntry("UNUSED", "Not used clue", "Misc"),
            WordEntry("SKIPPED", "Another skipped", "Misc"),
        ]
        write_clues_xlsx(across, down, xlsx_path, unplaced=unplaced)
        wb = openpyxl.load_workbook(xlsx_path)
        assert "Not placed" in wb.sheetnames
        ws2 = wb["Not placed"]
        assert ws2.cell(row=1, column=1).value == "Word"
        assert ws2.cell(row=2, column=1).value == "UNUSED"
        assert ws2.cell(row=3, column=2).value == "Another skipped"
        assert ws2.cell(row=3, column=3).value == "Misc"

    def test_no_optional_sheets_when_empty(self, xlsx_path):
        across, down = _sample_clues()
        write_clues_xlsx(across, down, xlsx_path, solution_word="", unplaced=[])
        wb = openpyxl.load_workbook(xlsx_path)
        assert "Not placed" not in wb.sheetnames
        assert "Solution" not in wb.sheetnames
