"""Integration tests: end-to-end CLI run to PDF/XLSX/SVG."""

import openpyxl
import pytest

from crossword_generator import main


def _write_pool(path):
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.append(["Word", "Clue", "Category"])
    for word in ["PIANO", "AIRPORT", "OPERA", "TRAIN", "ORBIT", "TENOR", "RIVER"]:
        ws.append([word, f"Clue for {word}", "Test"])
    sol = wb.create_sheet(title="Solutions")
    sol.append(["PAINTER"])
    wb.save(path)


@pytest.mark.slow
class TestEndToEnd:
    def test_builtin_pool(self, tmp_path):
        out = tmp_path / "puzzle.pdf"
        main([str(out), "--seed", "42", "--quiet"])

        out_dir = tmp_path / "output"
        pdf = out_dir / "puzzle.pdf"
        assert pdf.read_bytes()[:5] == b"%PDF-"
        assert pdf.stat().st_size > 1000
        assert (out_dir / "puzzle_clues.xlsx").exists()
        assert (out_dir / "puzzle_puzzle.svg").exists()
        assert (out_dir / "puzzle_answer.svg").exists()

        wb = openpyxl.load_workbook(out_dir / "puzzle_clues.xlsx")
        assert "Solution" in wb.sheetnames

    def test_custom_pool(self, tmp_path, capsys):
        pool = tmp_path / "pool.xlsx"
        _write_pool(pool)
        out = tmp_path / "custom.pdf"
        main([str(out), "--words", str(pool), "--seed", "7", "--attempts", "3"])

        err = capsys.readouterr().err
        assert "Placed" in err
        assert "solution word PAINTER" in err
        assert (tmp_path / "output" / "custom.pdf").exists()

    def test_missing_pool_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "x.pdf"), "--words", str(tmp_path / "missing.xlsx")])
        assert "File not found" in capsys.readouterr().err

    def test_quiet(self, tmp_path, capsys):
        main([str(tmp_path / "q.pdf"), "--seed", "1", "--quiet", "--strict-solution"])
        assert "Output:" not in capsys.readouterr().err
