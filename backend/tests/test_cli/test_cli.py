"""Tests for the chordview command line."""

import io
import xml.etree.ElementTree as ET

from PIL import Image

from tests.conftest import SAMPLE_CSV

from chordview.cli import main


def _write_csv(tmp_path, text=SAMPLE_CSV):
    path = tmp_path / "relationships.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_svg_to_stdout(tmp_path, capsys):
    assert main([str(_write_csv(tmp_path))]) == 0
    out = capsys.readouterr().out
    root = ET.fromstring(out)
    assert root.get("viewBox") == "0 0 940 680"


def test_svg_file_with_id(tmp_path):
    out = tmp_path / "diagram.svg"
    assert main([str(_write_csv(tmp_path)), "-o", str(out), "--id", "chord", "--width", "500"]) == 0
    root = ET.fromstring(out.read_text(encoding="utf-8"))
    assert root.get("id") == "chord"
    assert root.get("width") == "540"


def test_png_file(tmp_path):
    out = tmp_path / "diagram.png"
    assert main([str(_write_csv(tmp_path)), "-o", str(out), "-s", "1.5"]) == 0
    img = Image.open(io.BytesIO(out.read_bytes()))
    assert img.size == (1880, 1360)


def test_invalid_csv(tmp_path, capsys):
    assert main([str(_write_csv(tmp_path, "A,B\n"))]) == 1
    assert "Line 1" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.csv")]) == 1
    assert "Cannot read" in capsys.readouterr().err


def test_csv_output_is_normalized(tmp_path):
    src = _write_csv(tmp_path, " B1 Audit , 2 Finance , 4.0 \n\nA1,A1,0.5\n")
    out = tmp_path / "clean.csv"
    assert main([str(src), "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "B1 Audit,2 Finance,4\nA1,A1,0.5\n"
