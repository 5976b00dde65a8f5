import json
import tempfile

import pytest

from data_explorer.cli import decode_delimiter, main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    return tmp_path


@pytest.fixture
def people(workdir):
    path = workdir / "people.txt"
    path.write_text("name age\nann 31\nbob 42\n", encoding="utf-8")
    return path


def test_default_csv_output(people, workdir, capsys):
    assert main([str(people)]) == 0

    output = workdir / "structured_data" / "people_structured.csv"
    assert output.read_text(encoding="utf-8") == "name,age\nann,31\nbob,42\n"

    out = capsys.readouterr().out
    assert "Attempting to detect delimiter..." in out
    assert "Total Rows:      3" in out
    assert "Delimiter:       Detected: ' '" in out
    assert "Columns:         2" in out
    assert "Header Detected: no" in out
    assert "--- Structured Data Preview (First 10 lines) ---" in out
    assert "--- Processing Complete ---" in out
    assert list((workdir / "scratch").iterdir()) == []


def test_json_output_with_override(workdir, capsys):
    source = workdir / "scores.txt"
    source.write_text("id;score\n1;9\n2;7\n", encoding="utf-8")
    output = workdir / "out" / "scores.json"

    assert main([str(source), "-d", ";", "-f", "json", "-o", str(output)]) == 0

    assert json.loads(output.read_text(encoding="utf-8")) == [
        {"id": "1", "score": "9"},
        {"id": "2", "score": "7"},
    ]
    assert "Delimiter:       User-specified: ';'" in capsys.readouterr().out


def test_markdown_output_with_skip(people, workdir):
    output = workdir / "people.md"

    assert main([str(people), "-s", "1", "-f", "md", "-o", str(output)]) == 0

    assert output.read_text(encoding="utf-8") == "|ann,31|\n|---,--|\n|bob,42|\n"


def test_escaped_tab_override(workdir):
    source = workdir / "data.txt"
    source.write_text("a\tb c\n", encoding="utf-8")
    output = workdir / "data.csv"

    assert main([str(source), "-d", "\\t", "-o", str(output)]) == 0

    assert output.read_text(encoding="utf-8") == "a,b c\n"


def test_undetectable_delimiter_falls_back(workdir, capsys):
    source = workdir / "words.txt"
    source.write_text("alpha\nbeta\n", encoding="utf-8")
    output = workdir / "words.csv"

    assert main([str(source), "-o", str(output)]) == 0

    out = capsys.readouterr().out
    assert "Warning: Could not reliably detect a delimiter. Assuming space." in out
    assert "--- Processing Complete ---" in out
    assert output.read_text(encoding="utf-8") == "alpha\nbeta\n"


def test_unsupported_format_fails_after_analysis(people, workdir, capsys):
    output = workdir / "people.xml"

    assert main([str(people), "-f", "xml", "-o", str(output)]) == 1

    captured = capsys.readouterr()
    assert "--- Analysis Summary ---" in captured.out
    assert "--- Column Data Type Analysis ---" in captured.out
    assert "Processing Complete" not in captured.out
    assert "Unsupported output format: xml" in captured.err
    assert not output.exists()
    assert list((workdir / "scratch").iterdir()) == []


def test_missing_input_file(workdir, capsys):
    assert main([str(workdir / "missing.txt")]) == 1

    captured = capsys.readouterr()
    assert "File not found or not readable" in captured.err
    assert "--- Data Analysis Started ---" not in captured.out
    assert not (workdir / "structured_data").exists()


def test_negative_skip_is_an_error(people, capsys):
    assert main([str(people), "-s", "-2"]) == 1
    assert "Lines to skip must be zero or greater" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv", [["-h"], [], ["people.txt", "-x"], ["people.txt", "-s", "many"]]
)
def test_usage_exits_non_zero(workdir, argv, capsys):
    assert main(argv) == 1
    assert "Usage: data-explorer <file>" in capsys.readouterr().out


@pytest.mark.parametrize(
    "value,expected", [("\\t", "\t"), ("\\s", " "), (",", ","), ("", "")]
)
def test_decode_delimiter(value, expected):
    assert decode_delimiter(value) == expected


def test_latin1_input_is_preserved(workdir, capsys):
    source = workdir / "cities.txt"
    source.write_bytes(b"name;city\nann;caf\xe9\n")
    output = workdir / "cities.csv"

    assert main([str(source), "-d", ";", "-o", str(output)]) == 0

    assert output.read_bytes() == b"name,city\nann,caf\xe9\n"
    assert "ann,caf�" in capsys.readouterr().out


def test_carriage_return_inside_record(workdir, capsys):
    source = workdir / "notes.txt"
    source.write_bytes(b"a,b\n1,x\ry\n")
    output = workdir / "notes.csv"

    assert main([str(source), "-o", str(output)]) == 0

    assert output.read_bytes() == b"a,b\n1,x\ry\n"
    assert "Total Rows:      2" in capsys.readouterr().out


def test_output_path_is_a_directory(people, workdir, capsys):
    target = workdir / "out_dir"
    target.mkdir()

    assert main([str(people), "-f", "json", "-o", str(target)]) == 1

    captured = capsys.readouterr()
    assert "--- Analysis Summary ---" in captured.out
    assert "Output path is a directory" in captured.err
    assert list(target.iterdir()) == []
    assert list((workdir / "scratch").iterdir()) == []


def test_corrupt_compressed_input(workdir, capsys):
    source = workdir / "data.csv.gz"
    source.write_bytes(b"a,b\n1,2\n")

    assert main([str(source)]) == 1
    assert "Could not decompress" in capsys.readouterr().err
