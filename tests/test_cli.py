from levelschemer.cli import main

DOCUMENT = """\
ISOTOPE: ^123Ab
LEVEL: 0.0 0^+ GS
LEVEL: 1225.1 2^+ First
TRANSITION: 1225.1 0.0 E2 100
THRESHOLD: 2000.7 α 1 0 0 4 2
===
ISOTOPE: ^12C
LEVEL: 0 0^+ GS
"""


def test_main_renders_every_scheme(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text(DOCUMENT, encoding="utf-8")
    assert main([str(source), "--output-dir", str(tmp_path)]) == 0
    for number in (1, 2):
        assert (tmp_path / f"scheme_{number}.pdf").read_bytes().startswith(b"%PDF")
        assert (tmp_path / f"scheme_{number}.svg").exists()
    out = capsys.readouterr().out
    assert out.count("Saved ") == 2
    assert "scheme_2.svg" in out


def test_main_missing_input_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Failed to open input file" in capsys.readouterr().err


def test_main_reports_parse_error(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("LEVEL: abc 0^+ GS\n", encoding="utf-8")
    assert main([str(source), "-o", str(tmp_path)]) == 1
    assert "line 1" in capsys.readouterr().err


def test_main_empty_input_writes_nothing(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("# nothing here\n", encoding="utf-8")
    assert main([str(source), "-o", str(tmp_path)]) == 0
    assert list(tmp_path.glob("scheme_*")) == []
    assert capsys.readouterr().out == ""