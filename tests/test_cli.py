import pytest

import assemble


def test_usage_on_wrong_argument_count(capsys):
    assert assemble.main(["assemble.py"]) == 1
    assert assemble.main(["assemble.py", "a", "b", "c"]) == 1

    err = capsys.readouterr().err
    assert err.count("Usage: assemble.py SOURCE [OUTPUT]") == 2


def test_default_output(tmp_path):
    source = tmp_path / "prog.s"
    source.write_text("mov a, b\n", encoding="utf-8")

    assert assemble.main(["assemble.py", str(source)]) == 0
    assert (tmp_path / "prog.bin").read_bytes() == bytes([0x08, 0x00])


def test_explicit_output(tmp_path):
    source = tmp_path / "prog.s"
    source.write_text("ld\n", encoding="utf-8")
    output = tmp_path / "image"

    assert assemble.main(["assemble.py", str(source), str(output)]) == 0
    assert output.read_bytes() == bytes([0x00, 0x08])


def test_error_chain_is_printed(tmp_path, capsys):
    source = tmp_path / "prog.s"
    source.write_text("ld\nandi 0xzz\n", encoding="utf-8")

    assert assemble.main(["assemble.py", str(source)]) == 1

    lines = capsys.readouterr().err.splitlines()
    assert lines[0] == 'error: invalid integer literal "0xzz" at line 1'
    assert lines[1] == "caused by: malformed integer literal '0xzz'"
    assert lines[2].startswith("caused by: ")
    assert not (tmp_path / "prog.bin").exists()


def test_missing_source_reports_os_error(tmp_path, capsys):
    missing = tmp_path / "missing.s"

    assert assemble.main(["assemble.py", str(missing)]) == 1

    lines = capsys.readouterr().err.splitlines()
    assert lines[0] == f"error: unable to open {missing}"
    assert lines[1].startswith("caused by: [Errno 2]")


def test_entry_point_exit_status(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.argv", ["asm16"])

    with pytest.raises(SystemExit) as excinfo:
        assemble.entry_point()

    assert excinfo.value.code == 1
