import textwrap
from pathlib import Path

import pytest

from asm16 import assemble_lines, default_output_path, run
from asm16.exceptions import (
    FileOpenException,
    FileReadException,
    InvalidInstructionException,
    UndefinedLabelException,
)
from asm16.instruction import Immediate
from asm16.isa import Condition, OpCode, Register


def assemble_source(src):
    text = textwrap.dedent(src).strip("\n")
    return assemble_lines(text.splitlines())


def test_loop_scenario(tmp_path):
    source = tmp_path / "loop.s"
    source.write_text("loop:\nldi 1\njmp.eq a\n", encoding="utf-8")
    output = tmp_path / "loop.bin"

    result = run(source, output)

    assert result.symbols["loop"] == 0
    assert output.read_bytes() == bytes([0x01, 0x88, 0x02, 0x60])

    words = [int.from_bytes(output.read_bytes()[i:i + 2], "little") for i in (0, 2)]
    assert words[0] == (OpCode.LDI << 11) | 1
    assert words[1] == (OpCode.JMP << 11) | (Register.A << 3) | Condition.EQUAL


def test_forward_and_backward_references_match():
    result = assemble_source(
        """
        ldi later       # forward
        ld
        later:
        st
        ldi later       # backward
        """
    )

    assert result.symbols["later"] == 2
    assert result.instructions[0].payload == Immediate(2)
    assert result.instructions[3].payload == Immediate(2)
    assert result.image[0:2] == result.image[6:8]


def test_undefined_label_only_after_full_scan():
    # the bad mnemonic further down wins: resolution never starts
    with pytest.raises(InvalidInstructionException):
        assemble_source(
            """
            ldi nowhere
            bogus
            """
        )

    with pytest.raises(UndefinedLabelException, match='"nowhere"'):
        assemble_source(
            """
            ldi nowhere
            ld
            """
        )


def test_missing_source(tmp_path):
    missing = tmp_path / "missing.s"
    with pytest.raises(FileOpenException) as excinfo:
        run(missing, tmp_path / "out.bin")

    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert str(excinfo.value) == f"unable to open {missing}"


def test_unwritable_output(tmp_path):
    source = tmp_path / "prog.s"
    source.write_text("ld\n", encoding="utf-8")
    output = tmp_path / "no-such-dir" / "prog.bin"

    with pytest.raises(FileOpenException) as excinfo:
        run(source, output)

    assert excinfo.value.path == output
    assert isinstance(excinfo.value.__cause__, OSError)


def test_invalid_utf8(tmp_path):
    source = tmp_path / "prog.s"
    source.write_bytes(b"ld\n\xff\xfe\n")

    with pytest.raises(FileReadException) as excinfo:
        run(source, tmp_path / "prog.bin")

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_failed_run_writes_nothing(tmp_path):
    source = tmp_path / "prog.s"
    source.write_text("ld\nldi nowhere\n", encoding="utf-8")
    output = tmp_path / "prog.bin"

    with pytest.raises(UndefinedLabelException):
        run(source, output)

    assert not output.exists()


def test_crlf_source(tmp_path):
    source = tmp_path / "prog.s"
    source.write_bytes(b"start:\r\nldi start\r\n")
    output = tmp_path / "prog.bin"

    run(source, output)
    assert output.read_bytes() == bytes([0x00, 0x88])


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("prog.s", "prog.bin"),
        ("dir/prog.asm", "dir/prog.bin"),
        ("prog", "prog.bin"),
        ("prog.tar.s", "prog.tar.bin"),
    ],
)
def test_default_output_path(source, expected):
    assert default_output_path(source) == Path(expected)
