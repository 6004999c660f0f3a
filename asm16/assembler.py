import dataclasses
import logging
from pathlib import Path

from .builder import ProgramBuilder
from .encoder import encode_program
from .exceptions import FileOpenException, FileReadException, FileWriteException
from .symbols import resolve


LOGGER = logging.getLogger("asm16.assembler")

IMAGE_SUFFIX = ".bin"


@dataclasses.dataclass
class AssemblyResult:
    instructions: list
    symbols: object
    image: bytes


def _finish(builder):
    instructions = resolve(builder.instructions, builder.symbols)
    return AssemblyResult(instructions, builder.symbols, encode_program(instructions))


def assemble_lines(lines):
    """Assemble an iterable of source lines into a flat image.

    Phase one lays out every line and fills the symbol table; only then are
    label references resolved and the program encoded.
    """
    builder = ProgramBuilder()
    builder.feed_lines(lines)
    return _finish(builder)


def _read_lines(source_file, source_path):
    while True:
        try:
            line = source_file.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadException(source_path) from e

        if not line:
            return

        yield line


def run(source_path, output_path):
    """Assemble source_path into a flat image at output_path.

    The output file is only created once the whole program has been
    resolved, a failed run leaves no image behind.
    """
    source_path = Path(source_path)
    output_path = Path(output_path)

    try:
        source_file = open(source_path, "r", encoding="utf-8", newline="\n")
    except OSError as e:
        raise FileOpenException(source_path) from e

    builder = ProgramBuilder()
    with source_file:
        builder.feed_lines(_read_lines(source_file, source_path))

    result = _finish(builder)

    try:
        output_file = open(output_path, "wb")
    except OSError as e:
        raise FileOpenException(output_path) from e

    with output_file:
        try:
            output_file.write(result.image)
            output_file.flush()
        except OSError as e:
            raise FileWriteException(output_path) from e

    LOGGER.info("wrote %d words to %s", len(result.instructions), output_path)
    return result


def default_output_path(source_path):
    return Path(source_path).with_suffix(IMAGE_SUFFIX)
