import dataclasses
import sys

import pyparsing as pp

from .exceptions import LineSyntaxException
from .isa import WORD_MAX


# Every blank except the line terminators is insignificant
WHITESPACE = "".join(c for c in map(chr, range(sys.maxunicode + 1)) if c.isspace() and c not in "\r\n")

pp.ParserElement.set_default_whitespace_chars(WHITESPACE)


# Integer literals
dec_int_literal = pp.Word(pp.nums).set_name("dec_int_literal")
hex_int_literal = pp.Combine(pp.Literal("0x").suppress() + pp.Word(pp.hexnums)).set_name("hex_int_literal")
oct_int_literal = pp.Combine(pp.Literal("0o").suppress() + pp.Word("01234567")).set_name("oct_int_literal")
bin_int_literal = pp.Combine(pp.Literal("0b").suppress() + pp.Word("01")).set_name("bin_int_literal")

dec_int_literal.add_parse_action(lambda t: int(t[0]))
hex_int_literal.add_parse_action(lambda t: int(t[0], base=16))
oct_int_literal.add_parse_action(lambda t: int(t[0], base=8))
bin_int_literal.add_parse_action(lambda t: int(t[0], base=2))

# Prefixed forms first, "0" alone is still decimal
int_literal = (hex_int_literal | oct_int_literal | bin_int_literal | dec_int_literal)
int_literal.leave_whitespace()

# Labels
label_name = pp.Word(pp.alphas + "_", pp.identbodychars).set_name("label_name")
label_stmt = label_name("label") + pp.Suppress(":")

# Mnemonics may carry a dotted condition suffix (jmp.eq). They can't run
# straight into an operand, "ldi1" is not "ldi 1".
mnemonic = pp.Regex(r"[A-Za-z.]+(?!\w)").set_name("mnemonic")
mnemonic.add_parse_action(pp.common.downcase_tokens)

# Operands
operand = pp.Word(pp.identbodychars).set_name("operand")
comma = pp.Suppress(",")
operands = pp.Group(operand + pp.Optional(comma + operand) + pp.Optional(comma + operand))

inst_stmt = mnemonic("mnemonic") + pp.Optional(operands("operands"))

# Comments
comment = (pp.Literal("#") + pp.rest_of_line()).set_name("comment")

# A full line; every part is optional
line_stmt = pp.Optional(label_stmt) + pp.Optional(inst_stmt) + pp.string_end()
line_stmt.ignore(comment)


@dataclasses.dataclass(frozen=True)
class SourceLine:
    label: str = None
    mnemonic: str = None
    operands: tuple = ()


def parse_line(line_number, text):
    """Split one source line (no terminator) into label, mnemonic and
    operands.

    Raises LineSyntaxException when the line has no recognisable shape.
    """
    try:
        result = line_stmt.parse_string(text, parse_all=True)
    except pp.ParseException as e:
        raise LineSyntaxException(line_number, text) from e

    operand_tokens = result.get("operands")
    return SourceLine(
        label=result.get("label"),
        mnemonic=result.get("mnemonic"),
        operands=tuple(operand_tokens) if operand_tokens is not None else (),
    )


def parse_int_literal(text):
    """Parse an unsigned 16 bit literal: 0x hex, 0o octal, 0b binary, or
    decimal. Raises ValueError on anything else."""
    try:
        value = int_literal.parse_string(text, parse_all=True)[0]
    except pp.ParseException as e:
        raise ValueError(f"malformed integer literal {text!r}") from e

    if value > WORD_MAX:
        raise ValueError(f"integer literal {text!r} does not fit in 16 bits")

    return value
