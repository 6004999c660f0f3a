import logging

from .exceptions import (
    AddressSpaceExhaustedException,
    InvalidConditionException,
    InvalidInstructionException,
    InvalidIntegerLiteralException,
    InvalidRegisterException,
    MissingOperandException,
    TooManyOperandsException,
)
from .grammar import parse_line, parse_int_literal
from .instruction import (
    Instruction,
    Immediate,
    JumpOperand,
    LabelReference,
    NoOperand,
    RegisterPair,
)
from .isa import (
    ADDRESS_SPACE,
    OperandShape,
    lookup_condition,
    lookup_mnemonic,
    lookup_register,
)
from .symbols import SymbolTable


LOGGER = logging.getLogger("asm16.builder")


def _expect_operands(line_number, operands, roles):
    # One role name per required operand; anything past them is surplus
    if len(operands) < len(roles):
        raise MissingOperandException(line_number, roles[len(operands)])

    if len(operands) > len(roles):
        raise TooManyOperandsException(line_number, operands[len(roles)])

    return operands


def _register(line_number, name):
    register = lookup_register(name)
    if register is None:
        raise InvalidRegisterException(line_number, name)

    return register


def _immediate(line_number, text):
    try:
        return Immediate(parse_int_literal(text))
    except ValueError as e:
        raise InvalidIntegerLiteralException(line_number, text) from e


def build_instruction(line_number, source_line):
    """Turn a parsed line carrying a mnemonic into an Instruction.

    ldi may name a label; that operand comes back as a LabelReference
    and has to go through resolve() before encoding.
    """
    mnemonic = source_line.mnemonic
    operands = source_line.operands

    entry = lookup_mnemonic(mnemonic)
    if entry is None:
        raise InvalidInstructionException(line_number, mnemonic)

    opcode, shape = entry

    if shape is OperandShape.NONE:
        _expect_operands(line_number, operands, ())
        return Instruction(opcode, NoOperand())

    if shape is OperandShape.REGISTER_PAIR:
        target, source = _expect_operands(line_number, operands, ("target register", "source register"))
        return Instruction(opcode, RegisterPair(_register(line_number, target), _register(line_number, source)))

    if shape is OperandShape.JUMP:
        condition = lookup_condition(mnemonic)
        if condition is None:
            raise InvalidConditionException(line_number, mnemonic)

        source, = _expect_operands(line_number, operands, ("source register",))
        return Instruction(opcode, JumpOperand(condition, _register(line_number, source)))

    value, = _expect_operands(line_number, operands, ("value",))
    if shape is OperandShape.IMMEDIATE_OR_LABEL and value[0].isalpha():
        return Instruction(opcode, LabelReference(value, line_number))

    return Instruction(opcode, _immediate(line_number, value))


class ProgramBuilder:
    """Layout pass: collects instructions and label addresses line by line."""

    def __init__(self):
        self.symbols = SymbolTable()
        self.instructions = []
        self.address = 0

    def feed(self, line_number, text):
        source_line = parse_line(line_number, text)

        # A label names the address of the next instruction emitted
        if source_line.label is not None:
            self.symbols.define(source_line.label, self.address, line_number)

        if source_line.mnemonic is None:
            return None

        instruction = build_instruction(line_number, source_line)
        self.advance(instruction.size)
        self.instructions.append(instruction)
        return instruction

    def feed_lines(self, lines):
        for line_number, text in enumerate(lines):
            self.feed(line_number, text.rstrip("\r\n"))

        LOGGER.debug("layout done: %d instructions, %d labels",
                     len(self.instructions), len(self.symbols))

    def advance(self, size):
        if self.address + size >= ADDRESS_SPACE:
            raise AddressSpaceExhaustedException()

        self.address += size
