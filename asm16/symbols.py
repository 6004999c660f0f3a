import logging

from .exceptions import DuplicateLabelException, UndefinedLabelException
from .instruction import Instruction, Immediate, LabelReference


LOGGER = logging.getLogger("asm16.symbols")


class SymbolTable:
    """Label name -> word address. Names are case sensitive and can only
    be defined once."""

    def __init__(self):
        self.labels = {}

    def define(self, name, address, line_number):
        if name in self.labels:
            raise DuplicateLabelException(line_number, name)

        LOGGER.debug("label %s = 0x%04x (line %d)", name, address, line_number)
        self.labels[name] = address

    def __contains__(self, name):
        return name in self.labels

    def __getitem__(self, name):
        return self.labels[name]

    def __len__(self):
        return len(self.labels)


def resolve(instructions, symbols):
    """Return a new instruction list with every label reference replaced by
    the label's address.

    Must only run once the whole source has been laid out, so references
    may point forward. Stops at the first undefined label.
    """
    resolved = []
    for instruction in instructions:
        payload = instruction.payload
        if isinstance(payload, LabelReference):
            if payload.name not in symbols:
                raise UndefinedLabelException(payload.name, payload.line_number)

            address = symbols[payload.name]
            LOGGER.debug("resolved %s -> 0x%04x", payload.name, address)
            instruction = Instruction(instruction.opcode, Immediate(address))

        resolved.append(instruction)

    return resolved
