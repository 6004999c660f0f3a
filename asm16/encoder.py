from struct import pack

from .instruction import Immediate, JumpOperand, LabelReference, NoOperand, RegisterPair
from .isa import OPCODE_SHIFT, FIELD_MASK


def encode_payload(payload):
    if isinstance(payload, NoOperand):
        return 0
    elif isinstance(payload, Immediate):
        return payload.value
    elif isinstance(payload, RegisterPair):
        return (payload.source << 3) | payload.target
    elif isinstance(payload, JumpOperand):
        return (payload.register << 3) | payload.condition
    elif isinstance(payload, LabelReference):
        raise AssertionError(f"label reference {payload.name!r} reached the encoder unresolved")

    raise TypeError("Don't know how to encode " + repr(type(payload)))


def encode_instruction(instruction):
    """Opcode in the top five bits, payload field in the low eleven."""
    return (int(instruction.opcode) << OPCODE_SHIFT) | (encode_payload(instruction.payload) & FIELD_MASK)


def encode_program(instructions):
    output = bytearray()
    for instruction in instructions:
        output.extend(pack("<H", encode_instruction(instruction)))

    return bytes(output)
