import dataclasses

from .isa import OpCode, Register, Condition


@dataclasses.dataclass(frozen=True)
class NoOperand:
    pass


@dataclasses.dataclass(frozen=True)
class Immediate:
    value: int


@dataclasses.dataclass(frozen=True)
class RegisterPair:
    target: Register
    source: Register


@dataclasses.dataclass(frozen=True)
class JumpOperand:
    condition: Condition
    register: Register


@dataclasses.dataclass(frozen=True)
class LabelReference:
    # Only lives between the layout pass and resolve()
    name: str
    line_number: int


@dataclasses.dataclass(frozen=True)
class Instruction:
    opcode: OpCode
    payload: object = NoOperand()

    # Size in words
    size = 1

    @property
    def resolved(self):
        return not isinstance(self.payload, LabelReference)
