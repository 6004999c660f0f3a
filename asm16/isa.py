import enum


# Every instruction is one word: 5 bit opcode, 11 bit operand field
OPCODE_SHIFT = 11
FIELD_MASK = 0x7ff
WORD_MAX = 0xffff
ADDRESS_SPACE = 0x10000


class OpCode(enum.IntEnum):
    MOV = 0x00
    LD = 0x01
    ST = 0x02
    AND = 0x03
    OR = 0x04
    XOR = 0x05
    NOT = 0x06
    ADD = 0x07
    SUB = 0x08
    SL = 0x09
    SR = 0x0a
    CMP = 0x0b
    JMP = 0x0c

    # Immediate forms
    LDI = 0x11
    ANDI = 0x13
    ORI = 0x14
    XORI = 0x15
    ADDI = 0x17
    SLI = 0x19
    SRI = 0x1a
    CMPI = 0x1b


class Register(enum.IntEnum):
    A = 0x0
    B = 0x1
    ADDR = 0x2
    SP = 0x3
    SR = 0x4
    PC = 0x5


class Condition(enum.IntEnum):
    ALWAYS = 0x0
    ZERO = 0x1
    EQUAL = 0x2
    NOT_EQUAL = 0x3
    LESS_THAN = 0x4
    LESS_EQUAL = 0x5
    GREATER_THAN = 0x6
    GREATER_EQUAL = 0x7


class OperandShape(enum.Enum):
    NONE = enum.auto()
    IMMEDIATE = enum.auto()
    IMMEDIATE_OR_LABEL = enum.auto()
    REGISTER_PAIR = enum.auto()
    JUMP = enum.auto()


reg_map = {
    "a": Register.A,
    "b": Register.B,
    "addr": Register.ADDR,
    "sp": Register.SP,
    "sr": Register.SR,
    "pc": Register.PC,
}


cond_map = {
    "z": Condition.ZERO,
    "eq": Condition.EQUAL,
    "ne": Condition.NOT_EQUAL,
    "lt": Condition.LESS_THAN,
    "le": Condition.LESS_EQUAL,
    "gt": Condition.GREATER_THAN,
    "ge": Condition.GREATER_EQUAL,
}


JUMP_MNEMONIC = "jmp"


inst_ops = {
    "mov": (OpCode.MOV, OperandShape.REGISTER_PAIR),
    "ld": (OpCode.LD, OperandShape.NONE),
    "ldi": (OpCode.LDI, OperandShape.IMMEDIATE_OR_LABEL),
    "st": (OpCode.ST, OperandShape.NONE),
    "and": (OpCode.AND, OperandShape.NONE),
    "andi": (OpCode.ANDI, OperandShape.IMMEDIATE),
    "or": (OpCode.OR, OperandShape.NONE),
    "ori": (OpCode.ORI, OperandShape.IMMEDIATE),
    "xor": (OpCode.XOR, OperandShape.NONE),
    "xori": (OpCode.XORI, OperandShape.IMMEDIATE),
    "not": (OpCode.NOT, OperandShape.NONE),
    "add": (OpCode.ADD, OperandShape.NONE),
    "addi": (OpCode.ADDI, OperandShape.IMMEDIATE),
    "sub": (OpCode.SUB, OperandShape.NONE),
    "sl": (OpCode.SL, OperandShape.NONE),
    "sli": (OpCode.SLI, OperandShape.IMMEDIATE),
    "sr": (OpCode.SR, OperandShape.NONE),
    "sri": (OpCode.SRI, OperandShape.IMMEDIATE),
    "cmp": (OpCode.CMP, OperandShape.NONE),
    "cmpi": (OpCode.CMPI, OperandShape.IMMEDIATE),
    JUMP_MNEMONIC: (OpCode.JMP, OperandShape.JUMP),
}


def lookup_mnemonic(mnemonic):
    """Return (opcode, shape) for a lower-cased mnemonic, or None.

    Dotted jump mnemonics all map to the jump entry, the suffix is checked
    separately by lookup_condition().
    """
    if mnemonic.startswith(JUMP_MNEMONIC + "."):
        mnemonic = JUMP_MNEMONIC

    return inst_ops.get(mnemonic)


def lookup_register(name):
    return reg_map.get(name.lower())


def lookup_condition(mnemonic):
    # Bare jmp always jumps
    if mnemonic == JUMP_MNEMONIC:
        return Condition.ALWAYS

    _, _, suffix = mnemonic.partition(".")
    return cond_map.get(suffix)
