"""Turns raw 16-bit instruction words into tagged instructions.

Every word decodes to something: words that match no pattern in their
family become ``Op.UNKNOWN``, which the executor treats as a no-op.
"""

import enum
from typing import NamedTuple


class Op(enum.Enum):
    CLS = "00E0"
    RET = "00EE"
    SYS = "0NNN"
    JP = "1NNN"
    CALL = "2NNN"
    SE_BYTE = "3XNN"
    SNE_BYTE = "4XNN"
    SE_REG = "5XY0"
    LD_BYTE = "6XNN"
    ADD_BYTE = "7XNN"
    LD_REG = "8XY0"
    OR = "8XY1"
    AND = "8XY2"
    XOR = "8XY3"
    ADD_REG = "8XY4"
    SUB = "8XY5"
    SHR = "8XY6"
    SUBN = "8XY7"
    SHL = "8XYE"
    SNE_REG = "9XY0"
    LD_I = "ANNN"
    JP_V0 = "BNNN"
    RND = "CXNN"
    DRW = "DXYN"
    SKP = "EX9E"
    SKNP = "EXA1"
    LD_VX_DT = "FX07"
    LD_VX_K = "FX0A"
    LD_DT_VX = "FX15"
    LD_ST_VX = "FX18"
    ADD_I_VX = "FX1E"
    LD_F_VX = "FX29"
    LD_B_VX = "FX33"
    LD_I_VX = "FX55"
    LD_VX_I = "FX65"
    UNKNOWN = "????"


class Instruction(NamedTuple):
    op: Op
    raw: int
    nnn: int
    nn: int
    n: int
    x: int
    y: int

    def mnemonic(self):
        return f"{self.raw:04X} {self.op.name}"


_ARITHMETIC = {
    0x0: Op.LD_REG, 0x1: Op.OR, 0x2: Op.AND, 0x3: Op.XOR, 0x4: Op.ADD_REG,
    0x5: Op.SUB, 0x6: Op.SHR, 0x7: Op.SUBN, 0xE: Op.SHL,
}

_KEYS = {0x9E: Op.SKP, 0xA1: Op.SKNP}

_MISC = {
    0x07: Op.LD_VX_DT, 0x0A: Op.LD_VX_K, 0x15: Op.LD_DT_VX, 0x18: Op.LD_ST_VX,
    0x1E: Op.ADD_I_VX, 0x29: Op.LD_F_VX, 0x33: Op.LD_B_VX, 0x55: Op.LD_I_VX,
    0x65: Op.LD_VX_I,
}

# families identified by the high nibble alone
_SIMPLE = {
    0x1: Op.JP, 0x2: Op.CALL, 0x3: Op.SE_BYTE, 0x4: Op.SNE_BYTE,
    0x5: Op.SE_REG, 0x6: Op.LD_BYTE, 0x7: Op.ADD_BYTE, 0x9: Op.SNE_REG,
    0xA: Op.LD_I, 0xB: Op.JP_V0, 0xC: Op.RND, 0xD: Op.DRW,
}


def classify(word):
    family = word >> 12
    if family == 0x0:
        if word == 0x00E0:
            return Op.CLS
        if word == 0x00EE:
            return Op.RET
        return Op.SYS
    if family == 0x8:
        return _ARITHMETIC.get(word & 0x000F, Op.UNKNOWN)
    if family == 0xE:
        return _KEYS.get(word & 0x00FF, Op.UNKNOWN)
    if family == 0xF:
        return _MISC.get(word & 0x00FF, Op.UNKNOWN)
    return _SIMPLE[family]


def decode(word):
    """Split a 16-bit word into its opcode class and operand fields."""
    word &= 0xFFFF
    return Instruction(
        op=classify(word),
        raw=word,
        nnn=word & 0x0FFF,
        nn=word & 0x00FF,
        n=word & 0x000F,
        x=(word & 0x0F00) >> 8,
        y=(word & 0x00F0) >> 4,
    )
