"""Operands and instructions of the intermediate representation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .numeric import I16_MAX, I16_MIN

U16_MAX = 2**16 - 1


class OperandKind(Enum):
    SSA = "ssa"
    CONSTANT = "constant"
    IMMEDIATE = "immediate"
    LABEL = "label"


@dataclass(frozen=True)
class Operand:
    """An instruction operand: an SSA local, a constant, an immediate or a label.

    ``data`` is the SSA number, the constant index, the immediate value or
    the label index, depending on ``kind``.
    """

    kind: OperandKind
    data: int


def _check_u16(index: int, what: str) -> int:
    if not 0 <= index <= U16_MAX:
        raise ValueError(f"{what} index {index} is out of range")
    return index


def ssa(index: int) -> Operand:
    return Operand(OperandKind.SSA, _check_u16(index, "ssa"))


def constant(index: int) -> Operand:
    return Operand(OperandKind.CONSTANT, _check_u16(index, "constant"))


def immediate(value: int) -> Operand:
    if not I16_MIN <= value <= I16_MAX:
        raise ValueError(f"immediate {value} does not fit in 16 bits")
    return Operand(OperandKind.IMMEDIATE, value)


def label(index: int) -> Operand:
    return Operand(OperandKind.LABEL, _check_u16(index, "label"))


class Opcode(Enum):
    """Instruction opcodes; the value is the mnemonic used when printing."""

    RETURN = "ret"
    CALL = "call"
    DOT = "dot"
    LOAD = "load"
    NEGATE = "neg"
    ADD = "add"
    SUBTRACT = "sub"
    MULTIPLY = "mul"
    DIVIDE = "div"
    MODULUS = "mod"


@dataclass(frozen=True)
class Instruction:
    """An instruction with up to three operands ``a``, ``b`` and ``c``."""

    opcode: Opcode
    a: Operand | None = None
    b: Operand | None = None
    c: Operand | None = None


def _require_ssa(dst: Operand) -> None:
    if dst.kind is not OperandKind.SSA:
        raise ValueError(f"destination must be an SSA operand, not {dst.kind.value}")


def _instruction_ab(opcode: Opcode, a: Operand, b: Operand) -> Instruction:
    _require_ssa(a)
    return Instruction(opcode, a, b)


def _instruction_abc(opcode: Opcode, a: Operand, b: Operand, c: Operand) -> Instruction:
    _require_ssa(a)
    return Instruction(opcode, a, b, c)


def instruction_return(result: Operand) -> Instruction:
    return Instruction(Opcode.RETURN, b=result)


def instruction_call(dst: Operand, label_: Operand, args: Operand) -> Instruction:
    return _instruction_abc(Opcode.CALL, dst, label_, args)


def instruction_dot(dst: Operand, src: Operand, index: Operand) -> Instruction:
    return _instruction_abc(Opcode.DOT, dst, src, index)


def instruction_load(dst: Operand, src: Operand) -> Instruction:
    return _instruction_ab(Opcode.LOAD, dst, src)


def instruction_negate(dst: Operand, src: Operand) -> Instruction:
    return _instruction_ab(Opcode.NEGATE, dst, src)


def instruction_add(dst: Operand, left: Operand, right: Operand) -> Instruction:
    return _instruction_abc(Opcode.ADD, dst, left, right)


def instruction_subtract(dst: Operand, left: Operand, right: Operand) -> Instruction:
    return _instruction_abc(Opcode.SUBTRACT, dst, left, right)


def instruction_multiply(dst: Operand, left: Operand, right: Operand) -> Instruction:
    return _instruction_abc(Opcode.MULTIPLY, dst, left, right)


def instruction_divide(dst: Operand, left: Operand, right: Operand) -> Instruction:
    return _instruction_abc(Opcode.DIVIDE, dst, left, right)


def instruction_modulus(dst: Operand, left: Operand, right: Operand) -> Instruction:
    return _instruction_abc(Opcode.MODULUS, dst, left, right)