import pytest

from explang import operand as op
from explang.numeric import I16_MAX, I16_MIN
from explang.operand import Opcode, OperandKind


@pytest.mark.parametrize(
    "make, kind",
    [
        (op.ssa, OperandKind.SSA),
        (op.constant, OperandKind.CONSTANT),
        (op.immediate, OperandKind.IMMEDIATE),
        (op.label, OperandKind.LABEL),
    ],
)
def test_constructors_set_kind_and_data(make, kind):
    operand = make(7)
    assert operand.kind is kind
    assert operand.data == 7


def test_equality_depends_on_kind_and_data():
    assert op.ssa(3) == op.ssa(3)
    assert not op.ssa(3) == op.constant(3)
    assert not op.ssa(3) == op.ssa(4)


@pytest.mark.parametrize("make", [op.ssa, op.constant, op.label])
def test_index_out_of_range(make):
    with pytest.raises(ValueError):
        make(-1)
    with pytest.raises(ValueError):
        make(op.U16_MAX + 1)


@pytest.mark.parametrize("make", [op.ssa, op.constant, op.label])
def test_index_upper_bound_accepted(make):
    assert make(op.U16_MAX).data == op.U16_MAX


def test_immediate_bounds():
    assert op.immediate(I16_MIN).data == I16_MIN
    assert op.immediate(I16_MAX).data == I16_MAX
    with pytest.raises(ValueError):
        op.immediate(I16_MAX + 1)
    with pytest.raises(ValueError):
        op.immediate(I16_MIN - 1)


@pytest.mark.parametrize(
    "opcode, mnemonic",
    [
        (Opcode.RETURN, "ret"),
        (Opcode.CALL, "call"),
        (Opcode.DOT, "dot"),
        (Opcode.LOAD, "load"),
        (Opcode.NEGATE, "neg"),
        (Opcode.ADD, "add"),
        (Opcode.SUBTRACT, "sub"),
        (Opcode.MULTIPLY, "mul"),
        (Opcode.DIVIDE, "div"),
        (Opcode.MODULUS, "mod"),
    ],
)
def test_opcode_mnemonics(opcode, mnemonic):
    assert opcode.value == mnemonic


def test_return_uses_only_b():
    inst = op.instruction_return(op.immediate(5))
    assert inst.opcode is Opcode.RETURN
    assert inst.b == op.immediate(5)
    assert inst.a is None and inst.c is None


@pytest.mark.parametrize(
    "make, opcode",
    [
        (op.instruction_call, Opcode.CALL),
        (op.instruction_dot, Opcode.DOT),
        (op.instruction_add, Opcode.ADD),
        (op.instruction_subtract, Opcode.SUBTRACT),
        (op.instruction_multiply, Opcode.MULTIPLY),
        (op.instruction_divide, Opcode.DIVIDE),
        (op.instruction_modulus, Opcode.MODULUS),
    ],
)
def test_three_operand_instructions(make, opcode):
    a, b, c = op.ssa(0), op.label(1), op.constant(2)
    inst = make(a, b, c)
    assert inst.opcode is opcode
    assert (inst.a, inst.b, inst.c) == (a, b, c)


@pytest.mark.parametrize(
    "make, opcode",
    [(op.instruction_load, Opcode.LOAD), (op.instruction_negate, Opcode.NEGATE)],
)
def test_two_operand_instructions(make, opcode):
    a, b = op.ssa(4), op.immediate(-2)
    inst = make(a, b)
    assert inst.opcode is opcode
    assert (inst.a, inst.b, inst.c) == (a, b, None)


@pytest.mark.parametrize(
    "make, arity",
    [
        (op.instruction_call, 3),
        (op.instruction_dot, 3),
        (op.instruction_load, 2),
        (op.instruction_negate, 2),
        (op.instruction_add, 3),
        (op.instruction_subtract, 3),
        (op.instruction_multiply, 3),
        (op.instruction_divide, 3),
        (op.instruction_modulus, 3),
    ],
)
def test_destination_must_be_ssa(make, arity):
    rest = [op.immediate(1)] * (arity - 1)
    with pytest.raises(ValueError):
        make(op.constant(0), *rest)