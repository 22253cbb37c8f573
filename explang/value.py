"""Constant values and the constant pool."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Protocol

from .log import PanicError
from .numeric import I64_MAX, I64_MIN
from .operand import U16_MAX, Operand, OperandKind, constant


class ValueKind(Enum):
    UNINITIALIZED = auto()
    NIL = auto()
    BOOLEAN = auto()
    I64 = auto()
    TUPLE = auto()


@dataclass(frozen=True)
class Value:
    """A compile-time value.

    ``payload`` is a bool for booleans, an int for i64 values and a tuple of
    operands for tuples; it is None otherwise.
    """

    kind: ValueKind = ValueKind.UNINITIALIZED
    payload: Any = None


def nil_value() -> Value:
    return Value(ValueKind.NIL)


def boolean_value(flag: bool) -> Value:
    return Value(ValueKind.BOOLEAN, bool(flag))


def i64_value(number: int) -> Value:
    if not I64_MIN <= number <= I64_MAX:
        raise OverflowError(f"{number} is out of range of i64")
    return Value(ValueKind.I64, number)


def tuple_value(elements: Iterable[Operand]) -> Value:
    return Value(ValueKind.TUPLE, tuple(elements))


class _FormatContext(Protocol):
    def constants_at(self, index: int) -> Value: ...

    def labels_at(self, index: int) -> str: ...


def format_operand(operand: Operand, context: _FormatContext) -> str:
    """Render an operand; constants and labels are resolved through ``context``."""
    if operand.kind is OperandKind.SSA:
        return f"%{operand.data}"
    if operand.kind is OperandKind.CONSTANT:
        return format_value(context.constants_at(operand.data), context)
    if operand.kind is OperandKind.IMMEDIATE:
        return str(operand.data)
    return f"%{context.labels_at(operand.data)}"


def format_value(value: Value, context: _FormatContext) -> str:
    """Render a value as it appears in listings."""
    if value.kind in (ValueKind.UNINITIALIZED, ValueKind.NIL):
        return "()"
    if value.kind is ValueKind.BOOLEAN:
        return "true" if value.payload else "false"
    if value.kind is ValueKind.I64:
        return str(value.payload)
    return "(" + ", ".join(format_operand(e, context) for e in value.payload) + ")"


class Constants:
    """A pool of distinct constant values addressed by 16-bit index."""

    def __init__(self) -> None:
        self._values: list[Value] = []
        self._indices: dict[Value, int] = {}

    def append(self, value: Value) -> Operand:
        """Add ``value`` unless an equal one exists; return its constant operand."""
        index = self._indices.get(value)
        if index is None:
            index = len(self._values)
            if index > U16_MAX:
                raise PanicError("constant index out of bounds")
            self._values.append(value)
            self._indices[value] = index
        return constant(index)

    def at(self, index: int) -> Value:
        if not 0 <= index < len(self._values):
            raise IndexError(f"constant index {index} out of range")
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._values)

    def format(self, context: _FormatContext) -> str:
        """List every constant as ``index: [value]`` lines."""
        return "".join(
            f"{i}: [{format_value(v, context)}]\n" for i, v in enumerate(self._values)
        )