"""Function bodies: formal arguments, SSA locals and instruction blocks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Protocol

from .log import PanicError
from .numeric import U8_MAX
from .operand import U16_MAX, Instruction, Operand, ssa
from .types import Type
from .value import Value, format_operand


class _FormatContext(Protocol):
    def constants_at(self, index: int) -> Value: ...

    def labels_at(self, index: int) -> str: ...


@dataclass
class FormalArgument:
    """A declared argument of a function, bound to the SSA local ``ssa``."""

    name: str
    type: Type | None
    index: int = 0
    ssa: int = 0

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass
class LocalVariable:
    """An SSA local; unnamed temporaries have an empty ``name``."""

    name: str
    type: Type | None
    ssa: int


def format_instruction(instruction: Instruction, context: _FormatContext) -> str:
    """Render an instruction as ``mnemonic op, op, ...``."""
    operands = [
        format_operand(operand, context)
        for operand in (instruction.a, instruction.b, instruction.c)
        if operand is not None
    ]
    return f"{instruction.opcode.value} " + ", ".join(operands)


class Block:
    """An ordered sequence of instructions."""

    def __init__(self) -> None:
        self._instructions: list[Instruction] = []

    def append(self, instruction: Instruction) -> None:
        self._instructions.append(instruction)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._instructions)

    def __len__(self) -> int:
        return len(self._instructions)

    def format(self, context: _FormatContext) -> str:
        """List every instruction as an indented ``index: instruction`` line."""
        return "".join(
            f"  {i}: {format_instruction(instruction, context)}\n"
            for i, instruction in enumerate(self._instructions)
        )


@dataclass
class FunctionBody:
    """The arguments, locals and code of one function."""

    arguments: list[FormalArgument] = field(default_factory=list)
    locals: list[LocalVariable] = field(default_factory=list)
    block: Block = field(default_factory=Block)
    return_type: Type | None = None
    ssa_count: int = 0

    def _next_ssa(self) -> int:
        index = self.ssa_count
        if index + 1 > U16_MAX:
            raise PanicError("ssa index out of bounds")
        self.ssa_count += 1
        return index

    def new_argument(self, name: str, type_: Type | None) -> FormalArgument:
        """Declare the next formal argument and the SSA local holding it."""
        if len(self.arguments) >= U8_MAX:
            raise PanicError("cannot declare more than u8_MAX arguments")
        index = self._next_ssa()
        self.locals.append(LocalVariable(name, type_, index))
        argument = FormalArgument(name, type_, len(self.arguments), index)
        self.arguments.append(argument)
        return argument

    def arguments_lookup(self, name: str) -> FormalArgument | None:
        return next((arg for arg in self.arguments if arg.name == name), None)

    def argument_at(self, index: int) -> FormalArgument:
        if not 0 <= index < len(self.arguments):
            raise IndexError(f"argument index {index} out of range")
        return self.arguments[index]

    def new_local(self, name: str, ssa_index: int) -> None:
        """Give the SSA local ``ssa_index`` the name ``name``."""
        local = self.lookup_ssa(ssa_index)
        if local is not None:
            local.name = name

    def new_ssa(self) -> Operand:
        """Allocate a fresh unnamed SSA local and return its operand."""
        index = self._next_ssa()
        self.locals.append(LocalVariable("", None, index))
        return ssa(index)

    def lookup_local(self, name: str) -> LocalVariable | None:
        return next((local for local in self.locals if local.name == name), None)

    def lookup_ssa(self, ssa_index: int) -> LocalVariable | None:
        return next((local for local in self.locals if local.ssa == ssa_index), None)

    def format(self, context: _FormatContext) -> str:
        """Render the argument list followed by the instruction listing."""
        arguments = ", ".join(str(arg) for arg in self.arguments)
        return f"({arguments})\n" + self.block.format(context)