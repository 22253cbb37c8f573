"""The compilation context: shared tables, options and code emission."""

from __future__ import annotations

from collections.abc import Iterable

from . import operand as ops
from .errors import CompileError
from .function_body import Block, FormalArgument, FunctionBody, LocalVariable
from .log import PanicError
from .operand import Instruction, Operand, OperandKind
from .options import CLIOptions, ContextOptions, context_options
from .tables import Labels, StringInterner, Symbol, SymbolTable
from .type_interner import TypeInterner
from .types import Type
from .value import Constants, Value, ValueKind


class Context:
    """Everything needed while compiling one source file."""

    def __init__(self, options: CLIOptions | None = None) -> None:
        cli = CLIOptions() if options is None else options
        self.options: ContextOptions = context_options(cli)
        self.string_interner = StringInterner()
        self.type_interner = TypeInterner()
        self.symbol_table = SymbolTable()
        self.labels = Labels()
        self.constants = Constants()
        self.current_error: CompileError | None = None
        self._current_function: FunctionBody | None = None

    # options

    def do_assemble(self) -> bool:
        return self.options.do_assemble()

    def do_link(self) -> bool:
        return self.options.do_link()

    def do_cleanup(self) -> bool:
        return self.options.do_cleanup()

    @property
    def source_path(self) -> str:
        return self.options.source

    @property
    def assembly_path(self) -> str:
        return self.options.assembly

    @property
    def object_path(self) -> str:
        return self.options.object

    @property
    def output_path(self) -> str:
        return self.options.output

    @property
    def has_error(self) -> bool:
        return self.current_error is not None

    # interning

    def intern(self, text: str) -> str:
        return self.string_interner.insert(text)

    def nil_type(self) -> Type:
        return self.type_interner.nil_type()

    def boolean_type(self) -> Type:
        return self.type_interner.boolean_type()

    def i64_type(self) -> Type:
        return self.type_interner.i64_type()

    def tuple_type(self, elements: Iterable[Type]) -> Type:
        return self.type_interner.tuple_type(elements)

    def function_type(self, return_type: Type, argument_types: Iterable[Type]) -> Type:
        return self.type_interner.function_type(return_type, argument_types)

    # global names

    def labels_insert(self, name: str) -> Operand:
        return self.labels.insert(name)

    def labels_at(self, index: int) -> str:
        return self.labels.at(index)

    def symbol_table_at(self, name: str) -> Symbol:
        return self.symbol_table.at(name)

    # the function being compiled

    def enter_function(self, body: FunctionBody) -> None:
        if body is None:
            raise ValueError("cannot enter a missing function body")
        self._current_function = body

    def leave_function(self) -> None:
        self._current_function = None

    def current_function(self) -> FunctionBody:
        if self._current_function is None:
            raise RuntimeError("no function is being compiled")
        return self._current_function

    def current_block(self) -> Block:
        return self.current_function().block

    def def_local_const(self, name: str, value: Operand) -> None:
        """Load ``value`` into a fresh SSA local and name it ``name``."""
        result = self.emit_load(value)
        self.current_function().new_local(name, result.data)

    def lookup_local(self, name: str) -> LocalVariable | None:
        return self.current_function().lookup_local(name)

    def lookup_ssa(self, ssa_index: int) -> LocalVariable | None:
        return self.current_function().lookup_ssa(ssa_index)

    def lookup_argument(self, name: str) -> FormalArgument | None:
        return self.current_function().arguments_lookup(name)

    def argument_at(self, index: int) -> FormalArgument:
        return self.current_function().argument_at(index)

    # constants

    def constants_append(self, value: Value) -> Operand:
        return self.constants.append(value)

    def constants_at(self, index: int) -> Value:
        return self.constants.at(index)

    # emission

    def _emit_with_result(self, build, *operands: Operand) -> Operand:
        block = self.current_block()
        result = self.current_function().new_ssa()
        block.append(build(result, *operands))
        return result

    def emit_return(self, b: Operand) -> None:
        self.current_block().append(ops.instruction_return(b))

    def emit_call(self, b: Operand, c: Operand) -> Operand:
        return self._emit_with_result(ops.instruction_call, b, c)

    def emit_dot(self, b: Operand, c: Operand) -> Operand:
        return self._emit_with_result(ops.instruction_dot, b, c)

    def emit_load(self, b: Operand) -> Operand:
        return self._emit_with_result(ops.instruction_load, b)

    def emit_negate(self, b: Operand) -> Operand:
        return self._emit_with_result(ops.instruction_negate, b)

    def emit_add(self, b: Operand, c: Operand) -> Operand:
        return self._emit_with_result(ops.instruction_add, b, c)

    def emit_subtract(self, b: Operand, c: Operand) -> Operand:
        return self._emit_with_result(ops.instruction_subtract, b, c)

    def emit_multiply(self, b: Operand, c: Operand) -> Operand:
        return self._emit_with_result(ops.instruction_multiply, b, c)

    def emit_divide(self, b: Operand, c: Operand) -> Operand:
        return self._emit_with_result(ops.instruction_divide, b, c)

    def emit_modulus(self, b: Operand, c: Operand) -> Operand:
        return self._emit_with_result(ops.instruction_modulus, b, c)


def type_of_value(value: Value, context: Context) -> Type:
    """The interned type of a constant value."""
    if value.kind is ValueKind.UNINITIALIZED:
        raise PanicError("uninitialized Value")
    if value.kind is ValueKind.NIL:
        return context.nil_type()
    if value.kind is ValueKind.BOOLEAN:
        return context.boolean_type()
    if value.kind is ValueKind.I64:
        return context.i64_type()
    return context.tuple_type(type_of_operand(e, context) for e in value.payload)


def type_of_function(body: FunctionBody, context: Context) -> Type:
    """The interned function type of ``body``; its return type must be known."""
    if body.return_type is None:
        raise ValueError("function has no return type")
    return context.function_type(
        body.return_type, [argument.type for argument in body.arguments]
    )


def type_of_operand(operand: Operand, context: Context) -> Type | None:
    """The type of whatever ``operand`` refers to."""
    if operand.kind is OperandKind.SSA:
        local = context.lookup_ssa(operand.data)
        if local is None:
            raise LookupError(f"no local with ssa %{operand.data}")
        return local.type
    if operand.kind is OperandKind.CONSTANT:
        return type_of_value(context.constants_at(operand.data), context)
    if operand.kind is OperandKind.IMMEDIATE:
        return context.i64_type()
    name = context.labels_at(operand.data)
    symbol = context.symbol_table_at(name)
    if not symbol.name or symbol.type is None:
        raise ValueError(f"symbol {name!r} has no type")
    return symbol.type