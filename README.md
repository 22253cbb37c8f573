# explang

Building blocks for the front end of the exp language. Exp is a small
statically typed language made of functions, constants and integer
arithmetic. This package holds the pieces that a compiler front end
keeps in its context. It needs nothing outside the standard library.

## Modules

- `explang.numeric`: converts 64-bit integers to and from decimal text
  (`str_to_i64`, `str_to_u64`, `i64_to_str`, `u64_to_str`). It also has
  range checks (`i64_in_range_i16`, `i64_in_range_i8`,
  `i64_in_range_u8`), `nearest_power_of_two`, and `hash_string`, a
  64-bit hash in the style of djb2.
- `explang.log`: `LogLevel`, `format_log_message` and `log_message`,
  which write diagnostics of the form `[level @ file:line] message`.
  It also has `PanicError`, which is raised on unrecoverable internal
  failures.
- `explang.process`: `run_process(command, args)` runs a program, waits
  for it and returns its exit code. It raises `PanicError` if the
  program cannot be started or is killed by a signal.
- `explang.types`: the type model, made of `Type` and `TypeKind`. The
  constructors are `nil_type`, `boolean_type`, `i64_type`, `tuple_type`
  and `function_type`. `size_of` and `align_of` give the layout.
- `explang.type_interner`: `TypeInterner` hands out one shared instance
  for each distinct type.
- `explang.operand`: SSA, constant, immediate and label operands
  (`ssa`, `constant`, `immediate`, `label`). It has `Opcode` and the
  three-address `Instruction` constructors: `instruction_return`,
  `instruction_call`, `instruction_dot`, `instruction_load`,
  `instruction_negate`, `instruction_add`, `instruction_subtract`,
  `instruction_multiply`, `instruction_divide` and
  `instruction_modulus`.
- `explang.value`: compile-time values (`nil_value`, `boolean_value`,
  `i64_value`, `tuple_value`) and the deduplicating `Constants` pool.
  `format_value` and `format_operand` render them.
- `explang.function_body`: `FormalArgument`, `LocalVariable`, `Block`
  and `FunctionBody`, with `format_instruction` for listings.
- `explang.tables`: `Labels`, `StringInterner`, `Symbol` and
  `SymbolTable`.
- `explang.errors`: `ErrorCode` and `CompileError`.
- `explang.options`: `parse_cli_options`, `CLIOptions`, `Stage`,
  `ContextOptions`, `context_options` and `replace_extension`.
- `explang.context`: `Context`, which ties the pieces above together
  and emits instructions into the function being compiled. It also has
  `type_of_value`, `type_of_operand` and `type_of_function`.

## Examples

Integer conversions:

```python
from explang.numeric import str_to_i64, i64_to_str, i64_in_range_i16

str_to_i64("-42")           # -42
i64_to_str(-42)             # "-42"
i64_in_range_i16(40000)     # False
```

Types and their layout:

```python
from explang.types import i64_type, boolean_type, tuple_type, size_of, align_of

pair = tuple_type([i64_type(), boolean_type()])
str(pair)        # "(i64, bool)"
size_of(pair)    # 16
align_of(pair)   # 8
```

Interned types compare by identity:

```python
from explang.type_interner import TypeInterner

types = TypeInterner()
types.i64_type() is types.i64_type()   # True
types.i64_type() is types.nil_type()   # False
```

The constants pool stores each value once. Appending an equal value
again gives back the same operand:

```python
from explang.value import Constants, i64_value

pool = Constants()
first = pool.append(i64_value(100000))
again = pool.append(i64_value(100000))
first == again   # True
len(pool)        # 1
```

Emitting code into a function and listing it:

```python
from explang.context import Context
from explang.operand import immediate

ctx = Context()
body = ctx.symbol_table_at("f").function_body
ctx.enter_function(body)
total = ctx.emit_add(immediate(3), immediate(4))
ctx.emit_return(total)
ctx.leave_function()
print(body.format(ctx), end="")
# ()
#   0: add %0, 3, 4
#   1: ret %0
```

Command-line options and the paths derived from them.
`parse_cli_options` takes the arguments without the program name:

```python
from explang.options import parse_cli_options, context_options

cli = parse_cli_options(["-c", "hello.exp"])
cli.output                     # "hello"
opts = context_options(cli)
opts.assembly, opts.object     # ("hello.s", "hello.o")
opts.do_assemble()             # True
opts.do_link()                 # False
```

The options are:

| Option | Effect |
| --- | --- |
| `-h` | Prints the help text and raises `SystemExit(0)`. |
| `-v` | Prints the version and raises `SystemExit(0)`. |
| `-o <filename>` | Sets the output name. |
| `-c` | Stops after assembling. |
| `-s` | Stops after writing assembly. |

A missing source file is reported as an error and also raises
`SystemExit(0)`.

Compile errors carry their offending text:

```python
from explang.errors import CompileError, ErrorCode

err = CompileError(ErrorCode.PARSER_EXPECTED_SEMICOLON, "}")
err.text                  # "Expected: [;]. Found: [}]"
err.report("f.exp", 3)    # writes "\n[error @ f.exp:3] Expected: [;]. Found: [}]\n" to stderr
```

## What this package does not do

This package has no lexer, parser, type checker or code generator. It
installs no command, so it cannot compile an exp source file into
assembly, an object file or an executable. The option parsing,
`Context` and `run_process` are the parts such a driver would use, but
the driver itself is not included.

## Tests

The test suite uses pytest, which is declared under the `test` extra:

```
pip install -e .[test]
pytest
```