"""Command-line options and the options derived from them for compilation."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Flag, auto
from typing import TextIO

from .log import LogLevel, log_message

VERSION = "0.1.0"

HELP_TEXT = (
    "exp [options] <source-file>\n\n"
    "\t-h print help.\n"
    "\t-v print version.\n"
    "\t-o <filename> set output filename.\n"
    "\t-c emit an object file.\n"
    "\t-s emit an assembly file.\n"
    "\n"
)


class Stage(Flag):
    """Steps performed after generating assembly."""

    ASSEMBLE = auto()
    LINK = auto()
    CLEANUP = auto()


_ALL_STAGES = Stage.ASSEMBLE | Stage.LINK | Stage.CLEANUP


@dataclass
class CLIOptions:
    flags: Stage = _ALL_STAGES
    source: str = ""
    output: str = ""


def replace_extension(path: str, extension: str) -> str:
    """Replace the extension of ``path`` (if any) with ``extension``."""
    return os.path.splitext(path)[0] + extension


def parse_cli_options(
    argv: Sequence[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> CLIOptions:
    """Parse command-line arguments, not including the program name.

    Options may be clustered and may follow the source file. ``-h`` and
    ``-v`` print and raise SystemExit(0); a missing source file is reported
    and also raises SystemExit(0).
    """
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout if stdout is None else stdout
    err = sys.stderr if stderr is None else stderr

    options = CLIOptions()
    operands: list[str] = []
    remaining = iter(args)
    for arg in remaining:
        if arg == "--":
            operands.extend(remaining)
            break
        if not arg.startswith("-") or arg == "-":
            operands.append(arg)
            continue

        cluster = arg[1:]
        for position, option in enumerate(cluster):
            if option == "h":
                out.write(HELP_TEXT)
                raise SystemExit(0)
            if option == "v":
                out.write(VERSION + "\n")
                raise SystemExit(0)
            if option == "o":
                value = cluster[position + 1 :] or next(remaining, None)
                if value is None:
                    err.write(f"unknown option [{option}]\n")
                else:
                    options.output = value
                break
            if option == "c":
                options.flags &= ~(Stage.CLEANUP | Stage.LINK)
            elif option == "s":
                options.flags &= ~_ALL_STAGES
            else:
                err.write(f"unknown option [{option}]\n")

    if not operands:
        log_message(LogLevel.ERROR, "an input file must be specified.\n", stream=err)
        raise SystemExit(0)
    options.source = operands[0]

    if not options.output:
        options.output = replace_extension(options.source, "")
    return options


@dataclass
class ContextOptions:
    """Paths and stages used while compiling one source file."""

    flags: Stage = _ALL_STAGES
    source: str = ""
    assembly: str = ""
    object: str = ""
    output: str = ""

    def do_assemble(self) -> bool:
        return Stage.ASSEMBLE in self.flags

    def do_link(self) -> bool:
        return Stage.LINK in self.flags

    def do_cleanup(self) -> bool:
        return Stage.CLEANUP in self.flags


def context_options(cli_options: CLIOptions) -> ContextOptions:
    """Derive the assembly and object paths from the parsed command line."""
    result = ContextOptions(flags=cli_options.flags)
    if cli_options.source:
        result.source = cli_options.source
        result.assembly = replace_extension(cli_options.source, ".s")
        result.object = replace_extension(cli_options.source, ".o")
    if cli_options.output:
        result.output = cli_options.output
    return result