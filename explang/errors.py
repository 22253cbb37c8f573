"""Compile errors reported by the front end."""

from __future__ import annotations

from enum import Enum, auto
from typing import TextIO

from .log import LogLevel, log_message


class ErrorCode(Enum):
    NONE = auto()
    LEXER_ERROR_UNEXPECTED_CHAR = auto()
    LEXER_ERROR_UNMATCHED_DOUBLE_QUOTE = auto()
    INTEGER_TO_LARGE = auto()
    PARSER_EXPECTED_END_COMMENT = auto()
    PARSER_EXPECTED_BEGIN_BRACE = auto()
    PARSER_EXPECTED_END_BRACE = auto()
    PARSER_EXPECTED_BEGIN_PAREN = auto()
    PARSER_EXPECTED_END_PAREN = auto()
    PARSER_EXPECTED_RIGHT_ARROW = auto()
    PARSER_EXPECTED_SEMICOLON = auto()
    PARSER_EXPECTED_COLON = auto()
    PARSER_EXPECTED_EQUAL = auto()
    PARSER_EXPECTED_KEYWORD_CONST = auto()
    PARSER_EXPECTED_KEYWORD_FN = auto()
    PARSER_EXPECTED_EXPRESSION = auto()
    PARSER_EXPECTED_STATEMENT = auto()
    PARSER_EXPECTED_IDENTIFIER = auto()
    PARSER_UNEXPECTED_TOKEN = auto()
    TYPECHECK_UNDEFINED_SYMBOL = auto()
    TYPECHECK_TYPE_MISMATCH = auto()

    def description(self) -> str:
        """The text that introduces an error of this kind."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.NONE: "none",
    ErrorCode.LEXER_ERROR_UNEXPECTED_CHAR: "Unexcepted char in stream: ",
    ErrorCode.LEXER_ERROR_UNMATCHED_DOUBLE_QUOTE: "missing '\"' to end string literal.",
    ErrorCode.INTEGER_TO_LARGE: "Integer literal too large.",
    ErrorCode.PARSER_EXPECTED_END_COMMENT: "Expected: [*/]. Found: ",
    ErrorCode.PARSER_EXPECTED_BEGIN_BRACE: "Expected: [{]. Found: ",
    ErrorCode.PARSER_EXPECTED_END_BRACE: "Expected: [}]. Found: ",
    ErrorCode.PARSER_EXPECTED_BEGIN_PAREN: "Expected: [(]. Found: ",
    ErrorCode.PARSER_EXPECTED_END_PAREN: "Expected: [)]. Found: ",
    ErrorCode.PARSER_EXPECTED_RIGHT_ARROW: "Expected: [->]. Found: ",
    ErrorCode.PARSER_EXPECTED_SEMICOLON: "Expected: [;]. Found: ",
    ErrorCode.PARSER_EXPECTED_COLON: "Expected: [:]. Found: ",
    ErrorCode.PARSER_EXPECTED_EQUAL: "Expected: [=]. Found: ",
    ErrorCode.PARSER_EXPECTED_KEYWORD_CONST: "Expected: [const]. Found: ",
    ErrorCode.PARSER_EXPECTED_KEYWORD_FN: "Expected: [Fn]. Found: ",
    ErrorCode.PARSER_EXPECTED_EXPRESSION: "Expected an Expression. Found: ",
    ErrorCode.PARSER_EXPECTED_STATEMENT: "Expected a Statement. Found: ",
    ErrorCode.PARSER_EXPECTED_IDENTIFIER: "Expected an Identifier. Found: ",
    ErrorCode.PARSER_UNEXPECTED_TOKEN: "Unexpected Token: ",
    ErrorCode.TYPECHECK_UNDEFINED_SYMBOL: "Symbol Undefined: ",
    ErrorCode.TYPECHECK_TYPE_MISMATCH: "Expected Type does not match Actual Type: ",
}


class CompileError(Exception):
    """An error in the program being compiled, with the offending text."""

    def __init__(self, code: ErrorCode, message: str = "") -> None:
        self.code = ErrorCode(code)
        self.message = message
        super().__init__(self.text)

    @property
    def text(self) -> str:
        """The description followed by the offending text in brackets."""
        return f"{self.code.description()}[{self.message}]"

    def report(
        self, file: str | None = None, line: int = 0, stream: TextIO | None = None
    ) -> None:
        """Write the error as an error-level diagnostic."""
        log_message(LogLevel.ERROR, self.text, file, line, stream)