import io

import pytest

from explang.errors import CompileError, ErrorCode


def test_descriptions_from_source():
    assert ErrorCode.NONE.description() == "none"
    assert ErrorCode.PARSER_EXPECTED_SEMICOLON.description() == "Expected: [;]. Found: "
    assert ErrorCode.TYPECHECK_UNDEFINED_SYMBOL.description() == "Symbol Undefined: "


@pytest.mark.parametrize(
    "code, description",
    [
        (ErrorCode.NONE, "none"),
        (ErrorCode.INTEGER_TO_LARGE, "Integer literal too large."),
        (ErrorCode.PARSER_EXPECTED_END_BRACE, "Expected: [}]. Found: "),
        (ErrorCode.PARSER_EXPECTED_SEMICOLON, "Expected: [;]. Found: "),
        (ErrorCode.PARSER_UNEXPECTED_TOKEN, "Unexpected Token: "),
        (ErrorCode.TYPECHECK_UNDEFINED_SYMBOL, "Symbol Undefined: "),
    ],
)
def test_code_descriptions(code, description):
    assert code.description() == description


def test_compile_error_text():
    error = CompileError(ErrorCode.PARSER_EXPECTED_END_BRACE, "x")
    assert error.text == "Expected: [}]. Found: [x]"
    assert str(error) == error.text
    assert error.code is ErrorCode.PARSER_EXPECTED_END_BRACE


def test_compile_error_carries_message():
    error = CompileError(ErrorCode.INTEGER_TO_LARGE, "99999999999999999999")
    assert error.message == "99999999999999999999"
    assert error.code is ErrorCode.INTEGER_TO_LARGE
    assert error.text == "Integer literal too large.[99999999999999999999]"


def test_report_with_location():
    stream = io.StringIO()
    CompileError(ErrorCode.PARSER_EXPECTED_SEMICOLON, "}").report("f.exp", 3, stream)
    assert stream.getvalue() == "\n[error @ f.exp:3] Expected: [;]. Found: [}]\n"


def test_report_without_location():
    stream = io.StringIO()
    CompileError(ErrorCode.PARSER_UNEXPECTED_TOKEN, "+").report(stream=stream)
    assert stream.getvalue() == "\n[error] Unexpected Token: [+]\n"