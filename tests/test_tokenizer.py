import pytest

from infixcalc.errors import ErrorKind
from infixcalc.tokenizer import (
    BracketClose,
    BracketOpen,
    Constant,
    Function,
    Number,
    Operator,
    Token,
    TokenizerError,
    tokenize,
    untokenize,
)


@pytest.mark.parametrize(
    "code, expected_tokens",
    [
        pytest.param("12.5", [Number(12.5)]),
        pytest.param("1+2", [Number(1.0), Operator("+"), Number(2.0)]),
        pytest.param("1 2", [Number(12.0)]),
        pytest.param("-2", [Number(0.0), Operator("-"), Number(2.0)]),
        pytest.param(
            "(-2)",
            [BracketOpen(), Number(0.0), Operator("-"), Number(2.0), BracketClose()],
        ),
        pytest.param(
            "3*-2",
            [Number(3.0), Operator("*"), Number(0.0), Operator("-"), Number(2.0)],
        ),
        pytest.param("3-2", [Number(3.0), Operator("-"), Number(2.0)]),
        pytest.param(")-2", [BracketClose(), Operator("-"), Number(2.0)]),
        pytest.param("exp(e)", [Function("exp"), BracketOpen(), Constant("e"), BracketClose()]),
        pytest.param("e^2", [Constant("e"), Operator("^"), Number(2.0)]),
        pytest.param("pi*π", [Constant("pi"), Operator("*"), Constant("π")]),
        pytest.param("asin1", [Function("asin"), Number(1.0)]),
        pytest.param("acos1", [Function("acos"), Number(1.0)]),
        pytest.param("atan1", [Function("atan"), Number(1.0)]),
        pytest.param("lnlog", [Function("ln"), Function("log")]),
        pytest.param("sqrtcbrtabs", [Function("sqrt"), Function("cbrt"), Function("abs")]),
        pytest.param("7%2", [Number(7.0), Operator("%"), Number(2.0)]),
        pytest.param("", []),
    ],
)
def test_tokenize(code: str, expected_tokens: list[Token]) -> None:
    assert tokenize(code) == expected_tokens


@pytest.mark.parametrize(
    "code, expected_kind, expected_idx",
    [
        pytest.param("2@3", ErrorKind.UNKNOWN_CHARACTER, 1),
        pytest.param("2 @ 3", ErrorKind.UNKNOWN_CHARACTER, 1),
        pytest.param("p", ErrorKind.UNKNOWN_CHARACTER, 0),
        pytest.param("sinx", ErrorKind.UNKNOWN_CHARACTER, 3),
        pytest.param("1+1.2.3", ErrorKind.MALFORMED_NUMBER, 2),
        pytest.param("..", ErrorKind.MALFORMED_NUMBER, 0),
    ],
)
def test_tokenize_errors(code: str, expected_kind: ErrorKind, expected_idx: int) -> None:
    with pytest.raises(TokenizerError) as exc_info:
        tokenize(code)
    assert exc_info.value.kind is expected_kind
    assert exc_info.value.error_char_idx == expected_idx


def test_tokenizer_error_points_at_character() -> None:
    with pytest.raises(TokenizerError) as exc_info:
        tokenize("12 + 3 $ 4")
    error = exc_info.value
    assert error.char == "$"
    lines = str(error).splitlines()
    assert lines[0] == "[Unknown character] Unknown character: '$'"
    assert lines[1] == "12+3$4"
    assert lines[2] == "    ^"


def test_untokenize() -> None:
    assert untokenize(tokenize("2 * (sin(pi) + 1.5)")) == "2*(sin(pi)+1.5)"
    assert untokenize(tokenize("-3")) == "0-3"
