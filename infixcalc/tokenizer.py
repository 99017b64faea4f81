import logging
from dataclasses import dataclass

from infixcalc.builtins import BUILTIN_FUNCS, OPERATORS
from infixcalc.errors import CalcError, ErrorKind

logger = logging.getLogger(__name__)


@dataclass
class TokenizerError(CalcError):
    code: str
    error_char_idx: int

    @property
    def char(self) -> str:
        return self.code[self.error_char_idx]

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[{self.kind.label}] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


@dataclass(frozen=True)
class Number:
    value: float

    @property
    def lexeme(self) -> str:
        return str(int(self.value)) if self.value.is_integer() else repr(self.value)


@dataclass(frozen=True)
class Operator:
    symbol: str

    @property
    def lexeme(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Function:
    name: str

    @property
    def lexeme(self) -> str:
        return self.name


@dataclass(frozen=True)
class Constant:
    name: str

    @property
    def lexeme(self) -> str:
        return self.name


@dataclass(frozen=True)
class BracketOpen:
    @property
    def lexeme(self) -> str:
        return "("


@dataclass(frozen=True)
class BracketClose:
    @property
    def lexeme(self) -> str:
        return ")"


Token = Number | Operator | Function | Constant | BracketOpen | BracketClose


def _is_valid_in_number(s: str) -> bool:
    return s.isdigit() or s == "."


def _strip_whitespace(code: str) -> str:
    return "".join(code.split())


def _needs_implicit_zero(tokens: list[Token]) -> bool:
    """A minus with nothing to subtract from becomes ``0 - x``"""
    return not tokens or isinstance(tokens[-1], (BracketOpen, Operator))


def tokenize(code: str) -> list[Token]:
    """Split an expression into tokens.

    Whitespace is removed up front, so ``1 2`` reads as ``12`` and error
    positions refer to the stripped text.
    """
    code = _strip_whitespace(code)
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        char = code[i]
        if _is_valid_in_number(char):
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_valid_in_number(code[number_end_idx]):
                number_end_idx += 1
            lexeme = code[i:number_end_idx]
            try:
                tokens.append(Number(float(lexeme)))
            except ValueError:
                raise TokenizerError(
                    ErrorKind.MALFORMED_NUMBER, f"Malformed number: {lexeme!r}", code=code, error_char_idx=i
                ) from None
            i = number_end_idx
            continue

        if char == "e":
            if code.startswith("exp", i):
                tokens.append(Function("exp"))
                i += len("exp")
            else:
                tokens.append(Constant("e"))
                i += 1
            continue

        if char == "π":
            tokens.append(Constant("π"))
            i += 1
            continue

        func_name = next((name for name in BUILTIN_FUNCS if code.startswith(name, i)), None)
        if func_name is not None:
            tokens.append(Function(func_name))
            i += len(func_name)
            continue

        if code.startswith("pi", i):
            tokens.append(Constant("pi"))
            i += len("pi")
            continue

        if char in OPERATORS:
            if char == "-" and _needs_implicit_zero(tokens):
                tokens.append(Number(0.0))
            tokens.append(Operator(char))
        elif char == "(":
            tokens.append(BracketOpen())
        elif char == ")":
            tokens.append(BracketClose())
        else:
            raise TokenizerError(
                ErrorKind.UNKNOWN_CHARACTER, f"Unknown character: {char!r}", code=code, error_char_idx=i
            )
        i += 1

    logger.debug("Tokenized %r into %s", code, tokens)
    return tokens


def untokenize(tokens: list[Token]) -> str:
    return "".join(t.lexeme for t in tokens)
