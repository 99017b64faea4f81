import enum
from dataclasses import dataclass

from infixcalc.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    EMPTY_EXPRESSION = enum.auto()
    UNKNOWN_CHARACTER = enum.auto()
    MALFORMED_NUMBER = enum.auto()
    MISMATCHED_PARENTHESES = enum.auto()
    INVALID_EXPRESSION = enum.auto()
    DIVISION_BY_ZERO = enum.auto()
    DOMAIN_ERROR = enum.auto()
    OVERFLOW = enum.auto()


@dataclass
class CalcError(Exception):
    """Base for every failure raised while evaluating an expression.

    Callers should branch on ``kind``; ``errmsg`` is meant for humans.
    Besides the classic calculator failures, ``MALFORMED_NUMBER`` rejects
    literals like ``1.2.3`` and ``OVERFLOW`` replaces infinite or NaN results,
    which are never returned.
    """

    kind: ErrorKind
    errmsg: str

    def __str__(self) -> str:
        return f"[{self.kind.label}] {self.errmsg}"


@dataclass
class EmptyExpressionError(CalcError):
    kind: ErrorKind = ErrorKind.EMPTY_EXPRESSION
    errmsg: str = "Empty expression"
