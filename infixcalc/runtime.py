import logging
import math
import operator
from dataclasses import dataclass
from typing import Callable, Optional

from infixcalc.builtins import BUILTIN_FUNCS, CONSTANTS
from infixcalc.errors import CalcError, EmptyExpressionError, ErrorKind
from infixcalc.parser import to_postfix
from infixcalc.tokenizer import BracketClose, BracketOpen, Constant, Function, Number, Operator, Token, tokenize

logger = logging.getLogger(__name__)

# fractional digits kept in the final result, hides binary floating point noise like 0.1 + 0.2
RESULT_DIGITS = 12


@dataclass
class CalcRuntimeError(CalcError):
    function: Optional[str] = None


BinaryOperationImpl = Callable[[float, float], float]


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise CalcRuntimeError(ErrorKind.DIVISION_BY_ZERO, "Division by zero", function="/")
    return a / b


def _remainder(a: float, b: float) -> float:
    if b == 0:
        raise CalcRuntimeError(ErrorKind.DIVISION_BY_ZERO, "Remainder of division by zero", function="%")
    return math.fmod(a, b)


operator_impls: dict[str, BinaryOperationImpl] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "%": _remainder,
    "^": math.pow,
}


def apply_operator(symbol: str, a: float, b: float) -> float:
    impl = operator_impls.get(symbol)
    if impl is None:
        raise CalcRuntimeError(ErrorKind.INVALID_EXPRESSION, f"Unknown operator: {symbol!r}")
    try:
        return impl(a, b)
    except ValueError:
        raise CalcRuntimeError(
            ErrorKind.DOMAIN_ERROR, f"{symbol!r} is not defined for {a!r} and {b!r}", function=symbol
        ) from None
    except OverflowError:
        raise CalcRuntimeError(ErrorKind.OVERFLOW, f"{a!r} {symbol} {b!r} is too large", function=symbol) from None


def apply_function(name: str, arg: float) -> float:
    func = BUILTIN_FUNCS.get(name)
    if func is None:
        raise CalcRuntimeError(ErrorKind.INVALID_EXPRESSION, f"Unknown function: {name!r}")
    if not func.accepts(arg):
        raise CalcRuntimeError(ErrorKind.DOMAIN_ERROR, f"{name} is not defined for {arg!r}", function=name)
    try:
        return func.fn(arg)
    except ValueError:
        raise CalcRuntimeError(ErrorKind.DOMAIN_ERROR, f"{name} is not defined for {arg!r}", function=name) from None
    except OverflowError:
        raise CalcRuntimeError(ErrorKind.OVERFLOW, f"{name}({arg!r}) is too large", function=name) from None


def _constant_value(name: str) -> float:
    try:
        return CONSTANTS[name]
    except KeyError:
        raise CalcRuntimeError(ErrorKind.INVALID_EXPRESSION, f"Unknown constant: {name!r}") from None


def evaluate_postfix(tokens: list[Token]) -> float:
    stack: list[float] = []
    for token in tokens:
        if isinstance(token, Number):
            stack.append(token.value)
        elif isinstance(token, Constant):
            stack.append(_constant_value(token.name))
        elif isinstance(token, Operator):
            if len(stack) < 2:
                raise CalcRuntimeError(ErrorKind.INVALID_EXPRESSION, f"Missing operand for {token.symbol!r}")
            b = stack.pop()
            a = stack.pop()
            stack.append(apply_operator(token.symbol, a, b))
        elif isinstance(token, Function):
            if not stack:
                raise CalcRuntimeError(ErrorKind.INVALID_EXPRESSION, f"Missing argument for {token.name}")
            stack.append(apply_function(token.name, stack.pop()))
        elif isinstance(token, (BracketOpen, BracketClose)):
            raise CalcRuntimeError(ErrorKind.INVALID_EXPRESSION, "Brackets are not allowed in postfix")
        else:
            raise CalcRuntimeError(ErrorKind.INVALID_EXPRESSION, f"Unexpected token: {token!r}")

    if len(stack) != 1:
        raise CalcRuntimeError(
            ErrorKind.INVALID_EXPRESSION, f"Expression leaves {len(stack)} values instead of one"
        )
    return stack[0]


def round_result(value: float, digits: int = RESULT_DIGITS) -> float:
    """Round to ``digits`` fractional digits.

    The exact decimal value of ``value`` is rounded rather than ``value * 10**digits``,
    so a rounded result survives another round unchanged.
    """
    if not math.isfinite(value):
        raise CalcRuntimeError(ErrorKind.OVERFLOW, f"Result is not a finite number: {value!r}")
    return round(value, digits)


def evaluate(expression: str) -> float:
    """Evaluate an infix expression such as ``2*sin(pi/6)+3^2``.

    Raises a ``CalcError`` subclass; check its ``kind`` to tell failures apart.
    """
    if not expression or expression.isspace():
        raise EmptyExpressionError()
    tokens = tokenize(expression)
    postfix = to_postfix(tokens)
    result = round_result(evaluate_postfix(postfix))
    logger.debug("%r = %r", expression, result)
    return result
