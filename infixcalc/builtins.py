import enum
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from infixcalc.utils import PrintableEnum


class Associativity(PrintableEnum):
    LEFT = enum.auto()
    RIGHT = enum.auto()


@dataclass(frozen=True)
class OperatorSpec:
    symbol: str
    precedence: int
    associativity: Associativity

    def yields_to(self, top: "OperatorSpec") -> bool:
        """Whether ``top``, sitting on the operator stack, must be output before this operator is pushed"""
        if self.associativity is Associativity.LEFT:
            return self.precedence <= top.precedence
        return self.precedence < top.precedence


OPERATORS: Mapping[str, OperatorSpec] = MappingProxyType(
    {
        spec.symbol: spec
        for spec in [
            OperatorSpec("+", 2, Associativity.LEFT),
            OperatorSpec("-", 2, Associativity.LEFT),
            OperatorSpec("*", 3, Associativity.LEFT),
            OperatorSpec("/", 3, Associativity.LEFT),
            OperatorSpec("%", 3, Associativity.LEFT),
            OperatorSpec("^", 4, Associativity.RIGHT),
        ]
    }
)

CONSTANTS: Mapping[str, float] = MappingProxyType({"π": math.pi, "pi": math.pi, "e": math.e})


DomainPredicate = Callable[[float], bool]


@dataclass(frozen=True)
class BuiltinFunc:
    name: str
    fn: Callable[[float], float]
    domain: Optional[DomainPredicate] = None

    def accepts(self, arg: float) -> bool:
        return self.domain is None or self.domain(arg)


_BUILTIN_FUNCS: dict[str, BuiltinFunc] = dict()

# read-only view, the tokenizer matches names in registration order
BUILTIN_FUNCS: Mapping[str, BuiltinFunc] = MappingProxyType(_BUILTIN_FUNCS)


def register_builtin_func(name: str, domain: Optional[DomainPredicate] = None):
    def decorator(fn: Callable[[float], float]) -> Callable[[float], float]:
        if name in _BUILTIN_FUNCS:
            raise ValueError(f"Built-in function {name!r} is already registered")
        _BUILTIN_FUNCS[name] = BuiltinFunc(name=name, fn=fn, domain=domain)
        return fn

    return decorator


def _unit_interval(x: float) -> bool:
    return -1.0 <= x <= 1.0


def _positive(x: float) -> bool:
    return x > 0.0


def _non_negative(x: float) -> bool:
    return x >= 0.0


@register_builtin_func("sin")
def sin_(arg: float) -> float:
    return math.sin(arg)


@register_builtin_func("cos")
def cos_(arg: float) -> float:
    return math.cos(arg)


@register_builtin_func("tan")
def tan_(arg: float) -> float:
    return math.tan(arg)


@register_builtin_func("asin", domain=_unit_interval)
def asin_(arg: float) -> float:
    return math.asin(arg)


@register_builtin_func("acos", domain=_unit_interval)
def acos_(arg: float) -> float:
    return math.acos(arg)


@register_builtin_func("atan")
def atan_(arg: float) -> float:
    return math.atan(arg)


@register_builtin_func("log", domain=_positive)
def log_(arg: float) -> float:
    return math.log10(arg)


@register_builtin_func("ln", domain=_positive)
def ln_(arg: float) -> float:
    return math.log(arg)


@register_builtin_func("sqrt", domain=_non_negative)
def sqrt_(arg: float) -> float:
    return math.sqrt(arg)


@register_builtin_func("cbrt")
def cbrt_(arg: float) -> float:
    return math.cbrt(arg)


@register_builtin_func("abs")
def abs_(arg: float) -> float:
    return math.fabs(arg)


@register_builtin_func("exp")
def exp_(arg: float) -> float:
    return math.exp(arg)
