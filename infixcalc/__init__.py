from infixcalc.errors import CalcError, EmptyExpressionError, ErrorKind
from infixcalc.parser import ParserError
from infixcalc.runtime import CalcRuntimeError, evaluate
from infixcalc.tokenizer import TokenizerError

__all__ = [
    "CalcError",
    "CalcRuntimeError",
    "EmptyExpressionError",
    "ErrorKind",
    "ParserError",
    "TokenizerError",
    "evaluate",
]
