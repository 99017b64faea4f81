import logging
from dataclasses import dataclass

from infixcalc.builtins import OPERATORS
from infixcalc.errors import CalcError, ErrorKind
from infixcalc.tokenizer import BracketClose, BracketOpen, Constant, Function, Number, Operator, Token, untokenize

logger = logging.getLogger(__name__)


@dataclass
class ParserError(CalcError):
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        parsed_tokens = self.tokens[: self.error_token_idx]
        filler_whitespace = " " * len(untokenize(parsed_tokens))
        return "\n".join([f"[{self.kind.label}] {self.errmsg}", untokenize(self.tokens), filler_whitespace + "^"])


StackEntry = Operator | Function | BracketOpen


def _must_pop(top: StackEntry, incoming: Operator) -> bool:
    if isinstance(top, Function):
        return True
    if isinstance(top, Operator):
        return OPERATORS[incoming.symbol].yields_to(OPERATORS[top.symbol])
    return False


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Reorder infix tokens into postfix (RPN) order with the shunting-yard algorithm.

    Functions wait on the stack until the closing bracket of their argument,
    or until the next binary operator when written without brackets (``sin2``).
    """
    output: list[Token] = []
    stack: list[tuple[StackEntry, int]] = []  # entries paired with their index in tokens, for error reporting

    for i, token in enumerate(tokens):
        if isinstance(token, (Number, Constant)):
            output.append(token)
        elif isinstance(token, (Function, BracketOpen)):
            stack.append((token, i))
        elif isinstance(token, Operator):
            if token.symbol not in OPERATORS:
                raise ParserError(
                    ErrorKind.INVALID_EXPRESSION, f"Unknown operator: {token.symbol!r}", tokens=tokens, error_token_idx=i
                )
            while stack and _must_pop(stack[-1][0], token):
                output.append(stack.pop()[0])
            stack.append((token, i))
        elif isinstance(token, BracketClose):
            while stack and not isinstance(stack[-1][0], BracketOpen):
                output.append(stack.pop()[0])
            if not stack:
                raise ParserError(
                    ErrorKind.MISMATCHED_PARENTHESES,
                    "Closing bracket without a matching opening one",
                    tokens=tokens,
                    error_token_idx=i,
                )
            stack.pop()
            if stack and isinstance(stack[-1][0], Function):
                output.append(stack.pop()[0])
        else:
            raise ParserError(
                ErrorKind.INVALID_EXPRESSION, f"Unexpected token: {token!r}", tokens=tokens, error_token_idx=i
            )

    while stack:
        entry, i = stack.pop()
        if isinstance(entry, BracketOpen):
            raise ParserError(
                ErrorKind.MISMATCHED_PARENTHESES, "Unclosed bracket", tokens=tokens, error_token_idx=i
            )
        output.append(entry)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Postfix: %s", untokenize_postfix(output))
    return output


def untokenize_postfix(tokens: list[Token]) -> str:
    """Space-separated rendering, since RPN cannot be read back without separators"""
    return " ".join(t.lexeme for t in tokens)
