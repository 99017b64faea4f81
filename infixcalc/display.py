"""Helpers for front-ends: preparing user input and rendering results.

None of this is used by ``evaluate`` itself.
"""
import math

# below this magnitude integers are printed in full
MAX_PLAIN_INTEGER = 1e15
# outside [MIN_PLAIN, MAX_PLAIN) non-integers switch to exponential notation
MIN_PLAIN = 1e-4
MAX_PLAIN = 1e10
EXPONENT_DIGITS = 6
SIGNIFICANT_DIGITS = 10


def close_brackets(expression: str) -> str:
    """Append a ``)`` for every ``(`` left open, so ``sin(pi/2`` can be evaluated"""
    missing = expression.count("(") - expression.count(")")
    return expression + ")" * max(0, missing)


def format_result(value: float) -> str:
    if not math.isfinite(value):
        return str(value)
    if value.is_integer() and abs(value) < MAX_PLAIN_INTEGER:
        return str(int(value))
    magnitude = abs(value)
    if magnitude < MIN_PLAIN or magnitude >= MAX_PLAIN:
        mantissa, exponent = f"{value:.{EXPONENT_DIGITS}e}".split("e")
        return f"{mantissa}e{int(exponent):+d}"
    return f"{value:.{SIGNIFICANT_DIGITS}g}"
