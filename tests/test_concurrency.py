from concurrent.futures import ThreadPoolExecutor

from infixcalc.errors import CalcError
from infixcalc.runtime import evaluate

CODES = [
    "2+3*4",
    "(2+3)*4",
    "2^3^2",
    "-2^2",
    "sin(pi/3)*cos(pi/6)",
    "log(12345)/ln(10)",
    "sqrt(2)+cbrt(7)",
    "2831004/673",
    "(-7) % 3",
    "5/0",
    "asin(2)",
    "(1+2",
]


def _outcome(code: str) -> float | str:
    try:
        return evaluate(code)
    except CalcError as e:
        return str(e.kind)


def test_parallel_evaluation_matches_serial() -> None:
    codes = CODES * 50
    serial = [_outcome(code) for code in codes]
    with ThreadPoolExecutor(max_workers=8) as pool:
        parallel = list(pool.map(_outcome, codes))
    assert parallel == serial
