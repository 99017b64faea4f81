import math
import random
import re
import string
import warnings

from infixcalc.errors import CalcError
from infixcalc.runtime import evaluate

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return evaluate(code)
    except CalcError as e:
        return str(e)


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/"

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"//", code):
            continue  # avoid generating int devision (10 // 3)

        if re.findall(r"[-+*/(]\+|^\+", code):
            continue  # unary plus is not part of the grammar

        if re.findall(r"[-+*/]-", code):
            continue  # minus after an operator means "0 - x" at that operator's precedence

        if re.findall(r"\)\(|\d\(|\)[\d.]", code):
            continue  # python treats juxtaposition as a call, we report an invalid expression

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, (int, float)) and isinstance(res_my, float) and math.isclose(res_my, res_py, abs_tol=1e-9):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
