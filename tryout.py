from infixcalc.errors import CalcError
from infixcalc.parser import to_postfix, untokenize_postfix
from infixcalc.runtime import evaluate_postfix, round_result
from infixcalc.tokenizer import tokenize, untokenize

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "7/6/2000",
    "5^2",
    "2^3^2",
    "-2^2",
    "10 % -3",
    "2*pi",
    "sqrt(16) + cbrt(27)",
    "exp(1) - e",
    "log(100) * ln(e)",
    "sin2",
    "1.2.3",
    "(1 + 2",
    "asin(2)",
    "2 @ 3",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
        print(f"tokens: {untokenize(tokens)}")
        postfix = to_postfix(tokens)
        print(f"postfix: {untokenize_postfix(postfix)}")
        raw = evaluate_postfix(postfix)
        print(f"result: {raw!r} (rounded: {round_result(raw)!r})")
    except CalcError as e:
        print(e)
