import argparse
import logging
import sys

from infixcalc.display import close_brackets, format_result
from infixcalc.errors import CalcError
from infixcalc.runtime import evaluate

logger = logging.getLogger(__name__)


def calculate(code: str) -> str:
    return format_result(evaluate(close_brackets(code)))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate infix math expressions")
    parser.add_argument("expressions", nargs="*", help="expressions to evaluate; starts a REPL when omitted")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (DEBUG prints tokens and postfix)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if args.expressions:
        status = 0
        for code in args.expressions:
            try:
                print(calculate(code))
            except CalcError as e:
                print(e, file=sys.stderr)
                status = 1
        return status

    while True:
        try:
            code = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        if not code.strip():
            continue

        try:
            print(calculate(code))
        except CalcError as e:
            logger.info("Failed to evaluate %r: %s", code, e.kind)
            print(e)


if __name__ == "__main__":
    sys.exit(main())
