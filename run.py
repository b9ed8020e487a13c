import sys
from argparse import ArgumentParser, Namespace, RawTextHelpFormatter
from decimal import Decimal, InvalidOperation
from typing import Optional

from decimoney import DecimalAmount, get_default_context
from decimoney.shared.config import get_settings
from decimoney.shared.logging import configure_logging, get_logger

logger = get_logger(__name__)

AMOUNT_OPERATIONS = ("add", "subtract")
NUMBER_OPERATIONS = (
    "multiply",
    "divide",
    "remainder",
    "divide-to-integral-value",
    "divide-and-remainder",
    "scale-by-power-of-ten",
)
UNARY_OPERATIONS = ("negate", "plus", "abs", "strip-trailing-zeros")


def setup_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Decimal money calculator",
        formatter_class=RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    context_parser = subparsers.add_parser(
        "context", help="Print the resolved default numeric context."
    )
    context_parser.set_defaults(func=run_context)

    calc_parser = subparsers.add_parser(
        "calc",
        help="Apply one operation to an amount.\n"
        "Example: calc 'USD 10' divide 3",
    )
    calc_parser.add_argument("amount", help="Amount as '<currency> <number>'")
    calc_parser.add_argument(
        "operation",
        choices=AMOUNT_OPERATIONS + NUMBER_OPERATIONS + UNARY_OPERATIONS,
    )
    calc_parser.add_argument(
        "operand", nargs="?", help="Amount or number, depending on the operation"
    )
    calc_parser.set_defaults(func=run_calc)

    return parser


def run_context(args: Namespace) -> None:
    print(get_default_context())


def run_calc(args: Namespace) -> None:
    amount = DecimalAmount.parse(args.amount)
    method = getattr(amount, args.operation.replace("-", "_"))

    if args.operation in UNARY_OPERATIONS:
        result = method()
    elif args.operand is None:
        raise ValueError(f"Operation '{args.operation}' requires an operand")
    elif args.operation in AMOUNT_OPERATIONS:
        result = method(DecimalAmount.parse(args.operand))
    elif args.operation == "scale-by-power-of-ten":
        result = method(int(args.operand))
    else:
        try:
            result = method(Decimal(args.operand))
        except InvalidOperation as e:
            raise ValueError(f"Invalid number: {args.operand}") from e

    logger.debug("calc_evaluated", amount=str(amount), operation=args.operation)

    if isinstance(result, tuple):
        print(" ".join(str(part) for part in result))
    else:
        print(result)


def main(argv: Optional[list[str]] = None) -> None:
    settings = get_settings()

    configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

    parser = setup_arg_parser()
    args = parser.parse_args(argv)

    logger.debug("command_starting", command=args.command)

    try:
        args.func(args)
    except Exception as e:
        logger.error(
            "command_failed",
            command=args.command,
            error=str(e),
            exc_info=True,
        )
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
