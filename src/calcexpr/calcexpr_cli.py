"""Command-line tool for evaluating calcexpr expressions."""

import argparse
import logging
import sys
from typing import List, TextIO

from calcexpr.calcexpr import CalcExpr
from calcexpr.calcexpr_error import CalcExprError
from calcexpr.calcexpr_number_type import NUMBER_TYPES


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='calcexpr',
        description='Evaluate infix arithmetic expressions',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Evaluate an expression
  calcexpr "(2 + 3) * 4"

  # Use integer arithmetic
  calcexpr --type int "7 / 2"

  # Show the postfix form
  calcexpr --postfix "-3 + 5"

  # Evaluate one expression per line from stdin
  printf '1+2\\n3*4\\n' | calcexpr -
"""
    )
    parser.add_argument(
        'expression',
        help='Expression to evaluate (use "-" to read expressions from stdin, one per line)'
    )
    parser.add_argument(
        '--type',
        choices=sorted(NUMBER_TYPES),
        default='float',
        help='Numeric type used for evaluation (default: float)'
    )
    parser.add_argument(
        '--postfix',
        action='store_true',
        help='Print the postfix form instead of evaluating'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def _process(calc: CalcExpr, expression: str, postfix: bool, out: TextIO, err: TextIO) -> bool:
    """Evaluate or convert one expression; return False if it was invalid."""
    try:
        if postfix:
            print(calc.format_postfix(expression), file=out)

        else:
            print(calc.evaluate_and_format(expression), file=out)

    except CalcExprError as e:
        print(f"{e}", file=err)
        return False

    return True


def main(argv: List[str] | None = None) -> int:
    """Main entry point for the calcexpr CLI."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    calc = CalcExpr(NUMBER_TYPES[args.type])

    if args.expression != '-':
        ok = _process(calc, args.expression, args.postfix, sys.stdout, sys.stderr)
        return 0 if ok else 1

    ok = True
    for line in sys.stdin:
        if not line.strip():
            continue

        ok = _process(calc, line, args.postfix, sys.stdout, sys.stderr) and ok

    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
