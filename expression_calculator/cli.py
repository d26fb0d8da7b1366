"""
Batch driver: reads an expression file and prints each expression's infix
form, postfix form and value.

The default ``auto`` layout is the one the calculator was written for:
postfix expressions one per line, a blank line, then infix expressions until
the end of the file.
"""

import argparse
import sys
from typing import Iterable, Iterator, Optional, TextIO, Tuple

from .config import CalculatorConfig, VALID_MODES
from .errors import ExpressionError
from .expression_tree import BuildMode, ExpressionTree, SymPyEvaluator
from .logging_system import LogLevel, configure_logging, get_logger


def iter_expressions(lines: Iterable[str], mode: str = 'auto') -> Iterator[Tuple[int, BuildMode, str]]:
    """Yield ``(line_number, build_mode, line)`` for every expression line.

    In ``auto`` mode the first blank line switches from postfix to infix;
    later blank lines are skipped.
    """
    if mode == 'auto':
        current = BuildMode.POSTFIX
    else:
        current = BuildMode.parse(mode)

    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            if mode == 'auto' and current == BuildMode.POSTFIX:
                current = BuildMode.INFIX
            continue
        yield line_number, current, line


def format_value(tree: ExpressionTree, config: CalculatorConfig) -> str:
    if config.exact:
        return str(SymPyEvaluator().exact_value(tree))
    value = tree.evaluate()
    if config.integer_output:
        return str(int(value))
    return repr(value)


def render(tree: ExpressionTree, config: CalculatorConfig) -> str:
    return (f"Infix format: {tree.to_infix()}\n"
            f"Postfix format: {tree.to_postfix()}\n"
            f"Expression value: {format_value(tree, config)}\n")


def run(config: CalculatorConfig, lines: Iterable[str], out: TextIO = sys.stdout) -> int:
    """Process every expression in ``lines``; returns the process exit status"""
    logger = get_logger()
    processed = 0
    failed = 0

    for line_number, mode, line in iter_expressions(lines, config.mode):
        processed += 1
        try:
            tree = ExpressionTree.construct(line, mode)
            block = render(tree, config)
        except ExpressionError as e:
            failed += 1
            logger.critical(f"line {line_number} ({mode.name.lower()}) {line!r}: "
                            f"{type(e).__name__}: {e}")
            if not config.continue_on_error:
                logger.batch_summary(processed, failed)
                return 1
            continue
        out.write(block)
        out.write("\n")
        logger.info(f"line {line_number}: {line!r} done", LogLevel.MODERATE)

    logger.batch_summary(processed, failed)
    return 0 if failed == 0 else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expression-calculator",
        description="Build expression trees from infix/postfix lines and evaluate them")
    parser.add_argument("file", help="Expression file ('-' reads stdin)")
    parser.add_argument("--mode", choices=VALID_MODES, default="auto",
                        help="auto: postfix lines, a blank line, then infix lines (default)")
    parser.add_argument("--continue-on-error", action="store_true",
                        help="Log bad expressions and keep going instead of stopping")
    parser.add_argument("--float-output", action="store_true",
                        help="Print the float64 value instead of truncating it to an integer")
    parser.add_argument("--exact", action="store_true",
                        help="Print the exact rational value computed with SymPy")
    parser.add_argument("--log-level", default="minimal",
                        choices=[level.name.lower() for level in LogLevel],
                        help="Logging verbosity (default: minimal)")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    config = CalculatorConfig.from_args(args)
    configure_logging(config.log_level,
                      log_to_file=config.log_file is not None,
                      log_file_path=config.log_file)

    if args.file == '-':
        return run(config, sys.stdin)
    with open(args.file, 'r', encoding='utf-8') as f:
        return run(config, f)


if __name__ == "__main__":
    sys.exit(main())
