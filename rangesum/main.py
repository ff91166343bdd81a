"""CLI entry point for rangesum.

Reads bounds ``n`` and ``m`` (from arguments or prompted stdin), prints the
parity-signed value of each integer in ``[n, m]``, then the accumulated sum
and ``gcd(n, m)``.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from dotenv import load_dotenv

from rangesum.core import formatting
from rangesum.core.arithmetic import GcdDivergenceError
from rangesum.core.config import config
from rangesum.core.input_reader import IntegerReader, InvalidInputError, read_bounds
from rangesum.core.services.driver import RangeSumService
from rangesum.utils.file_io import write_to_file
from rangesum.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_GCD_DIVERGED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rangesum",
        description="Print parity-signed values over [n, m], their doubled sum and gcd(n, m)",
    )
    parser.add_argument("n", nargs="?", type=int, help="Lower bound (read from stdin if omitted)")
    parser.add_argument("m", nargs="?", type=int, help="Upper bound (read from stdin if omitted)")
    parser.add_argument(
        "--gcd-max-steps",
        type=int,
        default=None,
        help="Abort gcd after this many subtraction steps (default: GCD_MAX_STEPS env, 0 = unbounded)",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not print the 'n = ' / 'm = ' prompts when reading stdin",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Also write the run result as JSON to this file (default: RANGESUM_OUTPUT env)",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the CLI and return the process exit status."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    load_dotenv()
    config.reload()
    setup_logging(level=config.log_level, log_file=config.log_file)
    for issue in config.validate():
        logger.warning("Configuration issue: %s", issue)

    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.n is None) != (args.m is None):
        parser.error("n and m must be given together")

    try:
        if args.n is not None:
            n, m = args.n, args.m
        else:
            show_prompts = config.show_prompts and not args.no_prompt
            reader = IntegerReader(stdin, prompt_stream=stdout)
            n, m = read_bounds(reader, show_prompts=show_prompts)

        def print_sum(total: int) -> None:
            print(formatting.format_sum(total), file=stdout, flush=True)

        service = RangeSumService(gcd_max_steps=args.gcd_max_steps)
        result = service.run(
            n,
            m,
            emit=lambda j: print(formatting.format_value(j), file=stdout),
            on_sum=print_sum,
        )
    except InvalidInputError as e:
        logger.error("Input rejected: %s", e)
        print(f"Error: {e}", file=stderr)
        return EXIT_INVALID_INPUT
    except GcdDivergenceError as e:
        logger.error("GCD aborted: %s", e)
        print(f"Error: {e}", file=stderr)
        return EXIT_GCD_DIVERGED

    print(formatting.format_gcd(result.gcd), file=stdout)

    output_file = args.output or config.output_file
    if output_file:
        write_to_file(result.to_dict(), output_file)
        logger.info("Run result saved to %s", output_file)

    return EXIT_OK


def run() -> None:
    """Console-script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
