"""CLI entrypoint for running the declaration benchmark."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from collections.abc import Sequence

from .config import Backend, Variant, load_config
from .core import run_benchmark
from .exceptions import ConfigurationError


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="typing-bench",
        description="Compare construction time of annotated vs. unannotated bindings.",
    )
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        default=None,
        help="Payload shape: flat 'user' record or nested 'tree' (default: user)",
    )
    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=None,
        help="Records built per phase (default: 100000 for user, 100 for tree)",
    )
    parser.add_argument(
        "--backend",
        choices=[b.value for b in Backend],
        default=None,
        help="Model library for the user variant (default: msgspec)",
    )
    parser.add_argument(
        "--warmup",
        type=int,
        default=None,
        help="Untimed iterations before the first phase (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the payload random generator",
    )
    parser.add_argument(
        "--randomize-order",
        action="store_true",
        default=None,
        help="Run the two phases in random order instead of explicit first",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Also print the result as a JSON document",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for stderr diagnostics (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(
            variant=args.variant,
            iterations=args.iterations,
            backend=args.backend,
            warmup=args.warmup,
            seed=args.seed,
            randomize_order=args.randomize_order,
            log_level=args.log_level,
        )
    except ConfigurationError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    result = run_benchmark(config)
    if args.json:
        print(result.to_json().decode())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
