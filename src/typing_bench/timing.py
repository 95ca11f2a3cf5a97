"""Wall-clock timing of a single block."""

from __future__ import annotations

import logging
import sys
import time
from typing import Callable, TextIO

logger = logging.getLogger(__name__)


def measure_time(
    block: Callable[[], object],
    label: str | None = None,
    stream: TextIO | None = None,
) -> float:
    """
    Run ``block`` once and return the elapsed time in seconds.

    Uses ``time.perf_counter`` (monotonic, sub-microsecond resolution).
    If ``block`` raises, the exception propagates and nothing is reported.

    Args:
        block: Zero-argument callable to time.
        label: When given, ``"<label>: <elapsed> seconds"`` is written to ``stream``.
        stream: Output stream for the labeled line (default: ``sys.stdout``).

    Returns:
        Elapsed seconds, never negative.
    """
    start = time.perf_counter()
    block()
    end = time.perf_counter()
    elapsed = end - start

    if label is not None:
        print(f"{label}: {elapsed} seconds", file=stream or sys.stdout)
    logger.debug(f"Timed {label or 'block'} in {elapsed:.6f}s")
    return elapsed
