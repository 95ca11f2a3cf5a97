"""Benchmark driver comparing annotated and unannotated bindings."""

from __future__ import annotations

import logging
import random
import sys
from datetime import datetime
from enum import Enum
from typing import Any, Callable, TextIO

import msgspec

from .config import Backend, BenchmarkConfig, Variant
from .generators import make_sample_tree, make_sample_user, make_sample_user_model
from .models import RootModel, UserData
from .schemas import UserDataModel
from .timing import measure_time

logger = logging.getLogger(__name__)

EXPLICIT_LABEL = "Explicit Declaration"
IMPLICIT_LABEL = "Implicit Declaration"


class Phase(str, Enum):
    EXPLICIT = "explicit"
    IMPLICIT = "implicit"


class Verdict(str, Enum):
    """Outcome of comparing the two phase durations."""

    EXPLICIT_FASTER = "explicit_faster"
    IMPLICIT_FASTER = "implicit_faster"
    SAME_TIME = "same_time"


class BenchmarkResult(msgspec.Struct, frozen=True):
    """Timings and retained record counts of one benchmark run."""

    variant: Variant
    backend: Backend
    iterations: int
    explicit_time: float
    implicit_time: float
    explicit_count: int
    implicit_count: int
    phase_order: list[Phase]

    @property
    def diff(self) -> float:
        """``explicit_time - implicit_time``; negative means explicit was faster."""
        return self.explicit_time - self.implicit_time

    @property
    def verdict(self) -> Verdict:
        if self.explicit_time == self.implicit_time:
            return Verdict.SAME_TIME
        if self.diff < 0:
            return Verdict.EXPLICIT_FASTER
        return Verdict.IMPLICIT_FASTER

    def summary(self) -> str:
        """Human readable verdict line."""
        if self.verdict is Verdict.SAME_TIME:
            return "Both declarations took the same time"
        faster = "Explicit" if self.verdict is Verdict.EXPLICIT_FASTER else "Implicit"
        return f"{faster} declaration was faster by {abs(self.diff)} seconds"

    def to_json(self) -> bytes:
        """Encode the result, including the derived ``diff`` and ``verdict``."""
        payload = msgspec.structs.asdict(self)
        payload["diff"] = self.diff
        payload["verdict"] = self.verdict
        return msgspec.json.encode(payload)


# ============================================================================
# Phase Loops
# ============================================================================

# Each pair differs only in the annotation on ``record``. Local annotations
# are not evaluated at runtime, so the pairs compile to the same work.


def _explicit_users(iterations: int, rng: random.Random, now: datetime | None) -> list[Any]:
    records: list[UserData] = []
    for i in range(iterations):
        record: UserData = make_sample_user(i, rng, now)
        records.append(record)
    return records


def _implicit_users(iterations: int, rng: random.Random, now: datetime | None) -> list[Any]:
    records = []
    for i in range(iterations):
        record = make_sample_user(i, rng, now)
        records.append(record)
    return records


def _explicit_user_models(iterations: int, rng: random.Random, now: datetime | None) -> list[Any]:
    records: list[UserDataModel] = []
    for i in range(iterations):
        record: UserDataModel = make_sample_user_model(i, rng, now)
        records.append(record)
    return records


def _implicit_user_models(iterations: int, rng: random.Random, now: datetime | None) -> list[Any]:
    records = []
    for i in range(iterations):
        record = make_sample_user_model(i, rng, now)
        records.append(record)
    return records


def _explicit_trees(iterations: int, rng: random.Random, now: datetime | None) -> list[Any]:
    records: list[RootModel] = []
    for _ in range(iterations):
        record: RootModel = make_sample_tree(rng, now)
        records.append(record)
    return records


def _implicit_trees(iterations: int, rng: random.Random, now: datetime | None) -> list[Any]:
    records = []
    for _ in range(iterations):
        record = make_sample_tree(rng, now)
        records.append(record)
    return records


PhaseLoop = Callable[[int, random.Random, datetime | None], list[Any]]

_PHASE_LOOPS: dict[tuple[Variant, Backend], dict[Phase, PhaseLoop]] = {
    (Variant.USER, Backend.MSGSPEC): {
        Phase.EXPLICIT: _explicit_users,
        Phase.IMPLICIT: _implicit_users,
    },
    (Variant.USER, Backend.PYDANTIC): {
        Phase.EXPLICIT: _explicit_user_models,
        Phase.IMPLICIT: _implicit_user_models,
    },
    (Variant.TREE, Backend.MSGSPEC): {
        Phase.EXPLICIT: _explicit_trees,
        Phase.IMPLICIT: _implicit_trees,
    },
}


def _phase_loop(variant: Variant, backend: Backend, phase: Phase) -> PhaseLoop:
    return _PHASE_LOOPS[(Variant(variant), Backend(backend))][phase]


def run_explicit_phase(
    variant: Variant,
    backend: Backend = Backend.MSGSPEC,
    iterations: int = 1,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> list[Any]:
    """Build ``iterations`` records through annotated bindings and return them all."""
    return _phase_loop(variant, backend, Phase.EXPLICIT)(iterations, rng or random.Random(), now)


def run_implicit_phase(
    variant: Variant,
    backend: Backend = Backend.MSGSPEC,
    iterations: int = 1,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> list[Any]:
    """Build ``iterations`` records through unannotated bindings and return them all."""
    return _phase_loop(variant, backend, Phase.IMPLICIT)(iterations, rng or random.Random(), now)


# ============================================================================
# Driver
# ============================================================================


def run_benchmark(
    config: BenchmarkConfig | None = None,
    rng: random.Random | None = None,
    stream: TextIO | None = None,
) -> BenchmarkResult:
    """
    Time the explicit and implicit phases and report the difference.

    Phases run explicit first unless ``config.randomize_order`` is set, in
    which case ``rng`` picks the order. Records of each phase are retained
    until the run ends so construction cannot be optimized away.

    Args:
        config: Run settings (default: ``BenchmarkConfig()``).
        rng: Random source for payloads (default: seeded from ``config.seed``).
        stream: Where progress and summary lines go (default: ``sys.stdout``).

    Returns:
        BenchmarkResult with both durations and retained record counts.
    """
    config = config or BenchmarkConfig()
    rng = rng or random.Random(config.seed)
    out = stream or sys.stdout
    iterations = config.resolved_iterations

    logger.info(
        f"Starting {config.variant.value} benchmark "
        f"(backend={config.backend.value}, iterations={iterations})"
    )
    print(f"Running with {iterations} iterations...\n", file=out)

    if config.warmup:
        logger.debug(f"Warming up with {config.warmup} untimed iterations")
        _phase_loop(config.variant, config.backend, Phase.IMPLICIT)(config.warmup, rng, None)

    order = [Phase.EXPLICIT, Phase.IMPLICIT]
    if config.randomize_order:
        rng.shuffle(order)

    labels = {Phase.EXPLICIT: EXPLICIT_LABEL, Phase.IMPLICIT: IMPLICIT_LABEL}
    timings: dict[Phase, float] = {}
    counts: dict[Phase, int] = {}
    retained: dict[Phase, list[Any]] = {}

    for phase in order:
        loop = _phase_loop(config.variant, config.backend, phase)

        def block(phase: Phase = phase, loop: PhaseLoop = loop) -> None:
            retained[phase] = loop(iterations, rng, None)

        logger.debug(f"Running {phase.value} phase")
        timings[phase] = measure_time(block, label=labels[phase], stream=out)
        counts[phase] = len(retained[phase])

    result = BenchmarkResult(
        variant=config.variant,
        backend=config.backend,
        iterations=iterations,
        explicit_time=timings[Phase.EXPLICIT],
        implicit_time=timings[Phase.IMPLICIT],
        explicit_count=counts[Phase.EXPLICIT],
        implicit_count=counts[Phase.IMPLICIT],
        phase_order=order,
    )

    print(f"\nDifference (explicit - implicit): {result.diff} seconds", file=out)
    print(result.summary(), file=out)
    logger.info(f"Benchmark finished: {result.verdict.value} (diff={result.diff:.6f}s)")
    return result
