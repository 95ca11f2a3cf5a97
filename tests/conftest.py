"""Shared fixtures for the typing-bench test suite."""

import os
import random
from datetime import datetime, timezone

import pytest

from typing_bench.config import ENV_PREFIX


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator so payload contents are reproducible."""
    return random.Random(1234)


@pytest.fixture
def now() -> datetime:
    return datetime(2025, 6, 2, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any TYPING_BENCH_* variables inherited from the shell."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
