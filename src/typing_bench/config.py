"""Benchmark configuration with Pydantic validation and environment overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    NonNegativeInt,
    PositiveInt,
    ValidationError,
    field_validator,
    model_validator,
)

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "TYPING_BENCH_"


class Variant(str, Enum):
    """Which payload shape is benchmarked."""

    USER = "user"
    TREE = "tree"


class Backend(str, Enum):
    """Model library used to build Shape A records."""

    MSGSPEC = "msgspec"
    PYDANTIC = "pydantic"


DEFAULT_ITERATIONS: dict[Variant, int] = {
    Variant.USER: 100_000,
    # a tree holds 1,000 leaves, so far fewer roots keep run times comparable
    Variant.TREE: 100,
}


class BenchmarkConfig(BaseModel):
    """Validated settings for one benchmark run."""

    variant: Variant = Variant.USER
    iterations: PositiveInt | None = None
    backend: Backend = Backend.MSGSPEC
    warmup: NonNegativeInt = 0
    seed: int | None = None
    randomize_order: bool = False
    log_level: str = "WARNING"

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def check_backend_supports_variant(self) -> BenchmarkConfig:
        if self.backend is Backend.PYDANTIC and self.variant is not Variant.USER:
            raise ValueError("the pydantic backend only supports the 'user' variant")
        return self

    @property
    def resolved_iterations(self) -> int:
        """Explicit iteration count, or the default for the variant."""
        if self.iterations is not None:
            return self.iterations
        return DEFAULT_ITERATIONS[self.variant]


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error["loc"]) or "config"
        parts.append(f"{loc}: {error['msg']}")
    return "; ".join(parts)


def load_config(env: Mapping[str, str] | None = None, **overrides: Any) -> BenchmarkConfig:
    """
    Build a ``BenchmarkConfig`` from environment variables and overrides.

    Environment variables are named ``TYPING_BENCH_<FIELD>`` (e.g.
    ``TYPING_BENCH_ITERATIONS``). Overrides that are ``None`` are ignored so
    unset command-line flags fall through to the environment.

    Args:
        env: Mapping to read variables from (default: ``os.environ``).
        **overrides: Field values that take precedence over the environment.

    Returns:
        The validated configuration.

    Raises:
        ConfigurationError: If any value fails validation.
    """
    env = os.environ if env is None else env

    data: dict[str, Any] = {}
    for name in BenchmarkConfig.model_fields:
        value = env.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None and value != "":
            data[name] = value
    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        config = BenchmarkConfig(**data)
    except ValidationError as e:
        logger.debug(f"Invalid benchmark configuration: {e}")
        raise ConfigurationError(
            f"Invalid benchmark configuration: {_format_validation_error(e)}",
            suggestion="iterations must be a positive integer, variant one of "
            "'user'/'tree' and backend one of 'msgspec'/'pydantic'",
        ) from e

    logger.debug(f"Loaded configuration: {config!r}")
    return config
