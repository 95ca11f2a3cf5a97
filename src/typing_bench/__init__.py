"""typing-bench: does annotating a binding change object construction time?"""

__version__ = "1.0.0"

from .config import (
    DEFAULT_ITERATIONS,
    Backend,
    BenchmarkConfig,
    Variant,
    load_config,
)
from .core import (
    BenchmarkResult,
    Phase,
    Verdict,
    run_benchmark,
    run_explicit_phase,
    run_implicit_phase,
)
from .exceptions import (
    ConfigurationError,
    TypingBenchError,
    UnsupportedValueKind,
)
from .generators import (
    LEAVES_PER_ROOT,
    make_sample_tree,
    make_sample_user,
    make_sample_user_model,
    random_string,
)
from .models import (
    BoolValue,
    DynamicValue,
    FloatValue,
    IntValue,
    RootModel,
    StrValue,
    UserData,
)
from .timing import measure_time
from .values import convert_value, decode_value, encode_value, unwrap_value, wrap_value

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Backend",
    "BenchmarkConfig",
    "DEFAULT_ITERATIONS",
    "Variant",
    "load_config",
    # Driver
    "BenchmarkResult",
    "Phase",
    "Verdict",
    "run_benchmark",
    "run_explicit_phase",
    "run_implicit_phase",
    # Timing
    "measure_time",
    # Generators
    "LEAVES_PER_ROOT",
    "make_sample_tree",
    "make_sample_user",
    "make_sample_user_model",
    "random_string",
    # Models
    "UserData",
    "RootModel",
    "DynamicValue",
    "IntValue",
    "FloatValue",
    "StrValue",
    "BoolValue",
    # Dynamic values
    "wrap_value",
    "unwrap_value",
    "encode_value",
    "decode_value",
    "convert_value",
    # Exceptions
    "TypingBenchError",
    "ConfigurationError",
    "UnsupportedValueKind",
]
