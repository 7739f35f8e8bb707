"""Table-driven FizzBuzz for Python."""

from ._errors import (
    BenchmarkConfigError,
    ClassifierMismatchError,
    FizzBuzzError,
)
from ._internal.naive import classify_naive
from ._version import __version__
from .benchmark import (
    IMPLEMENTATIONS,
    arun_benchmark,
    find_disagreements,
    generate_inputs,
    run_benchmark,
)
from .classifier import classify, classify_label
from .types import (
    BenchmarkOptions,
    BenchmarkResult,
    Classifier,
    Disagreement,
    ImplementationName,
)

__all__ = [
    # Main exports
    "classify",
    "classify_label",
    "classify_naive",
    # Benchmark
    "run_benchmark",
    "arun_benchmark",
    "generate_inputs",
    "find_disagreements",
    "IMPLEMENTATIONS",
    # Types
    "Classifier",
    "ImplementationName",
    "BenchmarkOptions",
    "BenchmarkResult",
    "Disagreement",
    # Errors
    "FizzBuzzError",
    "BenchmarkConfigError",
    "ClassifierMismatchError",
    "__version__",
]
