"""Type definitions for fizz-buzz."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal

# Classifier signature shared by every implementation
Classifier = Callable[[int], str]

# Names registered in fizz_buzz.benchmark.IMPLEMENTATIONS
ImplementationName = Literal["table", "naive", "table-label", "naive-label"]


@dataclass
class BenchmarkOptions:
    """Options for a benchmark run."""

    iterations: int = 100_000  # Inputs classified per round
    rounds: int = 3  # Best round is reported
    bits: int = 64  # Inputs are drawn from [0, 2**bits)
    seed: int | None = None
    implementations: list[ImplementationName] = field(
        default_factory=lambda: ["table", "naive"]
    )
    verify: bool = True  # Compare against the naive counterpart before timing


@dataclass
class BenchmarkResult:
    """Timing for one implementation."""

    implementation: str
    iterations: int
    rounds: int
    best_ns: int  # Fastest round, whole input list
    total_ns: int  # Sum over all rounds

    @property
    def ns_per_call(self) -> float:
        return self.best_ns / self.iterations


@dataclass
class Disagreement:
    """An input on which two classifiers differ."""

    value: int
    expected: str
    actual: str
