"""Benchmark harness comparing the table classifier with the naive one."""

import logging
import random
import time
from collections.abc import Iterable

from anyio import to_thread

from ._errors import BenchmarkConfigError, ClassifierMismatchError
from ._internal.naive import classify_label_naive, classify_naive
from .classifier import classify, classify_label
from .types import BenchmarkOptions, BenchmarkResult, Classifier, Disagreement

logger = logging.getLogger(__name__)

IMPLEMENTATIONS: dict[str, Classifier] = {
    "table": classify,
    "naive": classify_naive,
    "table-label": classify_label,
    "naive-label": classify_label_naive,
}

# Implementation each entry is verified against
REFERENCES: dict[str, str] = {
    "table": "naive",
    "naive": "naive",
    "table-label": "naive-label",
    "naive-label": "naive-label",
}


def generate_inputs(
    count: int, *, bits: int = 64, seed: int | None = None
) -> list[int]:
    """
    Draw uniform random inputs from [0, 2**bits).

    Args:
        count: Number of inputs to draw
        bits: Width of each input; 64 covers the full unsigned 64-bit range
        seed: Seed for a reproducible sequence

    Returns:
        list[int]: The generated inputs
    """
    rng = random.Random(seed)
    return [rng.getrandbits(bits) for _ in range(count)]


def find_disagreements(
    inputs: Iterable[int], candidate: Classifier, reference: Classifier
) -> list[Disagreement]:
    """Return every input on which candidate and reference differ."""
    disagreements: list[Disagreement] = []
    for value in inputs:
        expected = reference(value)
        actual = candidate(value)
        if actual != expected:
            disagreements.append(
                Disagreement(value=value, expected=expected, actual=actual)
            )
    return disagreements


def _validate_options(options: BenchmarkOptions) -> None:
    if options.iterations <= 0:
        raise BenchmarkConfigError(
            f"iterations must be positive, got {options.iterations}"
        )
    if options.rounds <= 0:
        raise BenchmarkConfigError(f"rounds must be positive, got {options.rounds}")
    if options.bits <= 0:
        raise BenchmarkConfigError(f"bits must be positive, got {options.bits}")
    if not options.implementations:
        raise BenchmarkConfigError("At least one implementation is required")

    unknown = [name for name in options.implementations if name not in IMPLEMENTATIONS]
    if unknown:
        raise BenchmarkConfigError(
            f"Unknown implementation(s): {', '.join(unknown)}. "
            f"Available: {', '.join(IMPLEMENTATIONS)}"
        )


def _verify(name: str, inputs: list[int]) -> None:
    reference_name = REFERENCES[name]
    if reference_name == name:
        return

    disagreements = find_disagreements(
        inputs, IMPLEMENTATIONS[name], IMPLEMENTATIONS[reference_name]
    )
    if disagreements:
        first = disagreements[0]
        logger.warning(
            "%s disagrees with %s on %d of %d inputs",
            name,
            reference_name,
            len(disagreements),
            len(inputs),
        )
        raise ClassifierMismatchError(name, first.value, first.expected, first.actual)


def _time_implementation(
    name: str, inputs: list[int], rounds: int
) -> BenchmarkResult:
    func = IMPLEMENTATIONS[name]
    timings: list[int] = []
    for _ in range(rounds):
        start = time.perf_counter_ns()
        for value in inputs:
            func(value)
        timings.append(time.perf_counter_ns() - start)

    result = BenchmarkResult(
        implementation=name,
        iterations=len(inputs),
        rounds=rounds,
        best_ns=min(timings),
        total_ns=sum(timings),
    )
    logger.debug("%s: %.1f ns/call (best of %d)", name, result.ns_per_call, rounds)
    return result


def run_benchmark(options: BenchmarkOptions | None = None) -> list[BenchmarkResult]:
    """
    Time each configured implementation on the same random inputs.

    Every implementation sees the identical input list, generated once up
    front so that input generation is excluded from the timings.

    Args:
        options: Benchmark configuration (defaults to BenchmarkOptions() if None)

    Returns:
        list[BenchmarkResult]: One result per implementation, in the order
        given by options.implementations

    Raises:
        BenchmarkConfigError: If the options are invalid
        ClassifierMismatchError: If verification is enabled and an
            implementation disagrees with its naive counterpart
    """
    if options is None:
        options = BenchmarkOptions()
    _validate_options(options)

    logger.debug(
        "Running benchmark: %d inputs of %d bits, %d rounds, implementations=%s",
        options.iterations,
        options.bits,
        options.rounds,
        options.implementations,
    )
    inputs = generate_inputs(options.iterations, bits=options.bits, seed=options.seed)

    if options.verify:
        for name in options.implementations:
            _verify(name, inputs)

    return [
        _time_implementation(name, inputs, options.rounds)
        for name in options.implementations
    ]


async def arun_benchmark(
    options: BenchmarkOptions | None = None,
) -> list[BenchmarkResult]:
    """
    Run the benchmark in a worker thread without blocking the event loop.

    Example:
        ```python
        results = anyio.run(arun_benchmark, BenchmarkOptions(seed=42))
        ```
    """
    return await to_thread.run_sync(run_benchmark, options)
