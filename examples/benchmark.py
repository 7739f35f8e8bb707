#!/usr/bin/env python3
"""Compare the table classifier with the naive one.

Usage:
./examples/benchmark.py - Run the full-output comparison
./examples/benchmark.py labels - Compare label-only variants (no number formatting)
./examples/benchmark.py all - Run all implementations
"""

import logging
import sys

import anyio

from fizz_buzz import BenchmarkOptions, BenchmarkResult, arun_benchmark


def display_results(results: list[BenchmarkResult]) -> None:
    """Print one line per implementation, relative to the slowest."""
    slowest = max(result.ns_per_call for result in results)
    for result in results:
        speedup = slowest / result.ns_per_call if result.ns_per_call else 0.0
        print(
            f"{result.implementation:>12}: {result.ns_per_call:8.1f} ns/call "
            f"({speedup:.2f}x)"
        )


async def full_output_example():
    """Table vs naive, both formatting plain numbers."""
    print("=== Full Output Example ===")
    results = await arun_benchmark(BenchmarkOptions(seed=42))
    display_results(results)
    print()


async def labels_example():
    """Table vs naive, isolating the divisibility decision."""
    print("=== Label-Only Example ===")
    options = BenchmarkOptions(
        implementations=["table-label", "naive-label"],
        seed=42,
    )
    results = await arun_benchmark(options)
    display_results(results)
    print()


async def main():
    """Run the selected example."""
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.INFO)
    args = [arg for arg in sys.argv[1:] if arg != "-v"]
    mode = args[0] if args else "full"

    if mode == "full":
        await full_output_example()
    elif mode == "labels":
        await labels_example()
    elif mode == "all":
        await full_output_example()
        await labels_example()
    else:
        print(f"Unknown mode: {mode}")
        print("Available modes: full, labels, all")
        sys.exit(1)


if __name__ == "__main__":
    anyio.run(main)
