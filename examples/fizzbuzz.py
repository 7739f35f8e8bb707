#!/usr/bin/env python3
"""FizzBuzz example for fizz-buzz."""

from fizz_buzz import classify


def fizzbuzz_sequence(limit: int = 100) -> list[str]:
    """
    Classify every number from 1 to limit.

    Args:
        limit: The upper limit of the sequence (inclusive)

    Returns:
        list[str]: One label per number
    """
    return [classify(i) for i in range(1, limit + 1)]


def print_fizzbuzz(limit: int = 100) -> None:
    """Print FizzBuzz sequence from 1 to limit."""
    print(f"=== FizzBuzz (1 to {limit}) ===")
    for label in fizzbuzz_sequence(limit):
        print(label)


if __name__ == "__main__":
    print_fizzbuzz()
