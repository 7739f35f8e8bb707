"""Branching reference implementations."""


def classify_naive(n: int) -> str:
    """Classify ``n`` with three modulo checks."""
    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def classify_label_naive(n: int) -> str:
    """Like classify_naive, but plain numbers map to an empty string."""
    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return ""
