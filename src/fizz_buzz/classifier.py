"""Table-driven FizzBuzz classification."""

# Indexed by n % 15. 3 and 5 are coprime, so the residue decides both checks.
LABELS: tuple[str, ...] = (
    "FizzBuzz",
    "",
    "",
    "Fizz",
    "",
    "Buzz",
    "Fizz",
    "",
    "",
    "Fizz",
    "Buzz",
    "",
    "Fizz",
    "",
    "",
)

# True where no label applies and the number itself is returned.
RETURNS_NUMBER: tuple[bool, ...] = (
    False,
    True,
    True,
    False,
    True,
    False,
    False,
    True,
    True,
    False,
    False,
    True,
    False,
    True,
    True,
)


def classify(n: int) -> str:
    """
    Classify a number as "Fizz", "Buzz", "FizzBuzz" or its decimal string.

    One modulo and one table lookup replace the usual chain of divisibility
    checks.

    Args:
        n: The number to classify

    Returns:
        str: "FizzBuzz" for multiples of 15, "Fizz" for multiples of 3,
        "Buzz" for multiples of 5, and ``str(n)`` otherwise
    """
    remainder = n % 15
    if RETURNS_NUMBER[remainder]:
        return str(n)
    return LABELS[remainder]


def classify_label(n: int) -> str:
    """Like classify, but plain numbers map to an empty string."""
    remainder = n % 15
    if RETURNS_NUMBER[remainder]:
        return ""
    return LABELS[remainder]
