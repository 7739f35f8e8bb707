"""Error types for fizz-buzz."""


class FizzBuzzError(Exception):
    """Base exception for all fizz-buzz errors."""


class BenchmarkConfigError(FizzBuzzError):
    """Raised when benchmark options are invalid."""


class ClassifierMismatchError(FizzBuzzError):
    """Raised when an implementation disagrees with the baseline."""

    def __init__(
        self, implementation: str, value: int, expected: str, actual: str
    ):
        self.implementation = implementation
        self.value = value
        self.expected = expected
        self.actual = actual

        message = (
            f"Implementation '{implementation}' returned {actual!r} "
            f"for {value}, expected {expected!r}"
        )
        super().__init__(message)
