"""Version information for fizz-buzz."""

__version__ = "0.1.0"
