"""
Exceptions raised by SampSize.
"""

from typing import Any


class InvalidParameter(ValueError):
    """Raised when an input violates a precondition of the calculation.

    Raised before any arithmetic that would be undefined (division by zero,
    logarithm of a non-positive number), so a calculation never partially
    succeeds.

    Attributes:
        parameter: Name of the offending parameter (e.g. ``"alpha"``).
        constraint: Human-readable constraint that was violated
            (e.g. ``"must be in (0, 1)"``).
        value: The rejected value.
    """

    def __init__(self, parameter: str, constraint: str, value: Any = None):
        self.parameter = parameter
        self.constraint = constraint
        self.value = value
        super().__init__(f"{parameter} {constraint}, got {value!r}")
