"""Exceptions raised by graph analysis and numeric evaluation."""

from __future__ import annotations


class CyclicGraphError(ValueError):
    """The neurons graph reachable from an output is not acyclic."""


class DimensionMismatchError(ValueError):
    """Two operands of a numeric operation have incompatible dimensions."""

    def __init__(self, what: str, expected: int, actual: int) -> None:
        super().__init__(
            f"incompatible dimensions for {what}: expected {expected}, got {actual}"
        )
        self.what = what
        self.expected = expected
        self.actual = actual
