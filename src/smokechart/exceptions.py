from __future__ import annotations


class InvalidQuantileError(ValueError):
    """Raised when a quantile fraction is NaN or outside [0, 1]."""

    def __init__(self, q: object) -> None:
        super().__init__(f"Unable to calculate {q} quantile")
        self.q = q


class MalformedMatrixError(ValueError):
    """Raised when sample input is not a sequence of sample rows."""
