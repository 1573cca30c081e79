"""
Exception hierarchy.

Per-cell parse failures never surface here: a cell that is not a number is
routed to the categorical sample.  Everything below propagates to the
top-level caller.
"""

from __future__ import annotations

__all__ = [
    "UnivarError",
    "SourceUnreadableError",
    "SinkUnwritableError",
    "EmptySampleError",
    "DomainError",
    "UnresolvedTypeError",
]


class UnivarError(Exception):
    """
    Base exception for all univar errors
    """
    pass


class SourceUnreadableError(UnivarError):
    """
    Raised when the input file cannot be opened or decoded
    """

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class SinkUnwritableError(UnivarError):
    """
    Raised when the report destination cannot be opened or written
    """

    def __init__(self, target: object, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Could not write report to {target}: {reason}")


class EmptySampleError(UnivarError, ValueError):
    """
    Raised when an estimator is invoked on zero elements
    """

    def __init__(self, statistic: str) -> None:
        self.statistic = statistic
        super().__init__(f"Cannot compute {statistic} of an empty sample")


class DomainError(UnivarError, ArithmeticError):
    """
    Raised when a ratio statistic would divide by zero
    """

    def __init__(self, statistic: str, reason: str) -> None:
        self.statistic = statistic
        self.reason = reason
        super().__init__(f"{statistic} is undefined: {reason}")


class UnresolvedTypeError(UnivarError):
    """
    Raised when the data type cannot be determined
    """

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Unable to determine data type of {path}")
