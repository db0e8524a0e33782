"""Exception types raised while building or evaluating distance metrics.

Every error carries a short, stable code and, where one is known, a context
mapping naming the operand, field or element that triggered it. Errors are
raised where they are detected and pass through enclosing combinators
unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

NON_FINITE_INPUT = "NON_FINITE_INPUT"
DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
INVALID_WEIGHT = "INVALID_WEIGHT"
INVALID_EXPONENT = "INVALID_EXPONENT"
SHAPE_MISMATCH = "SHAPE_MISMATCH"
MISSING_FIELD = "MISSING_FIELD"
INVALID_OPTIONS = "INVALID_OPTIONS"


@dataclass(eq=False)
class DistanceError(Exception):
    """Base class for all errors raised by this package.

    Attributes:
        message: Human-readable description of the failure.
        context: Optional details such as the offending operand, field name
            or container shapes.
    """

    message: str
    context: Optional[dict[str, Any]] = None

    code = "DISTANCE_ERROR"

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        base = f"[{self.code}] {self.message}"
        if self.context:
            base += f" | ctx={self.context}"
        return base


class NonFiniteInputError(DistanceError, ValueError):
    """A scalar operand was NaN or infinite."""

    code = NON_FINITE_INPUT


class DivisionByZeroError(DistanceError, ZeroDivisionError):
    """A relative difference was requested against a zero reference value."""

    code = DIVISION_BY_ZERO


class InvalidWeightError(DistanceError, ValueError):
    code = INVALID_WEIGHT


class InvalidExponentError(DistanceError, ValueError):
    code = INVALID_EXPONENT


class ShapeMismatchError(DistanceError, ValueError):
    """Container operands of an elementwise aggregate have different shapes."""

    code = SHAPE_MISMATCH


class MissingFieldError(DistanceError, LookupError):
    """A record operand lacks a field declared by a named aggregate."""

    code = MISSING_FIELD


class InvalidOptionsError(DistanceError, ValueError):
    code = INVALID_OPTIONS


__all__ = [
    "DistanceError",
    "NonFiniteInputError",
    "DivisionByZeroError",
    "InvalidWeightError",
    "InvalidExponentError",
    "ShapeMismatchError",
    "MissingFieldError",
    "InvalidOptionsError",
]
