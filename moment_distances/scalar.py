"""Leaf metrics comparing scalars (and, for `AbsoluteRelative`, vectors)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import numpy as np

from .base import MetricBase
from .errors import DivisionByZeroError, InvalidOptionsError, NonFiniteInputError

NormFunction = Callable[[np.ndarray], float]


def _check_finite(value: Any, operand: str) -> None:
    if not np.all(np.isfinite(value)):
        raise NonFiniteInputError(f"{operand} must be finite.", context={operand: value})


@dataclass(frozen=True)
class AbsoluteDifference(MetricBase):
    """*Absolute* difference between the arguments, `abs(data - model)`.

    >>> distance(AbsoluteDifference(), 0.3, 0.6)
    0.3
    """

    def distance(self, data: Any, model: Any) -> float:
        _check_finite(data, "data")
        _check_finite(model, "model")
        return abs(float(data) - float(model))


@dataclass(frozen=True)
class RelativeDifference(MetricBase):
    """*Relative* difference, calculated as `abs(data - model) / abs(data)`.

    Raises `DivisionByZeroError` when `data == 0`.
    """

    def distance(self, data: Any, model: Any) -> float:
        _check_finite(data, "data")
        _check_finite(model, "model")
        if data == 0:
            raise DivisionByZeroError(
                "Relative difference is undefined for data == 0.", context={"data": data, "model": model}
            )
        return abs(float(data) - float(model)) / abs(float(data))


@dataclass(frozen=True)
class AbsoluteRelative(MetricBase):
    """Absolute distance `norm(x - y)`, optionally scaled towards a relative one.

    With `relative_adjustment=None` the result is `norm(x - y)`. Otherwise it is
    divided by `max(1, relative_adjustment * max(norm(x), norm(y)))`, so that it
    behaves like an absolute distance near the origin and like a relative one far
    from it. `relative_adjustment=inf` gives the purely relative
    `norm(x - y) / max(norm(x), norm(y))`, which is `nan` when both are zero.

    The default norm is the Euclidean one and works for scalars and arrays alike.
    """

    relative_adjustment: Optional[float] = None
    norm: NormFunction = field(default=np.linalg.norm, compare=False)

    def __post_init__(self) -> None:
        adjustment = self.relative_adjustment
        if adjustment is not None and not adjustment > 0:
            raise InvalidOptionsError(
                "relative_adjustment must be positive (or inf).",
                context={"relative_adjustment": adjustment},
            )

    def distance(self, data: Any, model: Any) -> float:
        x = np.asarray(data, dtype=float)
        y = np.asarray(model, dtype=float)
        _check_finite(x, "data")
        _check_finite(y, "model")

        delta = np.float64(self.norm(x - y))
        adjustment = self.relative_adjustment
        if adjustment is None:
            return float(delta)

        scale = max(np.float64(self.norm(x)), np.float64(self.norm(y)))
        if math.isinf(adjustment):
            with np.errstate(divide="ignore", invalid="ignore"):
                return float(delta / scale)
        return float(delta / max(1.0, adjustment * scale))

    def __repr__(self) -> str:
        args = []
        if self.relative_adjustment is not None:
            args.append(f"relative_adjustment={self.relative_adjustment!r}")
        if self.norm is not np.linalg.norm:
            args.append(f"norm={getattr(self.norm, '__name__', repr(self.norm))}")
        return f"AbsoluteRelative({', '.join(args)})"


__all__ = ["AbsoluteDifference", "AbsoluteRelative", "NormFunction", "RelativeDifference"]
