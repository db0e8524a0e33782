"""Multiplying a metric by a positive weight."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from .base import Metric, MetricBase
from .config import TextSummaryOptions
from .errors import InvalidWeightError
from .formatting import dotted_repr, indent
from .log import logger


@dataclass(frozen=True)
class Weighted(MetricBase):
    """Multiply the distance calculated by `child` by a positive weight.

    Wrapping a `Weighted` metric multiplies the weights instead of nesting, so
    `Weighted(Weighted(m, 2), 3) == Weighted(m, 6)`. The same metric can be
    created with `weight * metric`.

    >>> distance(AbsoluteDifference(), 0.1, 0.2)
    0.1
    >>> distance(Weighted(AbsoluteDifference(), 10), 0.1, 0.2)
    1.0
    """

    child: Metric
    weight: float

    def __post_init__(self) -> None:
        if not (np.isfinite(self.weight) and self.weight > 0):
            raise InvalidWeightError("Weight must be a positive finite number.", context={"weight": self.weight})
        if isinstance(self.child, Weighted):
            inner = self.child
            logger.debug(f"Collapsing nested weights {inner.weight!r} * {self.weight!r}")
            object.__setattr__(self, "child", inner.child)
            object.__setattr__(self, "weight", inner.weight * self.weight)

    def distance(self, data: Any, model: Any) -> float:
        return self.weight * self.child.distance(data, model)

    def summary(self, data: Any, model: Any, options: TextSummaryOptions) -> str:
        header = "weighted: " + dotted_repr(options, self.distance(data, model))
        return header + "\n" + indent(self.child.summary(data, model, options), options.indent)

    def __repr__(self) -> str:
        return f"{self.weight!r} * {self.child!r}"


__all__ = ["Weighted"]
