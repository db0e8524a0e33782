"""Generic metric API: the `Metric` protocol and `distance` dispatch.

A metric describes *how* two values are compared. It is not a metric in the
mathematical sense (it can be asymmetric), but `distance(metric, x, x)` is zero
for every metric and every valid `x`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Real
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .config import TextSummaryOptions
from .formatting import leaf_summary

if TYPE_CHECKING:
    from .weighted import Weighted


@runtime_checkable
class Metric(Protocol):
    """Minimal surface a metric needs to take part in composition."""

    def distance(self, data: Any, model: Any) -> float: ...

    def summary(self, data: Any, model: Any, options: TextSummaryOptions) -> str: ...


class MetricBase(ABC):
    """Shared behaviour for the metrics in this package.

    Subclassing is not required to be a `Metric`; it provides the
    `weight * metric` shorthand and renders as a leaf in summaries.
    """

    @abstractmethod
    def distance(self, data: Any, model: Any) -> float:
        """Distance between `data` and `model`."""

    def summary(self, data: Any, model: Any, options: TextSummaryOptions) -> str:
        return leaf_summary(options, data, model, self.distance(data, model))

    def __mul__(self, weight: Any) -> "Weighted":
        if not isinstance(weight, Real):
            return NotImplemented
        from .weighted import Weighted

        return Weighted(self, weight)

    __rmul__ = __mul__


def distance(metric: Metric, data: Any, model: Any) -> float:
    """Calculate the distance (a real number) between `data` and `model` using `metric`."""
    return metric.distance(data, model)


__all__ = ["Metric", "MetricBase", "distance"]
