"""Aggregating a metric over matching positions of two containers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple

import numpy as np

from ..base import Metric, MetricBase
from ..config import DEFAULT_P, TextSummaryOptions
from ..errors import InvalidExponentError, ShapeMismatchError
from ..formatting import dotted_repr, indent


def check_exponent(p: float) -> None:
    """Reject p-norm exponents outside `[1, inf)`."""
    if not (np.isfinite(p) and p >= 1):
        raise InvalidExponentError("p-norm exponent must be a finite number >= 1.", context={"p": p})


def p_norm(distances: Any, p: float) -> float:
    """`(Σ |d|^p)^(1/p)`; zero for an empty collection."""
    values = np.abs(np.asarray(distances, dtype=float))
    return float(np.sum(values**p) ** (1 / p))


Index = Tuple[int, ...]


def _is_nested(value: Any) -> bool:
    """True for a list or tuple whose elements are themselves arrays or sequences."""
    return isinstance(value, (list, tuple)) and any(isinstance(item, (np.ndarray, list, tuple)) for item in value)


def _top_level(value: Any, operand: str) -> list:
    if isinstance(value, (list, tuple)) or (isinstance(value, np.ndarray) and value.ndim > 0):
        return list(value)
    raise ShapeMismatchError(
        f"{operand} is not a container.", context={"operand": operand, f"{operand}_shape": np.shape(value)}
    )


def align_containers(data: Any, model: Any) -> Tuple[Index, List[Tuple[Index, Any, Any]]]:
    """Pair up the natural elements of two same-shaped containers.

    Returns the shared shape and `(index, x, y)` triples. Numeric arrays and flat
    sequences of scalars are visited position by position in row-major order. A
    list or tuple of arrays (or of sequences) is walked at the top level only,
    each element being handed to the child metric whole.
    """
    if _is_nested(data) or _is_nested(model):
        xs = _top_level(data, "data")
        ys = _top_level(model, "model")
        if len(xs) != len(ys):
            raise ShapeMismatchError(
                "Container operands must have the same length.",
                context={"data_length": len(xs), "model_length": len(ys)},
            )
        return (len(xs),), [((i,), x, y) for i, (x, y) in enumerate(zip(xs, ys))]

    x = np.asarray(data)
    y = np.asarray(model)
    if x.shape != y.shape:
        raise ShapeMismatchError(
            "Container operands must have the same shape.",
            context={"data_shape": x.shape, "model_shape": y.shape},
        )
    return x.shape, [(index, x[index], y[index]) for index in np.ndindex(x.shape)]


def _elementwise_distances(child: Metric, data: Any, model: Any) -> list[float]:
    _, pairs = align_containers(data, model)
    return [child.distance(x, y) for _, x, y in pairs]


def _elementwise_summary(header: str, child: Metric, data: Any, model: Any, options: TextSummaryOptions) -> str:
    shape, pairs = align_containers(data, model)
    # widest of the first (0) and last index, per axis
    digits_by_axis = [len(str(max(extent - 1, 0))) for extent in shape]
    lines = [header]
    for index, x, y in pairs:
        padded_index = ",".join(str(i).rjust(width) for i, width in zip(index, digits_by_axis))
        lines.append(indent(f"[{padded_index}]  " + child.summary(x, y, options), options.indent))
    return "\n".join(lines)


@dataclass(frozen=True)
class ElementwiseMean(MetricBase):
    """Mean of `child` applied to matching elements of `data` and `model`.

    Both operands must have the same shape. The mean over an empty container is 0.
    """

    child: Metric

    def distance(self, data: Any, model: Any) -> float:
        distances = _elementwise_distances(self.child, data, model)
        if not distances:
            return 0.0
        return float(np.mean(distances))

    def summary(self, data: Any, model: Any, options: TextSummaryOptions) -> str:
        header = "elementwise mean distance: " + dotted_repr(options, self.distance(data, model))
        return _elementwise_summary(header, self.child, data, model, options)

    def __repr__(self) -> str:
        return f"ElementwiseMean({self.child!r})"


@dataclass(frozen=True)
class PNorm(MetricBase):
    """Apply the elementwise metric `child`, then calculate a p-norm of the results."""

    child: Metric
    p: float = DEFAULT_P

    def __post_init__(self) -> None:
        check_exponent(self.p)

    def distance(self, data: Any, model: Any) -> float:
        return p_norm(_elementwise_distances(self.child, data, model), self.p)

    def summary(self, data: Any, model: Any, options: TextSummaryOptions) -> str:
        header = f"p-norm distance (p={self.p!r}): " + dotted_repr(options, self.distance(data, model))
        return _elementwise_summary(header, self.child, data, model, options)

    def __repr__(self) -> str:
        if self.p == DEFAULT_P:
            return f"PNorm({self.child!r})"
        return f"PNorm({self.child!r}, p={self.p!r})"


__all__ = ["ElementwiseMean", "PNorm", "check_exponent", "align_containers", "p_norm"]
