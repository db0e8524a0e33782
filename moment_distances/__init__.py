"""Composable distance functions between data and model moments.

Build a metric tree once, then evaluate it repeatedly:

    metric = NamedSum({"mean": AbsoluteDifference(), "quantiles": 0.5 * PNorm(RelativeDifference())})
    distance(metric, data_moments, model_moments)
    summarize(metric, data_moments, model_moments)
"""

from .aggregation import ElementwiseMean, NamedPNorm, NamedSum, PNorm
from .base import Metric, MetricBase, distance
from .config import DEFAULT_P, TextSummaryOptions
from .errors import (
    DistanceError,
    DivisionByZeroError,
    InvalidExponentError,
    InvalidOptionsError,
    InvalidWeightError,
    MissingFieldError,
    NonFiniteInputError,
    ShapeMismatchError,
)
from .scalar import AbsoluteDifference, AbsoluteRelative, RelativeDifference
from .summary import summarize, summary
from .weighted import Weighted

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_P",
    "AbsoluteDifference",
    "AbsoluteRelative",
    "DistanceError",
    "DivisionByZeroError",
    "ElementwiseMean",
    "InvalidExponentError",
    "InvalidOptionsError",
    "InvalidWeightError",
    "Metric",
    "MetricBase",
    "MissingFieldError",
    "NamedPNorm",
    "NamedSum",
    "NonFiniteInputError",
    "PNorm",
    "RelativeDifference",
    "ShapeMismatchError",
    "TextSummaryOptions",
    "Weighted",
    "distance",
    "summarize",
    "summary",
]
