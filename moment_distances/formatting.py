"""Text helpers used when rendering summaries."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

import numpy as np

from .config import TextSummaryOptions

ELLIPSIS = "…"


def round_significant(value: float, digits: int) -> float:
    """Round `value` to `digits` significant digits, leaving 0, NaN and inf untouched."""
    value = float(value)
    if value == 0 or not math.isfinite(value):
        return value
    return round(value, digits - 1 - math.floor(math.log10(abs(value))))


def dotted_repr(options: TextSummaryOptions, value: Any) -> str:
    """Single line representation of `value`, with `…` marking dropped lines.

    Real numbers (and numeric arrays, elementwise) are rounded to
    `options.significant_digits` first.
    """
    digits = options.significant_digits
    if isinstance(value, Real) and not isinstance(value, bool):
        return repr(round_significant(value, digits))
    if isinstance(value, np.ndarray) and value.dtype.kind in "iuf":
        rounded = np.array([round_significant(v, digits) for v in value.ravel()], dtype=float)
        text = repr(rounded.reshape(value.shape))
    else:
        text = repr(value)
    lines = text.split("\n")
    return lines[0] + ELLIPSIS if len(lines) > 1 else lines[0]


def indent(text: str, width: int) -> str:
    """Prefix every line of `text` with `width` spaces."""
    pad = " " * width
    return "\n".join(pad + line for line in text.split("\n"))


def leaf_summary(options: TextSummaryOptions, data: Any, model: Any, value: float) -> str:
    x, y, d = (dotted_repr(options, v) for v in (data, model, value))
    return f"‹{x} ↔ {y}: {d}›"


__all__ = ["ELLIPSIS", "dotted_repr", "indent", "leaf_summary", "round_significant"]
